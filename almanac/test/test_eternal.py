"""
# Sanity checks regarding the eternal points.
"""
from .. import eternal as module
from .. import calendar

def test_points(test):
	test/module.distant_future > module.distant_past
	test/module.distant_past < module.distant_future
	test/module.Indefinite(5) % module.distant_future
	test/module.Indefinite(-2) % module.distant_past
	test/-module.distant_past % module.distant_future
	test/-module.distant_future % module.distant_past

	with test/ValueError as exc:
		module.Indefinite(0)

def test_names(test):
	test/'distant_past' == str(module.distant_past)
	test/'distant_future' == str(module.distant_future)
	test/'almanac.eternal.distant_past' == repr(module.distant_past)
	test/module.names['distant_past'] % module.distant_past

def test_ordering(test):
	d = calendar.Date.epoch()
	test/True == module.distant_past.leads(d)
	test/False == module.distant_past.follows(d)
	test/True == module.distant_future.follows(d)
	test/True == module.distant_past.leads(module.distant_future)
	test/False == module.distant_future.leads(module.distant_future)

if __name__ == '__main__':
	import sys; from contention import engine
	engine.execute(sys.modules[__name__])
