"""
# Module level test execution without a collector.
"""
from . import core

def get_test_index(tester):
	"""
	# The first line number of the test function, or &None when it has no code.
	"""
	while '__wrapped__' in tester.__dict__:
		tester = tester.__wrapped__

	try:
		return tester.__code__.co_firstlineno
	except AttributeError:
		return None

def gather(container, prefix='test_'):
	"""
	# The names of the &prefix matching attributes of &container in the order
	# they were defined.
	"""
	tests = sorted(name for name in dir(container) if name.startswith(prefix))
	tests.sort(key=(lambda x: get_test_index(getattr(container, x)) or 0))
	return tests

def execute(module):
	"""
	# Seal the tests contained in &module in order; the fate of the first failure
	# is raised.
	"""
	for id in gather(module):
		test = core.Test(id, getattr(module, id))
		with test.exits:
			test.seal()
		if test.fate.negative:
			raise test.fate
