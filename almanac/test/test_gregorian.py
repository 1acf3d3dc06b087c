"""
"""
import itertools
import datetime
from .. import core
from .. import gregorian

def test_year_is_leap(test):
	# hand picked years
	test/True == gregorian.year_is_leap(2000)
	test/False == gregorian.year_is_leap(1999)
	test/False == gregorian.year_is_leap(1998)
	test/False == gregorian.year_is_leap(1997)
	test/True == gregorian.year_is_leap(1996)
	test/True == gregorian.year_is_leap(1600)
	test/True == gregorian.year_is_leap(1604)
	test/True == gregorian.year_is_leap(1200)
	test/False == gregorian.year_is_leap(1900)
	test/False == gregorian.year_is_leap(1800)
	test/False == gregorian.year_is_leap(1700)
	test/True == gregorian.year_is_leap(1704)
	test/True == gregorian.year_is_leap(0)
	test/True == gregorian.year_is_leap(-4)
	for x, i in zip(itertools.cycle((True, False, False, False)), range(1600, 1700)):
		test/x == gregorian.year_is_leap(i)

def test_days_in_cycle(test):
	test/146097 == gregorian.days_in_cycle
	test/366 == gregorian.days_before_year(1)
	test/(366 + 365) == gregorian.days_before_year(2)

def test_days_in_month(test):
	test/31 == gregorian.days_in_month(2021, 1)
	test/28 == gregorian.days_in_month(2019, 2)
	test/29 == gregorian.days_in_month(2020, 2)
	test/28 == gregorian.days_in_month(1900, 2)
	test/29 == gregorian.days_in_month(2000, 2)
	test/30 == gregorian.days_in_month(2021, 4)
	test/31 == gregorian.days_in_month(2021, 12)
	test/366 == sum(gregorian.days_in_month(2020, m) for m in range(1, 13))
	test/365 == sum(gregorian.days_in_month(2021, m) for m in range(1, 13))

	with test/core.InvalidArgument as exc:
		gregorian.days_in_month(2021, 13)
	test/13 == exc().argument

	with test/core.InvalidArgument as exc:
		gregorian.days_in_month(2021, 0)

def test_interpolate_month(test):
	test/(-1, 12) == gregorian.interpolate_month(0)
	test/(1, 1) == gregorian.interpolate_month(13)
	test/(-1, 11) == gregorian.interpolate_month(-1)
	test/(0, 5) == gregorian.interpolate_month(5)
	test/(0, 12) == gregorian.interpolate_month(12)
	test/(1, 11) == gregorian.interpolate_month(23)
	test/(-2, 12) == gregorian.interpolate_month(-12)

date_io_samples = [
	# whole cycle checks
	((2400,1,1), 6 * gregorian.days_in_cycle),
	((2000,1,1), 5 * gregorian.days_in_cycle),
	((1600,1,1), 4 * gregorian.days_in_cycle),
	((1200,1,1), 3 * gregorian.days_in_cycle),
	((800,1,1), 2 * gregorian.days_in_cycle),
	((400,1,1), gregorian.days_in_cycle),
	((0,1,1), 0),
	# and one
	((0,1,2), 1),
	# and two
	((400,1,3), 2 + gregorian.days_in_cycle),
	# unix epoch
	((1970,1,1), 719528),
	# before the era
	((-1,12,31), -1),
	((-400,1,1), -gregorian.days_in_cycle),
]

def test_date_from_days(test):
	for x in date_io_samples:
		date, days = x
		test/date == gregorian.date_from_days(days)

def test_days_from_date(test):
	for x in date_io_samples:
		date, days = x
		test/days == gregorian.days_from_date(date)

def test_days_from_date_overflow(test):
	test/gregorian.days_from_date((1982,4,30)) == gregorian.days_from_date((1982,5,0))
	test/gregorian.days_from_date((2021,1,1)) == gregorian.days_from_date((2020,13,1))
	test/gregorian.days_from_date((2021,3,1)) == gregorian.days_from_date((2021,2,29))
	test/gregorian.days_from_date((2019,12,1)) == gregorian.days_from_date((2020,0,1))

def test_scan_ordinals(test):
	"""
	# Check the conversions against &datetime.date ordinals across its range.
	# Ordinal one, 0001-01-01, follows the 366 days of year zero.
	"""
	for ordinal in range(1, datetime.date.max.toordinal(), 9973):
		d = datetime.date.fromordinal(ordinal)
		test/(d.year, d.month, d.day) == gregorian.date_from_days(ordinal + 365)
		test/(ordinal + 365) == gregorian.days_from_date((d.year, d.month, d.day))

def test_scan_days(test):
	"""
	# Consecutive days produce consecutive dates.
	"""
	for days in range(-799, (4 * gregorian.days_in_cycle), 7):
		date = gregorian.date_from_days(days)
		test/days == gregorian.days_from_date(date)
		test/True == gregorian.is_valid(date)

def test_clamp(test):
	test/(2021,2,28) == gregorian.clamp((2021,2,31))
	test/(2020,2,29) == gregorian.clamp((2020,2,30))
	test/(2021,4,30) == gregorian.clamp((2021,4,31))
	test/(2021,1,31) == gregorian.clamp((2021,1,31))
	test/(2021,1,1) == gregorian.clamp((2021,1,0))
	test/(2021,3,1) == gregorian.clamp((2021,3,-4))

def test_is_valid(test):
	test/True == gregorian.is_valid((2020,2,29))
	test/False == gregorian.is_valid((2021,2,29))
	test/False == gregorian.is_valid((2021,13,1))
	test/False == gregorian.is_valid((2021,0,1))
	test/False == gregorian.is_valid((2021,1,0))
	test/False == gregorian.is_valid((2021,1,32))

def test_month_name(test):
	test/'January' == gregorian.month_name(1)
	test/'December' == gregorian.month_name(12)
	test/'Jan' == gregorian.month_name(1, short=True)
	test/'Sep' == gregorian.month_name(9, short=True)
	for i, abbreviation in enumerate(gregorian.month_abbreviations, 1):
		test/abbreviation.capitalize() == gregorian.month_name(i, short=True)
		test/i == gregorian.month_name_to_number[abbreviation]

	for x in (0, 13, -1, '1', None):
		with test/core.InvalidArgument as exc:
			gregorian.month_name(x)
		test/'month' == exc().domain

def test_month_number(test):
	test/1 == gregorian.month_number('January')
	test/1 == gregorian.month_number('jan')
	test/1 == gregorian.month_number('JANUARY')
	test/12 == gregorian.month_number('Dec')
	for i in range(1, 13):
		test/i == gregorian.month_number(gregorian.month_name(i))
		test/i == gregorian.month_number(gregorian.month_name(i, short=True))

	for x in ('Janvier', '', None, 1):
		with test/core.InvalidArgument as exc:
			gregorian.month_number(x)

if __name__ == '__main__':
	import sys; from contention import engine
	engine.execute(sys.modules[__name__])
