"""
[ About ]
---------

almanac is a calendar and duration arithmetic package. Intervals of time are
held as &.types.Timestamp instances, microsecond precision values split across
three tiers of a million: megaseconds, seconds, and microseconds. Days of the
proleptic Gregorian calendar are held as &.calendar.Date instances.

Points in time are intervals since the era origin, 0000-01-01, which is also the
origin of the day counts used by dates; the two models convert between each
other without rounding.

Calendar Support:

	- Proleptic Gregorian

&.library will be referred to as `libalmanac` throughout the examples in this documentation.

#!/pl/python
	from almanac import library as libalmanac

Current point in time as a &.types.Timestamp and the current date.

#!/pl/python
	now = libalmanac.now() # UTC
	today = libalmanac.today()

[ Units ]
---------

Quantities convert between microseconds, milliseconds, seconds, minutes, hours,
days, and weeks exactly. Results that are not whole are &fractions.Fraction
instances.

#!/pl/python
	assert libalmanac.convert(90, 'seconds', 'minutes') == fractions.Fraction(3, 2)
	t = libalmanac.Timestamp.of(hour=1, microsecond=5)
	assert t.convert('microsecond') == 3600000005

[ Calendar Representation ]
---------------------------

Dates are constructed without validation.

#!/pl/python
	date = libalmanac.Date(1982, 5, 18)
	assert date.is_valid()
	assert libalmanac.Date(2021, 2, 29).is_valid() == False

[ Datetime Math ]
-----------------

Shifts apply several offsets in one operation and always produce valid dates.

#!/pl/python
	d = libalmanac.Date(2021, 1, 31)
	assert d.shift(months=1) == libalmanac.Date(2021, 2, 28)
	assert d.shift(days=1, years=1) == libalmanac.Date(2022, 2, 1)

Months cannot be combined with other units; the variable month length makes
the result ambiguous and &.core.AmbiguousShift is raised.

[ Clocks ]
----------

The process' clock can be replaced for testing, and any clock reading function
accepts a `clock` keyword.

Measuring the execution time of a callable:

#!/pl/python
	elapsed, result = libalmanac.measure(work, *args)
"""
