"""
Gregorian calendar functions and data.

Dates are handled in the common `(year, month, day)` form with one-based months
and days. Day counts are the number of days since 0000-01-01, the era origin,
of the proleptic Gregorian calendar.
"""
import bisect
from . import core

#: number of centuries in a gregorian cycle.
centuries_in_cycle = 4

#: number of years in a century.
years_in_century = 100

#: number of years in a gregorian cycle.
years_in_cycle = years_in_century * centuries_in_cycle

#: english names of the months of the year.
month_names = (
	"january",
	"february",
	"march",
	"april",
	"may",
	"june",
	"july",
	"august",
	"september",
	"october",
	"november",
	"december",
)

#: number of months in a year.
months_in_year = len(month_names)

#: abbreviations for the english names of the months of the year.
month_abbreviations = (
	"jan", "feb", "mar",
	"apr", "may", "jun",
	"jul", "aug", "sep",
	"oct", "nov", "dec",
)

#: Finite map associating the names and abbreviations of the months with a one-based index.
month_name_to_number = {
	month_names[i] : i + 1 for i in range(len(month_names))
}
month_name_to_number.update([
	(month_abbreviations[i], i + 1) for i in range(len(month_abbreviations))
])

#: Definition of a year in terms of gregorian month-to-days.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Definition of a leap year in terms of gregorian month-to-days.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:] # Feb29

def _starts(calendar):
	# Days preceding each month.
	total = 0
	for x in calendar:
		yield total
		total += x

month_starts = (tuple(_starts(calendar_year)), tuple(_starts(calendar_leap)))
del _starts

def year_is_leap(y):
	"""
	Given a gregorian calendar year, determine whether it is a leap year.
	"""
	if y % 4 == 0 and (y % 400 == 0 or not y % 100 == 0):
		return True
	return False

def days_in_month(year, month):
	"""
	The number of days in the &month of the &year.
	"""
	if not 1 <= month <= months_in_year:
		raise core.InvalidArgument('month', month)

	if year_is_leap(year):
		return calendar_leap[month-1]
	return calendar_year[month-1]

def days_before_year(year):
	"""
	Number of days preceding the given year within its cycle; `0 <= year <= 400`.
	"""
	# Year zero of each cycle is a leap year.
	leaps = (year + 3) // 4 - (year + 99) // 100 + (year + 399) // 400
	return (year * 365) + leaps

#: Number of days in a gregorian cycle.
days_in_cycle = days_before_year(years_in_cycle)

def interpolate_month(month):
	"""
	Map an arbitrary month number onto a `(years, month)` pair where `month` is
	within `[1, 12]` and `years` is the number of years the given number overflowed.

	#!/pl/python
		assert interpolate_month(0) == (-1, 12)
		assert interpolate_month(13) == (1, 1)
		assert interpolate_month(-1) == (-1, 11)
	"""
	years, moy = divmod(month - 1, months_in_year)
	return (years, moy + 1)

def clamp(date):
	"""
	Bound the day of the given date to the days of its month; days past the end
	become the last day and days before the first become the first.
	"""
	year, month, day = date
	last = days_in_month(year, month)
	if day > last:
		day = last
	elif day < 1:
		day = 1
	return (year, month, day)

def is_valid(date):
	"""
	Whether the `(year, month, day)` triple identifies a day in the calendar.
	"""
	year, month, day = date
	if not 1 <= month <= months_in_year:
		return False
	return 1 <= day <= days_in_month(year, month)

def days_from_date(date):
	"""
	Convert a Gregorian date in the common form, (year, month, day), to the number
	of days leading up to the date.

	Months and days outside of their range overflow onto the year and month.
	"""
	year, month, day = date
	years, month = interpolate_month(month)
	cycles, year_of_cycle = divmod(year + years, years_in_cycle)
	starts = month_starts[year_is_leap(year_of_cycle)]

	return (
		(cycles * days_in_cycle) +
		days_before_year(year_of_cycle) +
		starts[month-1] + (day - 1)
	)

def date_from_days(days, bisect=bisect.bisect_right):
	"""
	Convert the given Earth-days into a Gregorian date in the common form:
	 (year, month, day).
	"""
	cycles, day_of_cycle = divmod(days, days_in_cycle)

	# Estimate and then settle on the year containing the day.
	year = (day_of_cycle * years_in_cycle) // days_in_cycle
	while days_before_year(year + 1) <= day_of_cycle:
		year += 1
	while days_before_year(year) > day_of_cycle:
		year -= 1

	day_of_year = day_of_cycle - days_before_year(year)
	starts = month_starts[year_is_leap(year)]
	month = bisect(starts, day_of_year)

	return ((cycles * years_in_cycle) + year, month, day_of_year - starts[month-1] + 1)

def month_name(number, short=False):
	"""
	Get the english name of the month identified by the one-based &number.
	"""
	if not isinstance(number, int) or not 1 <= number <= months_in_year:
		raise core.InvalidArgument('month', number)

	if short:
		name = month_abbreviations[number-1]
	else:
		name = month_names[number-1]
	return name.capitalize()

def month_number(name):
	"""
	Get the one-based number of the month with the given name or abbreviation.
	"""
	try:
		return month_name_to_number[name.lower()]
	except (KeyError, AttributeError):
		raise core.InvalidArgument('month', name)
