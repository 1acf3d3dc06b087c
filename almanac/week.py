"""
# Week based measures of time: days of seven.

# Weekdays are numbered the ISO-8601 way; Monday is `1` and Sunday is `7`.
"""
from . import core
from . import gregorian

#: English names of the days of the week.
weekday_names = (
	'monday',
	'tuesday',
	'wednesday',
	'thursday',
	'friday',
	'saturday',
	'sunday',
)

#: Total number of a days in a week.
days_in_week = len(weekday_names)

#: Abbreviations for the english names of the days of the week.
weekday_abbreviations = (
	'mon', 'tue', 'wed', 'thu', 'fri', 'sat', 'sun',
)

#: Map of weekday names to a one-based index.
weekday_name_to_number = {
	weekday_names[i]: i + 1
	for i in range(len(weekday_names))
}

#: Map of weekday names and abbreviations to a one-based index.
weekday_name_to_number.update([
	(weekday_abbreviations[i], i + 1) for i in range(len(weekday_abbreviations))
])

#: Offset aligning day zero, 0000-01-01, a Saturday, with the start of the week.
datum_offset = 5

#: The day of the week used to identify the week that a year's first week is in.
iso_anchor = 4 # thursday

def weekday_name(number, short=False):
	"""
	# Get the english name of the weekday identified by &number.

	# [ Parameters ]
	# /number/
		# The ISO weekday; `1` through `7`.
	# /short/
		# Whether the three letter abbreviation should be returned.
	"""
	if not isinstance(number, int) or not 1 <= number <= days_in_week:
		raise core.InvalidArgument('weekday', number)

	if short:
		name = weekday_abbreviations[number-1]
	else:
		name = weekday_names[number-1]
	return name.capitalize()

def weekday_number(name):
	"""
	# Get the ISO weekday number of the given name or abbreviation. Case is ignored.
	"""
	try:
		return weekday_name_to_number[name.lower()]
	except (KeyError, AttributeError):
		raise core.InvalidArgument('weekday', name)

def weekday_from_days(days):
	"""
	# Derive the ISO day of the week from the days since the era origin.
	"""
	return ((days + datum_offset) % days_in_week) + 1

def week_from_days(days):
	"""
	# Identify the ISO-8601 `(year, week)` containing the given day.
	"""
	# The thursday of the same week decides the year.
	thursday = days - weekday_from_days(days) + iso_anchor
	year = gregorian.date_from_days(thursday)[0]
	first = gregorian.days_from_date((year, 1, 1))
	return (year, ((thursday - first) // days_in_week) + 1)

def context(table):
	table.define('week', 'day', days_in_week)
