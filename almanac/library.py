"""
# Primary public module.

# Provides access to the default types, &Timestamp, &Duration, &Date, and &DateTime,
# the clock functions, and the shift operation.
"""
__shortname__ = 'libalmanac'

from .core import Error, InvalidArgument, AmbiguousShift, InvalidDate
from .libunit import Unit, convert, convert_hms, to_carry, from_carry
from .types import Timestamp, Duration, diff as measure_diff
from .calendar import (
	Date, DateTime,
	compare, equal, diff,
	is_leap, is_valid, validate, days_in_month,
	weekday_name, weekday_number, month_name, month_number,
	datetime_from_seconds, seconds_from_datetime,
)
from .constants import *
from .sysclock import now, today, elapsed, measure
from .libshift import shift

def range(start, stop, step=None):
	"""
	# Construct an iterator producing dates between the given &start, inclusive,
	# and &stop, exclusive.

	# &step is a mapping of shift offsets; one day by default.

	#!/pl/python
		week = list(libalmanac.range(d, d.shift(days=7)))
	"""
	step = step or {'days': 1}
	current = start
	while compare(current, stop) < 0:
		yield current
		current = shift(current, step)

def business_week(date):
	"""
	# Return the list of the business days, Monday through Friday, of the week
	# containing &date.
	"""
	start = shift(date, days=1 - date.weekday())
	return list(range(start, shift(start, days=5)))
