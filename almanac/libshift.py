"""
# Compound shifts of dates and timestamps.

# A shift applies a collection of `(unit, amount)` offsets in a single operation:

#!python
	d = libshift.shift(calendar.Date(2020, 2, 29), years=1, days=1)
	assert d == calendar.Date(2021, 3, 1)

# Offsets are accumulated into seconds, days, and years, and applied in that order;
# seconds and days commute, but years are applied last so that a clamped day is
# not adjusted twice. The result is always a valid date: a day exceeding the
# target month is reduced to the month's last day.

# Months cannot be combined with any other unit as the variable month length makes
# the combination ambiguous; month shifts must be performed separately.

# [ Elements ]

# /units/
	# The accumulator and multiplier of each accepted unit name.
"""
import collections.abc
import dataclasses
import logging
import math

from . import core
from . import earth
from . import metric
from . import week
from . import gregorian
from . import libunit
from . import types
from . import calendar

log = logging.getLogger(__name__)

#: Accumulator and multiplier of each unit. Timestamps carry their own magnitude.
units = {
	'seconds': ('microseconds', metric.million),
	'minutes': ('microseconds', earth.seconds_in_minute * metric.million),
	'hours': ('microseconds', earth.seconds_in_hour * metric.million),
	'timestamp': ('microseconds', None),
	'days': ('days', 1),
	'weeks': ('days', week.days_in_week),
	'months': ('months', 1),
	'years': ('years', 1),
}

#: Alternate names of the units.
aliases = {
	'secs': 'seconds',
	'mins': 'minutes',
	'second': 'seconds',
	'minute': 'minutes',
	'hour': 'hours',
	'day': 'days',
	'week': 'weeks',
	'month': 'months',
	'year': 'years',
}

#: Units that can be applied to a &types.Timestamp.
timestamp_units = frozenset(['seconds', 'minutes', 'hours', 'days', 'timestamp'])

@core.struct()
class Offsets:
	"""
	# The accumulated offsets of a shift.

	# [ Properties ]
	# /units/
		# The names of the units that were given.
	"""
	microseconds: int = 0
	days: int = 0
	months: int = 0
	years: int = 0
	units: tuple = ()

def identify(name) -> str:
	"""
	# Resolve the canonical name of the unit identified by &name.
	"""
	if name in units:
		return name
	try:
		return aliases[name]
	except (KeyError, TypeError):
		raise core.InvalidArgument('unit', name)

def _timestamp(value):
	if isinstance(value, types.Timestamp):
		return value
	return types.Timestamp(*value)

def _zero(unit, amount):
	if identify(unit) == 'timestamp':
		return not _timestamp(amount)
	return amount == 0

def pairs(offsets, parts):
	"""
	# Combine the sequence or mapping of &offsets and the keyword &parts into
	# a list of `(unit, amount)` pairs.
	"""
	if isinstance(offsets, collections.abc.Mapping):
		offsets = offsets.items()
	return list(offsets) + list(parts.items())

def negate(offsets):
	"""
	# Invert the amounts of the given offsets; a mapping or a sequence of pairs.
	"""
	def invert(unit, amount):
		if identify(unit) == 'timestamp':
			return _timestamp(amount).invert()
		return -amount

	if isinstance(offsets, collections.abc.Mapping):
		return {k: invert(k, v) for k, v in offsets.items()}
	return [(k, invert(k, v)) for k, v in offsets]

def _integral(amount):
	# Whole amount of a calendar unit.
	value = libunit.reduce(libunit.exact(amount))
	if not isinstance(value, int):
		raise core.InvalidArgument('amount', amount)
	return value

def partition(offsets) -> Offsets:
	"""
	# Accumulate the `(unit, amount)` &offsets.
	# Fractional microseconds of the time units are floored; the calendar units
	# require whole amounts.

	# Raises &core.AmbiguousShift when `months` is given with any other unit, and
	# &core.InvalidArgument when a calendar unit is given a fractional amount.
	"""
	acc = {'microseconds': 0, 'days': 0, 'months': 0, 'years': 0}
	given = []

	for unit, amount in offsets:
		name = identify(unit)
		if name not in given:
			given.append(name)

		field, multiplier = units[name]
		if multiplier is None:
			acc[field] += _timestamp(amount).total
		elif field == 'microseconds':
			acc[field] += libunit.exact(amount) * multiplier
		else:
			acc[field] += _integral(amount) * multiplier

	if 'months' in given and len(given) > 1:
		raise core.AmbiguousShift([x for x in given if x != 'months'])

	acc['microseconds'] = math.floor(acc['microseconds'])
	return Offsets(units=tuple(given), **acc)

def _date(subject):
	if isinstance(subject, calendar.DateTime):
		return subject.date
	return subject

def _rebase(subject, date):
	# Place the shifted date in the subject's form.
	if isinstance(subject, calendar.DateTime):
		return dataclasses.replace(subject, date=date)
	return date

def shift_microseconds(subject, microseconds):
	"""
	# Shift a &calendar.Date or &calendar.DateTime by the given microseconds.
	# The sub-day part of the shift is discarded for dates.
	"""
	if not microseconds:
		return subject

	if isinstance(subject, calendar.DateTime):
		return subject.from_microseconds(subject.to_microseconds() + microseconds, subject.offset)

	seconds = subject.to_seconds() + (microseconds // metric.million)
	return calendar.Date.from_seconds(seconds)

def shift_days(subject, days):
	if not days:
		return subject
	return _rebase(subject, calendar.Date.from_days(_date(subject).to_days() + days))

def shift_years(subject, years):
	if not years:
		return subject
	d = _date(subject)
	return _rebase(subject, calendar.Date(*gregorian.clamp((d.year + years, d.month, d.day))))

def shift_months(subject, months):
	"""
	# Shift by months, wrapping the month number onto the year and clamping the day
	# to the length of the resulting month.
	"""
	if not months:
		return subject
	d = _date(subject)
	years, month = gregorian.interpolate_month(d.month + months)
	return _rebase(subject, calendar.Date(*gregorian.clamp((d.year + years, month, d.day))))

def shift_timestamp(subject, offsets:Offsets):
	"""
	# Shift a &types.Timestamp by seconds, minutes, hours, days, or timestamps.
	"""
	for name in offsets.units:
		if name not in timestamp_units:
			raise core.InvalidArgument('unit', name)

	delta = offsets.microseconds + (offsets.days * earth.seconds_in_day * metric.million)
	return subject.add(types.Timestamp(0, 0, delta))

def shift(subject, offsets=(), **parts):
	"""
	# Apply the given offsets to &subject in a single operation.

	# [ Parameters ]
	# /subject/
		# A &calendar.Date, &calendar.DateTime, or &types.Timestamp.
	# /offsets/
		# A sequence of `(unit, amount)` pairs, or a mapping of units to amounts.
	# /parts/
		# Keyword units and amounts added to &offsets.

	# Units are `seconds`, `minutes`, `hours`, `days`, `weeks`, `months`, `years`, and
	# `timestamp` whose amount is a &types.Timestamp. Singular names, `secs`,
	# and `mins` are also accepted.

	# [ Exceptions ]
	# /&core.AmbiguousShift/
		# `months` was given with other units.
	# /&core.InvalidArgument/
		# A unit was not recognized or cannot be applied to a &types.Timestamp.
	"""
	given = pairs(offsets, parts)
	if not given:
		return subject
	if len(given) == 1 and _zero(*given[0]):
		return subject

	p = partition(given)
	if len(given) > 1:
		log.debug("compound shift of %r: %r", subject, p)

	if isinstance(subject, types.Timestamp):
		return shift_timestamp(subject, p)

	if p.months:
		return shift_months(subject, p.months)

	subject = shift_microseconds(subject, p.microseconds)
	subject = shift_days(subject, p.days)
	return shift_years(subject, p.years)
