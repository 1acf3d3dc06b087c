"""
# Calendar dates of the proleptic Gregorian calendar.

# &Date is the `(year, month, day)` entity and &DateTime joins a &Date with a time
# of day and an externally supplied offset from UTC. Both are immutable; operations
# return new instances.

#!python
	d = calendar.Date(2021, 1, 31)
	assert d.shift(months=1) == calendar.Date(2021, 2, 28)
	assert calendar.Date.epoch().iso_triplet() == (1970, 1, 4)

# Construction does not validate; &is_valid and &validate are used for that.
# Shifts always produce valid dates.

# [ Elements ]

# /origins/
	# The days, since the era origin, of the origins accepted by &Date.to_days
	# and &Date.from_days.
"""
import dataclasses

from . import core
from . import earth
from . import metric
from . import gregorian
from . import week
from . import libunit
from . import types
from . import eternal

#: Day counts of the named origins.
origins = {
	'zero': 0,
	'epoch': gregorian.days_from_date((1970, 1, 1)),
}

def _origin(name):
	try:
		return origins[name]
	except (KeyError, TypeError):
		raise core.InvalidArgument('origin', name)

@core.struct()
class Date:
	"""
	# A day of the calendar.

	# [ Properties ]
	# /year/
		# The year; zero is the first year of the era.
	# /month/
		# The month of the year; `1` through `12`.
	# /day/
		# The day of the month; `1` through `31`.
	# /calendar/
		# The calendar system; always `'gregorian'`.
	"""
	year: int = 0
	month: int = 1
	day: int = 1
	calendar: str = 'gregorian'

	@classmethod
	def zero(Class):
		"""
		# The era origin, 0000-01-01.
		"""
		return Class(0, 1, 1)

	@classmethod
	def epoch(Class):
		"""
		# The unix epoch, 1970-01-01.
		"""
		return Class(1970, 1, 1)

	@classmethod
	def today(Class, offset=0, *, clock=None):
		from . import sysclock
		return sysclock.today(offset, clock=clock)

	@classmethod
	def from_days(Class, days, origin='zero'):
		"""
		# The date that is &days after the &origin.
		"""
		return Class(*gregorian.date_from_days(days + _origin(origin)))

	@classmethod
	def from_seconds(Class, seconds, origin='zero'):
		"""
		# The date containing the second that is &seconds after the &origin.
		"""
		return Class.from_days(seconds // earth.seconds_in_day, origin)

	def to_days(self, origin='zero') -> int:
		"""
		# The number of days from &origin to the date.
		"""
		return gregorian.days_from_date(self.parts()) - _origin(origin)

	def to_seconds(self, origin='zero') -> int:
		"""
		# The number of seconds from &origin to the start of the date.
		"""
		return self.to_days(origin) * earth.seconds_in_day

	def parts(self):
		"""
		# The `(year, month, day)` triple.
		"""
		return (self.year, self.month, self.day)

	def is_valid(self) -> bool:
		return gregorian.is_valid(self.parts())

	def is_leap(self) -> bool:
		return gregorian.year_is_leap(self.year)

	def days_in_month(self) -> int:
		return gregorian.days_in_month(self.year, self.month)

	def day_of_year(self) -> int:
		"""
		# The one-based ordinal of the day within its year.
		"""
		return 1 + diff(self.set(month=1, day=1), self, 'days')

	def weekday(self) -> int:
		"""
		# The ISO day of the week; Monday is `1` and Sunday is `7`.
		"""
		return week.weekday_from_days(self.to_days())

	def iso_week(self):
		"""
		# The ISO-8601 `(year, week)` that the date falls in.
		"""
		return week.week_from_days(self.to_days())

	def iso_triplet(self):
		"""
		# The ISO-8601 `(year, week, weekday)` of the date.
		"""
		days = self.to_days()
		return week.week_from_days(days) + (week.weekday_from_days(days),)

	def set(self, **fields):
		"""
		# Copy the date overwriting the named fields; `year`, `month`, or `day`.
		# The result is not validated.
		"""
		for name in fields:
			if name not in ('year', 'month', 'day'):
				raise core.InvalidArgument('field', name)
		return dataclasses.replace(self, **fields)

	def shift(self, offsets=(), **parts):
		from . import libshift
		return libshift.shift(self, offsets, **parts)

	def __str__(self):
		return "{0:04}-{1:02}-{2:02}".format(self.year, self.month, self.day)

@core.struct()
class DateTime:
	"""
	# A &Date with a time of day and an offset from UTC.

	# The offset is supplied by the caller; no zone is looked up or stored.

	# [ Properties ]
	# /date/
		# The local &Date.
	# /hour/
		# Hour of the day; `0` through `23`.
	# /minute/
		# Minute of the hour.
	# /second/
		# Second of the minute.
	# /microsecond/
		# Microsecond of the second.
	# /offset/
		# Seconds east of UTC that the local time is ahead of UTC.
	"""
	date: Date
	hour: int = 0
	minute: int = 0
	second: int = 0
	microsecond: int = 0
	offset: int = 0

	@classmethod
	def from_tuple(Class, datetime, offset=0):
		"""
		# Construct from the `(year, month, day, hour, minute, second)` form.
		"""
		return Class(Date(*datetime[:3]), *datetime[3:6], offset=offset)

	@classmethod
	def from_seconds(Class, seconds, microsecond=0, offset=0):
		"""
		# Construct from the local seconds since the era origin.
		"""
		days, second = divmod(seconds, earth.seconds_in_day)
		return Class(Date.from_days(days), *earth.timeofday_from_seconds(second),
			microsecond=microsecond, offset=offset)

	@classmethod
	def from_microseconds(Class, microseconds, offset=0):
		seconds, microsecond = divmod(microseconds, metric.million)
		return Class.from_seconds(seconds, microsecond, offset)

	@classmethod
	def from_absolute_seconds(Class, seconds, offset=0):
		"""
		# Construct the local time at the UTC &seconds since the era origin.
		"""
		return Class.from_seconds(seconds + offset, offset=offset)

	@classmethod
	def from_timestamp(Class, timestamp, offset=0):
		"""
		# Construct the local time at the point &timestamp, an interval since the era origin.
		"""
		return Class.from_microseconds(timestamp.total + (offset * metric.million), offset)

	def timeofday(self):
		return (self.hour, self.minute, self.second)

	def tuple(self):
		"""
		# The `(year, month, day, hour, minute, second)` form of the local time.
		"""
		return self.date.parts() + self.timeofday()

	def to_seconds(self) -> int:
		"""
		# The local seconds since the era origin.
		"""
		return self.date.to_seconds() + earth.seconds_from_timeofday(self.timeofday())

	def to_microseconds(self) -> int:
		return (self.to_seconds() * metric.million) + self.microsecond

	def to_absolute_seconds(self) -> int:
		"""
		# The UTC seconds since the era origin.
		"""
		return self.to_seconds() - self.offset

	def to_timestamp(self) -> types.Timestamp:
		return types.Timestamp(0, self.to_absolute_seconds(), self.microsecond)

	def to_gregorian(self):
		"""
		# The `((year, month, day), (hour, minute, second), offset)` form with
		# the offset in minutes.
		"""
		return (self.date.parts(), self.timeofday(), self.offset / earth.seconds_in_minute)

	def is_valid(self) -> bool:
		return self.date.is_valid() and (
			0 <= self.hour < earth.hours_in_day and
			0 <= self.minute < earth.minutes_in_hour and
			0 <= self.second < earth.seconds_in_minute and
			0 <= self.microsecond < metric.million
		)

	def shift(self, offsets=(), **parts):
		from . import libshift
		return libshift.shift(self, offsets, **parts)

def datetime_from_seconds(seconds):
	"""
	# Decompose the seconds since the era origin into the
	# `(year, month, day, hour, minute, second)` form.
	"""
	days, second = divmod(seconds, earth.seconds_in_day)
	return gregorian.date_from_days(days) + earth.timeofday_from_seconds(second)

def seconds_from_datetime(datetime):
	"""
	# Convert the `(year, month, day, hour, minute, second)` form into seconds since
	# the era origin. Fields overflow onto the larger units.
	"""
	return (
		gregorian.days_from_date(datetime[:3]) * earth.seconds_in_day +
		earth.seconds_from_timeofday(datetime[3:6])
	)

def is_valid(date) -> bool:
	return date.is_valid()

def validate(date):
	"""
	# Return &date if it is valid; otherwise, raise &core.InvalidDate.
	"""
	if not date.is_valid():
		raise core.InvalidDate(date)
	return date

def normalize(date):
	"""
	# Return a valid date by wrapping the month onto the year and clamping the day
	# to the month's range.
	"""
	years, month = gregorian.interpolate_month(date.month)
	year, month, day = gregorian.clamp((date.year + years, month, date.day))
	return date.set(year=year, month=month, day=day)

def is_leap(subject) -> bool:
	"""
	# Whether the year, or the year of the &Date, is a leap year.
	"""
	if isinstance(subject, Date):
		subject = subject.year
	return gregorian.year_is_leap(subject)

def days_in_month(subject, month=None) -> int:
	"""
	# The number of days in the month of the &Date, or of the given year and &month.
	"""
	if isinstance(subject, Date):
		return subject.days_in_month()
	return gregorian.days_in_month(subject, month)

def day_of_year(date) -> int:
	return date.day_of_year()

def weekday(date) -> int:
	return date.weekday()

def iso_week(date):
	return date.iso_week()

def iso_triplet(date):
	return date.iso_triplet()

def set(date, **fields):
	return date.set(**fields)

weekday_name = week.weekday_name
weekday_number = week.weekday_number
month_name = gregorian.month_name
month_number = gregorian.month_number

def _position(subject):
	# Microseconds since the era origin; eternal points are kept apart.
	if isinstance(subject, str):
		if subject in origins:
			subject = Date.from_days(origins[subject])
		elif subject in eternal.names:
			subject = eternal.names[subject]
		else:
			raise core.InvalidArgument('date', subject)

	if isinstance(subject, eternal.Indefinite):
		return (int(subject), 0)
	if isinstance(subject, DateTime):
		return (0, (subject.to_absolute_seconds() * metric.million) + subject.microsecond)
	if isinstance(subject, Date):
		return (0, subject.to_seconds() * metric.million)
	raise core.InvalidArgument('date', subject)

def compare(this, other) -> int:
	"""
	# Compare two dates returning `-1` when &this comes before &other, `0` when
	# they are the same, and `1` when &this comes after &other.

	# &other may also be one of the names `'epoch'`, `'zero'`, `'distant_past'`, or
	# `'distant_future'`, or an &eternal.Indefinite point. The distant past comes
	# before all dates and the distant future after them.
	"""
	a = _position(this)
	b = _position(other)
	if a < b:
		return -1
	elif a > b:
		return 1
	return 0

def equal(this, other) -> bool:
	"""
	# Whether the two dates identify the same day.
	"""
	return compare(this, other) == 0

def _truncate(n, d):
	# Integer division rounding toward zero.
	q = abs(n) // d
	return q if n >= 0 else -q

def _microseconds(subject):
	if isinstance(subject, DateTime):
		return (subject.to_absolute_seconds() * metric.million) + subject.microsecond
	return subject.to_seconds() * metric.million

def diff(this, other, unit='timestamp'):
	"""
	# The signed difference from &this to &other; positive when &other comes after &this.

	# [ Parameters ]
	# /unit/
		# `'timestamp'` for a &types.Timestamp, `'months'` or `'years'` for the
		# difference of the fields ignoring the day of month, or a &libunit.Unit
		# identifier for the whole number of units elapsed between the UTC
		# positions, truncated toward zero. Dates are positioned at midnight.
	"""
	if unit == 'timestamp':
		return types.Timestamp(0, 0, _microseconds(other) - _microseconds(this))

	if unit in ('year', 'years'):
		return date_of(other).year - date_of(this).year
	if unit in ('month', 'months'):
		a = date_of(this)
		b = date_of(other)
		return ((b.year - a.year) * gregorian.months_in_year) + (b.month - a.month)

	u = libunit.select(unit)
	return _truncate(_microseconds(other) - _microseconds(this), libunit.table.coefficients[u])

def date_of(subject) -> Date:
	"""
	# The &Date of a &Date or &DateTime.
	"""
	if isinstance(subject, DateTime):
		return subject.date
	return subject

def add(date, offsets=(), **parts):
	"""
	# Shift the date forward by the given offsets. See &.libshift.shift.
	"""
	from . import libshift
	return libshift.shift(date, offsets, **parts)

def subtract(date, offsets=(), **parts):
	"""
	# Shift the date backward by the given offsets. See &.libshift.shift.
	"""
	from . import libshift
	return libshift.shift(date, libshift.negate(offsets), **libshift.negate(parts))
