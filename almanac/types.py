"""
# Time domain classes for measures of time.

#!python
	two_hours = types.Timestamp.of(hour=2)
	later = two_hours + types.Timestamp.of(minute=2)

	assert later.convert('minute') == 122
	assert types.Duration.from_timestamp(later).minutes == 2

# [ Elements ]

# /Timestamp/
	# The microsecond precision measure in the three tier carry form.
# /Duration/
	# Human readable view of a &Timestamp.
# /unix_epoch_delta/
	# The number of seconds from the era origin, 0000-01-01, to the unix epoch.
"""
import math

from . import core
from . import libunit
from . import metric
from . import earth
from . import gregorian

million = metric.million

#: Seconds from the era origin to 1970-01-01T00:00:00.
unix_epoch_delta = gregorian.days_from_date((1970, 1, 1)) * earth.seconds_in_day

class Timestamp(tuple):
	"""
	# A signed interval of time stored as `(coarse, mid, fine)`, megaseconds,
	# seconds, and microseconds. Instances are always normalized: &mid and &fine
	# are within `[0, 1000000)` and the sign of the interval is carried by &coarse.

	# Points in time are expressed as the interval since the era origin.

	# Normalized tuples order chronologically, so the inherited comparisons are used.
	"""
	__slots__ = ()

	def __new__(Class, coarse=0, mid=0, fine=0):
		return tuple.__new__(Class, libunit.normalize(coarse, mid, fine))

	@property
	def coarse(self) -> int:
		"""
		# Megaseconds.
		"""
		return self[0]

	@property
	def mid(self) -> int:
		"""
		# Seconds of the megasecond.
		"""
		return self[1]

	@property
	def fine(self) -> int:
		"""
		# Microseconds of the second.
		"""
		return self[2]

	@property
	def total(self) -> int:
		"""
		# The magnitude of the interval in microseconds.
		"""
		return (((self[0] * million) + self[1]) * million) + self[2]

	@classmethod
	def zero(Class):
		return Class(0, 0, 0)

	@classmethod
	def epoch(Class):
		"""
		# The interval from the era origin to the unix epoch, 1970-01-01.
		"""
		return Class(*libunit.to_carry(unix_epoch_delta, libunit.Unit.second))

	@classmethod
	def from_unit(Class, value, unit):
		"""
		# Construct a normalized instance from a quantity of &unit units.
		"""
		return Class(*libunit.to_carry(value, unit))

	@classmethod
	def of(Class, *times, **parts):
		"""
		# Create an instance from the sum of the given &times and &parts.

		#!python
			t = Timestamp.of(hour=33, microsecond=44)

		# [ Parameters ]
		# /times/
			# A sequence of &Timestamp instances.
		# /parts/
			# Keyword names designate the unit of the corresponding value.
		"""
		total = sum(libunit.exact(v) * libunit.table.compose(libunit.select(k), libunit.Unit.microsecond)
			for k, v in parts.items())
		total += sum(t.total for t in times)
		return Class(0, 0, math.floor(total))

	def convert(self, unit):
		"""
		# Express the interval as a quantity of &unit units; exact, and fractional
		# when the interval is not a whole number of units.
		"""
		return libunit.from_carry(*self, unit=unit)

	def add(self, other):
		return self.__class__(self[0] + other[0], self[1] + other[1], self[2] + other[2])

	def subtract(self, other):
		return self.__class__(self[0] - other[0], self[1] - other[1], self[2] - other[2])

	def scale(self, factor):
		"""
		# Multiply the interval by &factor. Fractional microseconds are floored.
		"""
		if factor == 0:
			return self.zero()
		if isinstance(factor, int):
			return self.__class__(self[0] * factor, self[1] * factor, self[2] * factor)
		return self.__class__(*libunit.to_carry(libunit.exact(factor) * self.total, libunit.Unit.microsecond))

	def invert(self):
		return self.__class__(-self[0], -self[1], -self[2])

	def __abs__(self):
		for x in self:
			if x != 0:
				break
		if x < 0:
			return self.invert()
		return self

	__neg__ = invert

	def __add__(self, other):
		if not isinstance(other, Timestamp):
			return NotImplemented
		return self.add(other)

	def __sub__(self, other):
		if not isinstance(other, Timestamp):
			return NotImplemented
		return self.subtract(other)

	def __mul__(self, factor):
		if isinstance(factor, tuple):
			return NotImplemented
		return self.scale(factor)
	__rmul__ = __mul__

	def __bool__(self):
		return self != (0, 0, 0)

	def __repr__(self):
		return "{0}({1}, {2}, {3})".format(self.__class__.__name__, *self)

def add(a, b):
	return a.add(b)

def subtract(a, b):
	return a.subtract(b)

def scale(t, factor):
	return t.scale(factor)

def invert(t):
	return t.invert()

def diff(t1, t2, unit=None):
	"""
	# The interval from &t2 to &t1; positive when &t1 occurs after &t2.

	# [ Parameters ]
	# /unit/
		# The unit of the returned quantity. When &None, the normalized
		# &Timestamp is returned.
	"""
	d = t1.subtract(t2)
	if unit is None or unit == 'timestamp':
		return d
	return d.convert(unit)

@core.struct()
class Duration:
	"""
	# A &Timestamp viewed as hours, minutes, seconds, milliseconds, and microseconds.

	# Every field carries the sign of the whole interval; fields given with
	# inconsistent signs are summed and redistributed on construction:

	#!python
		d = Duration(hours=-3, minutes=10)
		assert (d.hours, d.minutes) == (-2, -50)

	# &hours is not bounded by a day.
	"""
	hours: int = 0
	minutes: int = 0
	seconds: int = 0
	milliseconds: int = 0
	microseconds: int = 0

	def __post_init__(self):
		fields = self._split(self._total())
		for name, value in zip(('hours', 'minutes', 'seconds', 'milliseconds', 'microseconds'), fields):
			object.__setattr__(self, name, value)

	def _total(self):
		return (
			(((self.hours * earth.minutes_in_hour) + self.minutes)
			* earth.seconds_in_minute + self.seconds) * million
			+ (self.milliseconds * 1000) + self.microseconds
		)

	@staticmethod
	def _split(total):
		sign = -1 if total < 0 else 1
		seconds, microseconds = divmod(abs(total), million)
		milliseconds, microseconds = divmod(microseconds, 1000)
		minutes, seconds = divmod(seconds, earth.seconds_in_minute)
		hours, minutes = divmod(minutes, earth.minutes_in_hour)
		return tuple(sign * x for x in (hours, minutes, seconds, milliseconds, microseconds))

	@classmethod
	def of(Class, hours=0, minutes=0, seconds=0, milliseconds=0, microseconds=0):
		return Class(hours, minutes, seconds, milliseconds, microseconds)

	@classmethod
	def from_timestamp(Class, timestamp):
		return Class(*Class._split(timestamp.total))

	def to_timestamp(self) -> Timestamp:
		return Timestamp(0, 0, self._total())

	def add(self, other):
		return self.from_timestamp(self.to_timestamp().add(other.to_timestamp()))

	def subtract(self, other):
		return self.from_timestamp(self.to_timestamp().subtract(other.to_timestamp()))

	def scale(self, factor):
		return self.from_timestamp(self.to_timestamp().scale(factor))
