"""
# Conversion between the units of time and the three tier carry representation.

# Every unit is defined as a multiple of a finer unit by &.metric, &.earth, and
# &.week. The resulting &Table relates each &Unit to the microsecond, the finest
# unit held by a &.types.Timestamp.

# Conversions are exact. Integral results are returned as &int and the remainder
# are returned as &fractions.Fraction instances.

#!/pl/python
	assert convert(90, 'second', 'minute') == fractions.Fraction(3, 2)
	assert to_carry(1, 'week') == (0, 604800, 0)
"""
import enum
import fractions
import math

from . import core
from . import metric
from . import earth
from . import week

class Unit(enum.Enum):
	"""
	# The supported units of time in ascending order.
	"""
	microsecond = 'microsecond'
	millisecond = 'millisecond'
	second = 'second'
	minute = 'minute'
	hour = 'hour'
	day = 'day'
	week = 'week'

#: Short forms of the unit names.
aliases = {
	'usecs': Unit.microsecond,
	'msecs': Unit.millisecond,
	'secs': Unit.second,
	'mins': Unit.minute,
}

class Table(object):
	"""
	# Coefficients relating each &Unit to the &datum unit.
	"""
	__slots__ = ('datum', 'coefficients',)

	def __init__(self, datum):
		self.datum = Unit(datum)
		self.coefficients = {self.datum: 1}

	def define(self, unit, definition, multiple):
		"""
		# Define &unit as &multiple of the already defined unit, &definition.
		"""
		self.coefficients[Unit(unit)] = self.coefficients[Unit(definition)] * multiple

	def compose(self, source, target, Fraction=fractions.Fraction):
		"""
		# The ratio used to convert quantities in &source units to &target units.
		"""
		return Fraction(self.coefficients[source], self.coefficients[target])

def standard_table():
	"""
	# Construct the &Table describing the units of &Unit.
	"""
	table = Table('microsecond')
	metric.context(table)
	earth.context(table)
	week.context(table)
	return table

table = standard_table()

def select(identifier) -> Unit:
	"""
	# Resolve the &Unit identified by a member, a singular or plural name, or an alias.
	"""
	if isinstance(identifier, Unit):
		return identifier

	if isinstance(identifier, str):
		name = identifier.lower()
		if name in aliases:
			return aliases[name]
		if name[-1:] == 's' and name[:-1] in Unit.__members__:
			name = name[:-1]
		if name in Unit.__members__:
			return Unit[name]

	raise core.InvalidArgument('unit', identifier)

def exact(value, Fraction=fractions.Fraction):
	"""
	# Convert a real number into an exact rational.
	# Floats are read by their decimal representation.
	"""
	if isinstance(value, int):
		return value
	if isinstance(value, float):
		return Fraction(repr(value))
	return Fraction(value)

def reduce(value):
	"""
	# Return an &int when the given rational is integral.
	"""
	if isinstance(value, int):
		return value
	if value.denominator == 1:
		return value.numerator
	return value

def convert(value, source, target, table=table):
	"""
	# Convert the &value in &source units to &target units.

	# [ Parameters ]
	# /value/
		# The quantity of &source units; any real number.
	# /source/
		# The unit of &value.
	# /target/
		# The unit of the returned quantity.
	"""
	ratio = table.compose(select(source), select(target))
	return reduce(exact(value) * ratio)

def convert_hms(hms, target):
	"""
	# Convert an `(hours, minutes, seconds)` triple to &target units.
	"""
	return convert(earth.seconds_from_timeofday(hms), Unit.second, target)

def normalize(coarse, mid, fine, divmod=divmod, million=metric.million):
	"""
	# Propagate carries from the finest tier upward so that &mid and &fine are
	# within `[0, 1000000)`. Negative values borrow from the coarser tier;
	# the sign of the whole is carried by &coarse.
	"""
	carry, fine = divmod(fine, million)
	carry, mid = divmod(mid + carry, million)
	return (coarse + carry, mid, fine)

def to_carry(value, unit):
	"""
	# Convert the &value in &unit units into the normalized `(coarse, mid, fine)` form.

	# Fractional microseconds are discarded by flooring the value.
	"""
	microseconds = math.floor(convert(value, unit, Unit.microsecond))
	return normalize(0, 0, microseconds)

def from_carry(coarse, mid, fine, unit=Unit.microsecond, million=metric.million):
	"""
	# Convert a `(coarse, mid, fine)` triple into a quantity of &unit units.
	"""
	return convert(((coarse * million) + mid) * million + fine, Unit.microsecond, unit)
