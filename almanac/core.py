"""
# Exception hierarchy and record constructor used across the almanac modules.
"""
import dataclasses
import functools

# Frozen, slotted dataclass constructor used for the calendar records.
struct = functools.partial(dataclasses.dataclass, slots=True, eq=True, frozen=True)

class Error(Exception):
	"""
	# Base class for almanac errors.
	"""

class InvalidArgument(Error, ValueError):
	"""
	# A lookup or conversion was given an identifier or ordinal that it does not know.

	# [ Properties ]
	# /argument/
		# The rejected value.
	# /domain/
		# What the value was expected to identify; `'weekday'`, `'month'`, `'unit'`,
		# or `'amount'`.
	"""

	def __init__(self, domain, argument):
		self.domain = domain
		self.argument = argument
		super().__init__(domain, argument)

	def __str__(self):
		return "invalid %s: %r" % (self.domain, self.argument)

class AmbiguousShift(Error, ValueError):
	"""
	# A compound shift mixed `months` with other units.

	# [ Properties ]
	# /units/
		# The unit names given alongside `months`.
	"""

	def __init__(self, units):
		self.units = tuple(units)
		super().__init__(self.units)

	def __str__(self):
		return "months cannot be shifted together with: " + ', '.join(self.units)

class InvalidDate(Error, ValueError):
	"""
	# A (year, month, day) triple that is not a day of the Gregorian calendar.
	"""

	def __init__(self, date):
		self.date = date
		super().__init__(date)

	def __str__(self):
		return "not a gregorian date: %r" % (self.date,)
