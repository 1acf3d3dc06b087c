"""
Information about the metric second and the sub-second multiples used by almanac.
"""

#: The names of the SI multiples associated with their exponent.
name_to_exponent = {
	'microsecond': -6,
	'millisecond': -3,
	'second': 0,
}

#: Number of microseconds in a second; the divisor of each carry tier.
million = 10 ** -name_to_exponent['microsecond']

def context(table):
	"""
	Given a &.libunit.Table instance, define the metric units ending with the
	'second'. The finest unit must already be the table's datum.
	"""
	import operator

	l = list(name_to_exponent.items())
	l.sort(key=operator.itemgetter(1))

	for i in range(1, len(l)):
		# define the unit with the prior definition
		defined = l[i]
		definition = l[i-1]

		table.define(
			defined[0], definition[0],
			10 ** (defined[1] - definition[1]),
		)
