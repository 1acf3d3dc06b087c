"""
# Eternals are points at an unbounded distance from every calendar day. They are used
# to represent the furthest points in the past and the future when comparing dates.
"""
unit = 'eternal'

# Sorted by index use: -1 is distant past, 1 is distant future.
points = (
	None,
	'distant_future',
	'distant_past',
)

class Indefinite(int):
	"""
	# A point before, `-1`, or after, `1`, all calendar days.
	"""
	__slots__ = ()

	def __new__(Class, direction):
		# Reduce superfluous quantities.
		if direction > 0:
			return point_instances[0]
		elif direction < 0:
			return point_instances[1]
		raise ValueError("indefinite points have a direction")

	def __neg__(self):
		return Indefinite(-int(self))

	def __repr__(self, choice = points):
		return '{0}.{1}'.format(__name__, choice[int(self)])

	def __str__(self, choice = points):
		return choice[int(self)]

	def leads(self, pit):
		"""
		# Whether the point comes before the given point.
		"""
		if isinstance(pit, Indefinite):
			return int(self) < int(pit)
		return self < 0

	def follows(self, pit):
		"""
		# Whether the point comes after the given point.
		"""
		if isinstance(pit, Indefinite):
			return int(self) > int(pit)
		return self > 0

point_instances = tuple(int.__new__(Indefinite, x) for x in (1, -1))

distant_future, distant_past = point_instances

#: Names of the eternal points.
names = {
	'distant_future': distant_future,
	'distant_past': distant_past,
}
