"""
# Abstract interfaces to the clocks read by &.sysclock.

# Primarily, this module exists to document the interface that clockwork must
# provide in order to be installed as the process' clock.
"""
from abc import abstractmethod
import typing

@typing.runtime_checkable
class Clock(typing.Protocol):
	"""
	# The source of the current time; the kernel's clock or a fixed clock
	# supplied by tests.

	# [ Properties ]
	# /unit/
		# The unit of the integers returned by &demotic and &monotonic.
	"""
	unit: str

	@abstractmethod
	def demotic(self) -> int:
		"""
		# The current wall clock reading as an integer since the unix epoch.
		"""

	@abstractmethod
	def monotonic(self) -> int:
		"""
		# A reading of a clock that is not affected by adjustments to the wall
		# clock. Only differences between readings are meaningful.
		"""
