"""
System clock management and query interface.
"""
import contextlib
import time

from . import abstract
from . import libunit
from . import types

class KClock(object):
	"""
	Operating System's &.abstract.Clock implementation.

	This Class provides access to the kernel's clockwork. It is a thin wrapper providing
	the &.abstract.Clock interface. By default, a process wide instance is
	bound by &.sysclock.iclock. That instance should normally be used.
	"""
	__slots__ = ()
	unit = 'nanosecond'

	def demotic(self):
		return time.time_ns()

	def monotonic(self):
		return time.monotonic_ns()

class IClock(object):
	"""
	Clock class binding &.types.Timestamp with the underlying clockwork's data.

	Demotic readings are expressed as the interval since the era origin so that
	they share the origin of &.calendar.Date day counts.
	"""
	__slots__ = ('clockwork', 'unit')

	def __init__(self, clockwork:abstract.Clock):
		self.clockwork = clockwork
		self.unit = clockwork.unit

	def _measure(self, reading):
		if self.unit == 'nanosecond':
			return types.Timestamp(0, 0, reading // 1000)
		return types.Timestamp.from_unit(reading, self.unit)

	def demotic(self) -> types.Timestamp:
		t = self._measure(self.clockwork.demotic())
		return t.add(types.Timestamp.from_unit(types.unix_epoch_delta, libunit.Unit.second))

	def monotonic(self) -> types.Timestamp:
		return self._measure(self.clockwork.monotonic())

	@contextlib.contextmanager
	def stopwatch(self):
		"""
		Measure the time spent in the block using the monotonic clock.

		The yielded callable returns the time elapsed so far while inside the block,
		and the final measurement after the block exits.
		"""
		start = self.monotonic()
		cell = []
		def inspect(cell=cell):
			if cell:
				return cell[0]
			else:
				return self.monotonic().subtract(start)
		try:
			yield inspect
		finally:
			cell.append(self.monotonic().subtract(start))
