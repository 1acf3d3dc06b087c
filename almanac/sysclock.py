"""
# Typed system clock access.

# The process' clock is bound to &iclock and used by &now, &today, &elapsed,
# and &measure unless a clock is given to them. &install replaces it.
"""
import logging

from . import core
from . import abstract
from . import libclock
from . import types
from . import earth

log = logging.getLogger(__name__)

#: The process' clock. Normally, the kernel's clock.
iclock = libclock.IClock(libclock.KClock())

def install(clockwork:abstract.Clock) -> libclock.IClock:
	"""
	# Replace the process' clock with one reading &clockwork.
	# Returns the clock that was replaced.
	"""
	global iclock

	if not isinstance(clockwork, abstract.Clock):
		raise core.InvalidArgument('clock', clockwork)

	previous = iclock
	iclock = libclock.IClock(clockwork)
	log.debug("installed clockwork %r replacing %r", clockwork, previous.clockwork)
	return previous

def now(*, clock=None) -> types.Timestamp:
	"""
	# Get the current point in time according to the clock's wall clock
	# as the interval since the era origin.
	"""
	return (clock or iclock).demotic()

def today(offset=0, *, clock=None):
	"""
	# Identify the current date.

	# [ Parameters ]
	# /offset/
		# Seconds east of UTC to apply to the clock's reading.
		# The local offset is not looked up; defaults to zero, UTC.
	"""
	from .calendar import Date # Defer import until usage.

	seconds = now(clock=clock).convert('second') + offset
	return Date.from_days(seconds // earth.seconds_in_day)

def elapsed(timestamp, unit=None, *, clock=None):
	"""
	# The interval between &timestamp and now; positive when &timestamp is in the past.
	"""
	return types.diff(now(clock=clock), timestamp, unit)

def measure(action, *args, clock=None, **kw):
	"""
	# Execute &action with the given arguments and measure the time it took using
	# the monotonic clock.

	# Returns `(elapsed, result)` where `elapsed` is a &types.Timestamp.
	# Exceptions raised by &action are not trapped.
	"""
	with (clock or iclock).stopwatch() as snapshot:
		result = action(*args, **kw)
	return (snapshot(), result)
