"""
# Various constants.

# [ Elements ]

# /zero/
	# The zero length &types.Timestamp.
# /unix_epoch/
	# &types.Timestamp instance referring to 1970 as an interval since the era origin.
# /zero_date/
	# &calendar.Date of the era origin, 0000-01-01.
# /epoch_date/
	# &calendar.Date of the unix epoch, 1970-01-01.
# /distant_past/
	# Point before all dates.
# /distant_future/
	# Point after all dates.
"""
from . import types
from . import calendar
from . import eternal

__all__ = [
	'zero', 'unix_epoch',
	'zero_date', 'epoch_date',
	'distant_past', 'distant_future',
]

zero = types.Timestamp.zero()
unix_epoch = types.Timestamp.epoch()

zero_date = calendar.Date.zero()
epoch_date = calendar.Date.epoch()

distant_past = eternal.distant_past
distant_future = eternal.distant_future
