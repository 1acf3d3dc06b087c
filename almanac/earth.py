"""
Data regarding Earth-based units of time. (The earth day)
"""
#: Number of seconds contained in a `minute`.
seconds_in_minute = 60

#: Number of minutes contained in an `hour`.
minutes_in_hour = 60

#: Number of hours contained in an earth `day`.
hours_in_day = 24

#: Number of seconds contained in an `hour`.
seconds_in_hour = seconds_in_minute * minutes_in_hour

#: Number of seconds contained in an earth `day`.
seconds_in_day = seconds_in_hour * hours_in_day

def timeofday_from_seconds(seconds):
	"""
	Split the seconds of a day into the common `(hour, minute, second)` form.
	Seconds beyond a day are wrapped.
	"""
	minutes, second = divmod(seconds % seconds_in_day, seconds_in_minute)
	hour, minute = divmod(minutes, minutes_in_hour)
	return (hour, minute, second)

def seconds_from_timeofday(timeofday):
	"""
	Convert an `(hour, minute, second)` triple into seconds. Fields are not
	validated; excess values overflow onto the larger units.
	"""
	hour, minute, second = timeofday
	return (hour * seconds_in_hour) + (minute * seconds_in_minute) + second

def context(table):
	table.define('minute', 'second', seconds_in_minute)
	table.define('hour', 'minute', minutes_in_hour)
	table.define('day', 'hour', hours_in_day)
