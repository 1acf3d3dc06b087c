name = 'almanac'
abstract = 'Calendar and duration arithmetic with microsecond precision.'
icon = '📅'
study = 'horology'

version_info = (0, 5, 0)
version = '.'.join(map(str, version_info))
