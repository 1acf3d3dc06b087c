import fractions
from .. import core
from .. import libunit

Fraction = fractions.Fraction
Unit = libunit.Unit

def test_ratios(test):
	test/1000000 == libunit.table.compose(Unit.second, Unit.microsecond)
	test/Fraction(1,1000000) == libunit.table.compose(Unit.microsecond, Unit.second)

def test_coefficients(test):
	c = libunit.table.coefficients
	test/c[Unit.microsecond] == 1
	test/c[Unit.millisecond] == 1000
	test/c[Unit.second] == 10**6
	test/c[Unit.minute] == 60 * 10**6
	test/c[Unit.hour] == 3600 * 10**6
	test/c[Unit.day] == 86400 * 10**6
	test/c[Unit.week] == 604800 * 10**6

def test_select(test):
	test/libunit.select('second') == Unit.second
	test/libunit.select('seconds') == Unit.second
	test/libunit.select('secs') == Unit.second
	test/libunit.select('usecs') == Unit.microsecond
	test/libunit.select('msecs') == Unit.millisecond
	test/libunit.select('mins') == Unit.minute
	test/libunit.select('hours') == Unit.hour
	test/libunit.select('Days') == Unit.day
	test/libunit.select(Unit.week) == Unit.week

	with test/core.InvalidArgument as exc:
		libunit.select('fortnight')
	test/exc().argument == 'fortnight'
	test/exc().domain == 'unit'

	with test/ValueError as exc:
		libunit.select(7)

def test_convert_to_microseconds(test):
	test/libunit.convert(13, 'msecs', 'usecs') == 13000
	test/libunit.convert(13, 'secs', 'usecs') == 13000000
	test/libunit.convert(13, 'mins', 'usecs') == 13000000 * 60
	test/libunit.convert(13, 'hours', 'usecs') == 13000000 * 3600

def test_convert_to_milliseconds(test):
	test/libunit.convert(13, 'usecs', 'msecs') == Fraction(13, 1000)
	test/libunit.convert(13, 'secs', 'msecs') == 13000
	test/libunit.convert(13, 'mins', 'msecs') == 13000 * 60
	test/libunit.convert(13, 'hours', 'msecs') == 13000 * 3600

def test_convert_to_seconds(test):
	test/libunit.convert(13, 'usecs', 'secs') == Fraction(13, 1000000)
	test/libunit.convert(13, 'msecs', 'secs') == Fraction(13, 1000)
	test/libunit.convert(13, 'mins', 'secs') == 13 * 60
	test/libunit.convert(13, 'hours', 'secs') == 13 * 3600

def test_convert_coarse(test):
	test/libunit.convert(1, 'week', 'day') == 7
	test/libunit.convert(1, 'day', 'week') == Fraction(1, 7)
	test/libunit.convert(90, 'second', 'minute') == Fraction(3, 2)
	test/libunit.convert(2, 'week', 'hour') == 336
	test/libunit.convert(-36, 'hour', 'day') == Fraction(-3, 2)

def test_convert_exactness(test):
	test.isinstance(libunit.convert(120, 'second', 'minute'), int)
	test.isinstance(libunit.convert(Fraction(4, 2), 'minute', 'second'), int)
	test.isinstance(libunit.convert(1, 'second', 'minute'), Fraction)
	# decimal reading of floats
	test/libunit.convert(0.7, 'second', 'microsecond') == 700000
	test/libunit.convert(1.5, 'minute', 'second') == 90

def test_convert_hms(test):
	test/libunit.convert_hms((1, 2, 3), 'second') == 3723
	test/libunit.convert_hms((1, 30, 0), 'hours') == Fraction(3, 2)
	test/libunit.convert_hms((0, 0, 1), 'msecs') == 1000

def test_normalize(test):
	test/libunit.normalize(0, 0, 1000000) == (0, 1, 0)
	test/libunit.normalize(0, 1000000, 0) == (1, 0, 0)
	test/libunit.normalize(0, 2000001, 3000002) == (2, 4, 2)
	test/libunit.normalize(1, -1, 0) == (0, 999999, 0)

def test_normalize_negative(test):
	# Borrows land the remainders within the tier.
	test/libunit.normalize(0, 0, -1) == (-1, 999999, 999999)
	test/libunit.normalize(0, -1, 0) == (-1, 999999, 0)
	test/libunit.normalize(-2, 0, -1000000) == (-3, 999999, 0)

def test_to_carry(test):
	test/libunit.to_carry(1362568903363960, 'usecs') == (1362, 568903, 363960)
	test/libunit.to_carry(13, 'msecs') == (0, 0, 13000)
	test/libunit.to_carry(1, 'week') == (0, 604800, 0)
	test/libunit.to_carry(1.5, 'secs') == (0, 1, 500000)
	test/libunit.to_carry(-1, 'usecs') == (-1, 999999, 999999)

def test_to_carry_floors(test):
	test/libunit.to_carry(Fraction(3, 2), 'usecs') == (0, 0, 1)
	test/libunit.to_carry(-0.5, 'usecs') == (-1, 999999, 999999)
	test/libunit.to_carry(Fraction(1, 3), 'msecs') == (0, 0, 333)

def test_from_carry(test):
	test/libunit.from_carry(1362, 568903, 363960) == 1362568903363960
	test/libunit.from_carry(0, 55, 587139, 'msecs') == Fraction(55587139, 1000)
	test/libunit.from_carry(0, 55, 587139, 'secs') == Fraction(55587139, 1000000)
	test/libunit.from_carry(-1, 999999, 999999) == -1

def test_carry_invariant(test):
	for value in range(-3 * 10**12, 3 * 10**12, 99991 * 10**6 + 12347):
		coarse, mid, fine = libunit.to_carry(value, 'usecs')
		test/0 <= mid
		test/mid < 10**6
		test/0 <= fine
		test/fine < 10**6
		test/libunit.from_carry(coarse, mid, fine) == value

if __name__ == '__main__':
	import sys; from contention import engine
	engine.execute(sys.modules[__name__])
