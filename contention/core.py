"""
# Test framework primitives. Provides and defines &Test, &Contention, &Absurdity, and &Fate.
"""
import builtins
import contextlib
import functools
import operator

class Absurdity(Exception):
	"""
	# Exception raised by &Contention instances designating a failed assertion.
	"""

	# for re-constituting the expression
	operator_names_mapping = {
		'__eq__': '==',
		'__ne__': '!=',
		'__lt__': '<',
		'__gt__': '>',
		'__le__': '<=',
		'__ge__': '>=',
		'__mod__': 'is',
	}

	def __init__(self, operator, former, latter):
		self.operator = operator
		self.former = former
		self.latter = latter
		super().__init__(operator, former, latter)

	def __str__(self):
		opchars = self.operator_names_mapping.get(self.operator, self.operator)
		return ' '.join((repr(self.former), opchars, repr(self.latter)))

def _check(opname, compare):
	def check(self, ob):
		if not compare(self.object, ob):
			raise self.test.Absurdity(opname, self.object, ob)
	check.__name__ = opname
	return check

class Contention(object):
	"""
	# Contentions are made by the true division operator of the &Test instance
	# passed into a test function and check the comparison applied to them.

	#!syntax/python
		def test_feature(test):
			test/expectation == featurelib.functionality()
			test/singleton % featurelib.lookup()

	# As a context manager, the contention traps the exception class it was made
	# with and yields a callable returning the trapped instance.
	"""
	__slots__ = ('test', 'object', 'storage')

	def __init__(self, test, object):
		self.test = test
		self.object = object

	__eq__ = _check('__eq__', operator.eq)
	__ne__ = _check('__ne__', operator.ne)
	__lt__ = _check('__lt__', operator.lt)
	__gt__ = _check('__gt__', operator.gt)
	__le__ = _check('__le__', operator.le)
	__ge__ = _check('__ge__', operator.ge)
	__mod__ = _check('__mod__', operator.is_)
	__hash__ = None

	def __enter__(self, partial=functools.partial):
		return partial(getattr, self, 'storage', None)

	def __exit__(self, typ, val, tb):
		y = self.storage = val
		if y is not None and not isinstance(y, Exception):
			# interrupts are never trapped
			return

		if not isinstance(y, self.object):
			raise self.test.Absurdity("isinstance", self.object, y)
		return True # trapped

class Fate(BaseException):
	"""
	# The conclusion of a sealed &Test.
	"""
	line = None

	test_fate_descriptors = {
		# Abstract, Impact
		'return': ("passed", 1),
		'fail': ("failed", -1),
		'interrupt': ("interrupted", -1),
	}

	def __init__(self, content, subtype='fail'):
		super().__init__(content)
		self.content = content
		self.subtype = subtype

	@property
	def impact(self):
		return self.test_fate_descriptors[self.subtype][1]

	@property
	def negative(self):
		"""
		# Whether the fate's effect should be considered undesirable.
		"""
		return self.impact < 0

class Test(object):
	"""
	# An individual test function and the &Contention constructor handed to it.

	# [ Properties ]
	# /identifier/
		# The name of the test function.
	# /subject/
		# The callable performing the checks with the &Test instance.
	# /fate/
		# The &Fate assigned by &seal.
	# /exits/
		# A &contextlib.ExitStack for cleaning up allocations made during the test.
	"""
	__slots__ = ('subject', 'identifier', 'fate', 'exits',)

	Absurdity = Absurdity
	Contention = Contention
	Fate = Fate

	def __init__(self, identifier, subject, ExitStack=contextlib.ExitStack):
		self.identifier = identifier
		self.subject = subject
		self.exits = ExitStack()

	def __truediv__(self, object):
		return self.Contention(self, object)

	def __rtruediv__(self, object):
		return self.Contention(self, object)

	def isinstance(self, *args):
		if not builtins.isinstance(*args):
			raise self.Absurdity("isinstance", *args)

	def issubclass(self, *args):
		if not builtins.issubclass(*args):
			raise self.Absurdity("issubclass", *args)

	def seal(self):
		"""
		# Run the subject with the Test instance and assign the outcome to &fate.
		# Exceptions are trapped except for those outside of &Exception, which
		# are re-raised after the fate is assigned.
		"""
		if hasattr(self, 'fate'):
			raise RuntimeError("test has already been sealed")

		tb = None
		try:
			self.fate = self.Fate(self.subject(self), subtype='return')
		except Exception as err:
			tb = err.__traceback__
			self.fate = self.Fate('test raised exception', subtype='fail')
			self.fate.__cause__ = err
		except BaseException as err:
			self.fate = self.Fate('test raised interrupt', subtype='interrupt')
			self.fate.__cause__ = err
			raise

		if tb is not None:
			while tb.tb_next is not None:
				tb = tb.tb_next
			self.fate.line = tb.tb_lineno
