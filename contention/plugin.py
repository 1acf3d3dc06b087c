"""
# pytest integration providing the &core.Test instance to test functions as `test`.
"""
import pytest

from . import core

@pytest.fixture(name='test')
def contention(request):
	"""
	# Construct the &core.Test for the requesting test function.
	# Allocations added to &core.Test.exits are released after the test.
	"""
	t = core.Test(request.node.name, request.function)
	with t.exits:
		yield t
