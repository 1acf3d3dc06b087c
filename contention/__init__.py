"""
# Contention based testing.

# Test functions accept a &core.Test and assert with the true division operator:

#!syntax/python
	def test_feature(test):
		test/expected == subject()

# Modules of tests are executed with &engine.execute, or collected by pytest
# through the &plugin fixture.
"""
