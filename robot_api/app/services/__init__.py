"""
Service layer.

The robot store owns all robot records and the reference catalog and
is the only place where validation happens.  API handlers receive a
store instance through a dependency and never touch its internals.
"""
