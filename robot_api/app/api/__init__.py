"""
API package containing versioned routes.

The HTTP layer is a thin dispatch shim: it parses requests, calls the
robot store obtained from ``deps.get_robot_store`` and turns store
errors into HTTP responses.
"""
