"""
Application package initializer.

The application is split into ``core`` (configuration, logging,
locking), ``schemas`` (pydantic models), ``services`` (the robot store
and reference catalog) and ``api`` (FastAPI routers).  Importing this
package builds the default application instance.
"""

from .main import app  # noqa: F401
