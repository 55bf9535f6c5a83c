"""
Top-level package for the Robot Registry API.

All functionality lives in submodules under ``app``; for example the
ASGI application is ``robot_api.app.main:app``.
"""

__all__ = []
