"""
Core infrastructure shared by the whole application.

Configuration, logging setup and the reader/writer lock used by the
robot store live here.  Nothing in this package knows about robots.
"""
