"""
Pydantic schema definitions for API payloads.

Robots and the reference catalog each define their own models for
request and response bodies.  The store works directly with these
models; there is no separate persistence representation.
"""

from .reference import ReferenceValues, ReferenceValuesUpdate
from .robot import Robot

__all__ = ["Robot", "ReferenceValues", "ReferenceValuesUpdate"]
