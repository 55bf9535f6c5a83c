"""
Pydantic schemas for the reference catalog.

``ReferenceValues`` is the full catalog as returned by the API.
``ReferenceValuesUpdate`` is the body accepted by the merge endpoint:
every vocabulary is optional and only the provided ones are merged.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ReferenceValues(BaseModel):
    """Schema for reading the reference catalog."""

    models: List[str] = Field(default_factory=list, examples=[["car", "humanoid", "transformation"]])
    techs: List[str] = Field(default_factory=list, examples=[["AI", "car", "robot", "cyborg", "humanoid"]])
    status: List[str] = Field(default_factory=list, examples=[["progress", "active", "inactive"]])


class ReferenceValuesUpdate(BaseModel):
    """Schema for additively merging values into the catalog.

    All fields are optional; omitted vocabularies are left untouched.
    """

    models: Optional[List[str]] = None
    techs: Optional[List[str]] = None
    status: Optional[List[str]] = None
