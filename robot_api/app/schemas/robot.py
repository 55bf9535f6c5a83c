"""
Pydantic schema for robot records.

A robot is identified by its ``code`` and classified by ``model``,
``tech`` and ``status``, whose permitted values come from the
reference catalog.  The schema itself only checks types: string fields
default to empty strings so that missing values reach the store and
are reported there as validation errors naming the offending field.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class Robot(BaseModel):
    """Schema for creating, replacing and reading a robot."""

    code: str = Field("", examples=["R1"], description="Unique robot code")
    name: str = Field("", examples=["Arm"])
    description: str = Field("", examples=["Six axis welding arm"])
    model: str = Field("", examples=["car"], description="One of the catalog models")
    tech: List[str] = Field(
        default_factory=list,
        examples=[["AI", "robot"]],
        description="Catalog techs; duplicates and an empty list are allowed",
    )
    status: str = Field("", examples=["active"], description="One of the catalog status values")

    @field_validator("description", mode="before")
    @classmethod
    def description_none_to_empty(cls, v: Optional[str]) -> str:
        return "" if v is None else v

    @field_validator("tech", mode="before")
    @classmethod
    def tech_none_to_empty(cls, v: Optional[List[str]]) -> List[str]:
        # JSON ``null`` behaves like an empty tech list
        if v is None:
            return []
        return v
