"""
Core data models for the curve-series pipeline.

All models use Pydantic for validation and serialization.
"""

import datetime as dt
from typing import Any
from uuid import UUID, uuid4

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class Point(BaseModel):
    """A normalized point on the drawing surface.

    ``x`` is the fraction of the time window, ``y`` the fraction between
    axis minimum (0) and maximum (1).
    """

    model_config = ConfigDict(frozen=True)

    x: float = Field(..., ge=0.0, le=1.0)
    y: float = Field(..., ge=0.0, le=1.0)

    @model_validator(mode="before")
    @classmethod
    def from_pair(cls, v: Any) -> Any:
        """Accept ``(x, y)`` pairs as well as mappings."""
        if isinstance(v, (tuple, list, np.ndarray)):
            if len(v) != 2:
                raise ValueError("A point needs exactly two coordinates")
            return {"x": float(v[0]), "y": float(v[1])}
        return v


class Curve(BaseModel):
    """A user-drawn curve and its display attributes."""

    model_config = ConfigDict(validate_assignment=True)

    id: UUID = Field(default_factory=uuid4)
    name: str = Field(..., min_length=1, max_length=256)
    points: tuple[Point, ...] = Field(default=())
    color: str = Field(default="hsl(175, 70%, 50%)")
    visible: bool = Field(default=True, description="Rendering only; ignored by export")
    roughness: int = Field(default=0, ge=0, le=100, description="0 = smooth, 100 = rough")

    @field_validator("points", mode="before")
    @classmethod
    def convert_to_tuple(cls, v: Any) -> Any:
        """Convert lists and arrays to an immutable tuple."""
        if isinstance(v, np.ndarray):
            return tuple(v.tolist())
        if isinstance(v, list):
            return tuple(v)
        return v

    @field_validator("points")
    @classmethod
    def validate_monotonic(cls, v: tuple[Point, ...]) -> tuple[Point, ...]:
        """Ensure x never decreases along the curve."""
        for prev, nxt in zip(v, v[1:]):
            if nxt.x < prev.x:
                raise ValueError("Point x values must be non-decreasing")
        return v

    @property
    def has_data(self) -> bool:
        """Whether the curve has at least one point."""
        return len(self.points) > 0

    def updated(self, **changes: Any) -> "Curve":
        """Return a validated copy with the given fields replaced."""
        data = self.model_dump()
        data.update(changes)
        return self.model_validate(data)


class AxisConfig(BaseModel):
    """Affine map from normalized y to actual values.

    ``y_max <= y_min`` is accepted and inverts or collapses the range.
    """

    model_config = ConfigDict(frozen=True)

    y_min: float = Field(default=0.0, allow_inf_nan=False)
    y_max: float = Field(default=100.0, allow_inf_nan=False)

    @property
    def span(self) -> float:
        """Axis range ``y_max - y_min``."""
        return self.y_max - self.y_min

    def scale(self, normalized_y: float) -> float:
        """Map a normalized y to an actual value."""
        return self.y_min + normalized_y * (self.y_max - self.y_min)


class EventLine(BaseModel):
    """A dated annotation shown alongside the curves; not exported."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    date: dt.date
    label: str = Field(default="")


class Margins(BaseModel):
    """Margins between the canvas edge and the inner drawing rectangle."""

    model_config = ConfigDict(frozen=True)

    top: float = Field(default=40.0, ge=0.0)
    right: float = Field(default=40.0, ge=0.0)
    bottom: float = Field(default=60.0, ge=0.0)
    left: float = Field(default=80.0, ge=0.0)


class CaptureRegion(BaseModel):
    """Canvas rectangle in internal pixel space plus its margins."""

    model_config = ConfigDict(frozen=True)

    width: float = Field(default=800.0, gt=0.0)
    height: float = Field(default=500.0, gt=0.0)
    margins: Margins = Field(default_factory=Margins)

    @model_validator(mode="after")
    def validate_inner_area(self) -> "CaptureRegion":
        """Ensure the margins leave a drawable area."""
        if self.inner_width <= 0 or self.inner_height <= 0:
            raise ValueError("Margins leave no drawable area")
        return self

    @property
    def inner_width(self) -> float:
        return self.width - self.margins.left - self.margins.right

    @property
    def inner_height(self) -> float:
        return self.height - self.margins.top - self.margins.bottom

    @property
    def right_edge(self) -> float:
        return self.width - self.margins.right

    @property
    def bottom_edge(self) -> float:
        return self.height - self.margins.bottom
