"""Core domain models for paint trail generation."""

import math
import re
from enum import Enum
from uuid import UUID, uuid4

import numpy as np
from pydantic import BaseModel, Field

TAU = 2 * math.pi


class AngleUnit(str, Enum):
    """Unit used by every trigonometric conversion on a Vector."""

    DEGREES = "degrees"
    RADIANS = "radians"


def _to_radians(angle: float, unit: AngleUnit) -> float:
    if unit == AngleUnit.DEGREES:
        return math.radians(angle)
    return angle


def _from_radians(angle: float, unit: AngleUnit) -> float:
    if unit == AngleUnit.DEGREES:
        return math.degrees(angle)
    return angle


class Vector(BaseModel):
    """Immutable 2D vector.

    Every operation returns a new Vector. Angles are interpreted in the
    ``unit`` passed to each trigonometric method (degrees by default), so
    two callers can never disagree about a shared angle mode.

    Attributes:
        x: Horizontal component.
        y: Vertical component.
    """

    x: float = Field(0.0, description="Horizontal component")
    y: float = Field(0.0, description="Vertical component")

    class Config:
        frozen = True

    def __init__(self, x: float = 0.0, y: float = 0.0, **data):
        super().__init__(x=x, y=y, **data)

    # ---------- construction ----------

    @classmethod
    def from_object(cls, obj) -> "Vector":
        """Build a Vector from anything exposing ``x`` and ``y`` (attribute or key)."""
        if isinstance(obj, dict):
            return cls(obj["x"], obj["y"])
        return cls(obj.x, obj.y)

    @classmethod
    def from_array(cls, values) -> "Vector":
        return cls(float(values[0]), float(values[1]))

    @classmethod
    def from_polar(
        cls, length: float, angle: float, unit: AngleUnit = AngleUnit.DEGREES
    ) -> "Vector":
        """Inverse of ``(length(), angle())``.

        Args:
            length: Distance from the origin.
            angle: Direction, measured from the positive x-axis.
            unit: Unit of ``angle``.

        Returns:
            The vector ``(length * cos(angle), length * sin(angle))``.
        """
        radians = _to_radians(angle, unit)
        return cls(length * math.cos(radians), length * math.sin(radians))

    # ---------- conversion ----------

    def to_object(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}

    def to_array(self) -> tuple[float, float]:
        return (self.x, self.y)

    def to_polar(self, unit: AngleUnit = AngleUnit.DEGREES) -> tuple[float, float]:
        return self.length(), self.angle(unit)

    def to_string(self, precision: int = 3, separator: str = ",") -> str:
        """Format both components, trimming an all-zero fractional part."""
        return separator.join(
            re.sub(r"\.0+$", "", f"{value:.{precision}f}") for value in (self.x, self.y)
        )

    def equals(self, other: "Vector") -> bool:
        return self.x == other.x and self.y == other.y

    # ---------- magnitude and direction ----------

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def length_squared(self) -> float:
        return self.x**2 + self.y**2

    def with_length(self, length: float) -> "Vector":
        """Same direction, new length. The zero vector stays zero."""
        return self.normalize().scale(length)

    def angle(self, unit: AngleUnit = AngleUnit.DEGREES) -> float:
        """Direction of the vector; 0 for the zero vector."""
        if self.x == 0 and self.y == 0:
            return 0.0
        return _from_radians(math.atan2(self.y, self.x), unit)

    def with_angle(
        self, angle: float, unit: AngleUnit = AngleUnit.DEGREES
    ) -> "Vector":
        return Vector.from_polar(self.length(), angle, unit)

    def angle_between(
        self, other: "Vector", unit: AngleUnit = AngleUnit.DEGREES
    ) -> float:
        return self.angle(unit) - other.angle(unit)

    def distance_to(self, other: "Vector") -> float:
        return other.subtract(self).length()

    # ---------- arithmetic ----------

    def add(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def add_x(self, x: float) -> "Vector":
        return Vector(self.x + x, self.y)

    def add_y(self, y: float) -> "Vector":
        return Vector(self.x, self.y + y)

    def subtract(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def scale(self, value: float) -> "Vector":
        return Vector(self.x * value, self.y * value)

    def scale_x(self, x: float) -> "Vector":
        return Vector(self.x * x, self.y)

    def scale_y(self, y: float) -> "Vector":
        return Vector(self.x, self.y * y)

    def divide(self, value: float) -> "Vector":
        return Vector(self.x / value, self.y / value)

    def hadamard(self, other: "Vector") -> "Vector":
        """Componentwise product."""
        return Vector(self.x * other.x, self.y * other.y)

    def normalize(self) -> "Vector":
        """Unit vector in the same direction, or the zero vector for zero input."""
        length = self.length()
        if length == 0:
            return Vector(0.0, 0.0)
        return Vector(self.x / length, self.y / length)

    def rotate(self, angle: float, unit: AngleUnit = AngleUnit.DEGREES) -> "Vector":
        radians = _to_radians(angle, unit)
        cos = math.cos(radians)
        sin = math.sin(radians)
        return Vector(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def perpendicular(self) -> "Vector":
        """The vector rotated a quarter turn counter-clockwise."""
        return Vector(-self.y, self.x)

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector") -> float:
        return self.x * other.y - other.x * self.y

    def mix(self, other: "Vector", ratio: float = 0.5) -> "Vector":
        """Linear interpolation; ratio 0 gives self, ratio 1 gives other."""
        return Vector(
            self.x + ratio * (other.x - self.x),
            self.y + ratio * (other.y - self.y),
        )

    def project(self, other: "Vector") -> "Vector":
        """Projection of self onto other. Projecting onto zero gives zero."""
        length = other.length()
        if length == 0:
            return Vector(0.0, 0.0)
        return other.normalize().scale(self.dot(other) / length)

    def bisect(self, other: "Vector") -> "Vector":
        return self.normalize().add(other.normalize()).normalize()

    def clamp(self, minimum: "Vector", maximum: "Vector") -> "Vector":
        return Vector(
            max(minimum.x, min(maximum.x, self.x)),
            max(minimum.y, min(maximum.y, self.y)),
        )

    def clip(self, min_length: float, max_length: float) -> "Vector":
        """Clamp the length while keeping the direction."""
        length = max(min_length, min(max_length, self.length()))
        return Vector.from_polar(length, self.angle(AngleUnit.RADIANS), AngleUnit.RADIANS)

    # ---------- operators ----------

    def __add__(self, other: "Vector") -> "Vector":
        return self.add(other)

    def __sub__(self, other: "Vector") -> "Vector":
        return self.subtract(other)

    def __mul__(self, value: float) -> "Vector":
        return self.scale(value)

    def __rmul__(self, value: float) -> "Vector":
        return self.scale(value)

    def __truediv__(self, value: float) -> "Vector":
        return self.divide(value)

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y)


class SamplePoint(BaseModel):
    """One weighted sample along a stroke's centerline.

    The animation driver mutates ``w`` (and, while fading, ``x``/``y``)
    in place over the point's lifetime.

    Attributes:
        x: Horizontal position.
        y: Vertical position.
        w: Current stroke weight, 0 at birth and death.
    """

    x: float = Field(..., description="Horizontal position")
    y: float = Field(..., description="Vertical position")
    w: float = Field(0.0, ge=0.0, description="Current stroke weight")

    @classmethod
    def at(cls, position: Vector, w: float = 0.0) -> "SamplePoint":
        return cls(x=position.x, y=position.y, w=w)

    @property
    def position(self) -> Vector:
        return Vector(self.x, self.y)

    def as_triple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.w)


def new_paint_id(rng: np.random.Generator | None = None) -> str:
    """Return a fresh paint id, drawn from ``rng`` when one is given."""
    if rng is None:
        return uuid4().hex
    return UUID(bytes=rng.bytes(16), version=4).hex


class Paint(BaseModel):
    """One animated brush mark produced from a single gesture sample.

    Attributes:
        id: Opaque unique token.
        points: Ordered centerline samples, owned by this paint only.
        color: Fill color, any CSS color string.
    """

    id: str = Field(default_factory=new_paint_id, description="Unique paint id")
    points: list[SamplePoint] = Field(
        default_factory=list, description="Centerline samples"
    )
    color: str = Field(..., description="Fill color")
