"""Pattern geometry and request/response models."""
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from whispher.models.emotion import Emotion

Seed = Union[float, str]


class Point(BaseModel):
    """Jittered grid vertex."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class HSLColor(BaseModel):
    """Palette entry. Saturation and lightness are percentages."""

    model_config = ConfigDict(frozen=True)

    hue: float
    saturation: float
    lightness: float


class Triangle(BaseModel):
    """Three grid vertices filled with a single palette colour."""

    model_config = ConfigDict(frozen=True)

    points: tuple[Point, Point, Point]
    color: HSLColor


class PatternRequest(BaseModel):
    """Request body for POST /api/patterns.

    Omitted fields fall back to the configured defaults; an omitted seed
    gets a fresh UUID so the caller can store it alongside the message.
    """

    width: Optional[float] = Field(None, gt=0)
    height: Optional[float] = Field(None, gt=0)
    seed: Optional[Seed] = None
    emotion: Optional[str] = None


class PatternResponse(BaseModel):
    """Rendered pattern returned to the frontend."""

    data_uri: str
    seed: Seed
    emotion: Emotion
    width: float
    height: float
    triangle_count: int
