"""Emotion category data models."""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Emotion(str, Enum):
    """Emotion categories a secret message can be tagged with."""

    passion = "passion"
    calm = "calm"
    joy = "joy"
    mystery = "mystery"
    nature = "nature"
    serenity = "serenity"


class PaletteProfile(BaseModel):
    """Base hue/saturation/lightness and spreads used to derive a palette.

    Hue is in degrees, saturation and lightness are percentages. `colors`
    holds the fixed swatches shown next to the emotion picker; they do not
    take part in pattern generation.
    """

    model_config = ConfigDict(frozen=True)

    base_hue: float = Field(..., ge=0, le=360)
    hue_range: float = Field(..., ge=0)
    saturation_base: float = Field(..., ge=0, le=100)
    saturation_range: float = Field(..., ge=0)
    lightness_base: float = Field(..., ge=0, le=100)
    lightness_range: float = Field(..., ge=0)
    colors: tuple[str, ...] = ()


class EmotionInfo(BaseModel):
    """Catalog entry returned to the frontend to populate the emotion picker."""

    id: Emotion
    label: str
    icon: str
    color: str
    swatches: list[str] = Field(default_factory=list)
