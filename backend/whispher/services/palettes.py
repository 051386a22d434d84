"""Emotion palette catalog."""
from types import MappingProxyType
from typing import Mapping, Optional, Union

from whispher.models.emotion import Emotion, EmotionInfo, PaletteProfile

EMOTION_PALETTES: Mapping[Emotion, PaletteProfile] = MappingProxyType({
    Emotion.passion: PaletteProfile(
        base_hue=0,
        hue_range=30,
        saturation_base=60,
        saturation_range=30,
        lightness_base=40,
        lightness_range=25,
        colors=("#FF1744", "#D50000", "#FF5252", "#FF8A80", "#C62828"),
    ),
    Emotion.calm: PaletteProfile(
        base_hue=200,
        hue_range=40,
        saturation_base=50,
        saturation_range=40,
        lightness_base=45,
        lightness_range=30,
        colors=("#0084D1", "#2196F3", "#64B5F6", "#1565C0", "#42A5F5"),
    ),
    Emotion.joy: PaletteProfile(
        base_hue=45,
        hue_range=35,
        saturation_base=70,
        saturation_range=25,
        lightness_base=50,
        lightness_range=20,
        colors=("#FFD600", "#FF9800", "#FFC107", "#FFAB00", "#FF6F00"),
    ),
    Emotion.mystery: PaletteProfile(
        base_hue=270,
        hue_range=40,
        saturation_base=55,
        saturation_range=35,
        lightness_base=35,
        lightness_range=25,
        colors=("#7C4DFF", "#651FFF", "#AA00FF", "#9C27B0", "#6200EA"),
    ),
    Emotion.nature: PaletteProfile(
        base_hue=120,
        hue_range=45,
        saturation_base=50,
        saturation_range=35,
        lightness_base=40,
        lightness_range=25,
        colors=("#00C853", "#4CAF50", "#8BC34A", "#2E7D32", "#66BB6A"),
    ),
    Emotion.serenity: PaletteProfile(
        base_hue=180,
        hue_range=35,
        saturation_base=45,
        saturation_range=30,
        lightness_base=45,
        lightness_range=25,
        colors=("#00BCD4", "#26C6DA", "#00ACC1", "#4DD0E1", "#0097A7"),
    ),
})

DEFAULT_EMOTION = Emotion.calm

EMOTIONS: tuple[str, ...] = tuple(emotion.value for emotion in EMOTION_PALETTES)

# label, icon, accent colour shown in the emotion picker
_EMOTION_LABELS: dict[Emotion, tuple[str, str, str]] = {
    Emotion.passion: ("Passion", "❤️", "#FF1744"),
    Emotion.calm: ("Calm", "🌊", "#0084D1"),
    Emotion.joy: ("Joy", "🌟", "#FFD600"),
    Emotion.mystery: ("Mystery", "🔮", "#7C4DFF"),
    Emotion.nature: ("Nature", "🌿", "#00C853"),
    Emotion.serenity: ("Serenity", "☮️", "#00BCD4"),
}


def resolve_emotion(name: Optional[Union[str, Emotion]]) -> Emotion:
    """Map a category name to an Emotion, case-insensitively.

    Unknown or missing names resolve to DEFAULT_EMOTION instead of raising.
    """
    if isinstance(name, Emotion):
        return name
    if not name:
        return DEFAULT_EMOTION
    try:
        return Emotion(name.lower())
    except ValueError:
        return DEFAULT_EMOTION


def get_palette_profile(name: Optional[Union[str, Emotion]]) -> PaletteProfile:
    """Return the palette profile for a category, falling back to the default."""
    return EMOTION_PALETTES[resolve_emotion(name)]


def get_emotion_colors(name: Optional[Union[str, Emotion]]) -> list[str]:
    """Return the UI swatch colours for a category."""
    return list(get_palette_profile(name).colors)


def list_emotions() -> list[EmotionInfo]:
    """Return the emotion catalog in display order."""
    catalog = []
    for emotion, profile in EMOTION_PALETTES.items():
        label, icon, color = _EMOTION_LABELS[emotion]
        catalog.append(
            EmotionInfo(
                id=emotion,
                label=label,
                icon=icon,
                color=color,
                swatches=list(profile.colors),
            )
        )
    return catalog
