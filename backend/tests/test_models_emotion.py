"""Tests for emotion data models."""
import pytest
from pydantic import ValidationError

from whispher.models.emotion import Emotion, EmotionInfo, PaletteProfile


class TestEmotion:
    def test_values(self) -> None:
        assert [e.value for e in Emotion] == [
            "passion", "calm", "joy", "mystery", "nature", "serenity",
        ]

    def test_invalid_value_rejected(self) -> None:
        with pytest.raises(ValueError):
            Emotion("sorrow")


class TestPaletteProfile:
    def _make_profile(self, **kwargs: object) -> PaletteProfile:
        defaults: dict[str, object] = {
            "base_hue": 200,
            "hue_range": 40,
            "saturation_base": 50,
            "saturation_range": 40,
            "lightness_base": 45,
            "lightness_range": 30,
        }
        defaults.update(kwargs)
        return PaletteProfile(**defaults)  # type: ignore[arg-type]

    def test_valid_profile(self) -> None:
        profile = self._make_profile()
        assert profile.base_hue == 200
        assert profile.colors == ()

    def test_profile_is_frozen(self) -> None:
        profile = self._make_profile()
        with pytest.raises(ValidationError):
            profile.base_hue = 10  # type: ignore[misc]

    def test_hue_above_360_rejected(self) -> None:
        with pytest.raises(ValidationError):
            self._make_profile(base_hue=361)

    def test_negative_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            self._make_profile(hue_range=-1)

    def test_saturation_above_100_rejected(self) -> None:
        with pytest.raises(ValidationError):
            self._make_profile(saturation_base=101)


class TestEmotionInfo:
    def test_valid_info(self) -> None:
        info = EmotionInfo(id="joy", label="Joy", icon="🌟", color="#FFD600")
        assert info.id == Emotion.joy
        assert info.swatches == []

    def test_unknown_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            EmotionInfo(id="sorrow", label="Sorrow", icon="x", color="#000000")
