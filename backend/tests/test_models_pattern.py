"""Tests for pattern request/response models."""
import pytest
from pydantic import ValidationError

from whispher.models.emotion import Emotion
from whispher.models.pattern import HSLColor, PatternRequest, PatternResponse, Point


class TestPatternRequest:
    def test_all_fields_optional(self) -> None:
        req = PatternRequest()
        assert req.width is None
        assert req.height is None
        assert req.seed is None
        assert req.emotion is None

    def test_numeric_seed_stays_numeric(self) -> None:
        req = PatternRequest.model_validate_json('{"seed": 0.5}')
        assert req.seed == 0.5
        assert isinstance(req.seed, float)

    def test_string_seed_stays_string(self) -> None:
        """A numeric-looking string is still a string seed."""
        req = PatternRequest.model_validate_json('{"seed": "0.5"}')
        assert req.seed == "0.5"

    def test_emotion_is_free_text(self) -> None:
        """Unknown emotions are accepted here and fall back at render time."""
        req = PatternRequest(emotion="unknown-category")
        assert req.emotion == "unknown-category"

    @pytest.mark.parametrize("field", ["width", "height"])
    def test_non_positive_dimension_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError):
            PatternRequest(**{field: 0})


class TestPatternResponse:
    def test_valid_response(self) -> None:
        resp = PatternResponse(
            data_uri="data:image/svg+xml;base64,AAAA",
            seed="abc",
            emotion="calm",
            width=100,
            height=100,
            triangle_count=18,
        )
        assert resp.emotion == Emotion.calm

    def test_invalid_emotion_rejected(self) -> None:
        with pytest.raises(ValidationError):
            PatternResponse(
                data_uri="x", seed=0.5, emotion="nope", width=1, height=1, triangle_count=2,
            )


class TestGeometry:
    def test_point_hashable(self) -> None:
        assert {Point(x=1, y=2), Point(x=1, y=2)} == {Point(x=1.0, y=2.0)}

    def test_color_frozen(self) -> None:
        color = HSLColor(hue=10, saturation=50, lightness=40)
        with pytest.raises(ValidationError):
            color.hue = 20  # type: ignore[misc]
