"""Tests for PatternService request handling."""
import logging
import uuid

import pytest

from whispher.models.emotion import Emotion
from whispher.models.pattern import PatternRequest
from whispher.services.pattern import PatternService, generate_pattern, render_svg


@pytest.fixture
def service() -> PatternService:
    return PatternService(
        default_width=100,
        default_height=100,
        default_emotion="passion",
        max_dimension=1000,
    )


class TestRender:
    def test_matches_generate_pattern(self, service: PatternService) -> None:
        resp = service.render(PatternRequest(width=120, height=90, seed="abc", emotion="joy"))
        assert resp.data_uri == generate_pattern(120, 90, "abc", "joy")
        assert resp.seed == "abc"
        assert resp.emotion == Emotion.joy
        assert resp.width == 120
        assert resp.height == 90

    def test_numeric_seed(self, service: PatternService) -> None:
        resp = service.render(PatternRequest(width=100, height=100, seed=0.5, emotion="passion"))
        assert resp.data_uri == generate_pattern(100, 100, 0.5, "passion")
        assert resp.triangle_count == 18

    def test_defaults_applied(self, service: PatternService) -> None:
        resp = service.render(PatternRequest(seed=0.5))
        assert resp.width == 100
        assert resp.height == 100
        assert resp.emotion == Emotion.passion
        assert resp.data_uri == generate_pattern(100, 100, 0.5, "passion")

    def test_unknown_emotion_reports_fallback(self, service: PatternService) -> None:
        resp = service.render(PatternRequest(seed=0.5, emotion="unknown-category"))
        assert resp.emotion == Emotion.calm
        assert resp.data_uri == generate_pattern(100, 100, 0.5, "calm")

    def test_missing_seed_gets_uuid(self, service: PatternService) -> None:
        resp = service.render(PatternRequest())
        assert isinstance(resp.seed, str)
        uuid.UUID(resp.seed)
        assert resp.data_uri == generate_pattern(100, 100, resp.seed, "passion")

    def test_dimension_above_max_rejected(self, service: PatternService) -> None:
        with pytest.raises(ValueError, match="width"):
            service.render(PatternRequest(width=1001, seed=0.5))

    def test_non_finite_seed_rejected(self, service: PatternService) -> None:
        with pytest.raises(ValueError, match="seed"):
            service.render(PatternRequest(seed=float("inf")))

    def test_logs_render(self, service: PatternService, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="whispher.services.pattern"):
            service.render(PatternRequest(seed=0.5))
        record = next(r for r in caplog.records if r.name == "whispher.services.pattern")
        assert record.triangle_count == 18
        assert record.emotion == "passion"


class TestRenderSvg:
    def test_returns_markup_seed_and_emotion(self, service: PatternService) -> None:
        svg, seed, emotion = service.render_svg(PatternRequest(seed="abc", emotion="MYSTERY"))
        assert svg == render_svg(100, 100, "abc", "mystery")
        assert seed == "abc"
        assert emotion == Emotion.mystery


def test_default_constructor_uses_gallery_size() -> None:
    resp = PatternService().render(PatternRequest(seed=0.5))
    assert (resp.width, resp.height) == (800, 600)
    assert resp.emotion == Emotion.calm
    assert resp.triangle_count == 2 * 15 * 11
