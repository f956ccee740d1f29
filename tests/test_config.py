"""Tests for environment-driven settings."""

from nafa_mvp.config import Settings


def test_defaults() -> None:
    s = Settings()
    assert s.app_name == "nafa-mvp"
    assert s.annotation_id_prefix == "ann-"
    assert s.strict_sensory_levels is False


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("NAFA_STRICT_SENSORY_LEVELS", "true")
    monkeypatch.setenv("NAFA_ANNOTATION_ID_PREFIX", "note-")
    s = Settings()
    assert s.strict_sensory_levels is True
    assert s.annotation_id_prefix == "note-"
