import logging

from app.config import Settings
from app.logger import get_logger
from app.scoring import PLACEHOLDER_TITLE, SEMANTIC_THRESHOLD, STUB_SEMANTIC_SCORE


def test_settings_default_to_scoring_constants():
    s = Settings()
    assert s.placeholder_title == PLACEHOLDER_TITLE
    assert s.semantic_threshold == SEMANTIC_THRESHOLD
    assert s.stub_semantic_score == STUB_SEMANTIC_SCORE


def test_settings_read_threshold_from_env(monkeypatch):
    monkeypatch.setenv("SEMANTIC_THRESHOLD", "0.5")
    assert Settings().semantic_threshold == 0.5


def test_get_logger_attaches_one_handler():
    first = get_logger("resume-api-test", "DEBUG")
    second = get_logger("resume-api-test")
    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.DEBUG
    assert second.propagate is False
