import logging
import string

import pytest

from feedback_client import FeedbackResult, Signal

LATIN = string.ascii_lowercase

M = Signal.MATCHED
U = Signal.UNMATCHED


def feedback(*signals, dictionary_error=False):
    return FeedbackResult(signals=tuple(signals), dictionary_error=dictionary_error)


class ScriptedClient:
    """Stands in for FeedbackClient, answering from a word -> FeedbackResult map."""

    def __init__(self, answers):
        self.answers = answers
        self.calls = []
        self.closed = False

    def submit(self, word, game_id):
        self.calls.append((word, game_id))
        answer = self.answers[word]
        if isinstance(answer, Exception):
            raise answer
        return answer

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


@pytest.fixture(autouse=True)
def quiet_progress(monkeypatch):
    import config
    monkeypatch.setattr(config, "FAST_MODE", True)


@pytest.fixture
def clean_logger():
    logger = logging.getLogger("vaajoor")
    saved = list(logger.handlers)
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved
