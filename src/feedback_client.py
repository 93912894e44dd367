"""
Client for the remote word-checking service.

One guess per request:

    GET <api_url>?word=<guess>&g=<game id>

The JSON answer carries a ``match`` array with one code per letter (``"g"``
for a letter in the right place, anything else otherwise) and a
``dictionaryError`` flag set when the guess is not a known word.
"""

import logging
import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional, Tuple

import requests

import config

logger = logging.getLogger("vaajoor.feedback_client")

MATCHED_CODE = "g"


class FeedbackError(Exception):
    """Base class for failures talking to the feedback service."""


class TransportFailure(FeedbackError):
    """The request could not be completed (connection, HTTP status, ...)."""


class DecodeFailure(FeedbackError):
    """The service answered with something that is not a valid check result."""


class Signal(Enum):
    MATCHED = "matched"
    UNMATCHED = "unmatched"

    @classmethod
    def from_code(cls, code: Any) -> "Signal":
        return cls.MATCHED if code == MATCHED_CODE else cls.UNMATCHED


@dataclass(frozen=True)
class FeedbackResult:
    signals: Tuple[Signal, ...]
    dictionary_error: bool = False

    @property
    def is_solved(self) -> bool:
        # A rejected word carries no signals and never counts as solved.
        return (
            not self.dictionary_error
            and len(self.signals) > 0
            and all(s is Signal.MATCHED for s in self.signals)
        )


def compute_game_id(now: Optional[datetime] = None) -> int:
    """The service numbers its daily games from FIRST_GAME_ID_DATE."""
    if now is None:
        now = datetime.now()
    days = (now - config.FIRST_GAME_ID_DATE).total_seconds() / 86400
    return math.floor(days) - 1


def _field(payload: Mapping[str, Any], name: str) -> Any:
    # Field names are matched without regard to case.
    wanted = name.lower()
    for key, value in payload.items():
        if isinstance(key, str) and key.lower() == wanted:
            return value
    return None


def _flag(value: Any) -> bool:
    # Missing or null means False; "true"/"false" strings are accepted too.
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise DecodeFailure(f"'dictionaryError' must be a boolean, got {value!r}")


def decode_feedback(payload: Any, word_length: Optional[int] = None) -> FeedbackResult:
    """Turn a decoded JSON body into a FeedbackResult, or raise DecodeFailure."""
    if not isinstance(payload, dict):
        raise DecodeFailure(f"Expected a JSON object, got {type(payload).__name__}")

    dictionary_error = _flag(_field(payload, "dictionaryError"))
    match = _field(payload, "match")

    # The codes of a rejected word are meaningless.
    if dictionary_error:
        return FeedbackResult(signals=(), dictionary_error=True)

    if not isinstance(match, list) or not all(isinstance(code, str) for code in match):
        raise DecodeFailure(f"'match' must be a list of codes, got {match!r}")
    if word_length is not None and len(match) != word_length:
        raise DecodeFailure(f"Expected {word_length} match codes, got {len(match)}")

    return FeedbackResult(
        signals=tuple(Signal.from_code(code) for code in match),
        dictionary_error=dictionary_error,
    )


class FeedbackClient:
    """
    Sends guesses to the service. No retries and no timeout of its own: any
    failure is raised to the caller.
    """

    def __init__(self, api_url: str = config.API_URL, word_length: Optional[int] = None,
                 session: Optional[requests.Session] = None) -> None:
        self.api_url = api_url
        self.word_length = word_length
        self.session = session if session is not None else requests.Session()
        # requests inflates gzip/deflate bodies on its own.
        self.session.headers["Accept-Encoding"] = "gzip, deflate"

    def submit(self, word: str, game_id: int) -> FeedbackResult:
        params = [("word", word), ("g", str(game_id))]
        try:
            response = self.session.get(self.api_url, params=params)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            logger.error(f"Request for '{word}' failed: {e}")
            raise TransportFailure(f"Could not check '{word}' against {self.api_url}: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            raise DecodeFailure(f"Response for '{word}' is not valid JSON") from e

        result = decode_feedback(payload, self.word_length)
        logger.debug(f"'{word}' -> {[s.value for s in result.signals]} (dictionaryError={result.dictionary_error})")
        return result

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "FeedbackClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
