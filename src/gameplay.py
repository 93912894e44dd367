# src/gameplay.py

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from tqdm import tqdm
from tqdm.contrib.logging import logging_redirect_tqdm

import config
import constraints
from data_loader import CandidatePool
from feedback_client import FeedbackClient, compute_game_id

logger = logging.getLogger("vaajoor.gameplay")


class SessionState(Enum):
    INITIALIZING = "initializing"
    GUESSING = "guessing"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


def format_elapsed(seconds: float) -> str:
    seconds = int(seconds)
    return f"{seconds // 3600:02d}:{seconds % 3600 // 60:02d}:{seconds % 60:02d}"


@dataclass
class SolveResult:
    solved: bool
    answer: Optional[str]
    guess_count: int
    elapsed: float
    game_id: int
    state: SessionState

    @property
    def elapsed_text(self) -> str:
        return format_elapsed(self.elapsed)


class SolverSession:
    """
    Plays one daily game: guesses candidates in load order, narrows the pool
    after every response and stops once the word is found or nothing is left.
    """

    def __init__(self, words: Iterable[str], word_length: int, client: FeedbackClient,
                 game_id: Optional[int] = None, alphabet: Iterable[str] = config.ALPHABET) -> None:
        if word_length < 1:
            raise ValueError(f"Word length must be positive, got {word_length}")

        self.state = SessionState.INITIALIZING
        self.word_length = word_length
        self.client = client
        self.alphabet = frozenset(alphabet)
        self.game_id = compute_game_id() if game_id is None else game_id
        self.vector = constraints.initial_vector(word_length)
        self.pool = CandidatePool(w for w in words if len(w) == word_length)
        self.guess_count = 0

    def solve(self) -> SolveResult:
        logger.info("")
        logger.info("***************************************")
        logger.info(f"**** New Game. Game ID = {self.game_id} ****")

        self.state = SessionState.GUESSING
        started = time.perf_counter()
        answer = None

        progress = tqdm(total=len(self.pool), desc="Eliminated", unit="word", disable=config.FAST_MODE)
        try:
            with logging_redirect_tqdm(loggers=[logging.getLogger("vaajoor")]):
                answer = self._guess_loop(started, progress)
        except Exception:
            self.state = SessionState.FAILED
            logger.error(f"Game {self.game_id} aborted after {self.guess_count} guess(es).")
            raise
        finally:
            progress.close()

        elapsed = time.perf_counter() - started
        if answer is not None:
            self.state = SessionState.SOLVED
            logger.info(f"Eureka!! '{answer}'. Found it by {self.guess_count} guess[es] in {format_elapsed(elapsed)} seconds")
        else:
            self.state = SessionState.EXHAUSTED
            logger.info(f"Not found by {self.guess_count} guesses in {format_elapsed(elapsed)} seconds. :-?")

        return SolveResult(
            solved=answer is not None,
            answer=answer,
            guess_count=self.guess_count,
            elapsed=elapsed,
            game_id=self.game_id,
            state=self.state,
        )

    def _guess_loop(self, started: float, progress: tqdm) -> Optional[str]:
        entry = self.pool.next_active()
        while entry is not None:
            self.guess_count += 1
            elapsed = format_elapsed(time.perf_counter() - started)
            logger.info(
                f"matching '{entry.word}' in {self.pool.active_count()} words. "
                f"Guess counter : {self.guess_count}. Elapsed: {elapsed} seconds..."
            )

            feedback = self.client.submit(entry.word, self.game_id)
            if feedback.dictionary_error:
                logger.info("The word is not in his dictionary! skipping to the next one...")
                entry = self.pool.next_active(entry.index)
                continue

            if feedback.is_solved:
                return entry.word

            self.vector = constraints.update(self.vector, entry.word, feedback)
            pattern = constraints.flatten(self.vector, self.alphabet)
            progress.update(self.pool.filter(pattern))
            logger.debug(f"Pattern {pattern} leaves {self.pool.active_count()} words.")

            entry = self.pool.next_active(entry.index)
        return None
