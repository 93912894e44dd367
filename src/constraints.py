"""
Module for managing the positional constraints learned from feedback.

Each position of the hidden word is either open (any letter of the alphabet)
or fixed to one confirmed letter. A response from the server overwrites every
position: a matched position is fixed to the guessed letter, any other
position goes back to open.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional, Sequence, Tuple

from feedback_client import FeedbackResult, Signal


@dataclass(frozen=True)
class PositionConstraint:
    # None means the position is still open.
    letter: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return self.letter is None

    @classmethod
    def fixed(cls, letter: str) -> "PositionConstraint":
        if len(letter) != 1:
            raise ValueError(f"A fixed position holds a single letter, got {letter!r}")
        return cls(letter)


OPEN = PositionConstraint()

ConstraintVector = Tuple[PositionConstraint, ...]


def initial_vector(word_length: int) -> ConstraintVector:
    """Every position open; the state before the first guess."""
    return (OPEN,) * word_length


def update(vector: ConstraintVector, guess: str, feedback: FeedbackResult) -> ConstraintVector:
    """
    Build the constraint vector implied by one guess and its feedback.

    The previous vector only fixes the length: knowledge is not accumulated,
    so a position reported as unmatched is reopened even if an earlier
    response had fixed it.
    """
    signals = feedback.signals
    if not (len(vector) == len(guess) == len(signals)):
        raise ValueError(
            f"Length mismatch: vector={len(vector)}, guess={len(guess)}, feedback={len(signals)}"
        )

    return tuple(
        PositionConstraint.fixed(letter) if signal is Signal.MATCHED else OPEN
        for letter, signal in zip(guess, signals)
    )


class Pattern:
    """A constraint vector bound to an alphabet, ready to test words against."""

    def __init__(self, constraints: Sequence[PositionConstraint], alphabet: Iterable[str]) -> None:
        self.constraints: ConstraintVector = tuple(constraints)
        self.alphabet: FrozenSet[str] = frozenset(alphabet)
        self._alphabet_text = "".join(sorted(self.alphabet))

    def __len__(self) -> int:
        return len(self.constraints)

    def matches(self, word: str) -> bool:
        """
        Full-length, position-aligned test. A word longer or shorter than the
        pattern never matches, even if part of it would.
        """
        if len(word) != len(self.constraints):
            return False
        for letter, constraint in zip(word, self.constraints):
            if constraint.is_open:
                if letter not in self.alphabet:
                    return False
            elif letter != constraint.letter:
                return False
        return True

    def __str__(self) -> str:
        return "".join(
            f"[{self._alphabet_text}]" if c.is_open else c.letter for c in self.constraints
        )

    def __repr__(self) -> str:
        return f"Pattern({str(self)!r})"


def flatten(vector: ConstraintVector, alphabet: Iterable[str]) -> Pattern:
    return Pattern(vector, alphabet)
