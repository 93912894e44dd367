# data_loader.py

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from constraints import Pattern

logger = logging.getLogger("vaajoor.data_loader")


def load_words(file_path: str, word_length: int) -> List[str]:
    """Read one word per line, keeping only words of exactly word_length letters."""
    with open(file_path, 'r', encoding='utf-8-sig') as f:
        words = [line.strip() for line in f if len(line.strip()) == word_length]
    logger.info(f"Loaded {len(words)} words of length {word_length} from {file_path}.")
    return words


@dataclass
class CandidateEntry:
    word: str
    index: int
    eliminated: bool = False


class CandidatePool:
    """
    Words that may still be the answer, kept in load order. Filtering only
    ever eliminates entries; nothing is brought back.
    """

    def __init__(self, words: Iterable[str]) -> None:
        self.entries: List[CandidateEntry] = []
        seen = set()
        for word in words:
            if word in seen:
                continue
            seen.add(word)
            self.entries.append(CandidateEntry(word=word, index=len(self.entries)))

    def __len__(self) -> int:
        return len(self.entries)

    def filter(self, pattern: Pattern) -> int:
        """Eliminate active entries the pattern rejects. Returns how many were eliminated."""
        eliminated = 0
        for entry in self.entries:
            if entry.eliminated:
                continue
            if not pattern.matches(entry.word):
                entry.eliminated = True
                eliminated += 1
        return eliminated

    def active_count(self) -> int:
        return sum(1 for entry in self.entries if not entry.eliminated)

    def active_words(self) -> List[str]:
        return [entry.word for entry in self.entries if not entry.eliminated]

    def next_active(self, after_index: int = -1) -> Optional[CandidateEntry]:
        for entry in self.entries[after_index + 1:]:
            if not entry.eliminated:
                return entry
        return None
