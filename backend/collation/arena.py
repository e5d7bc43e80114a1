"""
Word Arena
==========

Indexed store for the words of one alignment pass. The collation session
owns the arena; links and variants between words are plain references
into it and never own anything.
"""

import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional

from .word import Word

logger = logging.getLogger(__name__)


class WordArena:
    """All words taking part in one alignment pass, addressable by index"""

    def __init__(self, words: Optional[Iterable[Word]] = None):
        self._words: List[Word] = []
        self._index: Dict[int, int] = {}
        if words is not None:
            self.extend(words)

    def add(self, word: Word) -> int:
        """Store a word and return its index; a word already stored keeps its index"""
        key = id(word)
        if key in self._index:
            return self._index[key]
        self._index[key] = len(self._words)
        self._words.append(word)
        return self._index[key]

    def extend(self, words: Iterable[Word]) -> List[int]:
        indices = [self.add(word) for word in words]
        logger.info(f"📚 Arena holds {len(self._words)} words after adding {len(indices)}")
        return indices

    def index_of(self, word: Word) -> int:
        """
        Raises:
            KeyError: if the word was never added to this arena.
        """
        try:
            return self._index[id(word)]
        except KeyError:
            raise KeyError(f"{word!r} is not in this arena") from None

    def __getitem__(self, index: int) -> Word:
        return self._words[index]

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[Word]:
        return iter(self._words)

    def for_sigil(self, ms_sigil: str) -> List[Word]:
        """Words of one witness, in the order they were added"""
        return [word for word in self._words if word.ms_sigil == ms_sigil]

    def link(self, i: int, j: int, mutual: bool = True) -> None:
        """Record that words i and j are the same reading"""
        self._words[i].add_link(self._words[j])
        if mutual:
            self._words[j].add_link(self._words[i])

    def mark_variant(self, i: int, j: int, mutual: bool = True) -> None:
        """Record that words i and j share a column but differ"""
        self._words[i].add_variant(self._words[j])
        if mutual:
            self._words[j].add_variant(self._words[i])

    def save_states(self, indices: Optional[Iterable[int]] = None) -> Dict[int, Dict[str, Any]]:
        """Back up the mutable state of the given words (all words by default)"""
        if indices is None:
            indices = range(len(self._words))
        return {i: self._words[i].state() for i in indices}

    def restore_states(self, states: Dict[int, Dict[str, Any]]) -> None:
        """Roll words back to states taken by ``save_states``"""
        for i, saved in states.items():
            self._words[i].restore_state(saved)
        logger.debug(f"Restored state of {len(states)} words")
