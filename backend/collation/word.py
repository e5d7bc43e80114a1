"""
Word Model
==========

One token from one witness, with the forms the collator needs to match it
against tokens from other witnesses:

- ``original_form``: the text as transcribed, punctuation and all
- ``word``: the same text with punctuation lifted out
- ``canonical_form``: the word after the canonizer (default: lower case)
- ``comparison_form``: the word after the comparator (default: accents
  stripped); used only for matching, never shown

Words are built from a raw string, from a transcript snapshot, as the empty
sentinel, or as a special meta-token such as a sequence boundary.
"""

import copy
import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import ValidationError as SchemaValidationError

from .collation_config import MUTABLE_FIELDS
from .collation_utils import ValidationError, split_punctuation
from .normalization import NormalizationStrategy, lowercase_canonizer, unicode_normalize
from .schemas import PunctuationMark, WordSnapshot

logger = logging.getLogger(__name__)

SnapshotInput = Union[WordSnapshot, Mapping]


@dataclass
class WordAnnotations:
    """Collation-time flags the aligner sets, and may need to roll back"""
    is_glommed: bool = False  # fused with the following word
    is_base: bool = False     # base form of a fused group


class Word:
    """A token in a collated text"""

    mutable_fields: Tuple[str, ...] = MUTABLE_FIELDS

    def __init__(self,
                 string: Optional[str] = None,
                 ms_sigil: Optional[str] = None,
                 *,
                 snapshot: Optional[SnapshotInput] = None,
                 empty: bool = False,
                 special: Optional[str] = None,
                 canonizer: Optional[NormalizationStrategy] = lowercase_canonizer,
                 comparator: Optional[NormalizationStrategy] = unicode_normalize):
        """
        Build a word and compute its forms.

        Args:
            string: Raw token text; punctuation is split out and the
                canonizer and comparator are run over the rest.
            ms_sigil: Sigil of the witness the word belongs to. Required
                unless the word is empty or special.
            snapshot: Already-decomposed forms, as read from a transcript
                (``t``, ``c``, ``n``, ``punctuation``, ``original_form``).
            empty: Build the empty sentinel. Overrides every other option.
            special: Build an invisible meta-token carrying this marker.
            canonizer: Strategy producing ``canonical_form``; ``None`` keeps
                the word as is.
            comparator: Strategy producing ``comparison_form``; ``None``
                keeps the word as is.

        Raises:
            ValidationError: if the options cannot produce a valid word.
        """
        if ms_sigil is not None and not isinstance(ms_sigil, str):
            raise ValidationError(f"ms_sigil must be a string, got {type(ms_sigil).__name__}")

        self._canonizer = canonizer
        self._comparator = comparator

        self._word = ""
        self._original_form = ""
        self._canonical_form = ""
        self._comparison_form = ""
        self._punctuation: List[Dict[str, Any]] = []
        self._placeholders: List[str] = []
        self._links: List["Word"] = []
        self._variants: List["Word"] = []
        self._ms_sigil = ms_sigil or ""
        self._special: Optional[str] = None
        self._is_empty = False
        self._invisible = False
        self._annotations = WordAnnotations()

        if empty:
            self._ms_sigil = ""
            self._is_empty = True
            return

        if special is not None:
            self._special = special
            self._invisible = True
            return

        if snapshot is not None:
            self._init_from_snapshot(snapshot)
        elif string is not None:
            if not isinstance(string, str):
                raise ValidationError(f"Word string must be a str, got {type(string).__name__}")
            self._require_sigil(string)
            self._evaluate_word(string)
        else:
            raise ValidationError("Word needs a string, a snapshot, empty=True or a special marker")

    def _require_sigil(self, content: str) -> None:
        if content and not self._ms_sigil:
            raise ValidationError(f"Word {content!r} has no manuscript sigil")

    def _init_from_snapshot(self, snapshot: SnapshotInput) -> None:
        """Take the forms as given; only the original form may need rebuilding"""
        if not isinstance(snapshot, WordSnapshot):
            if not isinstance(snapshot, Mapping):
                raise ValidationError(f"Word snapshot must be a mapping, got {type(snapshot).__name__}")
            try:
                snapshot = WordSnapshot.model_validate(dict(snapshot))
            except SchemaValidationError as e:
                raise ValidationError(f"Invalid word snapshot: {e}") from e

        self._require_sigil(snapshot.t)
        self._word = snapshot.t
        self._original_form = snapshot.restored_original_form()
        self._canonical_form = snapshot.t if snapshot.c is None else snapshot.c
        self._comparison_form = snapshot.t if snapshot.n is None else snapshot.n
        self._punctuation = [mark.model_dump() for mark in snapshot.punctuation]

    def _evaluate_word(self, string: str) -> None:
        """Compute every form of the word from the raw string"""
        if string == "":
            return

        self._original_form = string
        self._word, self._punctuation = split_punctuation(string)

        if self._canonizer is not None:
            self._canonical_form = self._canonizer(self._word)
        else:
            self._canonical_form = self._word

        if self._comparator is not None:
            self._comparison_form = self._comparator(self._word)
        else:
            self._comparison_form = self._word

        logger.debug(f"Word {string!r} ({self._ms_sigil}) -> {self._comparison_form!r}, "
                     f"{len(self._punctuation)} punctuation")

    @classmethod
    def from_json(cls, text: Union[str, bytes], ms_sigil: str) -> "Word":
        """Build a word from a JSON-encoded snapshot"""
        try:
            snapshot = WordSnapshot.model_validate_json(text)
        except SchemaValidationError as e:
            raise ValidationError(f"Invalid word snapshot JSON: {e}") from e
        return cls(ms_sigil=ms_sigil, snapshot=snapshot)

    # Identity forms

    @property
    def word(self) -> str:
        """The word according to canonical orthography, without punctuation"""
        return self._word

    @property
    def original_form(self) -> str:
        return self._original_form

    @property
    def canonical_form(self) -> str:
        return self._canonical_form

    @property
    def comparison_form(self) -> str:
        """The normalized string the collator actually matches on"""
        return self._comparison_form

    @property
    def punctuation(self) -> List[Dict[str, Any]]:
        return [dict(mark) for mark in self._punctuation]

    @property
    def canonizer(self) -> Optional[NormalizationStrategy]:
        return self._canonizer

    @property
    def comparator(self) -> Optional[NormalizationStrategy]:
        return self._comparator

    @property
    def ms_sigil(self) -> str:
        return self._ms_sigil

    @property
    def special(self) -> Optional[str]:
        """Marker of a meta-word such as BEGIN or END"""
        return self._special

    @property
    def is_empty(self) -> bool:
        return self._is_empty

    @property
    def invisible(self) -> bool:
        return self._invisible

    def printable(self) -> str:
        """The special marker if there is one, else the canonical form"""
        return self._special if self._special else self._canonical_form

    # Collation-time annotations

    @property
    def is_glommed(self) -> bool:
        """True once the word has been matched together with its following word"""
        return self._annotations.is_glommed

    @is_glommed.setter
    def is_glommed(self, value: bool) -> None:
        self._annotations.is_glommed = value

    @property
    def is_base(self) -> bool:
        return self._annotations.is_base

    @is_base.setter
    def is_base(self, value: bool) -> None:
        self._annotations.is_base = value

    @property
    def placeholders(self) -> List[str]:
        """Sectional markers that go before the word"""
        return list(self._placeholders)

    @property
    def links(self) -> List["Word"]:
        """'Like' words in this word's column"""
        return list(self._links)

    @property
    def variants(self) -> List["Word"]:
        """'Different' words in this word's column"""
        return list(self._variants)

    def add_punctuation(self, char: str, pos: int) -> None:
        try:
            mark = PunctuationMark(char=char, pos=pos)
        except SchemaValidationError as e:
            raise ValidationError(f"Invalid punctuation mark: {e}") from e
        self._punctuation.append(mark.model_dump())

    def add_placeholder(self, placeholder: str) -> None:
        self._placeholders.append(placeholder)

    def add_link(self, word: "Word") -> None:
        self._links.append(word)

    def add_variant(self, word: "Word") -> None:
        self._variants.append(word)

    def state(self) -> Dict[str, Any]:
        """
        Back up every value a re-comparison might change.

        Only scalar values are copied faithfully; a composite value gets a
        shallow copy and a warning.
        """
        saved = {}
        for key in self.mutable_fields:
            value = getattr(self._annotations, key)
            if isinstance(value, (list, dict, set, tuple)):
                logger.warning(f"Not making full copy of composite value stored in {key}")
            saved[key] = copy.copy(value)
        return saved

    def restore_state(self, saved: Any) -> None:
        """Put back values saved by ``state()``; anything but a mapping is ignored"""
        if not isinstance(saved, Mapping):
            return
        defaults = {f.name: f.default for f in fields(WordAnnotations)}
        for key in self.mutable_fields:
            setattr(self._annotations, key, saved.get(key, defaults.get(key)))

    # Snapshot export

    def to_snapshot(self) -> Dict[str, Any]:
        """The word's forms in the transcript snapshot shape"""
        return self._as_snapshot().model_dump()

    def to_json(self) -> str:
        return self._as_snapshot().model_dump_json()

    def _as_snapshot(self) -> WordSnapshot:
        return WordSnapshot(
            t=self._word,
            c=self._canonical_form,
            n=self._comparison_form,
            punctuation=[PunctuationMark(**mark) for mark in self._punctuation],
            original_form=self._original_form,
        )

    def __repr__(self) -> str:
        if self._is_empty:
            return "Word(<empty>)"
        if self._special is not None:
            return f"Word(special={self._special!r}, ms_sigil={self._ms_sigil!r})"
        return f"Word({self._original_form!r}, ms_sigil={self._ms_sigil!r})"


def construct(options: Mapping) -> Word:
    """
    Build a word from a loose options mapping.

    Recognised keys: ``source_string``, ``ms_sigil``, ``canonizer``,
    ``comparator``, ``snapshot``, ``empty``, ``special_marker``. Strategies
    left out fall back to the defaults.
    """
    kwargs: Dict[str, Any] = {
        "snapshot": options.get("snapshot"),
        "empty": bool(options.get("empty", False)),
        "special": options.get("special_marker"),
    }
    for key in ("canonizer", "comparator"):
        if key in options:
            kwargs[key] = options[key]
    return Word(options.get("source_string"), options.get("ms_sigil"), **kwargs)
