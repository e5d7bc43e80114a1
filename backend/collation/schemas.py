from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .collation_utils import restore_punctuation


class PunctuationMark(BaseModel):
    """One punctuation character lifted out of a word, with its offset in the original form"""
    char: str
    pos: int = Field(ge=0)

    @field_validator("char")
    @classmethod
    def single_character(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError(f"punctuation char must be a single character, got {value!r}")
        return value


class WordSnapshot(BaseModel):
    """
    Defines the JSON shape a transcript loader hands over for a single word.

    ``t`` is the word content with punctuation already lifted out into
    ``punctuation``; ``c`` and ``n`` are the canonical and comparison forms.
    Keys outside this shape are ignored.
    """
    model_config = ConfigDict(extra="ignore")

    t: str
    c: Optional[str] = None
    n: Optional[str] = None
    punctuation: List[PunctuationMark] = Field(default_factory=list)
    original_form: Optional[str] = None

    def restored_original_form(self) -> str:
        """The stored original form, or ``t`` with its punctuation put back"""
        if self.original_form is not None:
            return self.original_form
        return restore_punctuation(self.t, [mark.model_dump() for mark in self.punctuation])
