"""
Witness Collation Core
======================

Word model and lexical distance for collating parallel manuscript witnesses.
The aligner builds a Word for every token of every witness and scores
candidate matches by the distance between their comparison forms.
"""

# Configuration
from collation.collation_config import (
    EDIT_COSTS,
    MUTABLE_FIELDS,
)

from collation.collation_utils import ValidationError, is_punctuation
from collation.normalization import (
    NormalizationStrategy,
    lowercase_canonizer,
    unicode_normalize,
)
from collation.distance import (
    comparator,
    distance,
    distance_matrix,
    strip_combining_marks,
)
from collation.schemas import PunctuationMark, WordSnapshot
from collation.word import Word, WordAnnotations, construct
from collation.arena import WordArena

__all__ = [
    # Configuration
    'EDIT_COSTS',
    'MUTABLE_FIELDS',

    # Word model
    'Word',
    'WordAnnotations',
    'WordSnapshot',
    'PunctuationMark',
    'construct',
    'WordArena',

    # Normalization and distance
    'NormalizationStrategy',
    'lowercase_canonizer',
    'unicode_normalize',
    'comparator',
    'distance',
    'distance_matrix',
    'strip_combining_marks',

    # Utilities
    'is_punctuation',
    'ValidationError',
]
