"""
Collation Configuration
=======================

Settings for word normalization and lexical distance scoring.
Cost and cache values can be overridden through the environment.
"""
import os
import string

# Wagner-Fischer weights: a match costs nothing, a gap costs one and a
# substitution costs two, so "w" vs "v" weighs as much as a dropped letter pair.
EDIT_COSTS = {
    "indel": int(os.getenv("COLLATION_INDEL_COST", "1")),
    "substitution": int(os.getenv("COLLATION_SUBSTITUTION_COST", "2")),
}

DISTANCE_CACHE_SIZE: int = int(os.getenv("COLLATION_DISTANCE_CACHE_SIZE", "1024"))

# The POSIX punct class also claims the ASCII symbols ($+<=>^`|~) that
# Unicode files under S*.
ASCII_PUNCTUATION = frozenset(string.punctuation)

# Attributes the aligner may roll back after a rejected match
MUTABLE_FIELDS = ("is_glommed",)
