#!/usr/bin/env python3
"""
Debug script to compare how witness readings normalize and how far apart
the collator scores them.
"""

import json
import sys
from pathlib import Path

# Add the backend directory to Python path
backend_dir = Path(__file__).parent / "backend"
sys.path.insert(0, str(backend_dir))

from collation import Word, WordArena, distance_matrix
import logging

# Set up detailed logging
logging.basicConfig(
    level=logging.INFO,  # Change to DEBUG for per-word detail
    format='%(levelname)s: %(message)s'
)
logger = logging.getLogger(__name__)

SAMPLE_WITNESSES = {
    "A": "Ende bedwange swaer , ἔστιν;",
    "B": "ende bedvanghe suaer Ἔστιν",
}


def load_witnesses(path=None):
    """Load {sigil: text} from a JSON file, or fall back to the built-in sample"""
    if path is None:
        return SAMPLE_WITNESSES
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


def build_arena(witnesses):
    arena = WordArena()
    for sigil, text in witnesses.items():
        arena.extend(Word(token, ms_sigil=sigil) for token in text.split())
    return arena


def show_forms(arena):
    print("\n" + "="*80)
    print("🔍 WORD FORMS")
    print("="*80)
    for word in arena:
        print(f"  [{word.ms_sigil}] {word.original_form!r:>14} -> word={word.word!r} "
              f"canonical={word.canonical_form!r} comparison={word.comparison_form!r} "
              f"punct={word.punctuation}")


def show_distances(arena, left_sigil, right_sigil):
    left = arena.for_sigil(left_sigil)
    right = arena.for_sigil(right_sigil)
    matrix = distance_matrix([w.comparison_form for w in left], [w.comparison_form for w in right])

    print("\n" + "="*80)
    print(f"📏 DISTANCES {left_sigil} x {right_sigil}")
    print("="*80)
    for i, word in enumerate(left):
        best = int(matrix[i].argmin()) if len(right) else None
        match = right[best].comparison_form if best is not None else "-"
        print(f"  {word.comparison_form!r:>12} -> {match!r} ({matrix[i].tolist()})")


if __name__ == "__main__":
    witnesses = load_witnesses(sys.argv[1] if len(sys.argv) > 1 else None)
    arena = build_arena(witnesses)
    show_forms(arena)
    sigils = list(witnesses)
    if len(sigils) >= 2:
        show_distances(arena, sigils[0], sigils[1])
