"""Guessable-pattern detectors for plaintext passwords.

Pure functions over ``str`` (Unicode code points, never bytes). They flag
runs that charset rules alone let through:

- ``has_sequential_run``: four consecutive characters stepping by exactly one,
  up or down, all digits or all ASCII letters ("1234", "dcba", "wXyZ").
- ``has_repeating_run``: one character four or more times in a row ("aaaa").

Only 4-wide windows with unit step are examined. "2468" or "acegi" are not
sequences here.
"""

import string
from itertools import pairwise

SEQUENCE_WINDOW = 4
REPEAT_THRESHOLD = 4

_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_lowercase)
_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _same_class(window: str) -> bool:
    chars = set(window)
    return chars <= _DIGITS or chars <= _LETTERS


def _steps_by(window: str, step: int) -> bool:
    return all(ord(b) - ord(a) == step for a, b in pairwise(window))


def has_sequential_run(value: str) -> bool:
    """Return True if any 4-character window is a unit-step run.

    Windows are scanned left to right and the scan stops at the first hit.
    Only ASCII letters are case-folded, so the string keeps one code point
    per character.

    Example:
        >>> has_sequential_run("Test1234!")
        True
        >>> has_sequential_run("Ab12Cd34")
        False
    """
    if len(value) < SEQUENCE_WINDOW:
        return False

    folded = value.translate(_ASCII_FOLD)
    for start in range(len(folded) - SEQUENCE_WINDOW + 1):
        window = folded[start : start + SEQUENCE_WINDOW]
        if not _same_class(window):
            continue
        if _steps_by(window, 1) or _steps_by(window, -1):
            return True
    return False


def has_repeating_run(value: str) -> bool:
    """Return True if any character repeats 4 or more times consecutively.

    Comparison is exact (case-sensitive): "aAaA" is not a run.

    Example:
        >>> has_repeating_run("Aaaaa123!")
        True
    """
    if len(value) < REPEAT_THRESHOLD:
        return False

    run = 1
    for previous, current in pairwise(value):
        run = run + 1 if current == previous else 1
        if run >= REPEAT_THRESHOLD:
            return True
    return False
