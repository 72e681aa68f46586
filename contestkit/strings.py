"""String puzzles: reversed translations and strings made of equal blocks."""

from __future__ import annotations


def is_reversal(word: str, candidate: str) -> bool:
    """Return whether ``candidate`` is ``word`` written backwards."""
    return candidate == word[::-1]


def k_string(k: int, text: str) -> str | None:
    """Rearrange ``text`` into ``k`` copies of one block, or return ``None``.

    The block is built from the sorted letters, so the answer is the
    alphabetically smallest such rearrangement.
    """
    if k < 1:
        raise ValueError("k must be at least one")
    ordered = "".join(sorted(text))
    block = ordered[::k]
    result = block * k
    return result if "".join(sorted(result)) == ordered else None