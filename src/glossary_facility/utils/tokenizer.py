"""
Word/separator tokenizer.

Splits text into maximal runs of separator characters and runs of
non-separator ("word") characters. The runs partition the text: joining
them gives back the original string exactly.
"""
from typing import AbstractSet, Iterable, Iterator, FrozenSet

from ..core.models import DEFAULT_SEPARATORS


def separator_set(chars: Iterable[str]) -> FrozenSet[str]:
    """Build a separator set from a string (or any iterable) of characters."""
    if isinstance(chars, str):
        return frozenset(chars)
    
    result = set()
    for item in chars:
        if not isinstance(item, str) or len(item) != 1:
            raise ValueError(f"Separator must be a single character, got {item!r}")
        result.add(item)
    return frozenset(result)


def next_token(text: str, position: int, separators: AbstractSet[str]) -> str:
    """
    Return the word or separator run of ``text`` starting at ``position``.
    
    Args:
        text: String to scan
        position: Start index, ``0 <= position < len(text)``
        separators: Set of separator characters
        
    Returns:
        The longest run starting at ``position`` whose characters all share
        the separator membership of ``text[position]``. Never empty.
        
    Raises:
        ValueError: If position is outside the string
    """
    if not 0 <= position < len(text):
        raise ValueError(
            f"position must satisfy 0 <= position < {len(text)}, got {position}"
        )
    
    in_separators = text[position] in separators
    end = position + 1
    while end < len(text) and (text[end] in separators) == in_separators:
        end += 1
    
    return text[position:end]


def tokenize(text: str, separators: AbstractSet[str] = DEFAULT_SEPARATORS) -> Iterator[str]:
    """Yield the tokens of ``text`` in order."""
    position = 0
    while position < len(text):
        token = next_token(text, position, separators)
        yield token
        position += len(token)


def is_separator_token(token: str, separators: AbstractSet[str]) -> bool:
    """True if every character of a non-empty ``token`` is a separator."""
    return bool(token) and all(ch in separators for ch in token)
