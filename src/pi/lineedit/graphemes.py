"""Grapheme navigation: cluster boundaries and widths around an index.

All indices are positions in a Python ``str``. Callers pass indices that are
already grapheme-cluster boundaries; passing anything else is a caller bug and
trips an assertion.
"""

from __future__ import annotations

from typing import NamedTuple

from pi.lineedit.utils import get_segmenter, grapheme_width

_segmenter = get_segmenter()


class Boundary(NamedTuple):
    """The far edge of an adjacent cluster and that cluster's display width."""

    index: int
    width: int


def _boundaries(text: str) -> list[int]:
    edges = [0]
    for g in _segmenter.segment(text):
        edges.append(edges[-1] + len(g))
    return edges


def is_boundary(text: str, index: int) -> bool:
    """Return ``True`` if *index* falls between two grapheme clusters of *text*."""
    if index == 0 or index == len(text):
        return True
    if index < 0 or index > len(text):
        return False
    return index in _boundaries(text)


def floor_boundary(text: str, index: int) -> int:
    """Largest boundary of *text* that is ``<= index``."""
    index = max(0, min(index, len(text)))
    best = 0
    for edge in _boundaries(text):
        if edge > index:
            break
        best = edge
    return best


def ceil_boundary(text: str, index: int) -> int:
    """Smallest boundary of *text* that is ``>= index``."""
    index = max(0, min(index, len(text)))
    for edge in _boundaries(text):
        if edge >= index:
            return edge
    return len(text)


def previous_boundary(text: str, index: int) -> Boundary | None:
    """Start index and width of the cluster ending at *index*, or ``None`` at 0."""
    assert is_boundary(text, index), f"Index {index} is not a grapheme boundary in {text!r}"
    if index <= 0:
        return None
    graphemes = _segmenter.segment(text[:index])
    last = graphemes[-1]
    return Boundary(index - len(last), grapheme_width(last))


def next_boundary(text: str, index: int) -> Boundary | None:
    """End index and width of the cluster starting at *index*, or ``None`` at the end."""
    assert is_boundary(text, index), f"Index {index} is not a grapheme boundary in {text!r}"
    if index >= len(text):
        return None
    graphemes = _segmenter.segment(text[index:])
    first = graphemes[0]
    return Boundary(index + len(first), grapheme_width(first))


def cluster_at(text: str, index: int) -> str | None:
    """The grapheme cluster starting at *index*, or ``None`` at the end."""
    nxt = next_boundary(text, index)
    if nxt is None:
        return None
    return text[index : nxt.index]


def utf8_offset(text: str, index: int) -> int:
    """UTF-8 byte position corresponding to the ``str`` index *index*."""
    return len(text[:index].encode("utf-8", "surrogatepass"))
