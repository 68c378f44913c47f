"""Text utilities: grapheme segmentation, width measurement, width fitting.

Provides functions for measuring terminal display widths per grapheme
cluster and for finding the longest cluster-aligned prefix or suffix of a
string that fits in a given number of columns.
"""

from __future__ import annotations

import unicodedata

import grapheme
import wcwidth as _wcwidth


# ---------------------------------------------------------------------------
# Grapheme segmenter wrapper
# ---------------------------------------------------------------------------


class _GraphemeSegmenter:
    """Thin wrapper around ``grapheme.graphemes``."""

    @staticmethod
    def segment(text: str) -> list[str]:
        return list(grapheme.graphemes(text))


def get_segmenter() -> _GraphemeSegmenter:
    """Return a grapheme segmenter instance."""
    return _GraphemeSegmenter()


# ---------------------------------------------------------------------------
# Width cache (capped at 512 entries)
# ---------------------------------------------------------------------------

_width_cache: dict[str, int] = {}
_WIDTH_CACHE_MAX = 512


def _cache_width(key: str, value: int) -> int:
    if len(_width_cache) >= _WIDTH_CACHE_MAX:
        _width_cache.clear()
    _width_cache[key] = value
    return value


# ---------------------------------------------------------------------------
# Grapheme width
# ---------------------------------------------------------------------------


def grapheme_width(g: str) -> int:
    """Return the terminal display width of a single grapheme cluster.

    Rules:
    1. Zero-width characters (control, combining marks, etc.) -> 0
    2. Emoji (multi-codepoint, contains VS16 U+FE0F, ZWJ sequences, etc.) -> 2
    3. Otherwise delegate to wcwidth for the first meaningful codepoint.
    """
    if not g:
        return 0

    # Single codepoint fast path
    if len(g) == 1:
        cp = ord(g)
        if cp < 0x20 or (0x7F <= cp <= 0x9F):
            return 0
        w = _wcwidth.wcwidth(g)
        return max(w, 0)

    codepoints = list(g)

    for ch in codepoints:
        cp = ord(ch)
        if cp == 0xFE0F:  # VS16
            return 2
        if cp == 0x200D:  # ZWJ
            return 2
        if 0x1F3FB <= cp <= 0x1F3FF:  # Skin tone modifiers
            return 2
        if 0x1F1E6 <= cp <= 0x1F1FF:  # Regional indicators
            return 2

    first_cp = ord(codepoints[0])

    if first_cp >= 0x1F000:
        return 2

    # Miscellaneous symbols, dingbats
    if 0x2600 <= first_cp <= 0x27BF:
        return 2

    # A cluster led by a mark or format char (e.g. a stray combining accent)
    cat = unicodedata.category(codepoints[0])
    if cat.startswith("M"):
        return 0
    if cat == "Cf":
        return 0

    # Base character plus combining marks: the base decides
    w = _wcwidth.wcwidth(codepoints[0])
    return max(w, 0)


# ---------------------------------------------------------------------------
# text_width
# ---------------------------------------------------------------------------


def _is_plain_ascii(text: str) -> bool:
    for ch in text:
        cp = ord(ch)
        if cp < 0x20 or cp > 0x7E:
            return False
    return True


def text_width(text: str) -> int:
    """Display width of raw *text*, summed per grapheme cluster.

    *text* is edit content, measured exactly as it will be drawn; escape
    sequences are not stripped.
    """
    if not text:
        return 0

    if _is_plain_ascii(text):
        return len(text)

    cached = _width_cache.get(text)
    if cached is not None:
        return cached

    total = 0
    for g in grapheme.graphemes(text):
        total += grapheme_width(g)

    return _cache_width(text, total)


# ---------------------------------------------------------------------------
# Prefix / suffix fitting
# ---------------------------------------------------------------------------


def _fitting_length(clusters: list[str], width: int) -> int:
    used = 0
    length = 0
    for g in clusters:
        used += grapheme_width(g)
        if used > width:
            break
        length += len(g)
    return length


def prefix_length(text: str, width: int) -> int:
    """Length of the longest cluster-aligned prefix of *text* fitting *width* columns."""
    return _fitting_length(list(grapheme.graphemes(text)), width)


def suffix_length(text: str, width: int) -> int:
    """Length of the longest cluster-aligned suffix of *text* fitting *width* columns.

    Clusters are taken from the end; accumulation stops at the first cluster
    that would push the total past *width*.
    """
    clusters = list(grapheme.graphemes(text))
    clusters.reverse()
    return _fitting_length(clusters, width)
