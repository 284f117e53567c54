"""
Splitting text into colorable segments.

`segment()` partitions a string into an ordered list of `Segment` values at
one of four granularities (see `Scope`). The partition is lossless: joining
the segment texts in order always gives back the input unchanged, whatever
the scope. The segmenter only classifies and slices; it never rewrites text.

Every segment carries an `is_blank` flag (empty or all whitespace). Blank
segments are still written by the renderer, they just never get a color and
never advance the palette.
"""

import re
from dataclasses import dataclass
from enum import Enum

from .errors import UnsupportedScopeError


class Scope(Enum):
    CHARACTERS = "characters"
    WORDS = "words"
    SENTENCES = "sentences"
    PARAGRAPHS = "paragraphs"


@dataclass(frozen=True)
class Segment:
    text: str
    is_blank: bool

    @classmethod
    def of(cls, text: str) -> "Segment":
        return cls(text, is_blank(text))


def is_blank(text: str) -> bool:
    """True if text is empty or consists only of whitespace."""
    return not text or text.isspace()


# Runs of non-whitespace and runs of whitespace, alternating
_WORD_RE = re.compile(r"\S+|\s+")

# Everything up to and including a run of terminators, or the trailing
# remainder with no terminator. [^.!?] already matches newlines.
_SENTENCE_RE = re.compile(r"[^.!?]*[.!?]+|[^.!?]+")

# Two or more line breaks in a row, bare or CRLF, i.e. a blank line
_PARAGRAPH_BREAK_RE = re.compile(r"(?:\r?\n){2,}")


def parse_scope(value: object) -> Scope:
    """Resolve a Scope member or a scope name such as "words" to a Scope.

    Raises:
        UnsupportedScopeError: if the value is not a supported scope.
    """
    if isinstance(value, Scope):
        return value
    if isinstance(value, str):
        try:
            return Scope(value.strip().lower())
        except ValueError:
            pass
    raise UnsupportedScopeError(f"Unsupported colorization scope: {value!r}")


def segment(text: str, scope: Scope | str = Scope.CHARACTERS) -> list[Segment]:
    """Split text into segments for the given scope.

    Args:
        text: The text to split. An empty string gives an empty list.
        scope: Granularity of the split, a Scope or its name.

    Returns:
        Segments in left-to-right order whose texts concatenate to `text`.

    Raises:
        UnsupportedScopeError: if scope is not a supported scope.
    """
    scope = parse_scope(scope)
    if not text:
        return []

    if scope is Scope.CHARACTERS:
        return [Segment.of(char) for char in text]
    if scope is Scope.WORDS:
        return [Segment.of(match.group()) for match in _WORD_RE.finditer(text)]
    if scope is Scope.SENTENCES:
        return [Segment.of(match.group()) for match in _SENTENCE_RE.finditer(text)]
    return _split_paragraphs(text)


def _split_paragraphs(text: str) -> list[Segment]:
    # Paragraph breaks are kept as blank segments of their own so the
    # partition stays lossless; the renderer writes them uncolored.
    segments = []
    start = 0
    for match in _PARAGRAPH_BREAK_RE.finditer(text):
        if match.start() > start:
            segments.append(Segment.of(text[start : match.start()]))
        segments.append(Segment.of(match.group()))
        start = match.end()
    if start < len(text):
        segments.append(Segment.of(text[start:]))
    return segments
