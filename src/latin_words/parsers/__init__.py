"""Line parsers for WORDS report lines."""

from latin_words.parsers.expansion import parse_expansion
from latin_words.parsers.possibility import parse_possibility

__all__ = [
    "parse_expansion",
    "parse_possibility",
]
