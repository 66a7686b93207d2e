"""
Splitter Module.

This package contains the delimiter splitting functions and the pluggable
splitter layer built on them:
- Segment views and the split / split_bounded / split_bounded_with_count functions
- Base splitter class
- Splitter factory
- Implementations (Delimiter)
"""

from src.libs.splitter.segment import Segment
from src.libs.splitter.delimiter_split import (
    BoundedSplit,
    split,
    split_bounded,
    split_bounded_with_count,
    split_strings,
)
from src.libs.splitter.base_splitter import BaseSplitter
from src.libs.splitter.splitter_factory import SplitterFactory
from src.libs.splitter.delimiter_splitter import DelimiterSplitter

__all__ = [
    "Segment",
    "BoundedSplit",
    "split",
    "split_bounded",
    "split_bounded_with_count",
    "split_strings",
    "BaseSplitter",
    "SplitterFactory",
    "DelimiterSplitter",
]
