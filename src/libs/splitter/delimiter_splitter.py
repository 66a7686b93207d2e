"""Delimiter Splitter provider.

Wraps the single-character split functions behind the
:class:`BaseSplitter` interface so the splitter can be selected and
configured from ``settings.yaml``.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from src.libs.splitter.base_splitter import BaseSplitter
from src.libs.splitter.delimiter_split import split, split_bounded_with_count, split_strings
from src.libs.splitter.segment import Segment

logger = logging.getLogger(__name__)


class DelimiterSplitter(BaseSplitter):
    """Splits text on a single configured character.

    Empty pieces are kept, so ``"a,,b,"`` becomes ``["a", "", "b", ""]``.
    When ``max_segments`` is set, at most that many pieces are returned and
    the rest of the input is dropped.

    Attributes:
        delimiter: The separator character.
        max_segments: Optional bound on the number of pieces.
    """

    def __init__(
        self,
        settings: Any,
        delimiter: Optional[str] = None,
        max_segments: Optional[int] = None,
        **kwargs: Any,
    ) -> None:
        """Initialize DelimiterSplitter.

        Args:
            settings: Application settings containing splitter configuration.
            delimiter: Optional override for settings.splitter.delimiter.
            max_segments: Optional override for settings.splitter.max_segments.
            **kwargs: Ignored; accepted so the factory can pass extra options.

        Raises:
            ValueError: If the configuration is missing or invalid.
        """
        self.settings = settings

        try:
            splitter_config = settings.splitter
            self.delimiter = delimiter if delimiter is not None else splitter_config.delimiter
            self.max_segments = (
                max_segments if max_segments is not None else splitter_config.max_segments
            )
        except AttributeError as e:
            raise ValueError(
                "Missing splitter configuration in settings. "
                "Expected settings.splitter.delimiter and settings.splitter.max_segments"
            ) from e

        if not isinstance(self.delimiter, str) or len(self.delimiter) != 1:
            raise ValueError(f"delimiter must be a single character, got: {self.delimiter!r}")

        if self.max_segments is not None and (
            isinstance(self.max_segments, bool)
            or not isinstance(self.max_segments, int)
            or self.max_segments < 0
        ):
            raise ValueError(
                f"max_segments must be a non-negative integer, got: {self.max_segments!r}"
            )

        logger.debug(
            f"DelimiterSplitter initialized with delimiter={self.delimiter!r}, "
            f"max_segments={self.max_segments}"
        )

    def split_segments(self, text: str, **kwargs: Any) -> List[Segment]:
        """Split text and return segment views instead of copies.

        Accepts the same ``delimiter`` and ``max_segments`` overrides as
        :meth:`split_text`.
        """
        self.validate_text(text)
        delimiter = kwargs.get("delimiter", self.delimiter)
        max_segments = kwargs.get("max_segments", self.max_segments)

        if max_segments is None:
            return split(text, delimiter)
        return list(split_bounded_with_count(text, delimiter, max_segments).segments)

    def split_text(
        self,
        text: str,
        trace: Optional[Any] = None,
        **kwargs: Any,
    ) -> List[str]:
        """Split text on the configured delimiter.

        Args:
            text: Input text. An empty string yields ``[""]``.
            trace: Optional TraceContext for observability.
            **kwargs: ``delimiter`` and ``max_segments`` override the
                configured values for this call.

        Returns:
            The pieces in source order, as plain strings.

        Raises:
            ValueError: If the text or an override is invalid.
        """
        self.validate_text(text)
        chunks = split_strings(
            text,
            kwargs.get("delimiter", self.delimiter),
            kwargs.get("max_segments", self.max_segments),
        )
        self.validate_chunks(chunks)
        return chunks
