"""Abstract base class for text splitter providers.

This module defines the pluggable interface for splitter implementations,
so callers can switch splitting strategies through configuration without
changing upstream code.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Optional


class BaseSplitter(ABC):
    """Abstract base class for splitter providers.

    All splitter implementations must inherit from this class and implement
    :meth:`split_text`.

    Design Principles Applied:
    - Pluggable: Subclasses can be swapped without changing upstream code.
    - Config-Driven: Instances are created via factory based on settings.
    """

    @abstractmethod
    def split_text(
        self,
        text: str,
        trace: Optional[Any] = None,
        **kwargs: Any,
    ) -> List[str]:
        """Split text into pieces.

        Args:
            text: Input text to split.
            trace: Optional TraceContext for observability.
            **kwargs: Provider-specific parameters.

        Returns:
            List of text pieces in source order.
        """
        raise NotImplementedError

    def validate_text(self, text: str) -> None:
        """Validate input text.

        Raises:
            ValueError: If ``text`` is not a string.
        """
        if not isinstance(text, str):
            raise ValueError(f"Text must be a string (type: {type(text).__name__})")

    def validate_chunks(self, chunks: List[str]) -> None:
        """Validate splitter output.

        Raises:
            ValueError: If the result is not a list of strings.
        """
        if not isinstance(chunks, list):
            raise ValueError(f"Splitter must return a list (type: {type(chunks).__name__})")
        for i, chunk in enumerate(chunks):
            if not isinstance(chunk, str):
                raise ValueError(
                    f"Chunk at index {i} is not a string (type: {type(chunk).__name__})"
                )
