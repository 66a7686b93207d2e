"""Factory for creating Splitter instances.

This module implements the Factory Pattern to instantiate the appropriate
Splitter provider based on configuration, enabling configuration-driven selection
of different splitting strategies without code changes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from src.libs.splitter.base_splitter import BaseSplitter

if TYPE_CHECKING:
    from src.core.settings import Settings

logger = logging.getLogger(__name__)


def _register_builtin_providers() -> None:
    """Register built-in splitter providers.

    This function is called automatically when the module is imported.
    """
    # Import here to avoid circular imports
    from src.libs.splitter.delimiter_splitter import DelimiterSplitter

    SplitterFactory.register_provider("delimiter", DelimiterSplitter)


class SplitterFactory:
    """Factory for creating Splitter provider instances.

    This factory reads the splitter configuration from settings and instantiates
    the corresponding Splitter implementation.
    """

    _PROVIDERS: dict[str, type[BaseSplitter]] = {}

    @classmethod
    def register_provider(cls, name: str, provider_class: type[BaseSplitter]) -> None:
        """Register a new Splitter provider implementation.

        Args:
            name: The provider identifier (e.g., 'delimiter').
            provider_class: The BaseSplitter subclass implementing the provider.

        Raises:
            ValueError: If provider_class doesn't inherit from BaseSplitter.
        """
        if not issubclass(provider_class, BaseSplitter):
            raise ValueError(
                f"Provider class {provider_class.__name__} must inherit from BaseSplitter"
            )
        cls._PROVIDERS[name.lower()] = provider_class
        logger.debug(f"Registered splitter provider '{name.lower()}': {provider_class.__name__}")

    @classmethod
    def create(cls, settings: Settings, **override_kwargs: Any) -> BaseSplitter:
        """Create a Splitter instance based on configuration.

        Args:
            settings: The application settings containing splitter configuration.
            **override_kwargs: Optional parameters to override config values.

        Returns:
            An instance of the configured Splitter provider.

        Raises:
            ValueError: If the configured provider is not supported or missing.
            RuntimeError: If the provider fails to initialize.
        """
        try:
            splitter_settings = settings.splitter
            if splitter_settings is None:
                raise AttributeError("settings.splitter is None")
            provider_name = splitter_settings.provider.lower()
        except AttributeError as e:
            raise ValueError(
                "Missing required configuration: settings.splitter.provider. "
                "Please ensure 'splitter.provider' is specified in settings.yaml"
            ) from e

        provider_class = cls._PROVIDERS.get(provider_name)
        if provider_class is None:
            available = ", ".join(sorted(cls._PROVIDERS.keys())) if cls._PROVIDERS else "none"
            raise ValueError(
                f"Unsupported Splitter provider: '{provider_name}'. "
                f"Available providers: {available}"
            )

        try:
            splitter = provider_class(settings=settings, **override_kwargs)
        except Exception as e:
            raise RuntimeError(
                f"Failed to instantiate Splitter provider '{provider_name}': {e}"
            ) from e

        logger.debug(f"Created splitter provider '{provider_name}'")
        return splitter

    @classmethod
    def list_providers(cls) -> list[str]:
        """List all registered provider names.

        Returns:
            Sorted list of available provider identifiers.
        """
        return sorted(cls._PROVIDERS.keys())


# Auto-register built-in providers when module is imported
_register_builtin_providers()
