"""Application settings singleton - single source of truth for configuration

This module provides a singleton Settings class that consolidates:
1. Element attribute surface constants (attribute names, prefixes, defaults)
2. Runtime configuration from twimg.yml

Usage:
    from twimg.common.settings import settings

    # Initialize once at startup with loaded config
    config = ConfigLoader.config_load()
    settings.initialize(config)

    # Use anywhere in the application
    options = settings.config.scaling
    if name.startswith(settings.SIZE_ATTRIBUTE_PREFIX):
        ...
"""

from typing import Optional

from twimg.common.config import SECTION_NAME, Config


class Settings:
    """Singleton settings manager combining twimg.yml and attribute constants

    The configuration is loaded once and then only read; renders running
    concurrently share it without locking.
    """

    _instance: Optional["Settings"] = None

    def __new__(cls) -> "Settings":
        """Ensure only one Settings instance exists"""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self) -> None:
        """Initialize settings singleton (only runs once)"""
        if hasattr(self, "_initialized"):
            return
        self._initialized = True
        self._config: Optional[Config] = None

    def initialize(self, config: Config) -> None:
        """
        Initialize with loaded configuration

        Args:
            config: Loaded configuration
        """
        self._config = config

    # =========================================================================
    # Element Attribute Surface
    # =========================================================================

    CONFIG_SECTION_NAME: str = SECTION_NAME
    """Name of the YAML section holding breakpoints and pixel ratios"""

    SIZE_ATTRIBUTE_PREFIX: str = "size-"
    """Prefix of per-breakpoint override attributes, e.g. `size-md="0.5"`"""

    DEFAULT_FALLBACK_SIZE: str = "100vw"
    """Size appended last to every `sizes` value unless overridden"""

    SOURCE_ELEMENT_NAME: str = "tw-img"
    OUTPUT_ELEMENT_NAME: str = "img"

    SRC_ATTRIBUTE: str = "src"
    FALLBACK_SIZE_ATTRIBUTE: str = "fallback-size"
    CONSERVE_SRC_ATTRIBUTE: str = "conserve-src"

    # =========================================================================
    # Runtime Configuration Access
    # =========================================================================

    @property
    def config(self) -> Config:
        """Get loaded configuration object"""
        if self._config is None:
            raise RuntimeError("Settings not initialized. Call settings.initialize(config) first.")
        return self._config


# Global singleton instance
settings = Settings()
"""Global settings singleton instance

Import this anywhere in the application:
    from twimg.common.settings import settings
"""
