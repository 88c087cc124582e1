"""Configuration file loading and management"""

import math
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import yaml

from twimg.common.types import Breakpoint

SECTION_NAME = "TailwindImageScaling"
DEFAULT_PROVIDER_NAME = "imagesharp"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass(frozen=True)
class ScalingOptions:
    """Breakpoint table and device pixel ratios, in declared order"""
    breakpoints: tuple[Breakpoint, ...]
    device_pixel_ratios: tuple[float, ...] = ()
    provider_name: str = DEFAULT_PROVIDER_NAME

    @staticmethod
    def from_pairs(
        breakpoints: Sequence[tuple[str, int]],
        device_pixel_ratios: Sequence[float] = (),
        provider_name: str = DEFAULT_PROVIDER_NAME,
    ) -> "ScalingOptions":
        """Build options from (name, width) pairs"""
        return ScalingOptions(
            breakpoints=tuple(Breakpoint(name=name, min_width=width) for name, width in breakpoints),
            device_pixel_ratios=tuple(device_pixel_ratios),
            provider_name=provider_name,
        )

    def breakpointNames_get(self) -> list[str]:
        """Breakpoint names in configuration order"""
        return [bp.name for bp in self.breakpoints]


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration settings"""
    level: str = "INFO"
    file: Optional[str] = None
    format: str = DEFAULT_LOG_FORMAT


@dataclass(frozen=True)
class Config:
    """Complete application configuration"""
    scaling: ScalingOptions
    logging: LoggingConfig


class ConfigLoader:
    """Loads and parses configuration from YAML files"""

    DEFAULT_CONFIG_PATHS = [
        "twimg.yml",
        "~/.config/twimg/twimg.yml",
        "/etc/twimg/twimg.yml",
    ]

    @staticmethod
    def configFile_find() -> Optional[Path]:
        """
        Find configuration file in standard locations

        Returns:
            Path to config file, or None if not found
        """
        for config_path in ConfigLoader.DEFAULT_CONFIG_PATHS:
            path = Path(config_path).expanduser().resolve()
            if path.exists() and path.is_file():
                return path
        return None

    @staticmethod
    def yaml_load(file_path: Path) -> Dict[str, Any]:
        """
        Load YAML configuration file

        Args:
            file_path: Path to YAML file

        Returns:
            Parsed configuration dictionary

        Raises:
            FileNotFoundError: If file does not exist
            yaml.YAMLError: If file is not valid YAML
        """
        with open(file_path, "r") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Config file {file_path} must contain a YAML dictionary")

        return data

    @staticmethod
    def breakpoints_parse(data: Any) -> tuple[Breakpoint, ...]:
        """
        Parse the Breakpoints mapping, keeping declaration order

        Args:
            data: Raw `Breakpoints` value

        Returns:
            Tuple of Breakpoint in declared order

        Raises:
            ValueError: If the mapping or any entry is invalid
        """
        if not isinstance(data, dict):
            raise ValueError(f"{SECTION_NAME}.Breakpoints must be a mapping of name to pixel width")

        breakpoints: list[Breakpoint] = []
        for name, width in data.items():
            if not isinstance(name, str) or not name:
                raise ValueError(f"Breakpoint name must be a non-empty string, got {name!r}")
            if isinstance(width, bool) or not isinstance(width, int) or width <= 0:
                raise ValueError(f"Breakpoint '{name}' must be a positive integer, got {width!r}")
            breakpoints.append(Breakpoint(name=name, min_width=width))
        return tuple(breakpoints)

    @staticmethod
    def devicePixelRatios_parse(data: Any) -> tuple[float, ...]:
        """
        Parse SupportedDevicePixelRatios; None means no scaling

        Args:
            data: Raw `SupportedDevicePixelRatios` value

        Returns:
            Tuple of ratios in declared order

        Raises:
            ValueError: If the value is not a sequence of positive numbers
        """
        if data is None:
            return ()
        if not isinstance(data, (list, tuple)):
            raise ValueError(f"{SECTION_NAME}.SupportedDevicePixelRatios must be a list")

        ratios: list[float] = []
        for ratio in data:
            is_number = isinstance(ratio, (int, float)) and not isinstance(ratio, bool)
            if not is_number or not math.isfinite(ratio) or ratio <= 0:
                raise ValueError(f"Device pixel ratio must be a positive number, got {ratio!r}")
            ratios.append(float(ratio))
        return tuple(ratios)

    @staticmethod
    def config_parse(data: Dict[str, Any]) -> Config:
        """
        Parse configuration dictionary into Config object

        Args:
            data: Raw configuration dictionary

        Returns:
            Parsed Config object

        Raises:
            ValueError: If the scaling section is missing or invalid
        """
        section = data.get(SECTION_NAME)
        if not isinstance(section, dict):
            raise ValueError(f"Config must contain a '{SECTION_NAME}' mapping")

        scaling = ScalingOptions(
            breakpoints=ConfigLoader.breakpoints_parse(section.get("Breakpoints")),
            device_pixel_ratios=ConfigLoader.devicePixelRatios_parse(
                section.get("SupportedDevicePixelRatios")
            ),
            provider_name=section.get("ScalingProvider") or DEFAULT_PROVIDER_NAME,
        )

        # Logging section is optional
        logging_data = data.get("logging") or {}
        logging = LoggingConfig(
            level=logging_data.get("level", "INFO"),
            file=logging_data.get("file"),
            format=logging_data.get("format", DEFAULT_LOG_FORMAT),
        )

        return Config(scaling=scaling, logging=logging)

    @staticmethod
    def config_load(file_path: Optional[Path] = None) -> Config:
        """
        Load configuration from file

        Args:
            file_path: Optional path to config file. If None, searches standard locations.

        Returns:
            Parsed Config object

        Raises:
            FileNotFoundError: If config file not found
            ValueError: If config file is invalid
        """
        if file_path is None:
            file_path = ConfigLoader.configFile_find()
            if file_path is None:
                raise FileNotFoundError(
                    f"Config file not found in standard locations: "
                    f"{ConfigLoader.DEFAULT_CONFIG_PATHS}"
                )

        data = ConfigLoader.yaml_load(file_path)
        return ConfigLoader.config_parse(data)

    @staticmethod
    def configWithOverrides_load(
        file_path: Optional[Path] = None,
        **overrides: Any
    ) -> Config:
        """
        Load configuration and apply command-line overrides

        Args:
            file_path: Optional path to config file
            **overrides: Key-value pairs to override config values

        Returns:
            Config object with overrides applied

        Example:
            config = ConfigLoader.configWithOverrides_load(
                device_pixel_ratios=[1, 2],
                provider_name="querystring",
            )
        """
        config = ConfigLoader.config_load(file_path)
        scaling = config.scaling

        if overrides.get("device_pixel_ratios") is not None:
            scaling = replace(
                scaling,
                device_pixel_ratios=ConfigLoader.devicePixelRatios_parse(
                    list(overrides["device_pixel_ratios"])
                ),
            )
        if overrides.get("provider_name"):
            scaling = replace(scaling, provider_name=overrides["provider_name"])
        if overrides.get("log_level"):
            config = replace(config, logging=replace(config.logging, level=overrides["log_level"]))

        return replace(config, scaling=scaling)
