"""twimg command-line interface"""

import argparse
import json
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from twimg import __version__
from twimg.common.app_logging import logging_setup
from twimg.common.config import ConfigLoader
from twimg.common.settings import settings
from twimg.element.adapter import Attribute, ImageElementAdapter, RewrittenElement


def ratios_parse(raw: str) -> list[float]:
    """
    Parse a comma-separated device pixel ratio list

    Args:
        raw: e.g. "1,2,3"; an empty string disables scaling

    Returns:
        Ratios in the given order.
    """
    try:
        return [float(part) for part in raw.split(",") if part.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid --dpr '{raw}'. Example: 1,2,3")


def sizeArgument_parse(raw: str) -> Attribute:
    """
    Parse a NAME=VALUE size override into a `size-NAME` attribute

    Args:
        raw: e.g. "md=0.5"

    Returns:
        (attribute name, attribute value) pair.
    """
    name, separator, value = raw.partition("=")
    if not separator:
        raise argparse.ArgumentTypeError(f"Invalid --size '{raw}'. Example: md=0.5")
    return f"{settings.SIZE_ATTRIBUTE_PREFIX}{name.strip()}", value.strip()


def arguments_parse(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments

    Args:
        argv: Argument list; defaults to sys.argv[1:].

    Returns:
        Parsed CLI arguments.
    """
    parser = argparse.ArgumentParser(
        prog="twimg",
        description="Generate responsive image sizes/srcset attributes from breakpoint config",
    )

    parser.add_argument("--version", action="version", version=f"twimg {__version__}")

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to config file (default: search standard locations)",
    )

    parser.add_argument("--src", type=str, required=True, help="Source image URL")

    parser.add_argument(
        "--size",
        type=sizeArgument_parse,
        action="append",
        default=[],
        metavar="BREAKPOINT=VALUE",
        help="Size override, fraction of viewport (0.5) or pixels (300). Repeatable.",
    )

    parser.add_argument(
        "--fallback-size",
        type=str,
        default=None,
        dest="fallback_size",
        help=f"Size used when no breakpoint matches (default: {settings.DEFAULT_FALLBACK_SIZE})",
    )

    parser.add_argument(
        "--conserve-src",
        action="store_true",
        dest="conserve_src",
        help="Keep the src attribute on the output element",
    )

    parser.add_argument(
        "--dpr",
        type=ratios_parse,
        default=None,
        help="Supported device pixel ratios, e.g. 1,2 (overrides config)",
    )

    parser.add_argument(
        "--provider", type=str, default=None, help="Scaling provider name (overrides config)"
    )

    parser.add_argument("--json", action="store_true", help="Print the attributes as JSON")

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug logging (overrides config)"
    )

    parser.add_argument(
        "--info", action="store_true", help="Enable info logging (overrides config)"
    )

    parser.add_argument(
        "--warning", action="store_true", help="Enable warning logging (overrides config)"
    )

    parser.add_argument(
        "--error", action="store_true", help="Enable error logging (overrides config)"
    )

    parser.add_argument(
        "--critical", action="store_true", help="Enable critical logging (overrides config)"
    )

    return parser.parse_args(argv)


def logLevelOverride_get(args: argparse.Namespace) -> str | None:
    """
    Resolve explicit log level override flags.

    Args:
        args: Parsed CLI args.

    Returns:
        Selected log level or None.
    """
    if args.critical:
        return "CRITICAL"
    if args.error:
        return "ERROR"
    if args.warning:
        return "WARNING"
    if args.info:
        return "INFO"
    if args.debug:
        return "DEBUG"
    return None


def elementAttributes_build(args: argparse.Namespace) -> list[Attribute]:
    """
    Assemble the element attributes described by the CLI args.

    Args:
        args: Parsed CLI args.

    Returns:
        (name, value) pairs in element order.
    """
    attributes: list[Attribute] = [(settings.SRC_ATTRIBUTE, args.src)]
    attributes.extend(args.size)
    if args.fallback_size is not None:
        attributes.append((settings.FALLBACK_SIZE_ATTRIBUTE, args.fallback_size))
    if args.conserve_src:
        attributes.append((settings.CONSERVE_SRC_ATTRIBUTE, "true"))
    return attributes


def element_format(element: RewrittenElement, as_json: bool) -> str:
    """
    Format the rewritten element's attributes for printing.

    Args:
        element: Adapter output.
        as_json: Emit a JSON object instead of attribute lines.

    Returns:
        Printable text.
    """
    if as_json:
        return json.dumps({name: value for name, value in element.attributes})
    return "\n".join(f'{name}="{value}"' for name, value in element.attributes)


def render_run(args: argparse.Namespace) -> str:
    """
    Load configuration and render the element described by args.

    Args:
        args: Parsed CLI args.

    Returns:
        Formatted output.
    """
    config = ConfigLoader.configWithOverrides_load(
        Path(args.config) if args.config else None,
        device_pixel_ratios=args.dpr,
        provider_name=args.provider,
        log_level=logLevelOverride_get(args),
    )
    logging_setup(config.logging)
    settings.initialize(config)

    adapter = ImageElementAdapter.fromSettings_create()
    element = adapter.element_rewrite(elementAttributes_build(args))
    return element_format(element, args.json)


def main(argv: Optional[Sequence[str]] = None) -> NoReturn:
    """Main entry point for the twimg command"""
    args = arguments_parse(argv)

    try:
        print(render_run(args))
        sys.exit(0)

    except KeyboardInterrupt:
        print("\nShutting down...")
        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
