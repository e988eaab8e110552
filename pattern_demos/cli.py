"""
Command-line interface for pattern demos.

With no arguments every demo runs in order and the exit code is 0. Bad
options or a bad configuration file give a message on stderr and exit 1.
"""

import argparse
import logging
import sys

from .config import DemoConfig
from .runner import DemoRunner

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pattern-demos",
        description="Run object-oriented design pattern demos",
    )
    parser.add_argument("-c", "--config", type=str, help="Path to configuration file")
    parser.add_argument("--demos", type=str, nargs="+", help="Run only these demos")
    parser.add_argument("--disable-demos", type=str, nargs="+", help="Skip these demos")
    parser.add_argument("--list-demos", action="store_true", help="List available demos and exit")
    parser.add_argument(
        "--init-config",
        type=str,
        metavar="FILE",
        help="Write a configuration file with every demo enabled and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log diagnostics to stderr")
    return parser


def load_config(args: argparse.Namespace) -> DemoConfig:
    """
    Build the configuration from the config file and demo options.

    Raises:
        FileNotFoundError: If the config file does not exist
        ValueError: If the file is malformed or a demo name is unknown
    """
    config = DemoConfig.from_file(args.config) if args.config else DemoConfig.default()
    if args.demos:
        config.enable_only(*args.demos)
    for demo_name in args.disable_demos or []:
        config.disable_demo(demo_name)
    return config


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)

    # stdout carries demo text only
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_demos:
        print("Available demos:")
        for name, desc in DemoConfig.AVAILABLE_DEMOS.items():
            print(f"  {name}: {desc}")
        return 0

    if args.init_config:
        DemoConfig.default().save(args.init_config)
        print(f"Configuration saved to: {args.init_config}")
        return 0

    try:
        config = load_config(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug("Enabled demos: %s", config.get_enabled_demos())
    results = DemoRunner(config).run()
    logger.debug("Ran %d demos", len(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
