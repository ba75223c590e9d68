"""Main application entry point."""

import argparse
import logging
import sys

USAGE_EXIT_CODE = 1


def setup_logging(verbose: bool = False):
    """
    Set up logging configuration.

    Args:
        verbose: Enable verbose logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(),
        ],
    )


class UsageArgumentParser(argparse.ArgumentParser):
    """Argument parser exiting with status 1 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(USAGE_EXIT_CODE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = UsageArgumentParser(
        prog="wms-themes",
        description="Publish a WMS GetCapabilities document as a QWC2 theme",
    )
    parser.add_argument("capabilities_url", help="WMS GetCapabilities URL")
    parser.add_argument("theme_key", help="Theme identifier (id and name of the entry)")
    parser.add_argument("themes_template", help="themes.json template")
    parser.add_argument("themes_config_template", help="themesConfig.json template")
    parser.add_argument("themes_output", help="themes.json output path")
    parser.add_argument("themes_config_output", help="themesConfig.json output path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main application entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    from wms_themes.cli import run_merge
    from wms_themes.models.merge_config import MergeConfig

    try:
        config = MergeConfig.from_sources(args)
    except ValueError as e:
        logging.error(str(e))
        return 1

    return run_merge(config)


if __name__ == "__main__":
    sys.exit(main())
