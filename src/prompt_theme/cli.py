"""Command-line interface for prompt-theme."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml
from prompt_toolkit import print_formatted_text

from prompt_theme.config.loader import load_config
from prompt_theme.errors import ConfigError
from prompt_theme.preview import GitStatus, build_preview, build_style

LOGGER = logging.getLogger(__name__)

STATUS_NAMES = ["staged", "unstaged", "untracked", "ahead", "behind"]


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        args: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        prog="prompt-theme",
        description="Check, dump and preview shell prompt segment configuration",
        epilog="Example: PROMPT_THEME_PATH_COLOR='#00ff00' prompt-theme preview",
    )

    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        metavar="FILE",
        help="Configuration file path (default: ~/.config/prompt-theme/config.yaml)",
    )

    parser.add_argument(
        "--config-dir",
        type=Path,
        metavar="DIR",
        help="Drop-in configuration directory (default: ~/.config/prompt-theme/conf.d/)",
    )

    parser.add_argument(
        "--no-env",
        action="store_true",
        help="Ignore PROMPT_THEME_* environment variables",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log which configuration sources are read",
    )

    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version="%(prog)s 0.1.0",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("check", help="Validate the configuration")
    subparsers.add_parser("dump", help="Print the effective configuration as YAML")

    preview = subparsers.add_parser("preview", help="Print a sample prompt")
    preview.add_argument("--path", default="~/projects/prompt-theme", help="Directory text")
    preview.add_argument("--branch", default="main", help="Branch name")
    preview.add_argument(
        "--no-branch",
        action="store_true",
        help="Render the prompt as if outside a git repository",
    )
    preview.add_argument(
        "--status",
        action="append",
        choices=STATUS_NAMES,
        help="Git status indicator to show (repeatable)",
    )
    preview.add_argument("--root", action="store_true", help="Show the root prompt character")
    preview.add_argument(
        "--failed",
        action="store_true",
        help="Show the prompt character for a failed command",
    )

    return parser.parse_args(args)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def main(args: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        args: Command-line arguments

    Returns:
        Exit code
    """
    parsed = parse_args(args)
    _configure_logging(parsed.verbose)

    # Load configuration
    try:
        config = load_config(
            config_path=parsed.config,
            dropin_dir=parsed.config_dir,
            use_env=not parsed.no_env,
        )
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        match parsed.command:
            case "check":
                print("ok")
            case "dump":
                print(
                    yaml.safe_dump(config.to_mapping(), allow_unicode=True, sort_keys=False),
                    end="",
                )
            case "preview":
                LOGGER.debug("Rendering preview for %s", parsed.path)
                text = build_preview(
                    config,
                    path=parsed.path,
                    branch=None if parsed.no_branch else parsed.branch,
                    status=GitStatus.from_names(parsed.status),
                    root=parsed.root,
                    failed=parsed.failed,
                )
                print_formatted_text(text, style=build_style(config))
        return 0

    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
