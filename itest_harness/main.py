# itest_harness/main.py
"""Command line entry point for itest-harness."""

import argparse
import json
import logging
import sys
from typing import Optional

from pydantic import ValidationError

from itest_harness.config import Settings
from itest_harness.services.harness import regression_defaults
from itest_harness.services.probe import probe
from itest_harness.utils.constants import MYSQL, POSTGRESQL
from itest_harness.utils.exceptions import HarnessError, InvalidSettingsError
from itest_harness.utils.log_setup import configure_logging


logger = logging.getLogger("itest_harness")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="itest-harness",
        description="Integration test harness helpers"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    probe_parser = subparsers.add_parser(
        "probe",
        help="Check that database servers accept TCP connections"
    )
    probe_parser.add_argument(
        "profiles",
        nargs="*",
        default=[POSTGRESQL, MYSQL],
        help="Profile names (default: postgresql mysql)"
    )
    probe_parser.add_argument(
        "--timeout",
        type=float,
        help="Connect timeout in seconds"
    )

    options_parser = subparsers.add_parser(
        "options",
        help="Print the regression test runner options as JSON"
    )
    options_parser.add_argument(
        "--equinox-console",
        action="store_true",
        help="Enable the OSGi console"
    )
    options_parser.add_argument(
        "--console-port",
        type=int,
        help="OSGi console port"
    )
    return parser


def run_probe(settings: Settings, profiles: list[str]) -> int:
    """Probe each profile and print one line per result.

    Returns:
        0 if every server is reachable, 1 otherwise.
    """
    exit_code = 0
    for name in profiles:
        result = probe(name, settings=settings)
        status = "available" if result.available else f"unavailable ({result.error})"
        print(f"{name}: {result.server_name}:{result.port} {status}")
        if not result.available:
            exit_code = 1
    return exit_code


def run_options(settings: Settings) -> int:
    """Print the flattened option list as JSON."""
    options = regression_defaults(settings).flatten()
    print(json.dumps([option.model_dump() for option in options], indent=2))
    return 0


def load_settings(args: argparse.Namespace) -> Settings:
    """Build settings from the environment and command line overrides.

    Raises:
        InvalidSettingsError: If an override fails validation.
    """
    overrides = {}
    if getattr(args, "timeout", None) is not None:
        overrides["probe_timeout"] = args.timeout
    if getattr(args, "equinox_console", False):
        overrides["equinox_console"] = True
    if getattr(args, "console_port", None) is not None:
        overrides["console_port"] = args.console_port

    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise InvalidSettingsError(
            f"Invalid settings: {e.error_count()} validation error(s)",
            errors=[
                {"field": ".".join(str(p) for p in err["loc"]), "message": err["msg"]}
                for err in e.errors()
            ]
        ) from e


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args)
        configure_logging(settings.log_level, settings.log_config_file)
        if args.command == "probe":
            return run_probe(settings, args.profiles)
        return run_options(settings)
    except HarnessError as e:
        logger.error("%s", e.message)
        print(json.dumps(e.to_dict()), file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
