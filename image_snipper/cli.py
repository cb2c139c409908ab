"""CLI entry point for the snipper."""

import argparse
import json
import logging
import signal
import sys
import threading
from collections.abc import Callable, Iterator, Sequence
from contextlib import contextmanager
from enum import IntEnum
from pathlib import Path

from image_snipper.core.cancellation import CancellationToken
from image_snipper.core.exceptions import OperationCancelledError, SnipperError
from image_snipper.core.settings import AppSettings, get_settings
from image_snipper.core.settings.app_settings import CLISettings
from image_snipper.core.utils import setup_logging
from image_snipper.services import (
    ImageTemplateFactory,
    ProbeStatus,
    TemplateRegistry,
)
from image_snipper.services.segment_loader import segment_list_schema

logger = logging.getLogger(__name__)


class ExitCode(IntEnum):
    """Process exit codes."""

    SUCCESS = 0
    NO_TEMPLATE = 1
    CANCELLED = 2
    NO_FILES = 3
    FAILED = 4


PausePolicy = Callable[[ExitCode], None]


def no_pause(exit_code: ExitCode) -> None:
    """Exit immediately."""


def console_pause(exit_code: ExitCode) -> None:
    """
    Wait for the user before a failing exit closes an interactive console.

    Args:
        exit_code (ExitCode): Code the process is about to exit with.
    """
    if exit_code == ExitCode.SUCCESS:
        return
    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        return
    input("Press Enter to continue...")


def get_pause_policy(settings: CLISettings) -> PausePolicy:
    """
    Get the pause policy configured for the CLI.

    Args:
        settings (CLISettings): CLI settings.

    Returns:
        PausePolicy: Callable invoked with the exit code just before exiting.
    """
    return console_pause if settings.pause_on_error else no_pause


def build_registry(settings: AppSettings) -> TemplateRegistry:
    """
    Build the ordered list of templates the CLI can run.

    Args:
        settings (AppSettings): Application settings instance.

    Returns:
        TemplateRegistry: Registry with every known template factory.
    """
    return TemplateRegistry(factories=[ImageTemplateFactory(settings=settings)])


@contextmanager
def cancel_on_interrupt(cancellation: CancellationToken) -> Iterator[None]:
    """
    Turn Ctrl+C into a cooperative cancellation request while active.

    Args:
        cancellation (CancellationToken): Token to cancel on SIGINT.

    Yields:
        None
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def handler(signum: int, frame: object) -> None:
        logger.warning("Interrupt received, stopping after the current tile")
        cancellation.cancel()

    previous = signal.signal(signal.SIGINT, handler)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)


def snip(
    paths: Sequence[Path],
    registry: TemplateRegistry,
    cancellation: CancellationToken,
) -> ExitCode:
    """
    Resolve a template for the paths and run it.

    Args:
        paths (Sequence[Path]): Input paths.
        registry (TemplateRegistry): Templates to choose from.
        cancellation (CancellationToken): Cancellation signal for the run.

    Returns:
        ExitCode: Outcome of the run.
    """
    result = registry.resolve(paths)

    if result.status is ProbeStatus.MALFORMED:
        logger.error(f"Template '{result.factory}' cannot use the specified files: {result.error}")
        return ExitCode.NO_TEMPLATE

    if result.status is ProbeStatus.NOT_APPLICABLE or result.template is None:
        print(
            result.reason or "No registered template can handle the specified files.",
            file=sys.stderr,
        )
        return ExitCode.NO_TEMPLATE

    try:
        written = result.template.execute(cancellation)
    except OperationCancelledError:
        logger.warning("Snipping was cancelled; files already written were kept")
        return ExitCode.CANCELLED
    except SnipperError as e:
        logger.error(f"Snipping failed: {e}")
        return ExitCode.FAILED

    logger.info(f"Snipping complete: {len(written)} file(s) written")
    return ExitCode.SUCCESS


def main() -> int:
    """
    Main CLI entry point.

        int: Exit code (0 for success).
    """
    parser = argparse.ArgumentParser(
        description="Snip named segments out of images",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Snip command
    snip_parser = subparsers.add_parser(
        "snip",
        help="Snip segments from images",
        description="JSON files define segments; every other file is an image to snip.",
    )
    snip_parser.add_argument("paths", nargs="*", help="Segment JSON files and image files")
    snip_parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Override the log level",
    )

    # Schema command
    subparsers.add_parser("schema", help="Print the JSON schema of segment definition files")

    args = parser.parse_args()

    if args.command == "snip":
        return run_snip(args)
    elif args.command == "schema":
        return run_schema(args)
    else:
        parser.print_help()
        return 0


def run_snip(args: argparse.Namespace) -> int:
    """
    Run the snip command.

    Args:
        args (argparse.Namespace): Parsed command line arguments.

        int: Exit code.
    """
    settings = get_settings()

    logging_settings = settings.logging
    if args.log_level:
        logging_settings = logging_settings.model_copy(update={"log_level": args.log_level})
    setup_logging(settings=logging_settings)

    pause = get_pause_policy(settings.cli)

    if not args.paths:
        print(
            "No files were specified. Pass segment JSON files and image files as arguments.",
            file=sys.stderr,
        )
        exit_code = ExitCode.NO_FILES
    else:
        cancellation = CancellationToken()
        paths = [Path(p).absolute() for p in args.paths]
        with cancel_on_interrupt(cancellation):
            exit_code = snip(
                paths=paths,
                registry=build_registry(settings),
                cancellation=cancellation,
            )

    pause(exit_code)
    return int(exit_code)


def run_schema(args: argparse.Namespace) -> int:
    """
    Print the segment definition JSON schema.

    Args:
        args (argparse.Namespace): Parsed command line arguments.

        int: Exit code (0 for success).
    """
    print(json.dumps(segment_list_schema(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
