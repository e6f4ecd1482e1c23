"""cargo-prefetch - populate Cargo's cache with popular crates for offline use.

    Raises:
        SystemExit: With a non-zero exit code on any fatal error.

    Returns:
        int: Exit code
"""
import logging
import sys

from args import parse_args
from cli_config import load_and_apply
from common.logging_utils import add_file_handler, configure_logging
from constants import ExitCodes
from errors import FileError, PrefetchError

logger = logging.getLogger(__name__)


def report_error(exc: PrefetchError) -> None:
    """Log the error followed by its full causal chain."""
    logger.error("Error: %s", exc)
    for cause in exc.chain():
        logger.error("Caused by: %s", cause)


def run(args) -> int:
    """Dispatch to the selected subcommand."""
    if args.action == "rank":
        from cli_rank import run_rank  # pylint: disable=import-outside-toplevel
        return run_rank(args)
    from cli_prefetch import run_prefetch  # pylint: disable=import-outside-toplevel
    return run_prefetch(args)


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(getattr(args, "LOG_LEVEL", None))

    try:
        if getattr(args, "LOG_FILE", None):
            try:
                add_file_handler(args.LOG_FILE)
            except OSError as e:
                raise FileError(f"Couldn't open log file: {args.LOG_FILE}") from e
        load_and_apply(getattr(args, "CONFIG", None))
        code = run(args)
    except PrefetchError as exc:
        report_error(exc)
        sys.exit(exc.exit_code.value)
    sys.exit(code if code is not None else ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
