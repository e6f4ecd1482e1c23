"""Argument parsing functionality for cargo-prefetch."""

import argparse

from constants import Constants

HELP = """\
This command is used to download some popular dependencies into Cargo's cache.
This is useful if you plan to go offline, and you want a collection of common
crates available to use.

By default, if no options are given, it will download the top 100 most used
dependencies (--top-deps=100).
"""


def _count(value):
    """argparse type for non-negative integer counts."""
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"must be an integer: {value!r}") from exc
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value!r}")
    return number


def _add_common_options(parser):
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML)",
                        action="store",
                        type=str)
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str.upper,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default=None)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)


def _add_prefetch_parser(subparsers):
    parser = subparsers.add_parser(
        "prefetch",
        help="Download popular crates.",
        description="Download popular crates.",
        epilog=HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--list",
                        dest="LIST",
                        help="List what is downloaded instead of downloading.",
                        action="store_true")
    parser.add_argument("-v", "--verbose",
                        dest="VERBOSE",
                        help="Print some extra info to stderr.",
                        action="store_true")
    parser.add_argument("--top-deps",
                        dest="TOP_DEPS",
                        help=("Download the most frequent dependencies. "
                              "Specify a value for the number to download, default is 100."),
                        nargs="?", type=_count, const=Constants.DEFAULT_TOP_COUNT,
                        default=None, metavar="N")
    parser.add_argument("--top-downloads",
                        dest="TOP_DOWNLOADS",
                        help=("Download the most downloaded crates. "
                              "Specify a value for the number to download, default is 100."),
                        nargs="?", type=_count, const=Constants.DEFAULT_TOP_COUNT,
                        default=None, metavar="N")
    parser.add_argument("--lockfile",
                        dest="LOCKFILE",
                        help="Download all crates listed in the specified lockfile.",
                        action="store",
                        type=str)
    parser.add_argument("-f", "--format",
                        dest="OUTPUT_FORMAT",
                        help="Output format for --list (text, json or csv; default: text)",
                        action="store",
                        type=str.lower,
                        choices=["text", "json", "csv"],
                        default="text")
    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Write the --list output to a file instead of stdout",
                        action="store",
                        type=str)
    parser.add_argument("crates",
                        nargs="*",
                        help=("Specify individual crates to download. "
                              "Use the syntax `crate_name@=2.7.0` to download a specific version."))
    _add_common_options(parser)


def _add_rank_parser(subparsers):
    parser = subparsers.add_parser(
        "rank",
        help="Rank crates by dependency frequency from a crates.io index checkout.",
        description=("Scan a local crates.io index checkout and print the most "
                     "depended-upon crates as a top_crates table."),
    )
    parser.add_argument("index_path",
                        metavar="INDEX_PATH",
                        help="Path to a local checkout of the crates.io index")
    parser.add_argument("--top",
                        dest="TOP",
                        help="Number of crates to keep (default: 1000)",
                        type=_count,
                        default=None,
                        metavar="K")
    parser.add_argument("-f", "--format",
                        dest="OUTPUT_FORMAT",
                        help="python (top_crates module source, default) or text",
                        type=str.lower,
                        choices=["python", "text"],
                        default="python")
    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Write the table to a file instead of stdout",
                        action="store",
                        type=str)
    _add_common_options(parser)


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="cargo-prefetch",
        description="Prefetch popular crates into Cargo's local cache",
        add_help=True,
    )
    subparsers = parser.add_subparsers(dest="action", metavar="COMMAND")
    subparsers.required = True
    _add_prefetch_parser(subparsers)
    _add_rank_parser(subparsers)
    return parser.parse_args(argv)
