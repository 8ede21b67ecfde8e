"""patternmatch CLI entry point.

Usage: patternmatch [-v] {search,profile} ...
"""
import argparse
import logging
import sys

from patternmatch.search.comparator import exact, ignore_case
from patternmatch.search.dispatch import ALGORITHMS, DEFAULT_ALGORITHM, find_all
from patternmatch.search.errors import InvalidArgumentError

log = logging.getLogger(__name__)


def _add_search_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "search",
        help="Print every position where PATTERN occurs in the text.",
    )
    p.add_argument("pattern", help="Pattern to search for.")
    source = p.add_mutually_exclusive_group()
    source.add_argument(
        "text", nargs="?", default=None,
        help="Text to search. Read from --file or stdin when omitted.",
    )
    source.add_argument(
        "--file", "-f", default=None,
        help="Read the text from this file (UTF-8).",
    )
    p.add_argument(
        "--algorithm", "-a", choices=sorted(ALGORITHMS),
        default=DEFAULT_ALGORITHM,
        help=f"Search algorithm (default: {DEFAULT_ALGORITHM})",
    )
    p.add_argument(
        "--ignore-case", "-i", action="store_true",
        help="Compare symbols case-insensitively.",
    )
    p.add_argument(
        "--count", "-c", action="store_true",
        help="Print only the number of matches.",
    )


def _add_profile_parser(subparsers: argparse._SubParsersAction) -> None:
    from patternmatch.profiling.corpus import ALPHABETS

    p = subparsers.add_parser(
        "profile",
        help="Benchmark all algorithms on a generated workload.",
    )
    p.add_argument(
        "--length", type=int, default=100_000,
        help="Text length in symbols (default: 100000)",
    )
    p.add_argument(
        "--pattern-length", type=int, default=8,
        help="Pattern length in symbols (default: 8)",
    )
    p.add_argument(
        "--alphabet", choices=sorted(ALPHABETS), default="lower",
        help="Symbol alphabet for the text (default: lower)",
    )
    p.add_argument(
        "--occurrences", type=int, default=50,
        help="Planted pattern occurrences (default: 50)",
    )
    p.add_argument(
        "--seed", type=int, default=42,
        help="RNG seed for reproducible runs (default: 42)",
    )
    p.add_argument(
        "--ignore-case", "-i", action="store_true",
        help="Benchmark with the case-insensitive comparator.",
    )


def _read_text(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if args.file is not None:
        with open(args.file, encoding="utf-8") as f:
            return f.read()
    return sys.stdin.read()


def _run_search(args: argparse.Namespace) -> int:
    try:
        text = _read_text(args)
    except (OSError, UnicodeDecodeError) as exc:
        source = args.file or "<stdin>"
        print(f"patternmatch: cannot read {source}: {exc}", file=sys.stderr)
        return 1

    comparator = ignore_case if args.ignore_case else exact
    try:
        matches = find_all(args.pattern, text, args.algorithm, comparator)
    except InvalidArgumentError as exc:
        print(f"patternmatch: {exc}", file=sys.stderr)
        return 2

    if args.count:
        print(len(matches))
    else:
        for pos in matches:
            print(pos)
    return 0


def _run_profile(args: argparse.Namespace) -> int:
    from patternmatch.profiling.harness import run_benchmark
    from patternmatch.profiling.report import format_report

    try:
        result = run_benchmark(
            text_length=args.length,
            pattern_length=args.pattern_length,
            alphabet=args.alphabet,
            occurrences=args.occurrences,
            seed=args.seed,
            case_insensitive=args.ignore_case,
        )
    except ValueError as exc:
        print(f"patternmatch: {exc}", file=sys.stderr)
        return 2
    print(format_report(result))
    return 0 if result.agree else 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="patternmatch",
        description="Exact substring search with KMP, Boyer-Moore and Rabin-Karp.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_search_parser(subparsers)
    _add_profile_parser(subparsers)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )

    if args.command is None:
        parser.print_help()
        return 0

    log.debug("command=%s", args.command)
    if args.command == "search":
        return _run_search(args)
    return _run_profile(args)


if __name__ == "__main__":
    sys.exit(main())
