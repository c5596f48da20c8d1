import sys
from collections.abc import Sequence
from typing import Final

from pd.application.aggregator import aggregate
from pd.core.errors import PagerError, UsageError
from pd.logging import init_logger
from pd.presentation.report import show_report

USAGE: Final[str] = "Usage: pd <search-term>"


def build_search_term(args: Sequence[str]) -> str:
    """Joins the command-line arguments into one search term.

    Raises:
        UsageError: No arguments were given, or they join to an empty string.
    """
    term = " ".join(args)
    if not term:
        raise UsageError(USAGE)
    return term


def main(argv: Sequence[str] | None = None) -> int:
    """Searches every package source for the term and pages the report.

    Args:
        argv: Arguments after the program name. Defaults to `sys.argv[1:]`.

    Returns:
        The process exit code.
    """
    args = sys.argv[1:] if argv is None else argv
    try:
        term = build_search_term(args)
    except UsageError as e:
        print(e, file=sys.stderr)
        return 1

    init_logger()
    results = aggregate(term)

    try:
        show_report(results)
    except PagerError as e:
        print(f"pd: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
