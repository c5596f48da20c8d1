from typing import Final

from pd.core.package_types import PackageRecord, SearchResults
from pd.infra.pager import Pager

BOLD: Final[str] = "\x1b[1m"
BLUE: Final[str] = "\x1b[34m"
RED: Final[str] = "\x1b[31m"
GREEN: Final[str] = "\x1b[32m"
RESET: Final[str] = "\x1b[0m"

SYSTEM_LABEL: Final[str] = "System"
USER_LABEL: Final[str] = "User"
SANDBOXED_LABEL: Final[str] = "Sandboxed"


def format_package_count(count: int) -> str:
    """Returns "1 package" for one, otherwise "<count> packages"."""
    if count == 1:
        return "1 package"
    return f"{count} packages"


def render_summary(results: SearchResults) -> str:
    """Renders the one-line per-source hit counts, followed by a blank line."""
    counts = (
        (SYSTEM_LABEL, len(results.system)),
        (USER_LABEL, len(results.user)),
        (SANDBOXED_LABEL, len(results.sandboxed)),
    )
    summary = " | ".join(
        f"{BOLD}{label}:{RESET} {format_package_count(count)}" for label, count in counts
    )
    return f"{summary}\n\n"


def render_section(label: str, records: list[PackageRecord], color: str) -> str:
    """Renders one source's records under an underlined header.

    Returns an empty string when there are no records.
    """
    if not records:
        return ""

    parts = [
        f"{BOLD}{label} Results:{RESET}\n",
        "=" * (len(label) + 9) + "\n",
    ]
    for record in records:
        parts.append(f"{BOLD}{color}{record.name}{RESET}\n")
        parts.append(f"  {record.description}\n\n")
    return "".join(parts)


def render_report(results: SearchResults) -> str:
    """Renders the full ANSI-styled report.

    Some description producers use `~` in place of spaces, so every `~` in the
    report is turned back into a space.
    """
    report = "".join(
        (
            render_summary(results),
            render_section(SYSTEM_LABEL, results.system, BLUE),
            render_section(USER_LABEL, results.user, RED),
            render_section(SANDBOXED_LABEL, results.sandboxed, GREEN),
        )
    )
    return report.replace("~", " ")


def show_report(results: SearchResults) -> None:
    """Renders the report and displays it in the pager until the user quits.

    Raises:
        PagerError: The pager could not be started, written to, or waited on.
    """
    report = render_report(results)
    with Pager() as pager:
        pager.write(report)
