from .output_lines import split_output_lines
from .package_types import NO_DESCRIPTION, PackageRecord


def parse_flatpak_search(text: str, term: str) -> list[PackageRecord]:
    """Parses tab-separated `flatpak search` output into records.

    The first line is a column header and is always dropped. Each row is split
    into at most three fields: name, a secondary column, and the description
    (which keeps any further tabs). `flatpak` also matches on fields other than
    the name, so rows whose name does not contain `term` (case-insensitive) are
    filtered out.

    Args:
        text: `flatpak search` stdout text.
        term: The search term the tool was invoked with.

    Returns:
        Matching records in output order.
    """
    needle = term.lower()

    records: list[PackageRecord] = []
    for line in split_output_lines(text)[1:]:
        if not line:
            continue

        parts = line.split("\t", 2)
        if len(parts) < 2:
            continue

        name = parts[0]
        if not name or needle not in name.lower():
            continue

        description = parts[2].strip() if len(parts) == 3 else ""
        records.append(
            PackageRecord(name=name, description=description or NO_DESCRIPTION)
        )
    return records
