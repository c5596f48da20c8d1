from .output_lines import split_output_lines
from .package_types import NO_DESCRIPTION, PackageRecord


def _description(line: str) -> str:
    """Returns the trimmed description, or the placeholder for blank lines."""
    text = line.strip()
    return text or NO_DESCRIPTION


def _parse_header(header: str) -> str | None:
    """Extracts the package name from a `repo/name version [flags]` header.

    Returns:
        The package name, or None if the header does not have the expected shape.
    """
    _, slash, rest = header.partition("/")
    if not slash:
        return None

    name, space, _ = rest.partition(" ")
    if not space or not name:
        return None
    return name


def parse_repo_search(text: str) -> list[PackageRecord]:
    """Parses `pacman -Ss` / `yay -Ss` output into records.

    Both tools print two lines per hit: a `repo/name version ...` header and an
    indented description. Lines are paired in order; a trailing unpaired line and
    pairs with a malformed header are skipped.
    """
    lines = [line for line in split_output_lines(text) if line]

    records: list[PackageRecord] = []
    for header, body in zip(lines[0::2], lines[1::2]):
        name = _parse_header(header)
        if name is None:
            continue
        records.append(PackageRecord(name=name, description=_description(body)))
    return records
