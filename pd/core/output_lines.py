def split_output_lines(text: str) -> list[str]:
    """Splits command output on newlines only.

    Unlike `str.splitlines()`, form feeds, vertical tabs and Unicode line
    separators stay inside their line. A trailing `\\r` is stripped from each
    line, and a final newline does not produce an extra empty line.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
