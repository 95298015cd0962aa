from __future__ import annotations


# A doc comment line starting with the marker would re-parse as a named
# section (`-- $name`), so it gets escaped.
DOC_SECTION_MARKER = "$"
DOC_ESCAPE = "\\"


def split_doc_string(raw: str) -> list[str]:
    """Split and normalize a doc string.

    The result is the list of lines that make up the comment. It is never
    empty: a comment with no text is a single empty line.
    """
    lines = [line.rstrip() for line in raw.split("\n")]
    while lines and lines[-1] == "":
        lines.pop()
    lines = [_escape_leading_marker(line) for line in _drop_padding_space(lines)]
    return lines or [""]


def _drop_padding_space(lines: list[str]) -> list[str]:
    # Only the first non-empty line decides whether the block is padded.
    first = next((line for line in lines if line), None)
    if first is None or not _has_padding(first):
        return lines
    return [line[1:] if line.startswith(" ") else line for line in lines]


def _has_padding(line: str) -> bool:
    # Exactly one space, not any leading space: deeper indentation is content.
    return line.startswith(" ") and not line.startswith("  ")


def _escape_leading_marker(line: str) -> str:
    if line.startswith(DOC_SECTION_MARKER):
        return DOC_ESCAPE + line
    return line
