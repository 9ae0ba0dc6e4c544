"""
Pure text edits applied to module-registration files.

The workspace reads a file, passes its contents through these functions
and writes the result back; nothing here touches the file system.
"""

from ...logging_config import get_logger

logger = get_logger(__name__)


def upsert_line_after_anchor(contents: str, anchor: str, line: str) -> str:
    """
    Insert ``line`` after the last line containing ``anchor``.

    If an identical line (ignoring surrounding whitespace) is already
    present, ``contents`` is returned unchanged, so applying the same edit
    twice never duplicates it. Without any anchor line the new line is
    appended at the end. The file's line endings (LF or CRLF) are kept.

    Args:
        contents: Current file contents
        anchor: Substring marking the insertion region (e.g. ``pub mod``)
        line: Line to insert, without a trailing newline

    Returns:
        New file contents
    """
    line = line.rstrip("\r\n")
    newline = "\r\n" if "\r\n" in contents else "\n"
    lines = contents.splitlines()

    if any(existing.strip() == line.strip() for existing in lines):
        logger.debug("Line already present, skipping: %s", line)
        return contents

    anchor_index = None
    for index, existing in enumerate(lines):
        if anchor in existing:
            anchor_index = index

    if anchor_index is None:
        logger.debug("Anchor %r not found, appending: %s", anchor, line)
        lines.append(line)
    else:
        lines.insert(anchor_index + 1, line)

    trailing_newline = contents.endswith("\n") or not contents
    return newline.join(lines) + (newline if trailing_newline else "")
