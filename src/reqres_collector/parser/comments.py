"""Handler comment lookup.

Finds the definition of an action inside its controller source file and
returns the block of comment lines written directly above it.
"""

import logging
import re

from reqres_collector.collector.base import NOT_FOUND
from reqres_collector.config import CollectorConfig

logger = logging.getLogger(__name__)


def get_action_comments(controller: str, action: str, config: CollectorConfig | None = None) -> list[str]:
    """Return the stripped comment lines above `def <action>`, in source order.

    Returns ["not found"] when the controller file cannot be read or does not
    define the action.
    """
    config = config or CollectorConfig()
    file_path = config.controller_file(controller)

    try:
        lines = file_path.read_text(encoding="utf-8").splitlines()
    except (OSError, ValueError) as e:
        logger.debug("Controller source %s unavailable: %s", file_path, e)
        return [NOT_FOUND]

    action_line = _find_action_line(lines, action)
    if action_line is None:
        logger.debug("No definition of %r in %s", action, file_path)
        return [NOT_FOUND]

    return _comments_above(lines, action_line, config.comment_marker)


def _find_action_line(lines: list[str], action: str) -> int | None:
    pattern = re.compile(rf"^\s*(?:async\s+)?def\s+{re.escape(action)}\b")
    for index, line in enumerate(lines):
        if pattern.match(line):
            return index
    return None


def _comments_above(lines: list[str], action_line: int, marker: str) -> list[str]:
    comment_lines = []
    index = action_line - 1
    while index >= 0:
        line = lines[index].strip()
        # Single-line decorators sit between the comments and the def
        if line.startswith("@"):
            index -= 1
            continue
        if not line.startswith(marker):
            break
        comment_lines.append(line)
        index -= 1
    comment_lines.reverse()
    return comment_lines
