"""Annotation comment parser.

Handlers are documented with tagged comments directly above their
definition:

    # @description Returns a single user.
    #   Admins also see the email address.
    # @param id required Integer the user id
    # @param fields optional Array
    #   which attributes to include
    def show(self, id):
        ...

The comment lines are read by a small scanner with three states: seeking a
tag, accumulating the description, and accumulating a param block. Any tag
line ends the block before it. Only the first @description block is kept;
@param and @params are treated alike.
"""

import re
from functools import lru_cache

from pydantic import BaseModel

from reqres_collector.collector.base import ParamDoc
from reqres_collector.config import PARAM_IMPORTANCES, PARAM_TYPES, CollectorConfig
from reqres_collector.parser.comments import get_action_comments

SEEKING = "seeking"
DESCRIPTION = "description"
PARAM = "param"

TAG_PATTERN = re.compile(r"@(?P<tag>description|params?)\b\s*")


class ActionDocs(BaseModel):
    """Documentation scraped for one controller action."""

    description: str = ""
    params: list[ParamDoc] = []


def get_action_docs(controller: str, action: str, config: CollectorConfig | None = None) -> ActionDocs:
    """Read and parse the annotation comments of a controller action."""
    config = config or CollectorConfig()
    comment_lines = get_action_comments(controller, action, config)
    return parse_comment_lines(comment_lines, config)


def get_action_description(controller: str, action: str, config: CollectorConfig | None = None) -> str:
    return get_action_docs(controller, action, config).description


def get_action_params(controller: str, action: str, config: CollectorConfig | None = None) -> list[ParamDoc]:
    return get_action_docs(controller, action, config).params


def parse_comment_lines(comment_lines: list[str], config: CollectorConfig | None = None) -> ActionDocs:
    """Derive the description and param docs from raw comment lines."""
    config = config or CollectorConfig()
    pattern = build_param_pattern(tuple(config.param_importances), tuple(config.param_types))

    description_parts: list[str] = []
    param_blocks: list[str] = []
    seen_description = False
    state = SEEKING

    for line in comment_lines:
        text = _strip_marker(line, config.comment_marker)
        tag = TAG_PATTERN.match(text)

        if tag:
            rest = text[tag.end():].strip()
            if tag.group("tag") != "description":
                param_blocks.append(rest)
                state = PARAM
            elif not seen_description:
                seen_description = True
                description_parts.append(rest)
                state = DESCRIPTION
            else:
                state = SEEKING
            continue

        if state == DESCRIPTION:
            description_parts.extend(["\n", text])
        elif state == PARAM:
            param_blocks[-1] = _append_line(param_blocks[-1], text)

    return ActionDocs(
        description=" ".join(description_parts),
        params=[parse_param_block(block, pattern) for block in param_blocks],
    )


def parse_param_block(block: str, pattern: re.Pattern | None = None) -> ParamDoc:
    """Split a param block into name, importance, type and description.

    A block that does not match keeps its full text as the description.
    """
    if pattern is None:
        pattern = build_param_pattern(tuple(PARAM_IMPORTANCES), tuple(PARAM_TYPES))

    match = pattern.match(block)
    if not match:
        return ParamDoc(description=block)

    return ParamDoc(
        name=match.group("name"),
        required=match.group("required"),
        type=match.group("type"),
        description=match.group("description"),
    )


@lru_cache(maxsize=16)
def build_param_pattern(importances: tuple[str, ...], types: tuple[str, ...]) -> re.Pattern:
    """Compile the param regex for the given vocabularies."""
    return re.compile(
        r"(?P<name>[a-zA-Z0-9_\[\]]+)?\s*"
        rf"(?:(?P<required>{_alternation(importances)})\b)?\s*"
        rf"(?:(?P<type>{_alternation(types)})\b)?\s*"
        r"(?P<description>.*)",
        re.DOTALL,
    )


def _alternation(words: tuple[str, ...]) -> str:
    if not words:
        return "(?!)"
    # Longest first so DateTime is not read as Date
    return "|".join(re.escape(w) for w in sorted(words, key=len, reverse=True))


def _strip_marker(line: str, marker: str) -> str:
    text = line.strip()
    if text.startswith(marker):
        text = text[len(marker):]
    return text.strip()


def _append_line(block: str, line: str) -> str:
    if not block.strip():
        return block + line
    return f"{block}\n{line}"
