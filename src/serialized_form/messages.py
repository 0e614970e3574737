"""Resource bundle with positional content placeholders."""

import re

from serialized_form.config import DEFAULT_MESSAGES
from serialized_form.models.node import DocumentNode

_PLACEHOLDER_RE = re.compile(r"\{(\d+)\}")


class Messages:
    """Look up message templates by key and substitute content arguments.

    Arguments are spliced in as separate content items, so link nodes keep
    their structure instead of being flattened to text. A missing key raises
    KeyError. Each placeholder index may appear at most once in a template,
    since a node can only be spliced into one place.
    """

    def __init__(self, templates: dict[str, str] | None = None) -> None:
        self._templates = dict(DEFAULT_MESSAGES if templates is None else templates)

    def get_text(self, key: str) -> str:
        return self._templates[key]

    def get_content(self, key: str, *args: DocumentNode | str) -> tuple[DocumentNode | str, ...]:
        template = self._templates[key]
        parts: list[DocumentNode | str] = []
        used: set[int] = set()
        # re.split with one group alternates literal text and placeholder indices.
        for i, piece in enumerate(_PLACEHOLDER_RE.split(template)):
            if i % 2 == 0:
                if piece:
                    parts.append(piece)
                continue
            index = int(piece)
            if index >= len(args):
                msg = f"Message {key!r} needs argument {{{index}}}, got {len(args)} argument(s)"
                raise ValueError(msg)
            if index in used:
                msg = f"Message {key!r} uses placeholder {{{index}}} more than once"
                raise ValueError(msg)
            used.add(index)
            parts.append(args[index])
        return tuple(parts)
