"""Placeholder substitution for note templates.

A placeholder is any run of characters between a ``<`` and the next ``>``:

    id: <id>          ->  id: 1718000000
    title: <title>    ->  title: My note

Unknown names and a ``<`` with no closing ``>`` pass through literally.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from zet.models import Note

DEFAULT_TEMPLATE = """\
---
id: <id>
title: <title>
created: <created>
tags: []
links: []
backlinks: []
---
# <title>

Content goes here.
"""


class _State(enum.Enum):
    LITERAL = enum.auto()
    IN_PLACEHOLDER = enum.auto()


def substitute(template: str, substitutions: Mapping[str, str]) -> str:
    """Replace each known ``<name>`` in template with substitutions[name].

    Scans left to right. On an unknown name only the ``<`` is emitted and
    scanning resumes right after it, so ``name>`` is re-read as text and may
    itself contain further placeholders.
    """
    out: list[str] = []
    state = _State.LITERAL
    start = 0  # index of the '<' that opened the current placeholder
    i = 0
    n = len(template)

    while i < n:
        ch = template[i]
        if state is _State.LITERAL:
            if ch == "<":
                state = _State.IN_PLACEHOLDER
                start = i
            else:
                out.append(ch)
            i += 1
            continue

        if ch != ">":
            i += 1
            continue

        name = template[start + 1 : i]
        if name in substitutions:
            out.append(substitutions[name])
            i += 1
        else:
            out.append("<")
            i = start + 1
        state = _State.LITERAL

    if state is _State.IN_PLACEHOLDER:
        # No '>' after start, so nothing past it can be a placeholder either.
        out.append(template[start:])

    return "".join(out)


def note_substitutions(note: Note) -> dict[str, str]:
    """The values a new note's template is rendered with."""
    return {
        "id": note.id,
        "title": note.title,
        "created": note.created,
    }
