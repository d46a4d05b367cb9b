"""
Placeholder ("intermediate") parsing for translation messages.

A message such as ``"Hi {{name}}, you have {{count}} mails"`` carries the
intermediates ``name`` and ``count``. Names are trimmed and may be anything
but empty; rendering only replaces the unpadded ``{{name}}`` token.
"""

from __future__ import annotations

from i18n_catalog.core.errors import FormatError

PREFIX = "{{"
SUFFIX = "}}"


class Intermediate(str):
    """Name of a placeholder inside a translation message."""

    @property
    def token(self) -> str:
        return f"{PREFIX}{self}{SUFFIX}"


def parse_intermediates(message: str) -> list[Intermediate]:
    """
    Extract the intermediates of ``message`` in order of occurrence.

    Duplicates are kept. Raises FormatError for unbalanced delimiters,
    an unterminated placeholder or an empty name.
    """
    if message.count(PREFIX) != message.count(SUFFIX):
        raise FormatError("invalid format of intermediates")

    intermediates: list[Intermediate] = []
    # Text before the first PREFIX cannot contain a placeholder.
    for part in message.split(PREFIX)[1:]:
        end = part.find(SUFFIX)
        if end == -1:
            raise FormatError(f"invalid format of intermediates, must end with {SUFFIX}")

        intermediate = Intermediate(part[:end].strip())
        if not intermediate:
            raise FormatError("empty intermediate")
        intermediates.append(intermediate)

    return intermediates
