from __future__ import annotations

SEPARATOR = "."


class Key(str):
    """
    Full dotted path of a translation, e.g. ``tyson.defeated``.

    Keys are built fragment by fragment while walking nested catalog objects.
    """

    def append(self, fragment: str) -> Key:
        fragment = fragment.strip(SEPARATOR)
        if not fragment:
            return self
        if self:
            return Key(f"{self}{SEPARATOR}{fragment}")
        return Key(fragment)
