from __future__ import annotations


class Language(str):
    """Two letter language code, e.g. ``en`` or ``de``."""

    @property
    def valid(self) -> bool:
        # Letters in any script count, the case is not checked here.
        return len(self) == 2 and self.isalpha()

    @classmethod
    def normalize(cls, raw: str | None) -> Language:
        return cls((raw or "").strip().lower())
