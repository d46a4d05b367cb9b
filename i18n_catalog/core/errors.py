"""
Error taxonomy for catalog loading and rendering.

Load-time errors derive from CatalogError and abort the whole load.
Render-time errors are per call and never touch the loaded catalog.
"""

from __future__ import annotations


class I18nError(Exception):
    """Base class for every error raised by this package."""


class CatalogError(I18nError):
    """Raised while loading a translations directory."""


class ConfigError(CatalogError, ValueError):
    """Raised when the configured default language is not a two letter code."""


class ReadError(CatalogError, OSError):
    """Raised when the directory or a translation file cannot be read."""


class NamingError(CatalogError, ValueError):
    """Raised when a file name does not map to a usable language code."""


class ParseError(CatalogError, ValueError):
    """Raised when a translation file is not a JSON object."""


class StructureError(CatalogError, ValueError):
    """Raised for empty objects, empty or duplicate keys and empty stores."""


class ValueTypeError(CatalogError, TypeError):
    """Raised when a translation value is neither a string nor an object."""


class FormatError(CatalogError, ValueError):
    """Raised when placeholder delimiters in a message are malformed."""


class MissingDefaultError(CatalogError):
    """Raised when no translations exist for the default language."""


class TranslationLookupError(I18nError, LookupError):
    """Raised when a language or key is not part of the loaded catalog."""


class UnknownLanguageError(TranslationLookupError):
    pass


class UnknownKeyError(TranslationLookupError):
    pass


class ArgumentError(I18nError, ValueError):
    """Raised for malformed translate() parameters."""


class MissingParameterError(ArgumentError):
    """Raised when a placeholder of the message has no value."""

    def __init__(self, key: str, name: str) -> None:
        super().__init__(f"parameter required for intermediate in translation {key!r}: {name!r}")
        self.key = key
        self.name = name
