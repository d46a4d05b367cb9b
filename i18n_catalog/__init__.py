from __future__ import annotations

from i18n_catalog.core.errors import (
    ArgumentError,
    CatalogError,
    ConfigError,
    FormatError,
    I18nError,
    MissingDefaultError,
    MissingParameterError,
    NamingError,
    ParseError,
    ReadError,
    StructureError,
    TranslationLookupError,
    UnknownKeyError,
    UnknownLanguageError,
    ValueTypeError,
)
from i18n_catalog.core.key import Key
from i18n_catalog.core.language import Language
from i18n_catalog.core.loader import Store, Translation
from i18n_catalog.core.placeholders import Intermediate, parse_intermediates
from i18n_catalog.core.translations import Translations, Translator

__all__ = [
    "ArgumentError",
    "CatalogError",
    "ConfigError",
    "FormatError",
    "I18nError",
    "Intermediate",
    "Key",
    "Language",
    "MissingDefaultError",
    "MissingParameterError",
    "NamingError",
    "ParseError",
    "ReadError",
    "Store",
    "StructureError",
    "Translation",
    "TranslationLookupError",
    "Translations",
    "Translator",
    "UnknownKeyError",
    "UnknownLanguageError",
    "ValueTypeError",
    "parse_intermediates",
]
