"""
Translation catalog and renderers.

``Translations`` holds the configuration (directory, default language and an
optional resolver for the current language) and, once loaded, one flat store
per language. It renders messages in two ways:

- dynamically: ``translations.translate(key, ...)`` asks the resolver for the
  language on every call and falls back to the default language;
- fixed: ``translations.for_language("de")`` returns a ``Translator`` bound to
  one language, chosen once.

Rendered messages are ``markupsafe.Markup``: parameter values are escaped,
the message text itself is trusted HTML written by translators.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from markupsafe import Markup, escape

from i18n_catalog.core.errors import (
    ArgumentError,
    ConfigError,
    MissingDefaultError,
    MissingParameterError,
    UnknownKeyError,
    UnknownLanguageError,
)
from i18n_catalog.core.key import Key
from i18n_catalog.core.language import Language
from i18n_catalog.core.loader import Store, Translation, load_directory
from i18n_catalog.core.placeholders import Intermediate

logger = logging.getLogger(__name__)

LanguageResolver = Callable[[], str]


def create_intermediate_lookup(params: tuple[Any, ...]) -> dict[Intermediate, Any]:
    """
    Turn alternating ``name, value`` parameters into a lookup.

    >>> create_intermediate_lookup(("name", "Ada", "count", 3))
    {'name': 'Ada', 'count': 3}
    """
    if len(params) % 2 != 0:
        raise ArgumentError(f"expected name/value pairs, got {len(params)} parameters")

    lookup: dict[Intermediate, Any] = {}
    for name, value in zip(params[::2], params[1::2]):
        if not isinstance(name, str):
            raise ArgumentError(f"parameter names must be strings, got {type(name).__name__}")
        lookup[Intermediate(name)] = value
    return lookup


def stringify(value: Any) -> str:
    """Textual form of a parameter value before escaping."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _substitute(key: Key, translation: Translation, lookup: Mapping[str, Any]) -> Markup:
    message = translation.message
    for intermediate in translation.intermediates:
        if intermediate not in lookup:
            raise MissingParameterError(key, intermediate)

        value = str(escape(stringify(lookup[intermediate])))
        # Only the exact token is replaced; a repeated name finds nothing left to replace.
        message = message.replace(intermediate.token, value)

    return Markup(message)


def _lookup(translations: Mapping[Language, Store], lang: Language, key: Key) -> Translation:
    store = translations.get(lang)
    if store is None:
        raise UnknownLanguageError(f"unknown language {str(lang)!r}")
    translation = store.get(key)
    if translation is None:
        raise UnknownKeyError(f"unknown key {str(key)!r}")
    return translation


@dataclass(frozen=True)
class Translations:
    """Per-language translation stores loaded from a directory of JSON files."""

    directory: str | Path
    default_language: Language
    language_fn: LanguageResolver | None = None
    translations: Mapping[Language, Store] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "default_language", Language.normalize(self.default_language))

    def load(self) -> Translations:
        """
        Read every translation file of the directory.

        Returns a new, loaded catalog; ``self`` is never modified, so a failed
        load leaves the previous catalog usable.

        Raises:
            ConfigError: invalid default language (the directory is not touched).
            CatalogError: any read, naming, parse, structure or format problem.
            MissingDefaultError: no file for the default language.
        """
        if not self.default_language.valid:
            raise ConfigError("invalid default language, must follow two letter code")

        stores = load_directory(self.directory)

        if self.default_language not in stores:
            raise MissingDefaultError(
                f"no translations found for default language {str(self.default_language)!r}"
            )

        logger.info(
            "Loaded translations from %s: %s",
            self.directory,
            ", ".join(f"{lang}={len(store)}" for lang, store in sorted(stores.items())),
        )
        return replace(self, translations=stores)

    @property
    def loaded(self) -> bool:
        return bool(self.translations)

    def languages(self) -> list[str]:
        return sorted(str(lang) for lang in self.translations)

    def store(self, lang: str) -> Store:
        store = self.translations.get(Language.normalize(lang))
        if store is None:
            raise UnknownLanguageError(f"unknown language {lang!r}")
        return store

    def current_language(self) -> Language:
        """Language chosen by the resolver, or the default when it gives nothing valid."""
        if self.language_fn is not None:
            target = Language.normalize(self.language_fn())
            if target.valid:
                return target
        return self.default_language

    def translate(self, key: str, *params: Any) -> Markup:
        """
        Render ``key`` in the current language.

        ``params`` alternate placeholder names and values:
        ``translate("greeting", "name", user.name)``.
        """
        lookup = create_intermediate_lookup(params)
        return self.render(key, lookup)

    def render(self, key: str, values: Mapping[str, Any]) -> Markup:
        return self._render(self.current_language(), Key(key), values)

    def for_language(self, code: str | None) -> Translator:
        """
        Bind a renderer to ``code``.

        Falls back to the default language when ``code`` is not a valid
        two letter code or has no translations.
        """
        lang = Language.normalize(code)
        if not lang.valid or lang not in self.translations:
            if code:
                logger.debug("No translations for %r, using %r", code, str(self.default_language))
            lang = self.default_language
        return Translator(catalog=self, language=lang)

    def _render(self, lang: Language, key: Key, values: Mapping[str, Any]) -> Markup:
        translation = _lookup(self.translations, lang, key)
        return _substitute(key, translation, values)


@dataclass(frozen=True)
class Translator:
    """Renderer bound to a single language of a loaded catalog."""

    catalog: Translations
    language: Language

    def translate(self, key: str, *params: Any) -> Markup:
        lookup = create_intermediate_lookup(params)
        return self.render(key, lookup)

    def render(self, key: str, values: Mapping[str, Any]) -> Markup:
        return self.catalog._render(self.language, Key(key), values)

    __call__ = translate
