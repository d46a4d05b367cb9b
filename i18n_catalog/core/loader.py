"""
Load a directory of per-language JSON catalogs into flat stores.

Every ``<code>.json`` file below the directory contributes one language. Files
may nest objects (i18next style); the nesting levels are folded into dotted
keys, so ``{"tyson": {"defeated": "..."}}`` is stored under ``tyson.defeated``.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from i18n_catalog.core.errors import (
    FormatError,
    NamingError,
    ParseError,
    ReadError,
    StructureError,
    ValueTypeError,
)
from i18n_catalog.core.key import Key
from i18n_catalog.core.language import Language
from i18n_catalog.core.placeholders import Intermediate, parse_intermediates

logger = logging.getLogger(__name__)

EXTENSION = ".json"


@dataclass(frozen=True)
class Translation:
    """Raw message plus the intermediates found in it."""

    message: str
    intermediates: tuple[Intermediate, ...] = field(default_factory=tuple)


Store = dict[Key, Translation]


def _object_pairs(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    # Plain json.loads keeps the last of duplicate members without notice.
    obj: dict[str, Any] = {}
    for name, value in pairs:
        if name in obj:
            raise StructureError(f"duplicate key {name!r}")
        obj[name] = value
    return obj


def _read_tree(path: Path, lang: Language) -> dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(f"{exc} for {lang!r}") from exc

    try:
        data = json.loads(raw, object_pairs_hook=_object_pairs)
    except json.JSONDecodeError as exc:
        raise ParseError(f"{exc} for {lang!r}") from exc
    except StructureError as exc:
        raise StructureError(f"{exc} for {lang!r}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ParseError(f"expected a JSON object, got {type(data).__name__} for {lang!r}")
    return data


def flatten(data: dict[str, Any], store: Store, root: Key = Key("")) -> None:
    """
    Fold the nested object ``data`` into ``store`` using dotted keys below ``root``.

    Only strings (translations) and non-empty objects (grouping levels) are
    accepted as values.
    """
    if not data:
        raise StructureError(f"invalid translation for {str(root)!r}")

    for name, value in data.items():
        if name == "":
            raise StructureError("invalid key, should not be empty")

        key = root.append(name)

        if isinstance(value, str):
            try:
                intermediates = parse_intermediates(value)
            except FormatError as exc:
                raise FormatError(f"{exc} with key {str(key)!r}") from exc

            # "a.b" and {"a": {"b": ...}} end up under the same key.
            if key in store:
                raise StructureError(f"duplicate key {str(key)!r}")
            store[key] = Translation(message=value, intermediates=tuple(intermediates))

        elif isinstance(value, dict):
            flatten(value, store, key)

        else:
            raise ValueTypeError(
                f"invalid type {type(value).__name__} in translation file for key {str(key)!r}, "
                "only string or objects as values allowed"
            )


def load_file(path: Path, lang: Language) -> Store:
    """Parse and flatten a single translation file."""
    data = _read_tree(path, lang)

    store: Store = {}
    try:
        flatten(data, store)
    except (StructureError, ValueTypeError, FormatError) as exc:
        raise type(exc)(f"{exc} for {lang!r}") from exc

    # An empty nested object already fails above; this guards the store itself.
    if not store:
        raise StructureError(f"no translations found for {lang!r}")
    return store


def language_for(path: Path) -> Language:
    """Derive the language from ``<code>.json``; NamingError unless two letters."""
    # Not Path.stem: a file named just ".json" must fail here, not be skipped.
    stem = path.name[: -len(EXTENSION)]
    lang = Language.normalize(stem)
    if not lang.valid:
        raise NamingError(
            f"invalid file naming scheme {stem!r}, allowed are only two letter codes"
        )
    return lang


def _walk_error(exc: OSError) -> None:
    raise ReadError(f"cannot read {exc.filename}: {exc.strerror or exc}") from exc


def _catalog_files(root: Path) -> list[Path]:
    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_walk_error):
        dirnames.sort()
        for name in sorted(filenames):
            if not name.endswith(EXTENSION):
                logger.debug("Skipping non-catalog file %s", os.path.join(dirpath, name))
                continue
            files.append(Path(dirpath, name))
    return files


def load_directory(directory: str | Path) -> dict[Language, Store]:
    """
    Walk ``directory`` recursively and load every ``.json`` file in it.

    Directories and other files are skipped. Any error, including an
    unreadable subdirectory, aborts the whole walk.
    """
    root = Path(directory)
    if not root.exists():
        raise ReadError(f"translations directory not found: {root}")
    if not root.is_dir():
        raise ReadError(f"translations path is not a directory: {root}")

    stores: dict[Language, Store] = {}
    sources: dict[Language, Path] = {}

    for path in _catalog_files(root):
        lang = language_for(path)
        if lang in sources:
            raise NamingError(
                f"duplicate translation file for {lang!r}: {sources[lang]} and {path}"
            )

        stores[lang] = load_file(path, lang)
        sources[lang] = path
        logger.debug("Loaded %d translations for %r from %s", len(stores[lang]), lang, path)

    return stores
