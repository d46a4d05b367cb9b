#!/usr/bin/env python3
"""
CLI utility to validate a directory of translation catalogs.

Loads the directory exactly like the application does and reports the
number of translations per language.

Examples:
    python tools/check_catalogs.py
    python tools/check_catalogs.py path/to/locales --default-language de
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Local imports
# The tool is meant to be run from repository root. Adjust sys.path for i18n_catalog/*.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from i18n_catalog.core.config import get_settings  # noqa: E402
from i18n_catalog.core.errors import CatalogError  # noqa: E402
from i18n_catalog.core.translations import Translations  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    settings = get_settings()
    p = argparse.ArgumentParser(description="Validate nested JSON translation catalogs")
    p.add_argument(
        "directory",
        nargs="?",
        default=str(settings.I18N_DIR),
        help="Directory scanned recursively for <code>.json files",
    )
    p.add_argument(
        "--default-language",
        default=settings.DEFAULT_LOCALE,
        help="Language that must be present (two letter code)",
    )
    p.add_argument(
        "--show-keys",
        action="store_true",
        help="List every flattened key with its placeholders",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        catalog = Translations(args.directory, args.default_language).load()
    except CatalogError as e:
        print(f"[error] {args.directory}: {e}", file=sys.stderr)
        return 1

    for lang in catalog.languages():
        store = catalog.store(lang)
        marker = " (default)" if lang == catalog.default_language else ""
        print(f"[ok] {lang}{marker}: {len(store)} translations")
        if args.show_keys:
            for key in sorted(store):
                names = ", ".join(store[key].intermediates)
                print(f"    {key}" + (f" [{names}]" if names else ""))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
