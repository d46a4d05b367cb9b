# ruff: noqa: E402
import json
import sys
from pathlib import Path

# Ensure project root on sys.path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest
from fastapi.testclient import TestClient

from i18n_catalog.core.config import Settings
from i18n_catalog.main import create_app


@pytest.fixture
def write_catalog(tmp_path: Path):
    """
    Write translation files into a fresh directory.

    Values are dumped as JSON unless they are already strings, which lets
    tests provide deliberately broken file contents.
    """

    def _write(files: dict[str, object]) -> Path:
        for name, content in files.items():
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            text = content if isinstance(content, str) else json.dumps(content, ensure_ascii=False)
            path.write_text(text, encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture
def catalog_dir(write_catalog) -> Path:
    return write_catalog(
        {
            "en.json": {
                "hello": "Hello {{name}}",
                "plain": "<b>Static</b> text",
                "tyson": {"defeated": "{{boxer}} was defeated"},
                "twice": "{{a}} and {{a}}",
            },
            "de.json": {
                "hello": "Hallo {{name}}",
                "tyson": {"defeated": "{{boxer}} wurde besiegt"},
            },
        }
    )


@pytest.fixture
def client(catalog_dir: Path):
    app = create_app(Settings(I18N_DIR=catalog_dir, DEFAULT_LOCALE="en"))
    with TestClient(app) as c:
        yield c
