from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel

from i18n_catalog.core.errors import ArgumentError, TranslationLookupError
from i18n_catalog.core.translations import Translations

router = APIRouter(prefix="/api/i18n", tags=["i18n"])


class LanguagesResponse(BaseModel):
    """Loaded languages and the configured fallback."""

    default: str
    languages: list[str]


class TranslationResponse(BaseModel):
    """A rendered translation; `text` is HTML with escaped parameter values."""

    lang: str
    key: str
    text: str


def _catalog(request: Request) -> Translations:
    return request.app.state.translations


@router.get("/languages", response_model=LanguagesResponse)
def list_languages(request: Request) -> LanguagesResponse:
    """Languages present in the loaded catalog."""
    translations = _catalog(request)
    return LanguagesResponse(
        default=str(translations.default_language),
        languages=translations.languages(),
    )


@router.get("/translate/{key}", response_model=TranslationResponse)
def translate_key(key: str, request: Request) -> TranslationResponse:
    """
    Render a single translation.

    The request language comes from LocaleMiddleware; every other query
    parameter is passed as a placeholder value:

        GET /api/i18n/translate/greeting?lang=de&name=Ada
        { "lang": "de", "key": "greeting", "text": "Hallo Ada" }
    """
    translator = _catalog(request).for_language(request.state.lang)
    values = {name: value for name, value in request.query_params.items() if name != "lang"}

    try:
        text = translator.render(key, values)
    except TranslationLookupError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except ArgumentError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    return TranslationResponse(lang=str(translator.language), key=key, text=str(text))
