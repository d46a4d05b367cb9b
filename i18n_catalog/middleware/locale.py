from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from i18n_catalog.core.language import Language


def _from_accept_language(header: str | None) -> str:
    # "de-CH,de;q=0.9,en;q=0.8" -> "de"
    first = (header or "").split(",", 1)[0]
    return first.split(";", 1)[0].split("-", 1)[0]


class LocaleMiddleware(BaseHTTPMiddleware):
    """
    Pick the request language and store it on ``request.state.lang``.

    Order: ``?lang=`` query, language cookie, first Accept-Language entry.
    Codes that are invalid or not loaded fall back to the default language.
    An explicit ``?lang=`` is remembered in the cookie.
    """

    def __init__(self, app, cookie_name: str = "lang") -> None:
        super().__init__(app)
        self.cookie_name = cookie_name

    async def dispatch(self, request: Request, call_next):
        translations = request.app.state.translations
        raw = (
            request.query_params.get("lang")
            or request.cookies.get(self.cookie_name)
            or _from_accept_language(request.headers.get("accept-language"))
        )
        lang = Language.normalize(raw)
        if not lang.valid or lang not in translations.translations:
            lang = translations.default_language
        request.state.lang = str(lang)

        response: Response = await call_next(request)
        if "lang" in request.query_params:
            response.set_cookie(
                self.cookie_name,
                str(lang),
                max_age=60 * 60 * 24 * 365,
                httponly=False,
                samesite="lax",
            )
        return response
