from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["ui"])


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """
    Render the landing page in the request language.
    Uses the shared Jinja2Templates instance; `t()` is bound per request.
    """
    templates = request.app.state.templates
    translations = request.app.state.translations
    t = translations.for_language(request.state.lang)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "t": t,
            "lang": str(t.language),
            "languages": translations.languages(),
            "visitor": request.query_params.get("name", ""),
        },
    )
