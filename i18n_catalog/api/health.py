from fastapi import APIRouter, Request

# Health router kept prefix-free to expose exactly /health and /health/ready
router = APIRouter(tags=["health"])


@router.get("/health", summary="Liveness probe")
def health() -> dict:
    """Return a simple OK payload to indicate the app is alive."""
    return {"status": "ok"}


@router.get("/health/ready", summary="Readiness probe")
def ready(request: Request) -> dict:
    """
    Return a readiness payload with the loaded languages.
    create_app() only finishes with a loaded catalog, so an app that answers is ready.
    """
    translations = request.app.state.translations
    return {
        "status": "ready",
        "ready": True,
        "default_language": str(translations.default_language),
        "languages": translations.languages(),
    }
