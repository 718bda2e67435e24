# Common language: Environment/ops check that surfaces library versions and the Gemini config.
# Use this before/after upgrades to confirm no silent drift.

from fastapi import APIRouter, Depends
from ..core.settings import settings
from ..scanner.sessions import SessionStore, get_store
import sys, importlib

router = APIRouter(tags=["health"])

def _ver(modname: str) -> str:
    try:
        m = importlib.import_module(modname)
        return getattr(m, "__version__", "unknown")
    except ImportError:
        return "not-installed"

@router.get("/healthz")
def healthz(store: SessionStore = Depends(get_store)):
    return {
        "status": "ok",
        "python": sys.version.split()[0],
        "versions": {
            "fastapi": _ver("fastapi"),
            "uvicorn": _ver("uvicorn"),
            "pydantic": _ver("pydantic"),
            "pydantic_settings": _ver("pydantic_settings"),
            "httpx": _ver("httpx"),
        },
        "config": {
            "gemini_base_url": settings.gemini_base_url,
            "gemini_model": settings.gemini_model,
            "gemini_timeout_s": settings.gemini_timeout_s,
            "response_language": settings.response_language,
        },
        "env_keys_present": {
            # never echo the key itself
            "GEMINI_API_KEY": bool(settings.gemini_api_key),
        },
        "sessions": len(store),
    }
