"""
Purpose:
- Expose /api/v1/scanner/* endpoints, one per user action on the page.
- Each returns the ScanView the page renders.
- While a request is in flight, action endpoints answer 409 (the page's disabled buttons).
"""

import logging
from fastapi import APIRouter, Depends, File, HTTPException, Request, Response, UploadFile, status

from ..core.settings import settings
from ..scanner.encoding import read_upload
from ..scanner.errors import EncodingError
from ..scanner.orchestrator import Orchestrator
from ..scanner.schema import ScanSession
from ..scanner.sessions import SessionStore, get_store
from ..scanner.views import ScanView, build_view

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/scanner", tags=["scanner"])

def get_orchestrator(request: Request, response: Response,
                     store: SessionStore = Depends(get_store)) -> Orchestrator:
    sid, orch = store.get_or_create(request.cookies.get(settings.session_cookie_name))
    response.set_cookie(settings.session_cookie_name, sid, httponly=True, samesite="lax")
    return orch

def _busy(orch: Orchestrator, response: Response) -> bool:
    if orch.session.request_state.accepts_actions:
        return False
    response.status_code = status.HTTP_409_CONFLICT
    return True

@router.get("/state", response_model=ScanView)
def scan_state(request: Request, store: SessionStore = Depends(get_store)):
    # read-only: an unknown or missing cookie gets the empty view, no session is created
    orch = store.get(request.cookies.get(settings.session_cookie_name))
    return build_view(orch.session if orch else ScanSession())

@router.post("/image", response_model=ScanView)
async def select_image(image: UploadFile = File(...),
                       orch: Orchestrator = Depends(get_orchestrator)):
    try:
        selected = await read_upload(image)
    except EncodingError as e:
        logger.warning("upload rejected: %s", e)
        raise HTTPException(status_code=400, detail=e.user_message)
    return build_view(orch.select_image(selected))

@router.post("/analysis", response_model=ScanView)
async def run_analysis(response: Response, orch: Orchestrator = Depends(get_orchestrator)):
    if _busy(orch, response):
        return build_view(orch.session)
    return build_view(await orch.run_analysis())

@router.post("/recipe", response_model=ScanView)
async def run_recipe(response: Response, orch: Orchestrator = Depends(get_orchestrator)):
    if _busy(orch, response):
        return build_view(orch.session)
    return build_view(await orch.run_recipe())

@router.post("/alternative", response_model=ScanView)
async def run_alternative(response: Response, orch: Orchestrator = Depends(get_orchestrator)):
    if _busy(orch, response):
        return build_view(orch.session)
    return build_view(await orch.run_alternative())
