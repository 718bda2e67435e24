"""
Purpose:
- Pydantic model of what the page renders, so the API is self-documenting and stable.
- All user-facing strings are Polish.
"""

from __future__ import annotations
from typing import Dict, Optional
from pydantic import BaseModel

from .schema import RequestState, ResultKind, ScanSession

HEADINGS = {
    ResultKind.ANALYSIS: "Wynik analizy:",
    ResultKind.RECIPE: "Wygenerowany przepis:",
    ResultKind.ALTERNATIVE: "Zdrowsza alternatywa:",
}

class ButtonLabel(BaseModel):
    idle: str
    busy: str

BUTTON_LABELS = {
    ResultKind.ANALYSIS: ButtonLabel(idle="Skanuj jedzenie", busy="Analizuję..."),
    ResultKind.RECIPE: ButtonLabel(idle="Generuj Przepis ✨", busy="Generuję..."),
    ResultKind.ALTERNATIVE: ButtonLabel(idle="✨ Zdrowsza Alternatywa", busy="Proponuję..."),
}

class ScanView(BaseModel):
    state: RequestState
    loading: bool
    kind: Optional[ResultKind] = None
    heading: Optional[str] = None
    result: Optional[str] = None        # verbatim; the page keeps whitespace
    error: Optional[str] = None
    preview: Optional[str] = None       # data: URL of the selected image
    can_analyze: bool = False
    can_follow_up: bool = False
    # the page picks idle/busy itself, so it can switch on click before the answer
    labels: Dict[ResultKind, ButtonLabel] = BUTTON_LABELS

def build_view(session: ScanSession) -> ScanView:
    state = session.request_state
    result = session.result
    error = session.error
    return ScanView(
        state=state,
        loading=state is RequestState.IN_FLIGHT,
        kind=result.kind if result else None,
        heading=HEADINGS[result.kind] if result else None,
        result=result.text if result else None,
        error=error.message if error else None,
        preview=session.image.data_url if session.image else None,
        can_analyze=state.accepts_actions and session.image is not None,
        can_follow_up=state.accepts_actions and result is not None and result.kind is ResultKind.ANALYSIS,
    )
