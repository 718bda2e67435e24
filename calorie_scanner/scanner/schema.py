"""
Purpose:
- Data model for one scanning session: the selected image, its encoding,
  the current AI answer and the request status.
- The status is a single tagged value (Idle / InFlight / Succeeded / Failed),
  so "at most one result kind visible at a time" holds by construction.
"""

from __future__ import annotations
import base64
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .errors import ErrorKind

class ResultKind(str, Enum):
    ANALYSIS = "analysis"
    RECIPE = "recipe"
    ALTERNATIVE = "alternative"

class RequestState(str, Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    ERROR = "error"

    @property
    def accepts_actions(self) -> bool:
        # an error is surfaced, but the user may act again right away
        return self is not RequestState.IN_FLIGHT

@dataclass(frozen=True)
class SelectedImage:
    data: bytes = field(repr=False)
    mime_type: str
    filename: Optional[str] = None

    @property
    def data_url(self) -> str:
        """Preview form of the image for the page."""
        return f"data:{self.mime_type};base64,{base64.b64encode(self.data).decode('ascii')}"

@dataclass(frozen=True)
class EncodedPayload:
    data: str = field(repr=False)   # base64, no data: prefix
    mime_type: str

@dataclass(frozen=True)
class AnalysisResult:
    text: str
    kind: ResultKind

# --- Status (tagged union) ---------------------------------------------------

@dataclass(frozen=True)
class Idle:
    pass

@dataclass(frozen=True)
class InFlight:
    kind: ResultKind

@dataclass(frozen=True)
class Succeeded:
    result: AnalysisResult

@dataclass(frozen=True)
class Failed:
    kind: ErrorKind
    message: str                       # Polish, shown to the user
    detail: Optional[str] = None       # diagnostic text, e.g. "Błąd API: 500 ..."
    status_code: Optional[int] = None

ScanStatus = Union[Idle, InFlight, Succeeded, Failed]

@dataclass(frozen=True)
class ScanSession:
    image: Optional[SelectedImage] = None
    status: ScanStatus = field(default_factory=Idle)
    # bumped on every new image; a request answers only for the generation it started in
    generation: int = 0

    @property
    def result(self) -> Optional[AnalysisResult]:
        return self.status.result if isinstance(self.status, Succeeded) else None

    @property
    def error(self) -> Optional[Failed]:
        return self.status if isinstance(self.status, Failed) else None

    @property
    def request_state(self) -> RequestState:
        if isinstance(self.status, InFlight):
            return RequestState.IN_FLIGHT
        if isinstance(self.status, Failed):
            return RequestState.ERROR
        return RequestState.IDLE
