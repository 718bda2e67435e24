"""
Purpose:
- Error kinds raised inside the scanner and the short Polish messages shown to the user.
- Every error is caught at the Orchestrator boundary and turned into a Failed status.
"""

from __future__ import annotations
from enum import Enum
from typing import Optional

class ErrorKind(str, Enum):
    NO_IMAGE_SELECTED = "no_image_selected"
    PRECONDITION = "precondition"
    TRANSPORT = "transport"
    EMPTY_RESPONSE = "empty_response"
    ENCODING = "encoding"
    UNEXPECTED = "unexpected"

class ScannerError(Exception):
    kind: ErrorKind = ErrorKind.UNEXPECTED
    user_message: str = "Wystąpił błąd. Spróbuj ponownie."

class NoImageSelected(ScannerError):
    kind = ErrorKind.NO_IMAGE_SELECTED
    user_message = "Proszę wybrać zdjęcie jedzenia."

class PreconditionError(ScannerError):
    kind = ErrorKind.PRECONDITION
    user_message = "Proszę najpierw zeskanować jedzenie."

class TransportError(ScannerError):
    """Non-2xx answer from the AI endpoint."""
    kind = ErrorKind.TRANSPORT

    def __init__(self, status_code: int, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"Błąd API: {status_code} {reason}".rstrip())

class EmptyResponseError(ScannerError):
    kind = ErrorKind.EMPTY_RESPONSE
    user_message = "Brak odpowiedzi od AI. Spróbuj ponownie."

class EncodingError(ScannerError):
    kind = ErrorKind.ENCODING
    user_message = "Nie udało się odczytać zdjęcia. Spróbuj ponownie."

def status_code_of(exc: BaseException) -> Optional[int]:
    return getattr(exc, "status_code", None)
