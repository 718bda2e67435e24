"""
Purpose:
- The one component behind the page: holds the session (image + status),
  builds prompts, calls Gemini and records the outcome.
- All state changes go through transition(); operations never raise to the caller.

Flow per action:
- check precondition (no request if it fails)
- RequestStarted -> InFlight (previous result is dropped)
- encode / prompt / one HTTP call
- RequestSucceeded or RequestFailed; InFlight never survives the call
- a new image during the call keeps InFlight; the old answer is then dropped
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from typing import Awaitable, Callable, Optional, Tuple, Union

from .encoding import encode_image
from .errors import (
    ErrorKind,
    NoImageSelected,
    PreconditionError,
    ScannerError,
    status_code_of,
)
from .gemini import GeminiClient
from .prompts import build_alternative_prompt, build_analysis_prompt, build_recipe_prompt
from .schema import (
    AnalysisResult,
    EncodedPayload,
    Failed,
    Idle,
    InFlight,
    ResultKind,
    ScanSession,
    SelectedImage,
    Succeeded,
)

logger = logging.getLogger(__name__)

# --- Events ------------------------------------------------------------------

@dataclass(frozen=True)
class ImageSelected:
    image: SelectedImage

@dataclass(frozen=True)
class RequestStarted:
    kind: ResultKind

@dataclass(frozen=True)
class RequestSucceeded:
    result: AnalysisResult
    generation: int

@dataclass(frozen=True)
class RequestFailed:
    failure: Failed
    generation: int

Event = Union[ImageSelected, RequestStarted, RequestSucceeded, RequestFailed]

def transition(session: ScanSession, event: Event) -> ScanSession:
    """
    Pure state step.
    A new image clears the result and error but not an InFlight status: the running
    request still holds the controls. A completion from an older generation is dropped.
    """
    if isinstance(event, ImageSelected):
        status = session.status if isinstance(session.status, InFlight) else Idle()
        return ScanSession(image=event.image, status=status, generation=session.generation + 1)
    if isinstance(event, RequestStarted):
        return replace(session, status=InFlight(event.kind))
    if isinstance(event, (RequestSucceeded, RequestFailed)):
        if event.generation != session.generation:
            # answer for a replaced image; only release the controls
            if isinstance(session.status, InFlight):
                return replace(session, status=Idle())
            return session
        if isinstance(event, RequestSucceeded):
            return replace(session, status=Succeeded(event.result))
        return replace(session, status=event.failure)
    raise TypeError(f"unknown event: {event!r}")

# --- Operations --------------------------------------------------------------

# generic message per action, used for transport and unexpected faults
FAILURE_MESSAGES = {
    ResultKind.ANALYSIS: "Wystąpił błąd podczas analizy. Spróbuj ponownie.",
    ResultKind.RECIPE: "Wystąpił błąd podczas generowania przepisu. Spróbuj ponownie.",
    ResultKind.ALTERNATIVE: "Wystąpił błąd podczas sugerowania alternatywy. Spróbuj ponownie.",
}

_GENERIC_KINDS = (ErrorKind.TRANSPORT, ErrorKind.UNEXPECTED)

RequestBuilder = Callable[[], Awaitable[Tuple[str, Optional[EncodedPayload]]]]

class Orchestrator:
    def __init__(self, gemini: Optional[GeminiClient] = None):
        self.gemini = gemini or GeminiClient()
        self.session = ScanSession()

    def _apply(self, event: Event) -> ScanSession:
        self.session = transition(self.session, event)
        return self.session

    def _fail(self, kind: ResultKind, exc: ScannerError, generation: int) -> ScanSession:
        message = FAILURE_MESSAGES[kind] if exc.kind in _GENERIC_KINDS else exc.user_message
        return self._apply(RequestFailed(Failed(
            kind=exc.kind,
            message=message,
            detail=str(exc) or None,
            status_code=status_code_of(exc),
        ), generation))

    def select_image(self, image: SelectedImage) -> ScanSession:
        logger.info("image selected: %s (%d bytes)", image.mime_type, len(image.data))
        return self._apply(ImageSelected(image))

    async def run_analysis(self) -> ScanSession:
        image = self.session.image
        if image is None:
            logger.warning("analysis requested without an image")
            return self._fail(ResultKind.ANALYSIS, NoImageSelected(), self.session.generation)

        async def request():
            payload = await encode_image(image)
            return build_analysis_prompt(), payload

        return await self._run(ResultKind.ANALYSIS, request)

    async def run_recipe(self) -> ScanSession:
        return await self._follow_up(ResultKind.RECIPE, build_recipe_prompt)

    async def run_alternative(self) -> ScanSession:
        return await self._follow_up(ResultKind.ALTERNATIVE, build_alternative_prompt)

    async def _follow_up(self, kind: ResultKind, build_prompt: Callable[[str], str]) -> ScanSession:
        prior = self.session.result
        if prior is None or prior.kind is not ResultKind.ANALYSIS:
            logger.warning("%s requested before a food analysis", kind.value)
            return self._fail(kind, PreconditionError(), self.session.generation)

        async def request():
            return build_prompt(prior.text), None

        return await self._run(kind, request)

    async def _run(self, kind: ResultKind, request: RequestBuilder) -> ScanSession:
        generation = self.session.generation
        self._apply(RequestStarted(kind))
        logger.info("%s request started", kind.value)
        try:
            prompt, image = await request()
            text = await self.gemini.generate(prompt, image)
        except ScannerError as e:
            logger.warning("%s failed: %s (%s)", kind.value, e.kind.value, e)
            self._fail(kind, e, generation)
        except Exception as e:
            logger.exception("%s failed unexpectedly", kind.value)
            self._apply(RequestFailed(Failed(
                kind=ErrorKind.UNEXPECTED,
                message=FAILURE_MESSAGES[kind],
                detail=repr(e),
            ), generation))
        else:
            self._apply(RequestSucceeded(AnalysisResult(text=text, kind=kind), generation))
            logger.info("%s request finished", kind.value)
        finally:
            # cancellation and other BaseExceptions skip the handlers above
            if isinstance(self.session.status, InFlight):
                self._apply(RequestFailed(Failed(
                    kind=ErrorKind.UNEXPECTED,
                    message=FAILURE_MESSAGES[kind],
                    detail="request did not complete",
                ), generation))
        if generation != self.session.generation:
            logger.info("%s answer dropped: image was replaced while it ran", kind.value)
        return self.session
