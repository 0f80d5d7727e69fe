"""
API routes for travel dates selector sessions and token handling
"""
import uuid
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import TypeAdapter

from travel_dates.schemas import (
    CreateSessionRequest,
    DurationRequest,
    NavigateMonthRequest,
    SelectDateRequest,
    Selection,
    SwitchTabRequest,
    TokenRequest,
    ToggleMonthRequest,
)
from travel_dates.selector import DropdownController, decode, display_text, encode, render_dropdown
from travel_dates.utils.config import settings
from travel_dates.utils.exceptions import (
    DropdownClosedError,
    InvalidSelectionError,
    SessionNotFoundError,
    TravelDatesError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/travel-dates", tags=["travel-dates"])

# In-memory session storage; each entry owns one independent dropdown
sessions_store: Dict[str, Dict[str, Any]] = {}

_selection_adapter = TypeAdapter(Selection)


def generate_session_id() -> str:
    """Generate unique session ID"""
    return f"dates_{uuid.uuid4().hex[:8]}"


def _get_session(session_id: str) -> Dict[str, Any]:
    session = sessions_store.get(session_id)
    if session is None:
        raise SessionNotFoundError(f"Session not found: {session_id}", context={"session_id": session_id})
    return session


def _session_response(session_id: str, session: Dict[str, Any]) -> Dict[str, Any]:
    controller: DropdownController = session["controller"]
    return {
        "session_id": session_id,
        "committed": controller.committed,
        "emitted": list(session["emitted"]),
        "view": render_dropdown(controller).model_dump(mode="json"),
    }


def _to_http_error(error: TravelDatesError) -> HTTPException:
    if isinstance(error, SessionNotFoundError):
        status_code = 404
    elif isinstance(error, DropdownClosedError):
        status_code = 409
    elif isinstance(error, InvalidSelectionError):
        status_code = 422
    else:
        status_code = 400
    logger.warning(f"Travel dates request rejected ({status_code}): {error.message}")
    return HTTPException(status_code=status_code, detail={"error": error.message, **error.context})


def _run(session_id: str, action: str, payload: Optional[Any] = None) -> Dict[str, Any]:
    """Look up a session, apply one controller action, and return the refreshed view."""
    try:
        session = _get_session(session_id)
        controller: DropdownController = session["controller"]

        if action == "open":
            controller.open()
        elif action == "toggle":
            controller.toggle()
        elif action == "cancel":
            controller.cancel()
        elif action == "apply":
            controller.apply()
        elif action == "clear":
            controller.clear()
        elif action == "tab":
            controller.switch_tab(payload.tab)
        elif action == "date":
            controller.select_date(payload.date)
        elif action == "duration":
            controller.set_duration(payload.duration)
        elif action == "month":
            controller.toggle_month(payload.month)
        elif action == "navigate":
            controller.navigate_month(payload.direction)
        else:
            raise ValueError(f"Unknown action: {action}")

        return _session_response(session_id, session)
    except TravelDatesError as e:
        raise _to_http_error(e)


@router.post("/sessions")
async def create_session(request: CreateSessionRequest):
    """
    Create a dropdown bound to the owner's current token.

    Tokens passed to ``on_change`` are recorded in ``emitted`` so the
    caller can forward them (e.g. into the page query string).
    """
    if len(sessions_store) >= settings.max_sessions:
        oldest = next(iter(sessions_store))
        sessions_store.pop(oldest)
        logger.info(f"Session store full, evicted {oldest}")

    session_id = generate_session_id()
    emitted: List[str] = []
    controller = DropdownController(
        value=request.value,
        on_change=emitted.append,
        locale=request.locale,
    )
    sessions_store[session_id] = {"controller": controller, "emitted": emitted}
    logger.info(f"Created travel dates session {session_id}")

    return _session_response(session_id, sessions_store[session_id])


@router.get("/sessions/{session_id}")
async def get_session(session_id: str):
    """Current view of a session"""
    try:
        return _session_response(session_id, _get_session(session_id))
    except TravelDatesError as e:
        raise _to_http_error(e)


@router.delete("/sessions/{session_id}")
async def delete_session(session_id: str):
    """Drop a session"""
    try:
        _get_session(session_id)
    except TravelDatesError as e:
        raise _to_http_error(e)
    sessions_store.pop(session_id)
    return {"session_id": session_id, "deleted": True}


@router.post("/sessions/{session_id}/open")
async def open_dropdown(session_id: str):
    return _run(session_id, "open")


@router.post("/sessions/{session_id}/toggle")
async def toggle_dropdown(session_id: str):
    return _run(session_id, "toggle")


@router.post("/sessions/{session_id}/cancel")
async def cancel_dropdown(session_id: str):
    return _run(session_id, "cancel")


@router.post("/sessions/{session_id}/apply")
async def apply_selection(session_id: str):
    return _run(session_id, "apply")


@router.post("/sessions/{session_id}/clear")
async def clear_selection(session_id: str):
    return _run(session_id, "clear")


@router.post("/sessions/{session_id}/tab")
async def switch_tab(session_id: str, request: SwitchTabRequest):
    return _run(session_id, "tab", request)


@router.post("/sessions/{session_id}/dates")
async def select_date(session_id: str, request: SelectDateRequest):
    return _run(session_id, "date", request)


@router.post("/sessions/{session_id}/duration")
async def set_duration(session_id: str, request: DurationRequest):
    return _run(session_id, "duration", request)


@router.post("/sessions/{session_id}/months")
async def toggle_month(session_id: str, request: ToggleMonthRequest):
    return _run(session_id, "month", request)


@router.post("/sessions/{session_id}/month")
async def navigate_month(session_id: str, request: NavigateMonthRequest):
    return _run(session_id, "navigate", request)


@router.post("/decode")
async def decode_token(request: TokenRequest):
    """Decode a token; unrecognized tokens come back as kind=empty"""
    selection = decode(request.token)
    return {"token": request.token, "selection": selection.model_dump(mode="json")}


@router.post("/encode")
async def encode_selection(selection: Dict[str, Any]):
    """Encode a selection given as JSON with a ``kind`` discriminator"""
    try:
        parsed = _selection_adapter.validate_python(selection)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return {"token": encode(parsed)}


@router.get("/display")
async def display(value: str = "", locale: Optional[str] = None):
    """Localized trigger-button text for a committed token"""
    return {"value": value, "text": display_text(value, locale)}
