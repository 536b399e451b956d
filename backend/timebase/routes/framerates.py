"""
Framerate API: construction, diagnostics and saved framerates.

Endpoints:
    POST   /api/framerates/parse         Build a framerate from a rate + options
    GET    /api/framerates/common        Predefined broadcast rates
    GET    /api/framerates/saved         List saved framerates
    GET    /api/framerates/saved/{id}    Get one saved framerate
    POST   /api/framerates/saved/{id}    Build and save a framerate
    DELETE /api/framerates/saved/{id}    Delete a saved framerate

Parse failures return 422 with {"reason": <code>, "message": <text>}.
A framerate too large for the database returns 422 with a text detail.
The same reason codes are returned by parse_framerate().
"""

import logging
from fractions import Fraction
from typing import List, Optional, Union

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, ConfigDict

from ..framerate import (
    Framerate,
    FramerateParseError,
    describe,
    parse_framerate,
    render,
)
from ..framerate.rates import ALL_RATES
from ..persistence import PersistenceManager, SaveError, SavedFramerate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/framerates", tags=["framerates"])


# =============================================================================
# Request / Response Models
# =============================================================================


class ParseFramerateRequest(BaseModel):
    """Rate plus construction options."""

    model_config = ConfigDict(extra="forbid")

    rate: Union[int, float, str]
    """Playback rate or timebase: 24, 23.98, "24000/1001"."""

    ntsc: Optional[str] = "non_drop"
    """'non_drop', 'drop', or null for whole rates."""

    invert: bool = False
    coerce_ntsc: bool = False


class SaveFramerateRequest(ParseFramerateRequest):
    label: Optional[str] = None


class FramerateResponse(BaseModel):
    """A validated framerate and its derived values."""

    numerator: int
    denominator: int
    ntsc: Optional[str] = None
    is_ntsc: bool
    timebase: str
    display: str
    description: str


class SavedFramerateResponse(BaseModel):
    id: str
    label: Optional[str] = None
    created_at: Optional[str] = None
    framerate: FramerateResponse


class CommonFramerateResponse(BaseModel):
    name: str
    framerate: FramerateResponse


# =============================================================================
# Helpers
# =============================================================================


def _format_fraction(value: Fraction) -> str:
    if value.denominator == 1:
        return str(value.numerator)
    return f"{value.numerator}/{value.denominator}"


def to_response(framerate: Framerate) -> FramerateResponse:
    return FramerateResponse(
        numerator=framerate.playback.numerator,
        denominator=framerate.playback.denominator,
        ntsc=framerate.ntsc.value if framerate.ntsc else None,
        is_ntsc=framerate.is_ntsc,
        timebase=_format_fraction(framerate.smpte_timebase),
        display=render(framerate),
        description=describe(framerate),
    )


def _saved_response(saved: SavedFramerate) -> SavedFramerateResponse:
    return SavedFramerateResponse(
        id=saved.id,
        label=saved.label,
        created_at=saved.created_at,
        framerate=to_response(saved.framerate),
    )


def _build(body: ParseFramerateRequest) -> Framerate:
    result = parse_framerate(
        body.rate,
        ntsc=body.ntsc,
        invert=body.invert,
        coerce_ntsc=body.coerce_ntsc,
    )
    if not result.ok:
        raise _parse_error_response(body.rate, result.error)
    return result.framerate


def _parse_error_response(rate, error: FramerateParseError) -> HTTPException:
    logger.warning(f"Framerate rejected: {rate!r} ({error.reason.value})")
    return HTTPException(
        status_code=422,
        detail={"reason": error.reason.value, "message": error.message},
    )


def _persistence(request: Request) -> PersistenceManager:
    return request.app.state.persistence


# =============================================================================
# Endpoints
# =============================================================================


@router.post("/parse", response_model=FramerateResponse)
async def parse_framerate_endpoint(body: ParseFramerateRequest):
    """Build and describe a framerate without storing it."""
    return to_response(_build(body))


@router.get("/common", response_model=List[CommonFramerateResponse])
async def list_common_framerates():
    return [
        CommonFramerateResponse(name=name, framerate=to_response(rate))
        for name, rate in ALL_RATES.items()
    ]


@router.get("/saved", response_model=List[SavedFramerateResponse])
async def list_saved_framerates(request: Request):
    return [_saved_response(saved) for saved in _persistence(request).list_framerates()]


@router.get("/saved/{framerate_id}", response_model=SavedFramerateResponse)
async def get_saved_framerate(framerate_id: str, request: Request):
    saved = _persistence(request).load_framerate(framerate_id)
    if saved is None:
        raise HTTPException(status_code=404, detail=f"Framerate not found: {framerate_id}")
    return _saved_response(saved)


@router.post("/saved/{framerate_id}", response_model=SavedFramerateResponse)
async def save_framerate_endpoint(framerate_id: str, body: SaveFramerateRequest, request: Request):
    framerate = _build(body)
    try:
        saved = _persistence(request).save_framerate(framerate_id, framerate, label=body.label)
    except SaveError as e:
        logger.warning(f"Failed to save framerate {framerate_id}: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    return _saved_response(saved)


@router.delete("/saved/{framerate_id}")
async def delete_saved_framerate(framerate_id: str, request: Request):
    if not _persistence(request).delete_framerate(framerate_id):
        raise HTTPException(status_code=404, detail=f"Framerate not found: {framerate_id}")
    return {"deleted": framerate_id}
