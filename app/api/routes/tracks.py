"""API routes for tracks, generation and generated sessions."""
import logging

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_db
from app.schemas.base import APIResponse, ResponseMeta
from app.schemas.generation import GenerateRequest, GenerationResult
from app.schemas.track import CoverageReport, SessionResponse, TrackResponse
from app.services.track_sessions import TrackSessionService
from app.services.workout_generator import WorkoutGeneratorService

router = APIRouter()
logger = logging.getLogger(__name__)


def _meta(request: Request) -> ResponseMeta:
    return ResponseMeta(request_id=getattr(request.state, "request_id", None))


@router.get("", response_model=APIResponse[list[TrackResponse]])
async def list_tracks(request: Request, db: AsyncSession = Depends(get_db)):
    """List active tracks in display order."""
    tracks = await TrackSessionService(db).list_tracks()
    return APIResponse(
        data=[TrackResponse.model_validate(t) for t in tracks],
        meta=_meta(request),
    )


@router.post("/{slug}/generate", response_model=APIResponse[GenerationResult])
async def generate_track(
    slug: str,
    body: GenerateRequest,
    request: Request,
    db: AsyncSession = Depends(get_db),
):
    """
    Generate sessions for a track.

    Replaces any previously generated sessions for the same weeks and days.
    """
    logger.info(f"Generating {body.week_count} week(s) for {slug} from week {body.start_week}")
    result = await WorkoutGeneratorService(db).generate(slug, body.start_week, body.week_count)
    return APIResponse(data=result, meta=_meta(request))


@router.get("/{slug}/sessions", response_model=APIResponse[list[SessionResponse]])
async def list_track_sessions(
    slug: str,
    request: Request,
    week: int | None = Query(None, ge=1, description="Only sessions of this week"),
    day: int | None = Query(None, ge=1, le=7, description="Only sessions on this day of the week"),
    db: AsyncSession = Depends(get_db),
):
    """Published sessions of a track with their blocks and exercises."""
    sessions = await TrackSessionService(db).list_sessions(slug, week_number=week, day_of_week=day)
    return APIResponse(
        data=[SessionResponse.model_validate(s) for s in sessions],
        meta=_meta(request),
    )


@router.get("/{slug}/coverage", response_model=APIResponse[CoverageReport])
async def track_coverage(slug: str, request: Request, db: AsyncSession = Depends(get_db)):
    report = await TrackSessionService(db).coverage(slug)
    return APIResponse(data=report, meta=_meta(request))
