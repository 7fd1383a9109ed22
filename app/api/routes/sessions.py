"""API routes for single generated sessions."""
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_db
from app.schemas.base import APIResponse, ResponseMeta
from app.schemas.track import SessionResponse
from app.services.track_sessions import TrackSessionService

router = APIRouter()


@router.get("/{session_id}", response_model=APIResponse[SessionResponse])
async def get_session(session_id: int, request: Request, db: AsyncSession = Depends(get_db)):
    session = await TrackSessionService(db).get_session(session_id)
    return APIResponse(
        data=SessionResponse.model_validate(session),
        meta=ResponseMeta(request_id=getattr(request.state, "request_id", None)),
    )
