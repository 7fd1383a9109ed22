from datetime import UTC, datetime

from fastapi import Request, status
from fastapi.responses import JSONResponse

from app.core.exceptions import (
    BusinessRuleError,
    DomainError,
    GenerationError,
    IncompleteBlockError,
    NotFoundError,
    UnknownTrackKindError,
    ValidationError,
)


ERROR_STATUS_MAP: dict[type[DomainError], int] = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    BusinessRuleError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    UnknownTrackKindError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    GenerationError: status.HTTP_503_SERVICE_UNAVAILABLE,
    IncompleteBlockError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = ERROR_STATUS_MAP.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)

    return JSONResponse(
        status_code=status_code,
        content={
            "data": None,
            "meta": {
                "request_id": getattr(request.state, "request_id", None),
                "timestamp": datetime.now(UTC).isoformat(),
            },
            "errors": [
                {
                    "code": exc.code,
                    "message": exc.message,
                    "details": exc.details,
                }
            ],
        },
    )
