import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse

from advisor_booking.services.availability_client import UpstreamError

logger = logging.getLogger(__name__)

UPSTREAM_ERROR_BODY = 'API Error.'


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(UpstreamError)
    async def upstream_error_handler(request: Request, exc: UpstreamError) -> PlainTextResponse:
        logger.error('Availability source failed during %s %s', request.method, request.url.path, exc_info=exc)
        return PlainTextResponse(UPSTREAM_ERROR_BODY, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
