"""Exception handlers rendering ProgramError as JSON."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from kinoprogram.exceptions import ProgramError

logger = logging.getLogger(__name__)


async def program_error_handler(request: Request, exc: ProgramError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.warning(f"{request.url.path} -> {exc.status_code}: {exc.to_payload()}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProgramError, program_error_handler)
