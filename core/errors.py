"""Failure taxonomy of the word-ingestion workflow.

Every step raises one of these to the caller; nothing is swallowed on the
way, so a failure never leaves half of a dictionary pair behind. The HTTP
layer turns them into a short JSON body the UI can show as a toast.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class IngestionError(Exception):
    kind = "ingestion_error"
    retryable = False
    status_code = 500
    user_message = "Something went wrong while adding the word."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.user_message)
        self.message = message or self.user_message


class AnalysisRejected(IngestionError):
    kind = "analysis_rejected"
    status_code = 422
    user_message = "This doesn't look like a valid word."


class AnalysisUnavailable(IngestionError):
    kind = "analysis_unavailable"
    retryable = True
    status_code = 503
    user_message = "The word analysis service is unavailable. Please try again."


class IncompleteAnalysis(IngestionError):
    kind = "incomplete_analysis"
    status_code = 502
    user_message = "The word analysis came back incomplete."


class StorageConflict(IngestionError):
    kind = "storage_conflict"
    retryable = True
    status_code = 409
    user_message = "The dictionary was changed at the same time. Please try again."


class IngestionFailed(IngestionError):
    kind = "ingestion_failed"
    status_code = 500
    user_message = "Failed to add the word."


async def _ingestion_error_handler(request: Request, exc: IngestionError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s on %s: %s", exc.kind, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.user_message,
            "error": exc.kind,
            "retryable": exc.retryable,
        },
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(IngestionError, _ingestion_error_handler)
