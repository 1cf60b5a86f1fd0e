"""FastAPI routes for the feedback service.

# ─── API ROUTE MAP ─────────────────────────────────────────────────────
#
# Endpoint                              Method  Description
# ─────────────────────────────────────────────────────────────────────
# /api/v1/feedback                      POST    Submit feedback (201 new / 200 duplicate)
# /api/v1/feedback                      GET     All feedback, newest first
# /api/v1/feedback/filter?sentiment=    GET     Feedback for one sentiment bucket
# /api/v1/statistics                    GET     Aggregate sentiment counters
# /api/v1/health                        GET     Health check + provider names
#
# Services are resolved from ``app.state`` (populated at startup in
# main.py's _build_all) through ``Depends`` helpers.  Errors are raised as
# FeedbackServiceError subclasses and turned into JSON by
# ErrorHandlingMiddleware.
# ──────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

from typing import Annotated, Any

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from feedback_service.api.schemas import ErrorResponse, HealthResponse, SubmitFeedbackRequest
from feedback_service.models.feedback import AggregateStatistics, FeedbackView
from feedback_service.services.feedback_query_service import FeedbackQueryService
from feedback_service.services.submission_coordinator import (
    SubmissionCoordinator,
    parse_submission,
)
from feedback_service.utils.errors import ConfigurationError
from feedback_service.utils.logging import get_logger

_logger: structlog.BoundLogger = get_logger(__name__)

router = APIRouter(prefix="/api/v1")

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


# ---------------------------------------------------------------------------
# Dependency helpers
# ---------------------------------------------------------------------------


def _get_coordinator(request: Request) -> SubmissionCoordinator:
    """Return the submission coordinator from application state."""
    coordinator = getattr(request.app.state, "coordinator", None)
    if coordinator is None:
        raise ConfigurationError("Submission coordinator is not configured")
    return coordinator


def _get_query_service(request: Request) -> FeedbackQueryService:
    """Return the read-side query service from application state."""
    query_service = getattr(request.app.state, "query_service", None)
    if query_service is None:
        raise ConfigurationError("Feedback query service is not configured")
    return query_service


CoordinatorDep = Annotated[SubmissionCoordinator, Depends(_get_coordinator)]
QueryServiceDep = Annotated[FeedbackQueryService, Depends(_get_query_service)]


# ---------------------------------------------------------------------------
# Submission
# ---------------------------------------------------------------------------


@router.post(
    "/feedback",
    status_code=201,
    response_model=FeedbackView,
    responses={200: {"model": FeedbackView, "description": "Duplicate submission"}, **_ERROR_RESPONSES},
    summary="Submit feedback for sentiment classification",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": SubmitFeedbackRequest.model_json_schema(by_alias=True),
                },
            },
        },
    },
)
async def submit_feedback(request: Request, coordinator: CoordinatorDep) -> JSONResponse:
    """Classify and store a submission.

    A repeat of an earlier (sessionId, text) pair returns the stored
    record with 200 instead of creating a second one.
    """
    text, session_id = parse_submission(await request.body())
    result = await coordinator.submit(text, session_id)
    return JSONResponse(
        status_code=201 if result.created else 200,
        content=result.feedback.model_dump(mode="json", by_alias=True),
    )


# ---------------------------------------------------------------------------
# Admin reads
# ---------------------------------------------------------------------------


@router.get(
    "/feedback",
    response_model=list[FeedbackView],
    responses={500: {"model": ErrorResponse}},
    summary="List all feedback",
)
async def list_feedback(query_service: QueryServiceDep) -> list[FeedbackView]:
    return await query_service.list_feedback()


@router.get(
    "/feedback/filter",
    response_model=list[FeedbackView],
    responses=_ERROR_RESPONSES,
    summary="List feedback for one sentiment",
)
async def list_filtered_feedback(
    query_service: QueryServiceDep,
    sentiment: str | None = None,
) -> list[FeedbackView]:
    """Return feedback whose sentiment is exactly ``Good``, ``Bad`` or ``Neutral``."""
    return await query_service.list_feedback_by_sentiment(sentiment)


@router.get(
    "/statistics",
    response_model=AggregateStatistics,
    responses={500: {"model": ErrorResponse}},
    summary="Get aggregate sentiment statistics",
)
async def get_statistics(query_service: QueryServiceDep) -> AggregateStatistics:
    return await query_service.get_statistics()


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health(request: Request) -> HealthResponse:
    return HealthResponse(
        version=getattr(request.app.state, "version", "unknown"),
        providers=getattr(request.app.state, "provider_registry", {}),
    )
