"""
Rating Handler

Handles rating submission, update, removal and aggregation endpoints.

ARCHITECTURE:
=============
    Handler → Service → Validator / Repository → Model

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Rating errors raised by the service carry their own status codes and
are rendered by the global exception handlers.
"""

from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from scorecard.shared.models.enums import RatingCategory
from scorecard.shared.schemas.rating import (
    CategoriesResponse,
    CategorySummaryResponse,
    RatingResponse,
    RatingResultResponse,
    RatingSummaryResponse,
)
from scorecard.shared.schemas.common import ErrorResponse
from scorecard.shared.services.rating_service import RatingResult, RatingService
from scorecard.api.dependencies import CurrentUser
from scorecard.api.dependencies.services import get_rating_service


router = APIRouter(
    responses={
        400: {"model": ErrorResponse, "description": "INVALID_CATEGORY or INVALID_SCORE"},
        401: {"model": ErrorResponse, "description": "Missing or invalid bearer token"},
        409: {"model": ErrorResponse, "description": "ALREADY_RATED or NOT_YET_RATED"},
    },
)


def _build_result_response(result: RatingResult) -> RatingResultResponse:
    return RatingResultResponse(
        user_id=result.user_id,
        content_id=result.content_id,
        category=result.category,
        score=result.score,
    )


def _score_of(body: Any) -> Any:
    # Any JSON value is accepted as the body so that a malformed score, or a
    # body that is not an object, is reported by the rating checks.
    return body.get("score") if isinstance(body, dict) else None


@router.get("/categories", response_model=CategoriesResponse)
async def list_categories():
    """List the registered rating categories."""
    return CategoriesResponse(categories=RatingCategory.all())


@router.get("", response_model=List[RatingResponse])
async def list_my_ratings(
    current_user: CurrentUser,
    rating_service: RatingService = Depends(get_rating_service),
):
    """List every content item the authenticated user has rated."""
    records = await rating_service.list_user_ratings(current_user["user_id"])
    return [RatingResponse.model_validate(record) for record in records]


@router.get("/{content_id}/summary", response_model=RatingSummaryResponse)
async def get_rating_summary(
    content_id: str,
    current_user: CurrentUser,
    rating_service: RatingService = Depends(get_rating_service),
):
    """
    Aggregate all users' scores for a content item.

    Every registered category is listed; unrated ones have count 0.
    """
    summary = await rating_service.summarize_content(content_id)
    return RatingSummaryResponse(
        content_id=summary.content_id,
        raters=summary.raters,
        categories=[
            CategorySummaryResponse.model_validate(item) for item in summary.categories
        ],
    )


@router.get("/{content_id}", response_model=RatingResponse)
async def get_my_rating(
    content_id: str,
    current_user: CurrentUser,
    rating_service: RatingService = Depends(get_rating_service),
):
    """
    Get the authenticated user's scores for a content item.

    Responds 409 NOT_YET_RATED when the user has not rated it at all.
    """
    record = await rating_service.get_user_rating(current_user["user_id"], content_id)
    return RatingResponse.model_validate(record)


@router.post(
    "/{content_id}",
    response_model=RatingResultResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_rating(
    content_id: str,
    current_user: CurrentUser,
    body: Any = Body(default=None, examples=[{"score": 80}]),
    category: Optional[str] = Query(default=None, description="Rating category"),
    rating_service: RatingService = Depends(get_rating_service),
):
    """
    Rate a content item in one category for the first time.

    Responds 409 ALREADY_RATED if a score for the category already exists.
    """
    result = await rating_service.submit_rating(
        user_id=current_user["user_id"],
        content_id=content_id,
        category=category,
        score=_score_of(body),
    )
    return _build_result_response(result)


@router.put("/{content_id}", response_model=RatingResultResponse)
async def update_rating(
    content_id: str,
    current_user: CurrentUser,
    body: Any = Body(default=None, examples=[{"score": 80}]),
    category: Optional[str] = Query(default=None, description="Rating category"),
    rating_service: RatingService = Depends(get_rating_service),
):
    """
    Change an existing score.

    Responds 409 NOT_YET_RATED if no score for the category exists.
    """
    result = await rating_service.update_rating(
        user_id=current_user["user_id"],
        content_id=content_id,
        category=category,
        score=_score_of(body),
    )
    return _build_result_response(result)


@router.delete("/{content_id}", response_model=RatingResultResponse)
async def remove_rating(
    content_id: str,
    current_user: CurrentUser,
    category: Optional[str] = Query(default=None, description="Rating category"),
    rating_service: RatingService = Depends(get_rating_service),
):
    """
    Remove a score. The response carries the removed score.
    """
    result = await rating_service.remove_rating(
        user_id=current_user["user_id"],
        content_id=content_id,
        category=category,
    )
    return _build_result_response(result)
