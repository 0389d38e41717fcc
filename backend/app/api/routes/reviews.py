"""reviews.py — Review submission.

Called by: Frontend reviewer dashboard
Depends on: deps.py (Portal, CurrentUser), services/portal.py
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from app.api.deps import CurrentUser, Portal, require_role
from app.models.schemas import ReviewResult, ReviewSubmission

router = APIRouter(prefix="/api/v1/reviews", tags=["reviews"])


@router.post("", response_model=ReviewResult, status_code=status.HTTP_201_CREATED)
async def submit_review(body: ReviewSubmission, user: CurrentUser, portal: Portal) -> ReviewResult:
    """Submit a review as the current reviewer.

    Auth: X-User-Id required (reviewer only). The reviewer id and name in
    the body are replaced with the caller's.

    Raises:
        HTTPException: 404 when the paper does not exist.
    """
    require_role(user, "reviewer")
    body = body.model_copy(update={"reviewer_id": user.id, "reviewer_name": user.name})
    result = await portal.submit_review(body)
    if not result.success:
        raise HTTPException(status_code=404, detail=result.error)
    return result
