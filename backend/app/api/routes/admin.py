"""admin.py — Editorial dashboard: submissions overview, reviewer assignment, publishing.

Provides admin-only endpoints. The underlying portal operations do not
check roles themselves; the guard lives here.

Called by: Frontend admin dashboard
Depends on: deps.py (CurrentUser, Portal), services/portal.py, services/dashboards.py
"""

from __future__ import annotations

import structlog
from fastapi import APIRouter, HTTPException, Query

from app.api.deps import CurrentUser, Portal, require_role
from app.models.schemas import AdminDashboard, AssignReviewerRequest, OperationResult, UserPublic
from app.services import dashboards

router = APIRouter(prefix="/api/v1/admin", tags=["admin"])
logger = structlog.get_logger()


@router.get("/papers", response_model=AdminDashboard)
async def list_all_papers(user: CurrentUser, portal: Portal) -> AdminDashboard:
    """Every submission with per-status counts.

    Auth: X-User-Id required (admin only).
    """
    require_role(user, "admin")
    papers = await portal.get_all_papers()
    return AdminDashboard(papers=papers, stats=dashboards.status_stats(papers))


@router.get("/reviewers", response_model=list[UserPublic])
async def list_reviewers(
    user: CurrentUser,
    portal: Portal,
    q: str | None = Query(default=None, description="Match reviewer name or affiliation"),
) -> list[UserPublic]:
    """Reviewer picker for the assignment modal.

    Auth: X-User-Id required (admin only).
    """
    require_role(user, "admin")
    reviewers = dashboards.search_reviewers(await portal.get_reviewers(), q)
    return [r.public() for r in reviewers]


@router.post("/papers/{paper_id}/reviewers", response_model=OperationResult)
async def assign_reviewer(
    paper_id: int,
    body: AssignReviewerRequest,
    user: CurrentUser,
    portal: Portal,
) -> OperationResult:
    """Assign a reviewer to a paper.

    Auth: X-User-Id required (admin only).

    Raises:
        HTTPException: 404 when the paper or reviewer does not exist.
    """
    require_role(user, "admin")
    result = await portal.assign_reviewer(paper_id, body.reviewer_id)
    if not result.success:
        logger.warning("assign_reviewer_failed", paper_id=paper_id, error=result.error)
        raise HTTPException(status_code=404, detail=result.error)
    return result


@router.post("/papers/{paper_id}/publish", response_model=OperationResult)
async def publish_paper(paper_id: int, user: CurrentUser, portal: Portal) -> OperationResult:
    """Publish a paper and stamp its DOI.

    Auth: X-User-Id required (admin only).

    Raises:
        HTTPException: 404 when the paper does not exist.
    """
    require_role(user, "admin")
    result = await portal.publish_paper(paper_id)
    if not result.success:
        raise HTTPException(status_code=404, detail=result.error)
    return result
