"""dashboard.py — Per-role dashboard payloads for authors and reviewers.

Called by: Frontend author and reviewer dashboards
Depends on: deps.py (Portal, CurrentUser), services/dashboards.py
"""

from __future__ import annotations

from fastapi import APIRouter

from app.api.deps import CurrentUser, Portal, require_role
from app.models.schemas import AuthorDashboard, ReviewerDashboard
from app.services import dashboards

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


@router.get("/author", response_model=AuthorDashboard)
async def author_dashboard(user: CurrentUser, portal: Portal) -> AuthorDashboard:
    """The current author's papers, status counts, and unpaid submissions.

    Auth: X-User-Id required (author only).
    """
    require_role(user, "author")
    papers = dashboards.papers_for_author(await portal.get_all_papers(), user)
    return AuthorDashboard(
        papers=papers,
        stats=dashboards.status_stats(papers),
        pending_payment=dashboards.pending_payment(papers),
    )


@router.get("/reviewer", response_model=ReviewerDashboard)
async def reviewer_dashboard(user: CurrentUser, portal: Portal) -> ReviewerDashboard:
    """Papers assigned to the current reviewer and their completed reviews.

    Auth: X-User-Id required (reviewer only).
    """
    require_role(user, "reviewer")
    assigned = dashboards.papers_assigned_to(await portal.get_all_papers(), user.id)
    reviews = await portal.get_reviews_by_reviewer(user.id)
    return ReviewerDashboard(
        assigned_papers=assigned,
        completed_reviews=reviews,
        stats=dashboards.reviewer_stats(assigned, reviews),
    )
