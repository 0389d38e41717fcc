"""papers.py — Published-paper browsing, submission, and fee payment.

Called by: Frontend landing page and author dashboard
Depends on: deps.py (Portal, CurrentUser), services/portal.py, services/dashboards.py
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, status

from app.api.deps import CurrentUser, Portal, require_role
from app.models.schemas import Paper, PaperResult, PaperSubmission, Review
from app.services import dashboards

router = APIRouter(prefix="/api/v1/papers", tags=["papers"])


@router.get("", response_model=list[Paper])
async def list_published_papers(
    portal: Portal,
    q: str | None = Query(default=None, description="Search title, authors, keywords"),
    category: str | None = Query(default=None, description="Exact category or 'all'"),
) -> list[Paper]:
    """Browse published papers.

    Auth: None.

    Returns:
        Published papers matching the optional search term and category.
    """
    papers = await portal.get_published_papers()
    return dashboards.filter_papers(papers, q, category)


@router.get("/categories", response_model=list[str])
async def list_categories(portal: Portal) -> list[str]:
    """Category choices for the browse filter, starting with ``all``."""
    return dashboards.categories(await portal.get_published_papers())


@router.get("/{paper_id}", response_model=Paper)
async def get_paper(paper_id: int, portal: Portal) -> Paper:
    paper = await portal.get_paper_by_id(paper_id)
    if paper is None:
        raise HTTPException(status_code=404, detail="Paper not found")
    return paper


@router.get("/{paper_id}/reviews", response_model=list[Review])
async def list_paper_reviews(paper_id: int, portal: Portal) -> list[Review]:
    return await portal.get_reviews_by_paper(paper_id)


@router.post("", response_model=PaperResult, status_code=status.HTTP_201_CREATED)
async def submit_paper(body: PaperSubmission, user: CurrentUser, portal: Portal) -> PaperResult:
    """Submit a new paper as the current author.

    Auth: X-User-Id required (author only).

    The paper always starts as ``submitted`` with the configured fee
    pending, whatever fee fields the client sends, and the submitter
    receives a confirmation notification.
    """
    require_role(user, "author")
    body = body.model_copy(
        update={"submitted_by": user.id, "submission_fee": None, "payment_status": None}
    )
    return await portal.submit_paper(body)


@router.post("/{paper_id}/payment", response_model=PaperResult)
async def pay_submission_fee(paper_id: int, user: CurrentUser, portal: Portal) -> PaperResult:
    """Settle the submission fee for one of the current author's papers.

    Auth: X-User-Id required (author only).

    Raises:
        HTTPException: 404 when the paper does not exist or is not the author's.
    """
    require_role(user, "author")
    paper = await portal.get_paper_by_id(paper_id)
    if paper is None or not dashboards.papers_for_author([paper], user):
        raise HTTPException(status_code=404, detail="Paper not found")
    result = await portal.pay_submission_fee(paper_id)
    if not result.success:
        raise HTTPException(status_code=404, detail=result.error)
    return result
