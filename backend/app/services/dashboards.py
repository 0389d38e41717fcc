"""dashboards.py — Aggregations behind the author, reviewer, and admin views.

Pure functions over lists already fetched from ``PortalAPI``. Nothing
here touches the store, so the same helpers work on any slice of papers.

Called by: api/routes/papers.py, api/routes/dashboard.py, api/routes/admin.py
Depends on: models/schemas.py
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from app.models.schemas import (
    PAPER_STATUSES,
    Paper,
    Review,
    ReviewerStats,
    StatusStats,
    User,
    UserPublic,
)

ALL_CATEGORIES = "all"


def status_stats(papers: Iterable[Paper]) -> StatusStats:
    """Count papers per status. Every status is present, zero or not."""
    counts = dict.fromkeys(PAPER_STATUSES, 0)
    for paper in papers:
        counts[paper.status] += 1
    return StatusStats(**counts)


def papers_for_author(papers: Iterable[Paper], user: User | UserPublic) -> list[Paper]:
    """Papers the user submitted or is listed on as an author."""
    name = user.name.strip().lower()
    return [
        paper
        for paper in papers
        if paper.submitted_by == user.id
        or any(author.strip().lower() == name for author in paper.authors)
    ]


def papers_assigned_to(papers: Iterable[Paper], reviewer_id: int) -> list[Paper]:
    return [p for p in papers if p.assigned_reviewers and reviewer_id in p.assigned_reviewers]


def reviewer_stats(assigned: Sequence[Paper], reviews: Sequence[Review]) -> ReviewerStats:
    """Assigned, completed, and still-pending counts for one reviewer.

    ``reviews`` should already be limited to the reviewer in question.
    """
    reviewed = {r.paper_id for r in reviews}
    return ReviewerStats(
        assigned=len(assigned),
        completed=len(reviews),
        pending=sum(1 for paper in assigned if paper.id not in reviewed),
    )


def pending_payment(papers: Iterable[Paper]) -> list[Paper]:
    return [p for p in papers if p.status == "submitted" and p.payment_status == "pending"]


def search_reviewers(reviewers: Iterable[User], term: str | None) -> list[User]:
    """Case-insensitive substring match on name or affiliation."""
    needle = (term or "").lower()
    return [
        r for r in reviewers
        if needle in r.name.lower() or needle in r.affiliation.lower()
    ]


def filter_papers(
    papers: Iterable[Paper],
    term: str | None = None,
    category: str | None = None,
) -> list[Paper]:
    """Browse filter for the landing page.

    Args:
        papers: Candidate papers, usually the published ones.
        term: Matched case-insensitively against title, authors, and keywords.
        category: Exact category, or ``None``/``"all"`` for every category.

    Returns:
        Matching papers in their original order.
    """
    filtered = list(papers)

    if term:
        needle = term.lower()
        filtered = [
            paper for paper in filtered
            if needle in paper.title.lower()
            or any(needle in author.lower() for author in paper.authors)
            or any(needle in keyword.lower() for keyword in paper.keywords)
        ]

    if category and category != ALL_CATEGORIES:
        filtered = [paper for paper in filtered if paper.category == category]

    return filtered


def categories(papers: Iterable[Paper]) -> list[str]:
    """``"all"`` followed by each distinct category in first-seen order."""
    seen = dict.fromkeys(paper.category for paper in papers)
    return [ALL_CATEGORIES, *seen]
