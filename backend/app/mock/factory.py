"""factory.py — Builders for new portal records.

Unlike fixtures.py, which holds static seed data, these functions create
fresh objects per call: new users on registration, papers on submission,
reviews, notifications, and the DOI stamped on publication.

Called by: services/portal.py
Depends on: models/schemas.py
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Any

from app.models.schemas import (
    Notification,
    NotificationType,
    Paper,
    PaperSubmission,
    RegisterRequest,
    Review,
    ReviewSubmission,
    User,
)


def today() -> str:
    """Today's UTC date as YYYY-MM-DD."""
    return datetime.now(UTC).date().isoformat()


def now_iso() -> str:
    """Current UTC time formatted like the fixture timestamps."""
    return datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


def next_id(records: Iterable[Any]) -> int:
    """One more than the largest ``id`` in ``records`` (1 for an empty list)."""
    return max((r.id for r in records), default=0) + 1


def synthesize_doi(paper_id: int, prefix: str = "10.1000/example", year: int = 2024) -> str:
    """Build the DOI for a published paper.

    >>> synthesize_doi(7)
    '10.1000/example.2024.007'
    """
    return f"{prefix}.{year}.{paper_id:03d}"


def create_user(user_id: int, data: RegisterRequest) -> User:
    """Build a registered user. New accounts are always authors."""
    return User(
        id=user_id,
        email=data.email,
        password=data.password,
        name=data.name,
        role="author",
        affiliation=data.affiliation,
        department=data.department,
        expertise=data.expertise,
    )


def create_paper(paper_id: int, data: PaperSubmission) -> Paper:
    """Build a freshly submitted paper, whatever status the client sent."""
    fields = data.model_dump(exclude={"status"}, exclude_none=True)
    return Paper(
        id=paper_id,
        **fields,
        status="submitted",
        submission_date=today(),
    )


def create_review(review_id: int, data: ReviewSubmission, reviewer_name: str) -> Review:
    """Build a completed review."""
    return Review(
        id=review_id,
        paper_id=data.paper_id,
        reviewer_id=data.reviewer_id,
        reviewer_name=data.reviewer_name or reviewer_name,
        rating=data.rating,
        comments=data.comments,
        recommendation=data.recommendation,
        submitted_date=today(),
        status="completed",
    )


def create_notification(
    notification_id: int,
    user_id: int,
    title: str,
    message: str,
    type_: NotificationType = "info",
) -> Notification:
    """Build an unread notification stamped with the current time."""
    return Notification(
        id=notification_id,
        user_id=user_id,
        title=title,
        message=message,
        type=type_,
        read=False,
        timestamp=now_iso(),
    )
