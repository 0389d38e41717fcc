"""portal.py — Mock backend for the paper review portal.

Every method is a coroutine over the in-memory ``MockStore`` so callers
use the same await-based calling convention a real backend would need.
Expected failures (bad credentials, unknown ids) come back as typed
results with ``success=False`` and an ``error`` message; nothing here
raises for them.

Operations are linear scans over small lists and are not synchronized.
That holds up because the portal runs on a single event loop and no
operation awaits between reading and writing the store.

Called by: api/routes/*, tests
Depends on: mock/store.py, mock/factory.py, config.py
"""

from __future__ import annotations

import asyncio

import structlog

from app.config import Settings, get_settings
from app.mock.factory import (
    create_notification,
    create_paper,
    create_review,
    create_user,
    next_id,
    synthesize_doi,
    today,
)
from app.mock.store import MockStore, get_store
from app.models.schemas import (
    AuthResult,
    Notification,
    NotificationType,
    OperationResult,
    Paper,
    PaperResult,
    PaperSubmission,
    RegisterRequest,
    Review,
    ReviewResult,
    ReviewSubmission,
    User,
)

logger = structlog.get_logger()

INVALID_CREDENTIALS = "Invalid credentials"
PAPER_NOT_FOUND = "Paper not found"
REVIEWER_NOT_FOUND = "Reviewer not found"
NOTIFICATION_NOT_FOUND = "Notification not found"


def _coerce_id(value: int | str) -> int | None:
    """Accept ids as ints or numeric strings (path params, form values)."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class PortalAPI:
    """Asynchronous operations over the mock store."""

    def __init__(self, store: MockStore | None = None, settings: Settings | None = None) -> None:
        self.store = store or get_store()
        self.settings = settings or get_settings()

    async def _latency(self) -> None:
        delay = self.settings.mock_latency_seconds
        if delay > 0:
            await asyncio.sleep(delay)

    # ─── Authentication ───────────────────────────────────────────────────────

    async def login(self, email: str, password: str) -> AuthResult:
        """Match exact email and password against stored users."""
        await self._latency()
        user = next(
            (u for u in self.store.users if u.email == email and u.password == password),
            None,
        )
        if user is None:
            logger.info("login_failed", email=email)
            return AuthResult(success=False, error=INVALID_CREDENTIALS)
        logger.info("login_succeeded", user_id=user.id, role=user.role)
        return AuthResult(success=True, user=user.public())

    async def register(self, data: RegisterRequest) -> AuthResult:
        """Append a new author account.

        Emails are not checked for uniqueness, and the requested role is
        ignored: self-registration only ever creates authors.
        """
        await self._latency()
        user = create_user(next_id(self.store.users), data)
        self.store.users.append(user)
        logger.info("user_registered", user_id=user.id, email=user.email)
        return AuthResult(success=True, user=user.public())

    async def get_user(self, user_id: int) -> User | None:
        await self._latency()
        return self.store.find_user(user_id)

    async def get_reviewers(self) -> list[User]:
        """Users with the reviewer role, in registration order."""
        await self._latency()
        return [u for u in self.store.users if u.role == "reviewer"]

    # ─── Papers ───────────────────────────────────────────────────────────────

    async def get_published_papers(self) -> list[Paper]:
        await self._latency()
        return [p for p in self.store.papers if p.status == "published"]

    async def get_all_papers(self) -> list[Paper]:
        await self._latency()
        return list(self.store.papers)

    async def get_paper_by_id(self, paper_id: int | str) -> Paper | None:
        await self._latency()
        pid = _coerce_id(paper_id)
        if pid is None:
            return None
        return self.store.find_paper(pid)

    async def submit_paper(self, data: PaperSubmission) -> PaperResult:
        """Append a paper as ``submitted`` with today's date.

        A missing fee falls back to the configured submission fee, left
        pending until the author pays it.
        """
        await self._latency()
        if data.submission_fee is None:
            data = data.model_copy(update={"submission_fee": self.settings.submission_fee})
        if data.payment_status is None:
            data = data.model_copy(update={"payment_status": "pending"})

        paper = create_paper(next_id(self.store.papers), data)
        self.store.papers.append(paper)

        if paper.submitted_by is not None and self.store.find_user(paper.submitted_by):
            self._notify(
                paper.submitted_by,
                "Paper Submission Confirmed",
                f'Your paper "{paper.title}" has been successfully submitted.',
                "success",
            )

        logger.info("paper_submitted", paper_id=paper.id, title=paper.title)
        return PaperResult(success=True, paper=paper)

    async def pay_submission_fee(self, paper_id: int | str) -> PaperResult:
        """Mark a paper's submission fee as paid."""
        await self._latency()
        pid = _coerce_id(paper_id)
        paper = self.store.find_paper(pid) if pid is not None else None
        if paper is None:
            return PaperResult(success=False, error=PAPER_NOT_FOUND)
        paper.payment_status = "paid"
        logger.info("submission_fee_paid", paper_id=paper.id)
        return PaperResult(success=True, paper=paper)

    # ─── Reviews ──────────────────────────────────────────────────────────────

    async def get_reviews_by_reviewer(self, reviewer_id: int) -> list[Review]:
        await self._latency()
        return [r for r in self.store.reviews if r.reviewer_id == reviewer_id]

    async def get_reviews_by_paper(self, paper_id: int) -> list[Review]:
        await self._latency()
        return [r for r in self.store.reviews if r.paper_id == paper_id]

    async def submit_review(self, data: ReviewSubmission) -> ReviewResult:
        """Append a completed review for an existing paper by a reviewer."""
        await self._latency()
        if self.store.find_paper(data.paper_id) is None:
            return ReviewResult(success=False, error=PAPER_NOT_FOUND)
        reviewer = self.store.find_user(data.reviewer_id)
        if reviewer is None or reviewer.role != "reviewer":
            return ReviewResult(success=False, error=REVIEWER_NOT_FOUND)

        review = create_review(next_id(self.store.reviews), data, reviewer.name)
        self.store.reviews.append(review)
        logger.info(
            "review_submitted",
            review_id=review.id,
            paper_id=review.paper_id,
            reviewer_id=review.reviewer_id,
            recommendation=review.recommendation,
        )
        return ReviewResult(success=True, review=review)

    # ─── Editorial ────────────────────────────────────────────────────────────

    async def assign_reviewer(self, paper_id: int, reviewer_id: int) -> OperationResult:
        """Add a reviewer to a paper. The paper's status is left alone."""
        await self._latency()
        paper = self.store.find_paper(paper_id)
        if paper is None:
            return OperationResult(success=False, error=PAPER_NOT_FOUND)
        reviewer = self.store.find_user(reviewer_id)
        if reviewer is None or reviewer.role != "reviewer":
            return OperationResult(success=False, error=REVIEWER_NOT_FOUND)

        if paper.assigned_reviewers is None:
            paper.assigned_reviewers = []
        paper.assigned_reviewers.append(reviewer_id)

        self._notify(
            reviewer_id,
            "New Review Assignment",
            f'You have been assigned to review "{paper.title}".',
            "info",
        )
        logger.info("reviewer_assigned", paper_id=paper_id, reviewer_id=reviewer_id)
        return OperationResult(success=True)

    async def publish_paper(self, paper_id: int) -> OperationResult:
        """Publish a paper from any status, stamping the date and a DOI."""
        await self._latency()
        paper = self.store.find_paper(paper_id)
        if paper is None:
            return OperationResult(success=False, error=PAPER_NOT_FOUND)

        paper.status = "published"
        paper.publication_date = today()
        paper.doi = synthesize_doi(paper_id, self.settings.doi_prefix, self.settings.doi_year)
        logger.info("paper_published", paper_id=paper_id, doi=paper.doi)
        return OperationResult(success=True)

    # ─── Notifications ────────────────────────────────────────────────────────

    async def get_notifications(self, user_id: int) -> list[Notification]:
        await self._latency()
        return [n for n in self.store.notifications if n.user_id == user_id]

    async def mark_notification_read(self, notification_id: int) -> OperationResult:
        await self._latency()
        notification = self.store.find_notification(notification_id)
        if notification is None:
            return OperationResult(success=False, error=NOTIFICATION_NOT_FOUND)
        notification.read = True
        return OperationResult(success=True)

    def _notify(self, user_id: int, title: str, message: str, type_: NotificationType) -> Notification:
        notification = create_notification(
            next_id(self.store.notifications), user_id, title, message, type_
        )
        self.store.notifications.append(notification)
        return notification
