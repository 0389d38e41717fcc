"""store.py — Process-wide in-memory store backing the portal.

Holds validated copies of the seed fixtures. Every mutation the portal
performs lands here, and nothing is persisted: a restart (or ``reset()``)
brings back the seed state.

Called by: services/portal.py, api/deps.py, tests/conftest.py
Depends on: fixtures.py, models/schemas.py
"""

from __future__ import annotations

from app.mock.fixtures import MOCK_NOTIFICATIONS, MOCK_PAPERS, MOCK_REVIEWS, MOCK_USERS
from app.models.schemas import Notification, Paper, Review, User


class MockStore:
    """Mutable lists of users, papers, reviews, and notifications."""

    def __init__(self) -> None:
        self.users: list[User] = []
        self.papers: list[Paper] = []
        self.reviews: list[Review] = []
        self.notifications: list[Notification] = []
        self.reset()

    def reset(self) -> None:
        """Drop every change and reload the seed fixtures."""
        self.users = [User.model_validate(u) for u in MOCK_USERS]
        self.papers = [Paper.model_validate(p) for p in MOCK_PAPERS]
        self.reviews = [Review.model_validate(r) for r in MOCK_REVIEWS]
        self.notifications = [Notification.model_validate(n) for n in MOCK_NOTIFICATIONS]

    # ─── Lookups ──────────────────────────────────────────────────────────────

    def find_user(self, user_id: int) -> User | None:
        return next((u for u in self.users if u.id == user_id), None)

    def find_paper(self, paper_id: int) -> Paper | None:
        return next((p for p in self.papers if p.id == paper_id), None)

    def find_notification(self, notification_id: int) -> Notification | None:
        return next((n for n in self.notifications if n.id == notification_id), None)


_store: MockStore | None = None


def get_store() -> MockStore:
    """Return the shared store, creating it on first use."""
    global _store
    if _store is None:
        _store = MockStore()
    return _store
