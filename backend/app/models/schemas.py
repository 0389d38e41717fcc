"""Pydantic v2 schemas for portal entities and API request/response bodies."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

Role = Literal["author", "reviewer", "admin"]
PaperStatus = Literal["submitted", "under_review", "published", "rejected"]
PaymentStatus = Literal["pending", "paid"]
Recommendation = Literal["accept", "accept_with_revisions", "reject_with_revisions", "reject"]
NotificationType = Literal["info", "success", "warning", "error"]

PAPER_STATUSES: tuple[str, ...] = ("submitted", "under_review", "published", "rejected")

# ─── Health ────────────────────────────────────────────────────────────────────


class HealthResponse(BaseModel):
    status: str = "healthy"
    store: str = "mock (in-memory)"
    version: str = "0.1.0"
    environment: dict = Field(default_factory=dict)


# ─── Users ─────────────────────────────────────────────────────────────────────


class UserPublic(BaseModel):
    """User as returned to clients. Never carries the password."""

    id: int
    email: str
    name: str
    role: Role
    affiliation: str
    department: str = ""
    expertise: list[str] | None = None


class User(UserPublic):
    # Plaintext, demo only.
    password: str

    def public(self) -> UserPublic:
        return UserPublic.model_validate(self.model_dump(exclude={"password"}))


class LoginRequest(BaseModel):
    email: str
    password: str


class RegisterRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=6)
    name: str = Field(..., min_length=1, max_length=200)
    affiliation: str = Field(..., min_length=1, max_length=200)
    department: str = ""
    # Accepted for form compatibility; registration always creates authors.
    role: Role | None = None
    expertise: list[str] | None = None

    @field_validator("email", "name", "affiliation")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class AuthResult(BaseModel):
    success: bool
    user: UserPublic | None = None
    error: str | None = None


# ─── Papers ────────────────────────────────────────────────────────────────────


class Paper(BaseModel):
    id: int
    title: str
    authors: list[str]
    abstract: str = ""
    keywords: list[str] = Field(default_factory=list)
    status: PaperStatus = "submitted"
    submission_date: str
    publication_date: str | None = None
    doi: str | None = None
    pdf_url: str | None = None
    category: str = ""
    word_count: int | None = None
    citation_count: int | None = None
    assigned_reviewers: list[int] | None = None
    review_deadline: str | None = None
    submission_fee: int | None = None
    payment_status: PaymentStatus | None = None
    submitted_by: int | None = None


class PaperSubmission(BaseModel):
    """Paper submission body.

    ``status`` is accepted so legacy clients can keep sending it, but new
    papers always start as ``submitted``.
    """

    title: str = Field(..., min_length=1, max_length=500)
    authors: list[str] = Field(..., min_length=1)
    abstract: str = ""
    keywords: list[str] = Field(default_factory=list)
    category: str = ""
    word_count: int | None = None
    pdf_url: str | None = None
    status: PaperStatus | None = None
    submission_fee: int | None = None
    payment_status: PaymentStatus | None = None
    submitted_by: int | None = None


class PaperResult(BaseModel):
    success: bool
    paper: Paper | None = None
    error: str | None = None


# ─── Reviews ───────────────────────────────────────────────────────────────────


class Review(BaseModel):
    id: int
    paper_id: int
    reviewer_id: int
    reviewer_name: str
    rating: int = Field(..., ge=1, le=5)
    comments: str
    recommendation: Recommendation
    submitted_date: str
    status: str = "completed"


class ReviewSubmission(BaseModel):
    paper_id: int
    reviewer_id: int
    reviewer_name: str | None = None
    rating: int = Field(..., ge=1, le=5)
    comments: str = Field(..., min_length=1)
    recommendation: Recommendation


class ReviewResult(BaseModel):
    success: bool
    review: Review | None = None
    error: str | None = None


# ─── Notifications ─────────────────────────────────────────────────────────────


class Notification(BaseModel):
    id: int
    user_id: int
    title: str
    message: str
    type: NotificationType = "info"
    read: bool = False
    timestamp: str


# ─── Admin ─────────────────────────────────────────────────────────────────────


class AssignReviewerRequest(BaseModel):
    reviewer_id: int


class OperationResult(BaseModel):
    success: bool
    error: str | None = None


# ─── Dashboards ────────────────────────────────────────────────────────────────


class StatusStats(BaseModel):
    submitted: int = 0
    under_review: int = 0
    published: int = 0
    rejected: int = 0


class ReviewerStats(BaseModel):
    assigned: int = 0
    completed: int = 0
    pending: int = 0


class AuthorDashboard(BaseModel):
    papers: list[Paper]
    stats: StatusStats
    pending_payment: list[Paper]


class ReviewerDashboard(BaseModel):
    assigned_papers: list[Paper]
    completed_reviews: list[Review]
    stats: ReviewerStats


class AdminDashboard(BaseModel):
    papers: list[Paper]
    stats: StatusStats
