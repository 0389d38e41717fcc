"""fixtures.py — Seed data for every portal entity.

The mock store is built from these records at startup and on every reset.
Data mirrors a small journal: one author, one reviewer, one editor, and
four papers spread across the review pipeline.

Design principles:
    - Stable integer ids so cross-entity references line up
    - Fixed dates so demos and tests are reproducible
    - Covers every dashboard state (published, under review, unpaid submission)
    - Zero external dependencies

Called by: store.py
Depends on: Nothing
"""

from __future__ import annotations

from typing import Any

# All demo accounts share this password.
DEMO_PASSWORD = "password123"

# ─── Users ────────────────────────────────────────────────────────────────────

MOCK_USERS: list[dict[str, Any]] = [
    {
        "id": 1,
        "email": "author@example.com",
        "password": DEMO_PASSWORD,
        "name": "Dr. Sarah Johnson",
        "role": "author",
        "affiliation": "University of Technology",
        "department": "Computer Science",
    },
    {
        "id": 2,
        "email": "reviewer@example.com",
        "password": DEMO_PASSWORD,
        "name": "Prof. Michael Chen",
        "role": "reviewer",
        "affiliation": "Stanford University",
        "department": "Computer Science",
        "expertise": ["Machine Learning", "Artificial Intelligence", "Data Science"],
    },
    {
        "id": 3,
        "email": "admin@example.com",
        "password": DEMO_PASSWORD,
        "name": "Dr. Emily Rodriguez",
        "role": "admin",
        "affiliation": "Journal Editorial Board",
        "department": "Editorial",
    },
]

# ─── Papers ───────────────────────────────────────────────────────────────────

MOCK_PAPERS: list[dict[str, Any]] = [
    {
        "id": 1,
        "title": "Advanced Machine Learning Techniques for Natural Language Processing",
        "authors": ["Dr. Sarah Johnson", "Dr. Alex Thompson"],
        "abstract": (
            "This paper presents novel approaches to improving natural language "
            "processing through advanced machine learning techniques..."
        ),
        "keywords": ["Machine Learning", "NLP", "Deep Learning", "Text Processing"],
        "status": "published",
        "submission_date": "2024-01-15",
        "publication_date": "2024-03-20",
        "doi": "10.1000/example.2024.001",
        "pdf_url": "/papers/paper1.pdf",
        "category": "Computer Science",
        "word_count": 8500,
        "citation_count": 12,
    },
    {
        "id": 2,
        "title": "Quantum Computing Applications in Cryptography",
        "authors": ["Prof. David Wilson", "Dr. Lisa Park"],
        "abstract": (
            "We explore the potential of quantum computing to revolutionize "
            "cryptographic systems and security protocols..."
        ),
        "keywords": ["Quantum Computing", "Cryptography", "Security", "Quantum Algorithms"],
        "status": "published",
        "submission_date": "2024-02-01",
        "publication_date": "2024-04-15",
        "doi": "10.1000/example.2024.002",
        "pdf_url": "/papers/paper2.pdf",
        "category": "Computer Science",
        "word_count": 9200,
        "citation_count": 8,
    },
    {
        "id": 3,
        "title": "Sustainable Energy Solutions for Smart Cities",
        "authors": ["Dr. Maria Garcia", "Prof. James Brown"],
        "abstract": (
            "This research investigates sustainable energy solutions and their "
            "implementation in smart city infrastructure..."
        ),
        "keywords": ["Sustainable Energy", "Smart Cities", "Renewable Energy", "Urban Planning"],
        "status": "under_review",
        "submission_date": "2024-03-10",
        "category": "Environmental Science",
        "word_count": 7800,
        "assigned_reviewers": [2],
        "review_deadline": "2024-04-15",
    },
    {
        "id": 4,
        "title": "Biomedical Applications of Artificial Intelligence",
        "authors": ["Dr. Robert Kim", "Dr. Jennifer Lee"],
        "abstract": (
            "We present comprehensive analysis of AI applications in biomedical "
            "research and clinical practice..."
        ),
        "keywords": ["Artificial Intelligence", "Biomedical", "Healthcare", "Machine Learning"],
        "status": "submitted",
        "submission_date": "2024-03-20",
        "category": "Biomedical Engineering",
        "word_count": 9500,
        "submission_fee": 150,
        "payment_status": "pending",
        "submitted_by": 1,
    },
]

# ─── Reviews ──────────────────────────────────────────────────────────────────

MOCK_REVIEWS: list[dict[str, Any]] = [
    {
        "id": 1,
        "paper_id": 3,
        "reviewer_id": 2,
        "reviewer_name": "Prof. Michael Chen",
        "rating": 4,
        "comments": (
            "This is a well-researched paper with significant contributions to the "
            "field. The methodology is sound and the results are promising. Minor "
            "revisions suggested."
        ),
        "recommendation": "accept_with_revisions",
        "submitted_date": "2024-04-10",
        "status": "completed",
    },
]

# ─── Notifications ────────────────────────────────────────────────────────────

MOCK_NOTIFICATIONS: list[dict[str, Any]] = [
    {
        "id": 1,
        "user_id": 1,
        "title": "Paper Submission Confirmed",
        "message": (
            'Your paper "Biomedical Applications of Artificial Intelligence" '
            "has been successfully submitted."
        ),
        "type": "success",
        "read": False,
        "timestamp": "2024-03-20T10:30:00Z",
    },
    {
        "id": 2,
        "user_id": 2,
        "title": "New Review Assignment",
        "message": 'You have been assigned to review "Sustainable Energy Solutions for Smart Cities".',
        "type": "info",
        "read": False,
        "timestamp": "2024-03-15T14:20:00Z",
    },
]
