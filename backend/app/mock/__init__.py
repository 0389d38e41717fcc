"""Mock data package for the paper review portal.

Stands in for a real database: seed records, the mutable in-memory
store, and builders for new records.

Contents:
    fixtures.py  — Static seed data (users, papers, reviews, notifications)
    store.py     — Process-wide store loaded from the fixtures
    factory.py   — Builders for records created at runtime, DOI synthesis

Called by: services/portal.py
Depends on: models/schemas.py
"""
