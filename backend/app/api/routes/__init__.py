from . import (
    admin,
    auth,
    dashboard,
    health,
    notifications,
    papers,
    reviews,
)

__all__ = [
    "admin",
    "auth",
    "dashboard",
    "health",
    "notifications",
    "papers",
    "reviews",
]
