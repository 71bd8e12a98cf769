"""API dependencies — Dependency injection for FastAPI endpoints."""

from __future__ import annotations

from bookbridge.core.facade import BookSearchFacade

# Global facade instance (set during application lifespan)
_facade: BookSearchFacade | None = None


def set_facade(facade: BookSearchFacade | None) -> None:
    """Set the global facade instance (called during app lifespan)."""
    global _facade
    _facade = facade


def get_facade() -> BookSearchFacade:
    """Get the global book search facade.

    Raises:
        RuntimeError: If the facade is not initialized.
    """
    if _facade is None:
        raise RuntimeError("Book search facade not initialized. Is the server running?")
    return _facade
