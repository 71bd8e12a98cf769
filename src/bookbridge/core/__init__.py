"""Core — The aggregation facade over provider adapters."""

from bookbridge.core.facade import BookSearchFacade

__all__ = ["BookSearchFacade"]
