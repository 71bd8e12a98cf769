"""Aladin adapter — TTB ItemSearch API."""

from bookbridge.adapters.aladin.adapter import AladinAdapter

__all__ = ["AladinAdapter"]
