"""Base adapter interface — Shared transport and outcome glue for providers."""

from bookbridge.adapters.base.adapter import AdapterHealth, BookSearchAdapter

__all__ = ["AdapterHealth", "BookSearchAdapter"]
