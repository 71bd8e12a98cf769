"""Naver adapter — Naver Open API book search."""

from bookbridge.adapters.naver.adapter import NaverAdapter

__all__ = ["NaverAdapter"]
