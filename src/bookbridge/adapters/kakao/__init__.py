"""Kakao adapter — Daum book search API."""

from bookbridge.adapters.kakao.adapter import KakaoAdapter

__all__ = ["KakaoAdapter"]
