"""Observability — Structured logging setup."""
