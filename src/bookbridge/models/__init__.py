"""Data models — Requests, provider responses, and call outcomes."""
