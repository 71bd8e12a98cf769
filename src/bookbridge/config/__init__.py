"""Configuration — Settings and per-provider configuration models."""
