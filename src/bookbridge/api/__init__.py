"""HTTP API — FastAPI entry point delegating to the book search facade."""
