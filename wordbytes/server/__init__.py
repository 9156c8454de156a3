"""HTTP API for the word codec (FastAPI)."""
