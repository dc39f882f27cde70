"""HTTP (FastAPI) adapter."""
