"""Web service exposing the live airport snapshot (FastAPI)."""
