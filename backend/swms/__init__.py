"""FastAPI service exposing the SWMS risk engines."""
