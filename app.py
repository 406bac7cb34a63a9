"""ASGI entry point: `uvicorn app:app`."""
from showroom.api.main import app

__all__ = ["app"]
