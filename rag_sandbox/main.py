"""
ASGI entrypoint.

    uvicorn rag_sandbox.main:app --reload
"""

from .api.main import app

__all__ = ["app"]
