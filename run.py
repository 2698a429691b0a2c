"""
Entry point:  uvicorn run:app --reload
"""

from backoffice.app import app

__all__ = ["app"]
