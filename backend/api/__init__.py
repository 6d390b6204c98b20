"""
FoodShare API package.

Provides the FastAPI application for the community food-sharing board.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
