"""
Main entry point for the Glossário service
"""

from .api import app

# Export the FastAPI app for deployment
__all__ = ["app"]
