"""
API v1 package.

Contains versioned API routes for the Speaker Registration API.
"""

from speaker_registration.api.v1.routes import router

__all__ = ["router"]
