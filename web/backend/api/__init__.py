"""API routes for the cover service"""

from web.backend.api import cover

__all__ = ["cover"]
