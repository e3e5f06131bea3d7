"""
Common schemas shared by all endpoints.
"""

from pydantic import BaseModel


class ErrorPayload(BaseModel):
    """Error body returned with 400 responses. Either field may be missing."""
    error_code: str | None = None
    error_message: str | None = None
