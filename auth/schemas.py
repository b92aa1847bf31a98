"""
Pydantic schemas for response models in the auth module.
"""

from typing import Optional

from pydantic import BaseModel


class SecretOut(BaseModel):
    """Schema for a successful /secret response."""
    message: Optional[str] = None
    authenticated: bool = True


class ErrorOut(BaseModel):
    """Schema for a 401 response body."""
    error: str
