"""Shareable link and error response models."""
from typing import Optional

from pydantic import BaseModel


class LinkResponse(BaseModel):
    link: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
