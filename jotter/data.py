"""
Pydantic schemas for the Jotter HTTP API
"""
from pydantic import BaseModel


class PingResponse(BaseModel):
    """
    Schema for ping response.
    """

    status: str


class VersionResponse(BaseModel):
    """
    Schema for responses on /version endpoint.
    """

    version: str


class ErrorResponse(BaseModel):
    error: str
