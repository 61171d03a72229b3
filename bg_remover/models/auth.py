"""
Authenticated identity passed into every job action.

Dependencies: pydantic
System role: Caller identity contract
"""

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """The current user as resolved by the upstream identity provider."""

    id: str = Field(..., min_length=1, description="Stable user identifier")
