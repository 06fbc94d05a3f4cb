"""
Pydantic schemas for User and Group models.

This module defines the read projections used to serialize service
payloads. Only the fields listed here ever leave the service.
"""

from pydantic import BaseModel
from typing import Any, Optional, List


class UserSummary(BaseModel):
    """Summary schema for user references inside a group."""
    id: int
    login: str
    age: Optional[int] = None

    class Config:
        from_attributes = True


class GroupBase(BaseModel):
    """Base Group schema with common attributes."""
    name: str
    permissions: Optional[Any] = None


class GroupResponse(GroupBase):
    """Schema for a single group without its members."""
    id: int

    class Config:
        from_attributes = True


class GroupDetailResponse(GroupResponse):
    """Group with its members projected to login, age and id."""
    users: List[UserSummary] = []

    class Config:
        from_attributes = True
