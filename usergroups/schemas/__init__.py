"""
Pydantic schemas package.

Central place to access the serialization schemas for service payloads.
"""

from usergroups.schemas.users import (
    UserSummary, GroupBase, GroupResponse, GroupDetailResponse
)

__all__ = [
    "UserSummary",
    "GroupBase",
    "GroupResponse",
    "GroupDetailResponse"
]
