"""
Domain Services

Business logic services for each domain entity. Domain services check
preconditions, delegate persistence to SQLAlchemy and report outcomes
as ServiceResult values.

Available Domain Services:
=========================

1. **GroupsService** - Group CRUD and user membership management
"""

from .group_service import GroupsService

__all__ = [
    'GroupsService'
]
