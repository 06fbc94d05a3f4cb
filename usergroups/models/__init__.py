"""
Database models package.

This module imports all SQLAlchemy models to ensure they are
registered with the database metadata for table creation.
"""

from usergroups.models.users import User, Group, UserGroupRelation

__all__ = [
    "User",
    "Group",
    "UserGroupRelation"
]
