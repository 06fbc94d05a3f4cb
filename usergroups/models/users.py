"""
User and Group SQLAlchemy models.

This module defines the database models for users, groups and the
join records linking them. The many-to-many association is declared
here, on the models, rather than wired up at service construction.
"""

from sqlalchemy import Column, Integer, String, ForeignKey, JSON
from sqlalchemy.orm import relationship

from usergroups.core.database import Base


class UserGroupRelation(Base):
    """
    Join record linking one user to one group.

    The (user_id, group_id) pair is the primary key, so a user
    can appear in a group at most once.
    """
    __tablename__ = "user_group_relations"

    user_id = Column(Integer, ForeignKey('users.id'), primary_key=True)
    group_id = Column(Integer, ForeignKey('groups.id'), primary_key=True)

    def __repr__(self):
        return f"<UserGroupRelation(user_id={self.user_id}, group_id={self.group_id})>"


class User(Base):
    """
    User model.

    Users are created and owned by a separate collaborator; groups only
    reference them by id.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    login = Column(String(100), nullable=False)
    age = Column(Integer, nullable=True)

    def __repr__(self):
        return f"<User(login='{self.login}')>"


class Group(Base):
    """
    Group model: a named set of permissions owning zero or more user memberships.
    """
    __tablename__ = "groups"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, index=True, nullable=False)

    # Opaque to this service; stored and returned as-is
    permissions = Column(JSON, nullable=True)

    # Read side of the membership; writes go through UserGroupRelation
    users = relationship(
        "User",
        secondary="user_group_relations",
        viewonly=True
    )

    def __repr__(self):
        return f"<Group(name='{self.name}')>"
