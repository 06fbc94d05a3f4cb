"""
Group Domain Service

This service handles group CRUD and user membership management. It checks
existence and uniqueness preconditions, delegates persistence to SQLAlchemy
and reports every outcome as a ServiceResult instead of raising.

Pre-checks run as separate reads before the write, so two concurrent callers
can both pass them. The unique constraint on the group name and the composite
key on the relation table turn such a race into SOMETHING_WENT_WRONG rather
than a duplicate row.
"""

from contextlib import nullcontext
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload, sessionmaker

from usergroups.models import Group, User, UserGroupRelation
from usergroups.schemas.users import GroupResponse, GroupDetailResponse
from usergroups.services.base import (
    BaseService, ServiceResult, service_method, NotFoundError, ConflictError
)


class GroupsService(BaseService):
    """Service for groups and their user memberships."""

    def __init__(
        self,
        session_factory: sessionmaker,
        groups_model=Group,
        users_model=User,
        user_group_model=UserGroupRelation
    ):
        super().__init__("GroupsService")
        self._session_factory = session_factory
        self.groups = groups_model
        self.users = users_model
        self.user_group = user_group_model

    def _session_scope(self, session: Optional[Session] = None):
        """Reuse the caller's session, or open (and later close) a new one."""
        if session is not None:
            return nullcontext(session)
        return self._session_factory()

    def _users_loader(self):
        # Members are exposed as login, age and id only
        return selectinload(self.groups.users).load_only(
            self.users.login, self.users.age, self.users.id
        )

    def exists_by_params(self, params: Dict[str, Any], model, session: Optional[Session] = None):
        """Return the first `model` row matching all of `params`, or None."""
        with self._session_scope(session) as db:
            return db.query(model).filter_by(**params).first()

    def exists_by_id(self, record_id: Any, model, options: Optional[List] = None, session: Optional[Session] = None):
        """Return the `model` row with primary key `record_id`, or None."""
        with self._session_scope(session) as db:
            query = db.query(model)
            if options:
                query = query.options(*options)
            return query.filter(model.id == record_id).first()

    @service_method
    def add(self, group_data: Dict[str, Any]) -> ServiceResult[Dict[str, Any]]:
        """Create a group whose name is not used yet."""
        name = group_data.get("name")
        permissions = group_data.get("permissions")

        with self._session_factory() as db:
            if self.exists_by_params({"name": name}, self.groups, session=db) is not None:
                raise ConflictError("Name exists", name)

            group = self.groups(name=name, permissions=permissions)
            db.add(group)
            db.commit()

            self.logger.info(f"Created group '{group.name}' with id {group.id}")
            return ServiceResult.success_result(GroupResponse.model_validate(group).model_dump())

    @service_method
    def update(self, group_id: Any, group_data: Dict[str, Any]) -> ServiceResult[None]:
        """Update name and/or permissions of an existing group."""
        values = {
            field: group_data[field]
            for field in ("name", "permissions")
            if field in group_data
        }

        with self._session_factory() as db:
            if self.exists_by_id(group_id, self.groups, session=db) is None:
                raise NotFoundError("Group", group_id)

            if values:
                db.query(self.groups).filter(self.groups.id == group_id).update(values)
                db.commit()

        return ServiceResult.success_result()

    @service_method
    def delete(self, group_id: Any) -> ServiceResult[None]:
        """Delete a group together with all of its memberships."""
        if self.exists_by_id(group_id, self.groups) is None:
            raise NotFoundError("Group", group_id)

        # Commits only if both deletes succeed
        try:
            with self._session_factory.begin() as db:
                db.query(self.user_group).filter(self.user_group.group_id == group_id).delete()
                db.query(self.groups).filter(self.groups.id == group_id).delete()
        except SQLAlchemyError:
            self.logger.warning(f"Delete of group {group_id} rolled back")
            raise

        self.logger.info(f"Deleted group {group_id}")
        return ServiceResult.success_result()

    @service_method
    def add_user_to_group(self, user_id: Any, group_id: Any) -> ServiceResult[None]:
        """Link an existing user to an existing group, once."""
        with self._session_factory() as db:
            user = self.exists_by_id(user_id, self.users, session=db)
            group = self.exists_by_id(group_id, self.groups, session=db)

            if user is not None and group is not None:
                relation = {"user_id": user_id, "group_id": group_id}
                if self.exists_by_params(relation, self.user_group, session=db) is not None:
                    raise ConflictError("User is in group already", relation)

                db.add(self.user_group(**relation))
                db.commit()
                self.logger.info(f"Added user {user_id} to group {group_id}")
                return ServiceResult.success_result()

            if user is not None:
                raise NotFoundError("Group", group_id)
            if group is not None:
                raise NotFoundError("User", user_id)
            raise NotFoundError("User and Group", {"user_id": user_id, "group_id": group_id})

    @service_method
    def get_by_id(self, group_id: Any) -> ServiceResult[Dict[str, Any]]:
        """Get a group with its members."""
        with self._session_factory() as db:
            group = self.exists_by_id(group_id, self.groups, options=[self._users_loader()], session=db)
            if group is None:
                raise NotFoundError("Group", group_id)

            return ServiceResult.success_result(GroupDetailResponse.model_validate(group).model_dump())

    @service_method
    def get(self) -> ServiceResult[List[Dict[str, Any]]]:
        """Get all groups, each with its members."""
        with self._session_factory() as db:
            groups = (
                db.query(self.groups)
                .options(self._users_loader())
                .order_by(self.groups.id)
                .all()
            )
            return ServiceResult.success_result(
                [GroupDetailResponse.model_validate(group).model_dump() for group in groups]
            )
