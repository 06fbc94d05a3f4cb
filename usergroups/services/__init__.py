"""
Service Layer

Business logic sitting between callers (an HTTP layer, scripts, tests) and
the SQLAlchemy models. Every public service operation returns a
ServiceResult carrying one of the ResultCode values; nothing is raised
to the caller.

Usage Example:
=============

```python
from usergroups.core.database import SessionLocal
from usergroups.services import GroupsService

groups_service = GroupsService(SessionLocal)

result = groups_service.add({"name": "Admins", "permissions": ["READ", "WRITE"]})
if result.success:
    groups_service.add_user_to_group(user_id=1, group_id=result.data["id"])

response_body, status = result.to_dict(), result.status_code
```
"""

from .base import BaseService, ServiceError, ServiceResult, NotFoundError, ConflictError
from .codes import ResultCode, CODES_TO_STATUS_CODES, status_code_for
from .domain import *

__all__ = [
    'BaseService',
    'ServiceError',
    'ServiceResult',
    'NotFoundError',
    'ConflictError',
    'ResultCode',
    'CODES_TO_STATUS_CODES',
    'status_code_for',
    'GroupsService'
]
