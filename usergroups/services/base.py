"""
Base Service Classes and Utilities

This module provides the foundation for all service layer implementations:
the service error hierarchy, the uniform result type returned by every
service operation, and the decorator that turns raised errors into results.
"""

import logging
from typing import Any, Dict, Optional, Generic, TypeVar, Callable
from dataclasses import dataclass
from functools import wraps

from usergroups.services.codes import (
    ResultCode, DEFAULT_CODE, DEFAULT_ERROR_MESSAGE, status_code_for
)

logger = logging.getLogger(__name__)

T = TypeVar('T')


class ServiceError(Exception):
    """Base exception for service layer errors."""

    def __init__(self, message: str, error_code: ResultCode = DEFAULT_CODE, details: Dict[str, Any] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class NotFoundError(ServiceError):
    """Referenced resource is absent."""

    def __init__(self, resource_type: str, identifier: Any = None):
        super().__init__(
            f"{resource_type} not found",
            ResultCode.NOT_FOUND,
            {"resource_type": resource_type, "identifier": identifier}
        )


class ConflictError(ServiceError):
    """Caller-supplied data collides with existing state."""

    def __init__(self, message: str, conflicting_resource: Any = None):
        super().__init__(message, ResultCode.BAD_DATA, {"conflicting_resource": conflicting_resource})


@dataclass
class ServiceResult(Generic[T]):
    """Standard result type for service operations."""
    success: bool
    code: ResultCode
    message: Optional[str] = None
    data: Optional[T] = None

    @classmethod
    def success_result(cls, data: T = None) -> 'ServiceResult[T]':
        """Create a successful result."""
        return cls(success=True, code=ResultCode.SUCCESS, data=data)

    @classmethod
    def error_result(cls, error: ServiceError) -> 'ServiceResult[T]':
        """Create an error result."""
        return cls(success=False, code=error.error_code, message=error.message)

    @classmethod
    def from_exception(cls, exc: Exception) -> 'ServiceResult[T]':
        """Create error result from exception, hiding anything unexpected."""
        if isinstance(exc, ServiceError):
            return cls.error_result(exc)
        return cls(success=False, code=DEFAULT_CODE, message=DEFAULT_ERROR_MESSAGE)

    @property
    def status_code(self) -> int:
        return status_code_for(self.code)

    def to_dict(self) -> Dict[str, Any]:
        """Render as a plain dict, leaving out message and data when absent."""
        result = {"success": self.success, "code": self.code.value}
        if self.message is not None:
            result["message"] = self.message
        if self.data is not None:
            result["data"] = self.data
        return result


def service_method(func: Callable) -> Callable:
    """Decorator for service methods with automatic error handling and logging."""

    @wraps(func)
    def wrapper(self, *args, **kwargs):
        method_name = f"{self.__class__.__name__}.{func.__name__}"
        logger.info(f"[{method_name}] Starting operation")

        try:
            result = func(self, *args, **kwargs)

            if isinstance(result, ServiceResult) and not result.success:
                logger.error(f"[{method_name}] Operation failed: {result.message}")
            else:
                logger.info(f"[{method_name}] Operation completed successfully")

            return result

        except ServiceError as e:
            logger.error(f"[{method_name}] Service error: {e.message}")
            return ServiceResult.error_result(e)
        except Exception as e:
            logger.exception(f"[{method_name}] Unexpected error: {e}")
            return ServiceResult.from_exception(e)

    return wrapper


class BaseService:
    """Base class for all services."""

    def __init__(self, name: str = None):
        self.name = name or self.__class__.__name__
        self.logger = logging.getLogger(f"services.{self.name}")
