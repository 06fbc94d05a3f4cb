"""Tests for result codes, ServiceResult and the service_method decorator."""

import pytest

from usergroups.services import (
    BaseService, ServiceResult, ResultCode, NotFoundError, ConflictError,
    CODES_TO_STATUS_CODES, status_code_for
)
from usergroups.services.base import service_method


class DummyService(BaseService):

    @service_method
    def ok(self, value):
        return ServiceResult.success_result({"value": value})

    @service_method
    def missing(self):
        raise NotFoundError("Widget", 7)

    @service_method
    def conflict(self):
        raise ConflictError("Widget exists", "w")

    @service_method
    def crash(self):
        raise RuntimeError("connection reset by peer")


@pytest.mark.parametrize(
    "code, status",
    [
        (ResultCode.SUCCESS, 200),
        (ResultCode.BAD_DATA, 400),
        (ResultCode.NOT_FOUND, 404),
        (ResultCode.SOMETHING_WENT_WRONG, 500),
        ("NOT_FOUND", 404),
        ("TEAPOT", 500),
        (None, 500),
    ],
)
def test_status_code_for(code, status):
    assert status_code_for(code) == status


def test_every_code_has_a_status():
    assert set(CODES_TO_STATUS_CODES) == set(ResultCode)


def test_success_result_to_dict_omits_empty_fields():
    assert ServiceResult.success_result().to_dict() == {"success": True, "code": "SUCCESS"}


def test_error_result_from_service_error():
    result = ServiceResult.error_result(NotFoundError("Group", 1))

    assert result.to_dict() == {"success": False, "code": "NOT_FOUND", "message": "Group not found"}
    assert result.status_code == 404


def test_from_exception_hides_details():
    result = ServiceResult.from_exception(ValueError("secret table name"))

    assert result.code == ResultCode.SOMETHING_WENT_WRONG
    assert result.message == "Something went wrong"
    assert "secret" not in str(result.to_dict())


def test_service_method_passes_results_through():
    result = DummyService().ok(3)

    assert result.success is True
    assert result.data == {"value": 3}


def test_service_method_converts_service_errors():
    service = DummyService()

    missing = service.missing()
    conflict = service.conflict()

    assert (missing.code, missing.message) == (ResultCode.NOT_FOUND, "Widget not found")
    assert (conflict.code, conflict.message) == (ResultCode.BAD_DATA, "Widget exists")
    assert conflict.status_code == 400


def test_service_method_logs_and_masks_unexpected_errors(caplog):
    result = DummyService().crash()

    assert result.success is False
    assert result.code == ResultCode.SOMETHING_WENT_WRONG
    assert result.message == "Something went wrong"
    assert "connection reset by peer" in caplog.text


def test_service_logger_name():
    assert DummyService().logger.name == "services.DummyService"
    assert BaseService("Custom").name == "Custom"
