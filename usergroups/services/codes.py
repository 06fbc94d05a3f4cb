"""
Result codes shared by all services and their HTTP-style status mapping.
"""

from enum import Enum
from typing import Dict, Union


class ResultCode(str, Enum):
    """Outcome code carried by every service result."""
    SUCCESS = "SUCCESS"
    NOT_FOUND = "NOT_FOUND"
    BAD_DATA = "BAD_DATA"
    SOMETHING_WENT_WRONG = "SOMETHING_WENT_WRONG"


DEFAULT_CODE = ResultCode.SOMETHING_WENT_WRONG
DEFAULT_ERROR_MESSAGE = "Something went wrong"

CODES_TO_STATUS_CODES: Dict[ResultCode, int] = {
    ResultCode.SUCCESS: 200,
    ResultCode.BAD_DATA: 400,
    ResultCode.NOT_FOUND: 404,
    ResultCode.SOMETHING_WENT_WRONG: 500,
}

DEFAULT_ERROR_STATUS = CODES_TO_STATUS_CODES[DEFAULT_CODE]


def status_code_for(code: Union[ResultCode, str, None]) -> int:
    """Map a result code to an HTTP status, falling back to the default error status."""
    try:
        return CODES_TO_STATUS_CODES[ResultCode(code)]
    except ValueError:
        return DEFAULT_ERROR_STATUS
