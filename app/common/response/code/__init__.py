from app.common.response.code.base_code import BaseCode
from app.common.response.code.success_code import SuccessCode
from app.common.response.code.failure_code import FailureCode

__all__ = [
    'FailureCode',
    'SuccessCode',
    'BaseCode',
]
