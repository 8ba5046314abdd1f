"""
부하테스트 실행 경로에서 사용하는 예외 분류

모든 예외는 ApiException을 상속하므로 exception handler에서
ResponseTemplate.fail 형태로 변환되며, data에는 기계가 읽을 수 있는
kind와 상세 정보(detail)가 담긴다.
"""
from typing import Any, Dict, Optional

from app.common.exception.api_exception import ApiException
from app.common.response.code import FailureCode


class LoadTestException(ApiException):
    """단일 부하테스트 실행(run) 안에서 발생한 실패"""

    def __init__(self, code: FailureCode = FailureCode.LOAD_TEST_FAILED, message: str = None,
                 detail: Optional[Dict[str, Any]] = None):
        self.detail = detail or {}
        super().__init__(code, message, data={"kind": code.name, **self.detail})

    @property
    def kind(self) -> str:
        return self.code.name


class ScriptResolutionError(LoadTestException):
    """실행할 스크립트 본문을 확보하지 못함 (재요청으로 복구 가능, 내부 재시도 없음)"""

    def __init__(self, code: FailureCode = FailureCode.SCRIPT_NOT_PROVIDED, message: str = None,
                 detail: Optional[Dict[str, Any]] = None):
        super().__init__(code, message, detail)


class ProcessSpawnError(LoadTestException):
    """k6 프로세스를 시작하지 못함"""

    def __init__(self, command: str, reason: str):
        super().__init__(
            FailureCode.K6_PROCESS_SPAWN_FAILED,
            detail={"command": command, "error": reason},
        )


class ProcessExecutionError(LoadTestException):
    """k6가 알 수 없는 non-zero exit code로 종료됨"""

    def __init__(self, exit_code: int, stdout: str, stderr: str):
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr
        super().__init__(
            FailureCode.K6_PROCESS_EXECUTION_FAILED,
            detail={"exit_code": exit_code, "error": stderr, "output": stdout},
        )


class OrchestratorSubmissionError(LoadTestException):
    """ConfigMap 또는 TestRun 생성 실패"""

    def __init__(self, step: str, details: Any):
        self.step = step
        self.details = details
        super().__init__(
            FailureCode.ORCHESTRATOR_SUBMISSION_FAILED,
            detail={"step": step, "details": details},
        )
