"""
k6-operator TestRun으로 스크립트를 제출하는 전략

ConfigMap 생성 → TestRun 생성 후 바로 반환한다 (fire-and-forget).
실행 상태 조회와 메트릭 수집은 이 경로에서 하지 않는다.
"""
import asyncio
import json
import logging
from typing import Any, Optional

from app.common.exception.load_test_exception import OrchestratorSubmissionError
from app.schemas.load_test.run_result import ClusterRunResult
from app.services.testing.execution_strategy import ExecutionMode, ExecutionStrategy, PreparedScript
from k8s.test_run_service import TestRunService

logger = logging.getLogger(__name__)

MESSAGE_SUBMITTED = "Test submitted to Kubernetes cluster"


def extract_error_details(error: Exception) -> Any:
    """Kubernetes API 오류 body가 있으면 body를, 없으면 오류 메시지를 반환"""
    body = getattr(error, "body", None)
    if body:
        if isinstance(body, bytes):
            body = body.decode("utf-8", errors="replace")
        try:
            return json.loads(body)
        except (TypeError, ValueError):
            return body
    return str(error)


class ClusterExecutionStrategy(ExecutionStrategy):
    """변환된 스크립트를 ConfigMap으로 올리고 TestRun을 생성"""

    mode = ExecutionMode.CLUSTER

    def __init__(self, test_run_service: Optional[TestRunService] = None):
        self.test_run_service = test_run_service or TestRunService()

    @staticmethod
    def job_id_for(prepared: PreparedScript) -> str:
        return f"k6-test-{prepared.run_id}"

    @staticmethod
    def config_map_name_for(prepared: PreparedScript) -> str:
        return f"k6-script-{prepared.run_id}"

    async def execute(self, prepared: PreparedScript) -> ClusterRunResult:
        job_id = self.job_id_for(prepared)
        config_map_name = self.config_map_name_for(prepared)
        namespace = self.test_run_service.namespace

        # 1. 스크립트 ConfigMap 생성
        try:
            await asyncio.to_thread(
                self.test_run_service.create_script_config_map, config_map_name, prepared.script_text
            )
        except Exception as e:
            logger.error(f"[{prepared.run_id}] ConfigMap 생성 실패: {e}")
            raise OrchestratorSubmissionError("config_map", extract_error_details(e)) from e

        # 2. TestRun 생성 (실패시 앞에서 만든 ConfigMap 정리)
        try:
            await asyncio.to_thread(self.test_run_service.create_test_run, job_id, config_map_name)
        except Exception as e:
            logger.error(f"[{prepared.run_id}] TestRun 생성 실패: {e}")
            await self._rollback_config_map(config_map_name)
            raise OrchestratorSubmissionError("test_run", extract_error_details(e)) from e

        logger.info(f"[{prepared.run_id}] TestRun '{job_id}' submitted to namespace '{namespace}'")
        return ClusterRunResult(
            job_id=job_id,
            config_map_name=config_map_name,
            namespace=namespace,
            message=MESSAGE_SUBMITTED,
        )

    async def _rollback_config_map(self, config_map_name: str) -> None:
        deleted = await asyncio.to_thread(self.test_run_service.delete_config_map, config_map_name)
        if not deleted:
            logger.error(f"Orphaned ConfigMap left in cluster: {config_map_name}")
