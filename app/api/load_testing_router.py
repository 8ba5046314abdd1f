import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from kubernetes.client.rest import ApiException as KubernetesApiException
from pydantic import ValidationError

from app.common.exception.api_exception import ApiException
from app.common.response.code import FailureCode, SuccessCode
from app.common.response.response_template import ResponseTemplate
from app.dependencies import get_execution_dispatcher, get_test_run_service
from app.schemas.load_test.load_profile import LoadProfile
from app.schemas.load_test.run_result import ClusterRunResult
from app.schemas.load_test.script_source import ScriptSource
from app.services.testing.execution_dispatcher import ExecutionDispatcher
from k8s.test_run_service import TestRunService

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    path="/run",
    summary="K6 부하테스트 실행 API",
    description="""
    k6 스크립트에 부하 프로필(램프업 / 유지 / 램프다운)을 적용하여 실행합니다.

    ## 📝 요청 파라미터 (multipart/form-data)

    ### 스크립트 출처 (우선순위: 업로드 > 저장된 스크립트 > 인라인)
    - **file**: 업로드할 k6 스크립트 파일 (optional)
    - **selected_script_id / selected_environment / selected_application**: 저장된 스크립트 참조 (세 값 모두 필요)
    - **script**: 인라인 스크립트 본문 (optional)

    ### 부하 프로필
    - **ramp_up_vus / ramp_up_duration**: 램프업 단계 (vus > 0 일 때 적용)
    - **steady_vus / steady_duration**: 유지 단계 (vus > 0 일 때 적용)
    - **ramp_down_vus / ramp_down_duration**: 램프다운 단계 (vus = 0 허용)
    - duration 형식: "30s", "2m", "1m30s"
    - 활성 단계가 없으면 `vus: steady_vus 또는 10, duration: steady_duration 또는 '30s'` 로 실행합니다.

    ## 📤 응답값
    - **local 모드**: message, raw_output, aggregate_metrics, endpoint_metrics, threshold_violated
    - **cluster 모드**: job_id, config_map_name, namespace, message (TestRun 제출 후 바로 반환)

    ## 🔍 주의사항
    - 임계값 위반(k6 exit code 99)은 오류가 아니며 threshold_violated=true 로 응답합니다.
    - 선택한 스크립트가 없으면 400, k6 실행/클러스터 제출 실패는 500을 반환합니다.
    """,
)
async def run_load_test(
        file: Optional[UploadFile] = File(None),
        selected_script_id: Optional[str] = Form(None),
        selected_environment: Optional[str] = Form(None),
        selected_application: Optional[str] = Form(None),
        script: Optional[str] = Form(None),
        ramp_up_vus: Optional[int] = Form(None),
        ramp_up_duration: Optional[str] = Form(None),
        steady_vus: Optional[int] = Form(None),
        steady_duration: Optional[str] = Form(None),
        ramp_down_vus: Optional[int] = Form(None),
        ramp_down_duration: Optional[str] = Form(None),
        dispatcher: ExecutionDispatcher = Depends(get_execution_dispatcher),
):
    # 1. 부하 프로필 검증
    try:
        profile = LoadProfile.from_flat(
            ramp_up_vus, ramp_up_duration,
            steady_vus, steady_duration,
            ramp_down_vus, ramp_down_duration,
        )
    except ValidationError as e:
        raise ApiException(
            FailureCode.BAD_REQUEST,
            "부하 프로필 형식이 올바르지 않습니다.",
            data={"errors": e.errors(include_url=False, include_context=False)},
        ) from e

    # 2. 스크립트 출처 구성
    uploaded_bytes = await file.read() if file is not None else None
    source = ScriptSource.from_form(
        uploaded_bytes=uploaded_bytes,
        script_id=selected_script_id,
        environment=selected_environment,
        application=selected_application,
        inline_text=script,
    )

    # 3. 실행 (local: 완료까지 대기, cluster: 제출 후 반환)
    result = await dispatcher.run(source, profile)

    if isinstance(result, ClusterRunResult):
        code = SuccessCode.TEST_SUBMITTED
    elif result.threshold_violated:
        code = SuccessCode.TEST_THRESHOLD_VIOLATED
    else:
        code = SuccessCode.TEST_COMPLETED

    return ResponseTemplate.success(code, result.model_dump(), custom_message=result.message)


@router.get(
    path="/cluster/{job_id}",
    summary="클러스터 TestRun 상태 조회 API",
    description="cluster 모드로 제출한 TestRun의 현재 stage를 조회합니다. (initialization, created, started, finished, error)",
)
def get_cluster_test_run_status(
        job_id: str,
        test_run_service: TestRunService = Depends(get_test_run_service),
):
    try:
        status = test_run_service.get_test_run_status(job_id)
    except KubernetesApiException as e:
        logger.error(f"Error getting TestRun status for {job_id}: {e}")
        raise ApiException(FailureCode.INTERNAL_SERVER_ERROR, f"TestRun 상태 조회에 실패했습니다: {e.reason}") from e

    if not status["found"]:
        raise ApiException(FailureCode.NOT_FOUND_DATA, f"TestRun을 찾을 수 없습니다: {job_id}")

    return ResponseTemplate.success(SuccessCode.SUCCESS_CODE, status)
