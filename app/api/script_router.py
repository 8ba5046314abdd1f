import logging
from typing import Optional

from fastapi import APIRouter, Depends

from app.common.exception.api_exception import ApiException
from app.common.response.code import FailureCode, SuccessCode
from app.common.response.response_template import ResponseTemplate
from app.dependencies import get_script_repository
from app.repositories.script_repository import ScriptRepository
from app.schemas.script.script_dto import ScriptSaveRequest

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get(
    path="",
    summary="k6 스크립트 목록 조회 API",
    description="""
    저장된 k6 스크립트 목록을 이름순으로 조회합니다.

    - environment, application 모두 지정: 해당 폴더의 스크립트
    - environment만 지정: 해당 환경의 모든 애플리케이션 스크립트 (이름 앞에 `APP - `)
    - 미지정: 전체 스크립트 (이름 앞에 `ENV APP - `)
    """,
)
def list_scripts(
        environment: Optional[str] = None,
        application: Optional[str] = None,
        repository: ScriptRepository = Depends(get_script_repository),
):
    scripts = repository.list_scripts(environment, application)
    return ResponseTemplate.success(SuccessCode.SUCCESS_CODE, scripts)


@router.get(
    path="/{environment}/{application}/{script_id}",
    summary="k6 스크립트 본문 조회 API",
)
def get_script(
        environment: str,
        application: str,
        script_id: str,
        repository: ScriptRepository = Depends(get_script_repository),
):
    script = repository.get_script(environment, application, script_id)
    if script is None:
        raise ApiException(FailureCode.NOT_FOUND_DATA, "Script not found")
    return ResponseTemplate.success(SuccessCode.SUCCESS_CODE, script)


@router.post(
    path="",
    summary="k6 스크립트 저장 API",
    description="""
    스크립트를 `{environment}/{application}/{script_id}.js` 로 저장합니다.
    script_id는 script_name을 소문자로 바꾸고 공백을 `-`로 치환한 값이며, 같은 id가 있으면 덮어씁니다.
    """,
)
def save_script(
        request: ScriptSaveRequest,
        repository: ScriptRepository = Depends(get_script_repository),
):
    if not (request.script_name.strip() and request.content and request.environment and request.application):
        raise ApiException(
            FailureCode.BAD_REQUEST,
            "Script name, content, environment, and application are required",
        )

    try:
        saved = repository.save_script(
            request.environment, request.application, request.script_name, request.content
        )
    except ValueError as e:
        raise ApiException(FailureCode.BAD_REQUEST, str(e)) from e

    return ResponseTemplate.success(SuccessCode.CREATED, saved, custom_message="Script saved successfully")


@router.delete(
    path="/{environment}/{application}/{script_id}",
    summary="k6 스크립트 삭제 API",
)
def delete_script(
        environment: str,
        application: str,
        script_id: str,
        repository: ScriptRepository = Depends(get_script_repository),
):
    if not repository.delete_script(environment, application, script_id):
        raise ApiException(FailureCode.NOT_FOUND_DATA, "Script not found")
    return ResponseTemplate.success(SuccessCode.SUCCESS_CODE, custom_message="Script deleted successfully")
