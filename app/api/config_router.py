from fastapi import APIRouter, Depends

from app.common.response.code import SuccessCode
from app.common.response.response_template import ResponseTemplate
from app.dependencies import get_execution_strategy, get_script_repository
from app.repositories.script_repository import ScriptRepository
from app.services.testing.execution_strategy import ExecutionStrategy

router = APIRouter()


@router.get(
    path="",
    summary="환경/애플리케이션 옵션 조회 API",
    description="스크립트 선택 화면에서 사용할 환경, 애플리케이션 목록과 현재 실행 모드를 반환합니다.",
)
def get_config(
        repository: ScriptRepository = Depends(get_script_repository),
        strategy: ExecutionStrategy = Depends(get_execution_strategy),
):
    return ResponseTemplate.success(SuccessCode.SUCCESS_CODE, {
        "execution_mode": strategy.mode.value,
        "environments": [
            {"id": env, "name": env.capitalize(), "value": env}
            for env in repository.environments
        ],
        "applications": [
            {"id": app, "name": app.upper(), "value": app}
            for app in repository.applications
        ],
    })
