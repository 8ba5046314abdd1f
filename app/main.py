import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from app.api import api_router
from app.core.config import settings
from app.common.exceptionhandler import register_exception_handler
from app.common.middleware import register_cors_middleware
from app.dependencies import get_execution_dispatcher, get_script_repository
from app.services.script.sample_script_service import seed_sample_scripts
from app.utils.file_writer import FileWriter

# 로깅 설정
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 라이프사이클 관리"""
    # 시작 시 실행
    logger.info("Starting K6 Load Test Runner API...")

    # 실행 모드 확정 (잘못된 EXECUTION_MODE면 여기서 기동 실패)
    dispatcher = get_execution_dispatcher()
    logger.info(f"Execution mode: {dispatcher.mode.value}")

    # 실행 단위 파일 디렉터리 준비
    FileWriter.ensure_directory_exists(dispatcher.work_dir)

    # 스크립트 저장소 디렉터리 구조 초기화 및 샘플 스크립트 생성
    repository = get_script_repository()
    repository.initialize_directory_structure()
    if settings.SEED_SAMPLE_SCRIPTS:
        try:
            seed_sample_scripts(repository)
        except OSError as e:
            logger.error(f"Failed to seed sample scripts: {e}")

    yield

    # 종료 시 실행
    logger.info("Shutting down K6 Load Test Runner API...")


app = FastAPI(
    title="K6 Load Test Runner API",
    description="k6 스크립트에 부하 프로필을 적용하여 로컬 또는 Kubernetes(k6-operator)에서 실행하는 백엔드 API입니다.",
    version="1.0.0",
    docs_url="/api/swagger",
    lifespan=lifespan
)

app.include_router(api_router)

register_cors_middleware(app)
register_exception_handler(app)
