import logging
from functools import lru_cache

from app.core.config import settings
from app.repositories.script_repository import ScriptRepository
from app.services.testing.execution_dispatcher import ExecutionDispatcher
from app.services.testing.execution_strategy import ExecutionStrategy
from app.services.testing.execution_strategy_factory import ExecutionStrategyFactory
from k8s.test_run_service import TestRunService

logger = logging.getLogger(__name__)


@lru_cache()
def get_script_repository() -> ScriptRepository:
    return ScriptRepository()

@lru_cache()
def get_test_run_service() -> TestRunService:
    return TestRunService()

@lru_cache()
def get_execution_strategy() -> ExecutionStrategy:
    """실행 모드는 프로세스 시작 시 한 번만 결정"""
    strategy = ExecutionStrategyFactory.create_strategy(settings.EXECUTION_MODE, get_test_run_service())
    logger.info(f">>> EXECUTION_MODE = {strategy.mode.value}")
    return strategy

@lru_cache()
def get_execution_dispatcher() -> ExecutionDispatcher:
    return ExecutionDispatcher(
        strategy=get_execution_strategy(),
        script_repository=get_script_repository(),
    )
