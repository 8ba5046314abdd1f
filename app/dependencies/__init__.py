from .services import (get_execution_dispatcher,
                       get_execution_strategy,
                       get_script_repository,
                       get_test_run_service)

# Singleton Instance 관리 패키지
__all__ = [
    "get_execution_dispatcher",
    "get_execution_strategy",
    "get_script_repository",
    "get_test_run_service",
]
