import os
import tempfile
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings:
    """애플리케이션 설정"""

    # 실행 모드 설정 (local | cluster), 프로세스 시작 시 한 번만 결정
    EXECUTION_MODE: str = os.getenv("EXECUTION_MODE", "local").lower()

    # k6 로컬 실행 설정
    K6_BINARY: str = os.getenv("K6_BINARY", "k6")
    K6_WORK_DIR: str = os.getenv("K6_WORK_DIR", os.path.join(tempfile.gettempdir(), "k6-runs"))
    K6_THRESHOLD_EXIT_CODE: int = int(os.getenv("K6_THRESHOLD_EXIT_CODE", "99"))
    K6_KEEP_RUN_SCRIPTS: bool = os.getenv("K6_KEEP_RUN_SCRIPTS", "false").lower() == "true"

    # 스크립트 저장소 설정
    K6_SCRIPT_BASE_DIR: str = os.getenv("K6_SCRIPT_BASE_DIR", "./k6-scripts")
    SCRIPT_ENVIRONMENTS: List[str] = _split_csv(os.getenv("SCRIPT_ENVIRONMENTS", "stage,prod"))
    SCRIPT_APPLICATIONS: List[str] = _split_csv(os.getenv("SCRIPT_APPLICATIONS", "ab,cd"))
    SEED_SAMPLE_SCRIPTS: bool = os.getenv("SEED_SAMPLE_SCRIPTS", "true").lower() == "true"

    # Kubernetes (k6-operator) 설정
    KUBERNETES_K6_NAMESPACE: str = os.getenv("KUBERNETES_K6_NAMESPACE", "k6")
    K6_TESTRUN_GROUP: str = os.getenv("K6_TESTRUN_GROUP", "k6.io")
    K6_TESTRUN_VERSION: str = os.getenv("K6_TESTRUN_VERSION", "v1alpha1")
    K6_TESTRUN_PLURAL: str = os.getenv("K6_TESTRUN_PLURAL", "testruns")

    # CORS 설정
    CORS_ALLOW_ORIGINS: List[str] = _split_csv(os.getenv("CORS_ALLOW_ORIGINS", "*"))

    # 실행 식별자/리소스 이름에 사용하는 타임존
    TIMEZONE: str = os.getenv("TIMEZONE", "Asia/Seoul")

    # 로깅 설정
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def get_local_execution_config(cls) -> dict:
        """로컬 k6 실행 설정을 딕셔너리로 반환"""
        return {
            "k6_binary": cls.K6_BINARY,
            "work_dir": cls.K6_WORK_DIR,
            "threshold_exit_code": cls.K6_THRESHOLD_EXIT_CODE,
            "keep_run_scripts": cls.K6_KEEP_RUN_SCRIPTS,
        }

    @classmethod
    def get_cluster_config(cls) -> dict:
        """k6-operator TestRun 제출 설정을 딕셔너리로 반환"""
        return {
            "namespace": cls.KUBERNETES_K6_NAMESPACE,
            "group": cls.K6_TESTRUN_GROUP,
            "version": cls.K6_TESTRUN_VERSION,
            "plural": cls.K6_TESTRUN_PLURAL,
        }

    @classmethod
    def get_script_store_config(cls) -> dict:
        """스크립트 저장소 설정을 딕셔너리로 반환"""
        return {
            "base_dir": cls.K6_SCRIPT_BASE_DIR,
            "environments": list(cls.SCRIPT_ENVIRONMENTS),
            "applications": list(cls.SCRIPT_APPLICATIONS),
        }


settings = Settings()
