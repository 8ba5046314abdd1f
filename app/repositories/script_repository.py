import logging
import re
from pathlib import Path
from typing import List, Optional

from app.core.config import settings
from app.schemas.script.script_dto import ScriptContent, ScriptMeta
from app.utils.file_writer import FileWriter

logger = logging.getLogger(__name__)

SCRIPT_EXTENSION = ".js"
_SAFE_SEGMENT = re.compile(r"^[A-Za-z0-9_-]+$")


def is_safe_segment(value: Optional[str]) -> bool:
    """경로 조각으로 사용할 수 있는 값인지 확인 (디렉터리 탈출 방지)"""
    return bool(value) and bool(_SAFE_SEGMENT.match(value))


def to_script_id(script_name: str) -> str:
    """'Homepage Test' → 'homepage-test'"""
    return re.sub(r"\s+", "-", script_name.strip().lower())


def to_display_name(script_id: str) -> str:
    """'ab-stage-homepage-test' → 'Ab Stage Homepage Test'"""
    return " ".join(word[:1].upper() + word[1:] for word in script_id.replace("-", " ").split(" "))


class ScriptRepository:
    """
    환경/애플리케이션 디렉터리 구조로 k6 스크립트를 보관하는 저장소

    <base_dir>/<environment>/<application>/<script_id>.js
    """

    def __init__(self, base_dir: Optional[str] = None,
                 environments: Optional[List[str]] = None,
                 applications: Optional[List[str]] = None):
        store_config = settings.get_script_store_config()
        self.base_dir = Path(base_dir or store_config["base_dir"])
        self.environments = environments if environments is not None else store_config["environments"]
        self.applications = applications if applications is not None else store_config["applications"]

    def initialize_directory_structure(self) -> None:
        """설정된 모든 환경/애플리케이션 디렉터리 생성"""
        for environment in self.environments:
            for application in self.applications:
                FileWriter.ensure_directory_exists(str(self.base_dir / environment / application))
        logger.info(f"Script store initialized at {self.base_dir.resolve()}")

    def _script_path(self, environment: str, application: str, script_id: str) -> Optional[Path]:
        if not all(is_safe_segment(value) for value in (environment, application, script_id)):
            return None
        return self.base_dir / environment / application / f"{script_id}{SCRIPT_EXTENSION}"

    def _list_directory(self, environment: str, application: str, name_prefix: str = "") -> List[ScriptMeta]:
        directory = self.base_dir / environment / application
        if not directory.is_dir():
            return []

        scripts = []
        for file_path in directory.iterdir():
            if not file_path.is_file() or file_path.suffix != SCRIPT_EXTENSION:
                continue
            script_id = file_path.stem
            scripts.append(ScriptMeta(
                id=script_id,
                name=f"{name_prefix}{to_display_name(script_id)}",
                filename=file_path.name,
                path=str(file_path),
                environment=environment,
                application=application,
                full_id=f"{environment}-{application}-{script_id}",
            ))
        return scripts

    def list_scripts(self, environment: Optional[str] = None, application: Optional[str] = None) -> List[ScriptMeta]:
        """
        스크립트 목록 조회

        Args:
            environment: 환경 필터 (없으면 전체)
            application: 애플리케이션 필터 (environment가 있을 때만 적용)

        Returns:
            List[ScriptMeta]: 이름순 정렬된 스크립트 목록
        """
        if environment and not is_safe_segment(environment):
            return []
        if application and not is_safe_segment(application):
            return []

        scripts: List[ScriptMeta] = []
        if environment and application:
            scripts = self._list_directory(environment, application)
        elif environment:
            for app_name in self.applications:
                scripts.extend(self._list_directory(environment, app_name, f"{app_name.upper()} - "))
        else:
            for env_name in self.environments:
                for app_name in self.applications:
                    scripts.extend(
                        self._list_directory(env_name, app_name, f"{env_name.upper()} {app_name.upper()} - ")
                    )

        return sorted(scripts, key=lambda script: script.name)

    def get_script(self, environment: str, application: str, script_id: str) -> Optional[ScriptContent]:
        """스크립트 본문 조회 (없으면 None)"""
        script_path = self._script_path(environment, application, script_id)
        if script_path is None or not script_path.is_file():
            logger.warning(f"Script not found: {environment}/{application}/{script_id}")
            return None

        return ScriptContent(
            content=FileWriter.read_from_path(str(script_path)),
            script_id=script_id,
            environment=environment,
            application=application,
            full_id=f"{environment}-{application}-{script_id}",
        )

    def save_script(self, environment: str, application: str, script_name: str, content: str) -> ScriptMeta:
        """
        스크립트 저장 (같은 이름이면 덮어씀)

        Raises:
            ValueError: 환경/애플리케이션/스크립트 이름이 경로로 사용할 수 없는 값일 때
        """
        script_id = to_script_id(script_name)
        script_path = self._script_path(environment, application, script_id)
        if script_path is None:
            raise ValueError(f"사용할 수 없는 스크립트 경로입니다: {environment}/{application}/{script_name}")

        FileWriter.write_to_path(content, script_path.name, str(script_path.parent))
        logger.info(f"Script saved: {script_path}")

        return ScriptMeta(
            id=script_id,
            name=to_display_name(script_id),
            filename=script_path.name,
            path=str(script_path),
            environment=environment,
            application=application,
            full_id=f"{environment}-{application}-{script_id}",
        )

    def delete_script(self, environment: str, application: str, script_id: str) -> bool:
        """스크립트 삭제 (삭제 여부 반환)"""
        script_path = self._script_path(environment, application, script_id)
        if script_path is None:
            return False
        return FileWriter.remove_file(str(script_path))

    def exists(self, environment: str, application: str, script_id: str) -> bool:
        script_path = self._script_path(environment, application, script_id)
        return script_path is not None and script_path.is_file()
