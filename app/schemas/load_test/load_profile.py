import re
from typing import Optional, List

from pydantic import BaseModel, Field, field_validator

# k6 duration 문자열 (예: "30s", "1m30s", "1.5h", "500ms")
DURATION_PATTERN = re.compile(r"^(\d+(\.\d+)?(ms|s|m|h))+$")
_DURATION_PART = re.compile(r"(\d+(?:\.\d+)?)(ms|s|m|h)")

DEFAULT_VUS = 10
DEFAULT_DURATION = "30s"


def is_zero_duration(duration: str) -> bool:
    """모든 구성 요소가 0인 duration("0s", "0m0s" 등)인지 확인"""
    return all(float(value) == 0 for value, _ in _DURATION_PART.findall(duration))


class StageConfig(BaseModel):
    vus: Optional[int] = Field(default=None, ge=0)   # 목표 가상 사용자 수
    duration: Optional[str] = None                   # 단계 지속시간 (예: "30s", "2m")

    @field_validator("duration", mode="before")
    @classmethod
    def validate_duration(cls, value):
        if value is None:
            return None
        value = str(value).strip()
        if not value:
            return None
        if not DURATION_PATTERN.match(value):
            raise ValueError(f"잘못된 duration 형식입니다: {value} (예: '30s', '1m30s')")
        return value

    def has_duration(self) -> bool:
        return bool(self.duration) and not is_zero_duration(self.duration)


class LoadProfile(BaseModel):
    """
    램프업 / 유지 / 램프다운 3단계로 구성된 부하 프로필

    - ramp_up, steady: vus > 0 이고 duration이 0이 아닐 때 활성
    - ramp_down: vus가 0이어도(scale-to-zero) duration이 있으면 활성
    """
    ramp_up: Optional[StageConfig] = None
    steady: Optional[StageConfig] = None
    ramp_down: Optional[StageConfig] = None

    @staticmethod
    def _is_active(stage: Optional[StageConfig], allow_zero_vus: bool = False) -> bool:
        if stage is None or stage.vus is None:
            return False
        if stage.vus == 0 and not allow_zero_vus:
            return False
        return stage.has_duration()

    def active_stages(self) -> List[StageConfig]:
        """활성화된 stage 목록을 ramp-up, steady, ramp-down 순서로 반환"""
        stages = []
        if self._is_active(self.ramp_up):
            stages.append(self.ramp_up)
        if self._is_active(self.steady):
            stages.append(self.steady)
        if self._is_active(self.ramp_down, allow_zero_vus=True):
            stages.append(self.ramp_down)
        return stages

    def is_steady_only(self) -> bool:
        """유지 단계만 활성화된 경우 (constant-vus 형태)"""
        return (self._is_active(self.steady)
                and not self._is_active(self.ramp_up)
                and not self._is_active(self.ramp_down, allow_zero_vus=True))

    def fallback_vus(self) -> int:
        if self.steady and self.steady.vus:
            return self.steady.vus
        return DEFAULT_VUS

    def fallback_duration(self) -> str:
        if self.steady and self.steady.has_duration():
            return self.steady.duration
        return DEFAULT_DURATION

    @classmethod
    def from_flat(cls,
                  ramp_up_vus: Optional[int] = None, ramp_up_duration: Optional[str] = None,
                  steady_vus: Optional[int] = None, steady_duration: Optional[str] = None,
                  ramp_down_vus: Optional[int] = None, ramp_down_duration: Optional[str] = None) -> "LoadProfile":
        """폼 입력처럼 평탄화된 6개 필드로부터 LoadProfile 생성"""
        return cls(
            ramp_up=StageConfig(vus=ramp_up_vus, duration=ramp_up_duration),
            steady=StageConfig(vus=steady_vus, duration=steady_duration),
            ramp_down=StageConfig(vus=ramp_down_vus, duration=ramp_down_duration),
        )
