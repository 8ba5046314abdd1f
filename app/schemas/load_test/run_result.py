from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class EndpointMetric(BaseModel):
    """URL 단위 요청 통계"""
    label: str                  # 요청 URL
    requests_total: int = 0
    mean_duration_ms: int = 0   # 평균 응답시간 (ms, 반올림)
    error_count: int = 0        # 4xx/5xx 응답 수


class LocalRunResult(BaseModel):
    execution_mode: Literal["local"] = "local"
    run_id: str
    message: str
    raw_output: str
    aggregate_metrics: Dict[str, Union[str, int]] = Field(default_factory=dict)
    endpoint_metrics: List[EndpointMetric] = Field(default_factory=list)
    threshold_violated: bool = False
    script_used: Optional[str] = None
    environment: Optional[str] = None
    application: Optional[str] = None


class ClusterRunResult(BaseModel):
    execution_mode: Literal["cluster"] = "cluster"
    job_id: str
    config_map_name: str
    namespace: str
    message: str


RunResult = Annotated[Union[LocalRunResult, ClusterRunResult], Field(discriminator="execution_mode")]
