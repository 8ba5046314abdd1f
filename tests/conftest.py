import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

from app.repositories.script_repository import ScriptRepository
from app.services.testing import local_execution_strategy


K6_SUMMARY_OUTPUT = """
          /\\      |‾‾| /‾‾/   /‾‾/
     /\\  /  \\     |  |/  /   /  /
    /  \\/    \\    |     (   /   ‾‾\\
   /          \\   |  |\\  \\ |  (‾)  |
  / __________ \\  |__| \\__\\ \\_____/ .io

  execution: local
     script: test-script.js
     output: json (results.json)

     ✓ home status is 200

     checks.........................: 100.00% ✓ 120      ✗ 0
     data_received..................: 1.2 MB  39 kB/s
     http_req_blocked...............: avg=1.2ms    min=1µs     med=4µs     max=140ms   p(90)=6µs     p(95)=7µs
   ✓ http_req_duration..............: avg=123.45ms min=98.1ms  med=120ms   max=310ms   p(90)=150.2ms p(95)=180ms
       { expected_response:true }...: avg=99ms     min=98.1ms  med=120ms   max=310ms   p(90)=111ms   p(95)=112ms
   ✓ http_req_failed................: 0.00%   ✓ 0        ✗ 120
     http_reqs......................: 120     3.95/s
     iteration_duration.............: avg=1.12s    min=1.09s   med=1.12s   max=1.31s   p(90)=1.15s   p(95)=1.18s
     iterations.....................: 120     3.95/s
     vus............................: 5       min=5      max=5
     vus_max........................: 5       min=5      max=5
"""


def duration_point(url: str, value: Any, status: Optional[str] = "200") -> str:
    tags = {"url": url, "method": "GET", "name": url}
    if status is not None:
        tags["status"] = status
    return json.dumps({
        "type": "Point",
        "metric": "http_req_duration",
        "data": {"time": "2025-01-01T00:00:00Z", "value": value, "tags": tags},
    })


@pytest.fixture
def k6_summary_output() -> str:
    return K6_SUMMARY_OUTPUT


@pytest.fixture
def script_repository(tmp_path) -> ScriptRepository:
    repository = ScriptRepository(
        base_dir=str(tmp_path / "k6-scripts"),
        environments=["stage", "prod"],
        applications=["ab", "cd"],
    )
    repository.initialize_directory_structure()
    return repository


class FakeProcess:
    def __init__(self, returncode: int, stdout: str = "", stderr: str = ""):
        self.returncode = returncode
        self._stdout = stdout.encode("utf-8")
        self._stderr = stderr.encode("utf-8")

    async def communicate(self):
        return self._stdout, self._stderr


@pytest.fixture
def fake_k6(monkeypatch):
    """
    asyncio.create_subprocess_exec 를 대체하여 k6 실행을 흉내낸다.

    events가 주어지면 `--out json=<path>` 경로에 NDJSON 이벤트 로그를 기록한다.
    """
    calls: Dict[str, Any] = {}

    def install(returncode: int = 0, stdout: str = "", stderr: str = "",
                events: Optional[List[str]] = None, spawn_error: Optional[Exception] = None):
        async def fake_create_subprocess_exec(*command, **kwargs):
            calls["command"] = list(command)
            if spawn_error is not None:
                raise spawn_error

            out_arg = command[command.index("--out") + 1]
            event_log_path = Path(out_arg.split("=", 1)[1])
            calls["event_log_path"] = event_log_path
            calls["stale_event_log_present"] = event_log_path.exists()
            if events is not None:
                event_log_path.write_text("\n".join(events), encoding="utf-8")
            return FakeProcess(returncode, stdout, stderr)

        monkeypatch.setattr(
            local_execution_strategy.asyncio, "create_subprocess_exec", fake_create_subprocess_exec
        )
        return calls

    return install


class FakeCoreV1Api:
    def __init__(self, create_error: Optional[Exception] = None, delete_error: Optional[Exception] = None):
        self.create_error = create_error
        self.delete_error = delete_error
        self.created: List[Dict[str, Any]] = []
        self.deleted: List[Dict[str, Any]] = []

    def create_namespaced_config_map(self, namespace, body):
        if self.create_error is not None:
            raise self.create_error
        self.created.append({"namespace": namespace, "body": body})
        return body

    def delete_namespaced_config_map(self, name, namespace):
        if self.delete_error is not None:
            raise self.delete_error
        self.deleted.append({"name": name, "namespace": namespace})


class FakeCustomObjectsApi:
    def __init__(self, create_error: Optional[Exception] = None, objects: Optional[Dict[str, Dict]] = None):
        self.create_error = create_error
        self.objects = objects or {}
        self.created: List[Dict[str, Any]] = []

    def create_namespaced_custom_object(self, group, version, namespace, plural, body):
        if self.create_error is not None:
            raise self.create_error
        self.created.append({
            "group": group, "version": version, "namespace": namespace, "plural": plural, "body": body,
        })
        return body

    def get_namespaced_custom_object(self, group, version, namespace, plural, name):
        from kubernetes.client.rest import ApiException

        if name not in self.objects:
            raise ApiException(status=404, reason="Not Found")
        return self.objects[name]


@pytest.fixture
def fake_core_v1_api() -> FakeCoreV1Api:
    return FakeCoreV1Api()


@pytest.fixture
def fake_custom_objects_api() -> FakeCustomObjectsApi:
    return FakeCustomObjectsApi()
