import logging
from typing import Dict, List

from app.repositories.script_repository import ScriptRepository

logger = logging.getLogger(__name__)


def _homepage_script(label: str, vus: int, duration: str, sleep_seconds: int, with_cookie: bool,
                     url: str = "https://www.google.com") -> str:
    request_options = ""
    if with_cookie:
        request_options = """, {
    headers: {
      'Cookie': 'xxxxx=true',
    }
  }"""
    return f"""import http from 'k6/http';
import {{ sleep, check }} from 'k6';

export const options = {{
  vus: {vus},
  duration: '{duration}',
}};

export default function() {{
  const res = http.get('{url}'{request_options});
  check(res, {{ "{label} status is 200": (res) => res.status === 200 }});
  sleep({sleep_seconds});
}}"""


SAMPLE_SCRIPTS: List[Dict[str, str]] = [
    {
        "environment": "stage",
        "application": "ab",
        "name": "ab-stage-homepage-test",
        "content": _homepage_script("Stage ab Home", 10, "2m", 1, with_cookie=True),
    },
    {
        "environment": "stage",
        "application": "ab",
        "name": "ab-stage-plp-test",
        "content": _homepage_script("Stage ab PLP", 5, "1m", 2, with_cookie=True, url="https://www.google.com/"),
    },
    {
        "environment": "stage",
        "application": "cd",
        "name": "cd-stage-homepage-test",
        "content": _homepage_script("Stage cd Home", 8, "90s", 1, with_cookie=False),
    },
    {
        "environment": "prod",
        "application": "ab",
        "name": "ab-prod-homepage-test",
        "content": _homepage_script("Prod ab Home", 20, "5m", 3, with_cookie=False),
    },
    {
        "environment": "prod",
        "application": "cd",
        "name": "cd-prod-homepage-test",
        "content": _homepage_script("Prod cd Home", 15, "3m", 2, with_cookie=False),
    },
]


def seed_sample_scripts(repository: ScriptRepository) -> int:
    """
    샘플 스크립트를 저장소에 생성 (이미 존재하는 스크립트는 덮어쓰지 않음)

    Returns:
        int: 새로 생성된 스크립트 수
    """
    created = 0
    for sample in SAMPLE_SCRIPTS:
        if repository.exists(sample["environment"], sample["application"], sample["name"]):
            continue
        repository.save_script(sample["environment"], sample["application"], sample["name"], sample["content"])
        created += 1

    logger.info(f"Seeded {created} sample scripts")
    return created
