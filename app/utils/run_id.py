import uuid
from datetime import datetime

import pytz

from app.core.config import settings


def generate_run_id() -> str:
    """
    실행 단위 식별자 생성 (예: 20250101123045-a1b2c3)

    타임스탬프 + uuid 앞 6자리로 구성되며, 파일명과
    Kubernetes 리소스 이름(DNS-1123)에 그대로 사용할 수 있다.
    """
    timestamp = datetime.now(pytz.timezone(settings.TIMEZONE)).strftime("%Y%m%d%H%M%S")
    unique_id = uuid.uuid4().hex[:6]
    return f"{timestamp}-{unique_id}"
