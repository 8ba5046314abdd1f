from app.services.testing.script_transformer import apply_load_profile
from app.services.testing.metrics_extractor import parse_summary, parse_event_log
from app.services.testing.execution_dispatcher import ExecutionDispatcher

__all__ = [
    "apply_load_profile",
    "parse_summary",
    "parse_event_log",
    "ExecutionDispatcher",
]
