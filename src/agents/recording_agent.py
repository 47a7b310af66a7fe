"""Recording agent for tests and dry runs.

This module implements an in-process agent that records every entry-point
call instead of sending telemetry anywhere.
"""

import logging
from typing import Any, Dict, List, Optional
from src.core.agent import IMonitoringAgent
from src.core.models import AgentCall

logger = logging.getLogger(__name__)


class RecordingAgent(IMonitoringAgent):
    """Simulated agent that keeps every call in memory."""

    name = "recording"

    def __init__(self, loaded: bool = True):
        """Initialize recording agent.

        Args:
            loaded: Whether the agent reports itself as present
        """
        self.loaded = loaded

        # Entry-point calls, in order
        self.calls: List[AgentCall] = []

        # Number of presence probes made against this agent
        self.probe_count = 0

    def _record(self, method: str, *args: Any) -> None:
        self.calls.append(AgentCall(method=method, args=args))
        logger.debug(f"Recorded agent call: {method}{args}", extra={"backend": self.name})

    def calls_to(self, method: str) -> List[AgentCall]:
        """Return recorded calls to a single entry point."""
        return [c for c in self.calls if c.method == method]

    @property
    def methods(self) -> List[str]:
        """Names of recorded entry points, in call order."""
        return [c.method for c in self.calls]

    def reset(self) -> None:
        """Forget recorded calls and probes."""
        self.calls.clear()
        self.probe_count = 0

    def is_loaded(self) -> bool:
        self.probe_count += 1
        return self.loaded

    def notice_error(self, message: str, exception: Optional[BaseException] = None) -> None:
        if exception is None:
            self._record("notice_error", message)
        else:
            self._record("notice_error", message, exception)

    def name_transaction(self, name: str) -> None:
        self._record("name_transaction", name)

    def capture_params(self) -> None:
        self._record("capture_params")

    def add_custom_parameter(self, key: str, value: Any) -> None:
        self._record("add_custom_parameter", key, value)

    def record_custom_event(self, name: str, attributes: Dict[str, Any]) -> None:
        self._record("record_custom_event", name, dict(attributes))

    def start_transaction(self, app_name: str) -> None:
        self._record("start_transaction", app_name)

    def end_transaction(self, ignore: bool = False) -> None:
        self._record("end_transaction", ignore)

    def custom_metric(self, metric: str, value: float) -> None:
        self._record("custom_metric", metric, value)

    def background_job(self, flag: bool = True) -> None:
        self._record("background_job", flag)

    def ignore_transaction(self) -> None:
        self._record("ignore_transaction")

    def set_appname(self, app_name: str) -> None:
        self._record("set_appname", app_name)
