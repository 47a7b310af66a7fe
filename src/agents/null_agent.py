"""Agent that is never loaded."""

from typing import Any, Dict, Optional
from src.core.agent import IMonitoringAgent


class NullAgent(IMonitoringAgent):
    """Always-disabled agent; the facade never gets past its probe."""

    name = "disabled"

    def is_loaded(self) -> bool:
        return False

    def notice_error(self, message: str, exception: Optional[BaseException] = None) -> None:
        pass

    def name_transaction(self, name: str) -> None:
        pass

    def capture_params(self) -> None:
        pass

    def add_custom_parameter(self, key: str, value: Any) -> None:
        pass

    def record_custom_event(self, name: str, attributes: Dict[str, Any]) -> None:
        pass

    def start_transaction(self, app_name: str) -> None:
        pass

    def end_transaction(self, ignore: bool = False) -> None:
        pass

    def custom_metric(self, metric: str, value: float) -> None:
        pass

    def background_job(self, flag: bool = True) -> None:
        pass

    def ignore_transaction(self) -> None:
        pass

    def set_appname(self, app_name: str) -> None:
        pass
