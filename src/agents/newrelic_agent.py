"""New Relic agent adapter.

Maps the agent interface onto the ``newrelic.agent`` Python API. The agent
is installed and initialised by the host process (for example through
``newrelic-admin run-program``); this adapter only looks the API module up
in ``sys.modules`` and never imports or configures it.
"""

import logging
import sys
from types import ModuleType
from typing import Any, Dict, Optional
from src.core.agent import IMonitoringAgent
from src.core.constants import DEFAULT_AGENT_MODULE
from src.core.models import NoticeError

logger = logging.getLogger(__name__)


class AgentNotLoadedError(RuntimeError):
    """Raised when an entry point is used while the agent module is absent."""


class NewRelicAgent(IMonitoringAgent):
    """Adapter over the host-loaded New Relic agent."""

    name = "newrelic"

    def __init__(
        self,
        module_name: str = DEFAULT_AGENT_MODULE,
        register_timeout: Optional[float] = None,
    ):
        """Initialize adapter.

        Args:
            module_name: Module the host exposes once the agent is loaded
            register_timeout: Seconds ``start_transaction`` waits for the
                application to register; None uses the agent's startup_timeout
        """
        self.module_name = module_name
        self.register_timeout = register_timeout

    def _api(self) -> ModuleType:
        api = sys.modules.get(self.module_name)
        if api is None:
            raise AgentNotLoadedError(f"{self.module_name} is not loaded")
        return api

    def is_loaded(self) -> bool:
        return sys.modules.get(self.module_name) is not None

    def notice_error(self, message: str, exception: Optional[BaseException] = None) -> None:
        if exception is None:
            exception = NoticeError(message)
        self._api().notice_error(error=(type(exception), exception, exception.__traceback__))

    def name_transaction(self, name: str) -> None:
        self._api().set_transaction_name(name)

    def capture_params(self) -> None:
        self._api().capture_request_params(True)

    def add_custom_parameter(self, key: str, value: Any) -> None:
        self._api().add_custom_attribute(key, value)

    def record_custom_event(self, name: str, attributes: Dict[str, Any]) -> None:
        self._api().record_custom_event(name, attributes)

    def start_transaction(self, app_name: str) -> None:
        """Begin a background task bound to ``app_name``.

        The Python agent has no global "start" call, so the task is entered
        here and exited by ``end_transaction``. Its name defaults to the app
        name until ``name_transaction`` replaces it.

        With no ``register_timeout`` the agent's startup_timeout applies,
        which defaults to 0: the first transaction for an app that is not yet
        registered is then entered disabled, is not reported, and
        ``end_transaction`` finds no current transaction to end.
        """
        api = self._api()
        application = api.register_application(name=app_name, timeout=self.register_timeout)
        api.BackgroundTask(application, name=app_name).__enter__()
        logger.debug(f"Started transaction for {app_name}", extra={"backend": self.name})

    def end_transaction(self, ignore: bool = False) -> None:
        api = self._api()
        transaction = api.current_transaction()
        if transaction is None:
            logger.debug("No current transaction to end", extra={"backend": self.name})
            return
        if ignore:
            api.ignore_transaction(True)
        transaction.__exit__(None, None, None)

    def custom_metric(self, metric: str, value: float) -> None:
        self._api().record_custom_metric(metric, value)

    def background_job(self, flag: bool = True) -> None:
        self._api().set_background_task(flag)

    def ignore_transaction(self) -> None:
        self._api().ignore_transaction(True)

    def set_appname(self, app_name: str) -> None:
        # Applies to applications registered from here on
        self._api().global_settings().app_name = app_name
