"""Monitoring facade.

One-line operations for reporting to the monitoring agent. Every operation
probes the agent first and does nothing when it is not loaded, and a failure
inside the agent is logged and never reaches the caller.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Mapping, Optional

from src.core.agent import IMonitoringAgent
from src.core.constants import DEFAULT_PARAMETER_VALUE
from src.monitoring.encoding import encode_event_attributes, encode_parameter_value


logger = logging.getLogger(__name__)


class MonitoringFacade:
    """Availability-gated pass-through to an injected monitoring agent."""

    def __init__(self, agent: IMonitoringAgent) -> None:
        self.agent = agent

    def _call(self, entry_point: Callable[..., Any], *args: Any) -> None:
        name = getattr(entry_point, "__name__", repr(entry_point))
        try:
            entry_point(*args)
            logger.debug(f"Forwarded {name}", extra={"backend": self.agent.name})
        except Exception as e:
            logger.warning(f"Agent call {name} failed: {e}", extra={"backend": self.agent.name})

    def _skip(self, operation: str) -> None:
        logger.debug(f"Agent not loaded, skipping {operation}", extra={"backend": self.agent.name})

    def is_enabled(self) -> bool:
        """Check whether the agent is loaded. Probed on every call, never cached."""
        try:
            return bool(self.agent.is_loaded())
        except Exception as e:
            logger.warning(f"Agent probe failed: {e}", extra={"backend": self.agent.name})
            return False

    def send_notice(self, message: str, params: Optional[Mapping[str, Any]] = None) -> None:
        """Report a notice with optional custom parameters.

        Args:
            message: Error message
            params: Custom parameters added to the transaction first, unchanged
        """
        if not self.is_enabled():
            self._skip("send_notice")
            return

        for key, value in (params or {}).items():
            self._call(self.agent.add_custom_parameter, key, value)

        self._call(self.agent.notice_error, message)

    def send_exception(self, exc: BaseException) -> None:
        """Report a handled exception."""
        if not self.is_enabled():
            self._skip("send_exception")
            return

        self._call(self.agent.notice_error, str(exc), exc)

    def name_transaction(self, name: str, capture_params: bool = False) -> None:
        """Name the current transaction.

        Args:
            name: Transaction name; empty names are ignored
            capture_params: Also capture the request's input parameters
        """
        if not self.is_enabled():
            self._skip("name_transaction")
            return

        if not name:
            return

        self._call(self.agent.name_transaction, name)

        if capture_params:
            self._call(self.agent.capture_params)

    def add_parameter_to_current_transaction(self, key: str, value: Any = DEFAULT_PARAMETER_VALUE) -> None:
        """Add a custom parameter; non-scalar values are sent as JSON text."""
        if not self.is_enabled():
            self._skip("add_parameter_to_current_transaction")
            return

        self._call(self.agent.add_custom_parameter, key, encode_parameter_value(value))

    def add_parameters_to_current_transaction(
        self, parameters: Mapping[str, Any], key_prefix: str = ""
    ) -> None:
        """Add each entry as a custom parameter, keys prefixed with ``key_prefix``."""
        for key, value in parameters.items():
            self.add_parameter_to_current_transaction(f"{key_prefix}{key}", value)

    def record_custom_event(self, name: str, attributes: Mapping[str, Any]) -> None:
        """Record a custom event.

        Only numbers and strings reach the agent as-is; booleans and
        everything else are sent as JSON text. The caller's mapping is left
        untouched.
        """
        if not self.is_enabled():
            self._skip("record_custom_event")
            return

        self._call(self.agent.record_custom_event, name, encode_event_attributes(attributes))

    def start_transaction(self, app_name: str) -> None:
        if not self.is_enabled():
            self._skip("start_transaction")
            return

        self._call(self.agent.start_transaction, app_name)

    def end_transaction(self, ignore: bool = False) -> None:
        """End the current transaction.

        Args:
            ignore: Discard the transaction instead of reporting it
        """
        if not self.is_enabled():
            self._skip("end_transaction")
            return

        self._call(self.agent.end_transaction, ignore)

    def add_custom_metric(self, metric: str, response_time: float) -> None:
        if not self.is_enabled():
            self._skip("add_custom_metric")
            return

        self._call(self.agent.custom_metric, metric, response_time)

    def set_as_background_job(self) -> None:
        """Mark the current transaction as a non-web background job."""
        if not self.is_enabled():
            self._skip("set_as_background_job")
            return

        self._call(self.agent.background_job, True)

    def ignore_transaction(self) -> None:
        """Keep the current transaction from being reported."""
        if not self.is_enabled():
            self._skip("ignore_transaction")
            return

        self._call(self.agent.ignore_transaction)

    def set_app_name(self, app_name: str) -> None:
        """Set the app name the transaction is tracked under. Forwarded verbatim."""
        if not self.is_enabled():
            self._skip("set_app_name")
            return

        self._call(self.agent.set_appname, str(app_name))

    @contextmanager
    def transaction(
        self, app_name: str, name: Optional[str] = None, background: bool = False
    ) -> Iterator["MonitoringFacade"]:
        """Run a block inside its own transaction.

        An exception raised by the block is reported and re-raised; the
        transaction is ended either way.
        """
        self.start_transaction(app_name)
        if name:
            self.name_transaction(name)
        if background:
            self.set_as_background_job()
        try:
            yield self
        except Exception as e:
            self.send_exception(e)
            raise
        finally:
            self.end_transaction()
