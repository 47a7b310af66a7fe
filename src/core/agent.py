"""Monitoring agent interface.

This module defines the capability interface the facade talks to. It is
implemented by the New Relic adapter, the recording agent used in tests,
and the always-disabled null agent.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class IMonitoringAgent(ABC):
    """Interface for monitoring agents (real or simulated)."""

    name: str = "agent"

    @abstractmethod
    def is_loaded(self) -> bool:
        """Check whether the agent is present in the current process."""
        pass

    @abstractmethod
    def notice_error(self, message: str, exception: Optional[BaseException] = None) -> None:
        """Report an error on the current transaction.

        Args:
            message: Error message
            exception: Originating exception, if any
        """
        pass

    @abstractmethod
    def name_transaction(self, name: str) -> None:
        """Set the current transaction's display name."""
        pass

    @abstractmethod
    def capture_params(self) -> None:
        """Capture the current request's input parameters."""
        pass

    @abstractmethod
    def add_custom_parameter(self, key: str, value: Any) -> None:
        """Attach a custom parameter to the current transaction.

        Args:
            key: Parameter name
            value: bool, int, float, Decimal or str
        """
        pass

    @abstractmethod
    def record_custom_event(self, name: str, attributes: Dict[str, Any]) -> None:
        """Record a custom event, independent of any transaction.

        Args:
            name: Event type
            attributes: int, float, Decimal or str values keyed by attribute name
        """
        pass

    @abstractmethod
    def start_transaction(self, app_name: str) -> None:
        """Begin a new transaction for the given application."""
        pass

    @abstractmethod
    def end_transaction(self, ignore: bool = False) -> None:
        """End the current transaction.

        Args:
            ignore: Discard the transaction instead of reporting it
        """
        pass

    @abstractmethod
    def custom_metric(self, metric: str, value: float) -> None:
        """Record a custom metric sample."""
        pass

    @abstractmethod
    def background_job(self, flag: bool = True) -> None:
        """Mark (or unmark) the current transaction as a background job."""
        pass

    @abstractmethod
    def ignore_transaction(self) -> None:
        """Drop the current transaction from reporting."""
        pass

    @abstractmethod
    def set_appname(self, app_name: str) -> None:
        """Set the application name transactions are tracked under."""
        pass
