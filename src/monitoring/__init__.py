"""Monitoring facade over the host-loaded APM agent."""

from src.monitoring.facade import MonitoringFacade
from src.monitoring.factory import build_facade, create_agent
from src.monitoring.encoding import (
    encode_event_attribute,
    encode_event_attributes,
    encode_parameter_value,
)

__all__ = [
    "MonitoringFacade",
    "build_facade",
    "create_agent",
    "encode_event_attribute",
    "encode_event_attributes",
    "encode_parameter_value",
]
