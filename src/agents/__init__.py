"""Monitoring agent implementations."""

from src.agents.newrelic_agent import NewRelicAgent
from src.agents.null_agent import NullAgent
from src.agents.recording_agent import RecordingAgent

__all__ = [
    "NewRelicAgent",
    "NullAgent",
    "RecordingAgent",
]
