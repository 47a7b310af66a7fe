"""Builds a facade from configuration."""

import logging
from typing import Optional

from src.agents import NewRelicAgent, NullAgent, RecordingAgent
from src.core.agent import IMonitoringAgent
from src.core.config import AgentBackend, Settings
from src.monitoring.facade import MonitoringFacade

logger = logging.getLogger(__name__)


def create_agent(settings: Settings) -> IMonitoringAgent:
    """Create the agent selected by ``settings.agent_backend``."""
    if settings.agent_backend == AgentBackend.NEWRELIC:
        agent: IMonitoringAgent = NewRelicAgent(
            module_name=settings.agent_module,
            register_timeout=settings.agent_register_timeout,
        )
    elif settings.agent_backend == AgentBackend.RECORDING:
        agent = RecordingAgent()
    else:
        agent = NullAgent()
    logger.debug(f"Using {agent.name} agent", extra={"backend": agent.name})
    return agent


def build_facade(settings: Optional[Settings] = None) -> MonitoringFacade:
    """Create a facade for the configured agent, loading settings from env if none given."""
    settings = settings or Settings.from_env()
    return MonitoringFacade(create_agent(settings))
