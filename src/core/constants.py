"""Constants and default values for the monitoring facade."""

# Module the host process exposes once the New Relic agent is loaded
DEFAULT_AGENT_MODULE = "newrelic.agent"

# Environment variable prefix for Settings
ENV_PREFIX = "MONITORING_"

# Value used when a custom parameter is added without one
DEFAULT_PARAMETER_VALUE = 1

# Compact JSON, matches the agent's own string encoding of arrays/objects
JSON_SEPARATORS = (",", ":")

# Placeholder for log records without backend context
DEFAULT_LOG_BACKEND = "-"
