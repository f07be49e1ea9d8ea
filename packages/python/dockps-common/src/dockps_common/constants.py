"""Shared constants for dockps."""

from datetime import datetime, timedelta, timezone

# Container identifiers
ID_PREFIX_LENGTH = 10
DISPLAY_ID_WIDTH = 12

# Docker Compose
COMPOSE_PROJECT_LABEL = "com.docker.compose.project"

# Lifecycle
RUNNING_STATE = "running"

# Docker reports this StartedAt for containers that were never started
NEVER_STARTED = datetime(1, 1, 1, tzinfo=timezone.utc)

# Severity thresholds (uptime below these is flagged)
CRITICAL_UPTIME = timedelta(seconds=10)
WARNING_UPTIME = timedelta(seconds=60)

# Rendering
PORT_ARROW = "→"
PORT_SEPARATOR = ", "

# Docker client
DEFAULT_DOCKER_TIMEOUT = 10
DEFAULT_LOG_LEVEL = "WARNING"
