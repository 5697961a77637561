"""Constants for pysesame."""

# Base URL for the SESAME public API
BASE_URL = "https://api.candyhouse.co/public"

# Library version, reported in the User-Agent header
LIB_VERSION = "0.1.0"

# Total timeout for a single request, in seconds
DEFAULT_TIMEOUT = 30

# API Endpoints (relative to BASE_URL)
SESAMES_ENDPOINT = "sesames"
SESAME_ENDPOINT = "sesame/{device_id}"
ACTION_RESULT_ENDPOINT = "action-result"

# Commands accepted by the control endpoint (the server has the final say)
COMMAND_LOCK = "lock"
COMMAND_UNLOCK = "unlock"

# Execution result status once a task has finished
STATUS_PROCESSING = "processing"
STATUS_TERMINATED = "terminated"


def build_user_agent(lib_version: str = LIB_VERSION) -> str:
    """Build the User-Agent string sent with every request."""
    return f"pysesame (Ver: {lib_version})"
