"""
Constants and configuration values used across the algobox codebase.
"""

# Sandbox containers
DEFAULT_ALGOD_CONTAINER = "algorand-sandbox-algod"

# REST endpoints
DEFAULT_ALGOD_URL = "http://localhost:4001"
DEFAULT_INDEXER_URL = "http://localhost:8980"
HEALTH_ENDPOINT = "/health"
HEALTH_CHECK_TIMEOUT = 10  # seconds

# goal commands executed inside the algod container
GOAL_NODE_STATUS = ["goal", "node", "status"]
GOAL_NODE_CATCHUP = ["goal", "node", "catchup"]

# Catchpoint lookup
CATCHPOINT_URL_TEMPLATE = (
    "https://algorand-catchpoints.s3.us-east-2.amazonaws.com/channel/"
    "{network}/latest.catchpoint"
)
CATCHPOINT_NETWORKS = ("mainnet", "testnet", "betanet")
CATCHPOINT_LOOKUP_TIMEOUT = 30  # seconds

# Status text labels reported by `goal node status`
LABEL_TOTAL_ACCOUNTS = "Catchpoint total accounts"
LABEL_ACCOUNTS_PROCESSED = "Catchpoint accounts processed"
LABEL_TOTAL_BLOCKS = "Catchpoint total blocks"
LABEL_DOWNLOADED_BLOCKS = "Catchpoint downloaded blocks"

# Catchup monitor defaults
CATCHUP_POLL_INTERVAL = 0.1  # seconds between status polls
CATCHUP_TIMEOUT = None  # seconds; None waits forever
CATCHUP_COMPLETION_CONFIRMATIONS = 1  # marker-absent polls before completion
PLACEHOLDER_TOTAL = 1000  # rendered before the node reports a total
UNKNOWN_TOTAL = 0

# Progress bar
PROGRESS_BAR_WIDTH = 40  # cells
PROGRESS_FILL_CHAR = "#"
PROGRESS_EMPTY_CHAR = "-"

# Retry configuration for status polls
FETCH_RETRY_ATTEMPTS = 5
FETCH_RETRY_DELAY = 0.5  # seconds
FETCH_RETRY_BACKOFF = 2.0  # exponential backoff multiplier
FETCH_RETRY_MAX_DELAY = 5.0  # seconds

# Environment variable prefix for CLI options
ENV_PREFIX = "ALGOBOX"

# Messages
MESSAGE_ACCOUNTS_COMPLETE = "Accounts processing complete"
MESSAGE_BLOCKS_COMPLETE = "Blocks downloaded"
ERROR_CONTAINER_NOT_RUNNING = "Container {container} is not running"
ERROR_CONTAINER_NOT_FOUND = "Container {container} not found"
