# src/tag_inventory_cli/config.py
"""
Central configuration for Tag Inventory CLI.
All environment variables, limits, and constants live here.
"""

import os
from dotenv import load_dotenv

load_dotenv()


# ---------------------------------------------------------------------------
# Tagging API
# ---------------------------------------------------------------------------
# Page size requested from resourcegroupstaggingapi:GetResources.
RESOURCES_PER_PAGE: int = 50

# Optional deadline (seconds) for the whole listing run. Unset means no limit.
_timeout = os.getenv("TAG_INVENTORY_TIMEOUT")
REQUEST_TIMEOUT_SECONDS: float | None = float(_timeout) if _timeout else None

# ---------------------------------------------------------------------------
# Classification
# Service identifiers whose short ARN splits into "<product>/<identifier>".
# Extend this when adding a dedicated strategy for a new service.
# ---------------------------------------------------------------------------
SPECIALIZED_SERVICES: dict[str, str] = {
    "ec2": "compute_instance",
    "ecs": "container_orchestration",
}

# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------
OUTPUT_FORMATS: list[str] = ["table", "json", "csv"]
DEFAULT_OUTPUT_FORMAT: str = os.getenv("TAG_INVENTORY_FORMAT", "table")

TABLE_COLUMNS: list[str] = ["Region", "Service", "Product", "ID"]

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL: str = os.getenv("TAG_INVENTORY_LOG_LEVEL", "WARNING").upper()
