"""
PaletteLab Request ID Utilities
Generate unique request IDs for tracing.
"""
import uuid
from datetime import datetime


def generate_request_id(prefix: str = "req") -> str:
    """
    Generate a unique request ID for tracking.

    Args:
        prefix: Short tag naming the kind of request (e.g. "extract")

    Returns:
        Unique request ID string
    """
    timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
    short_uuid = str(uuid.uuid4())[:8]
    return f"{prefix}-{timestamp}-{short_uuid}"
