"""Plain-text rendering of deployment timings."""

from datetime import datetime, timezone
from typing import Iterable

from .models import ResourceDeploymentTime

REPORT_HEADER = "Resource deployment times (sorted by duration):"


def format_timestamp(ts: datetime) -> str:
    """
    Format a timestamp as ISO-8601 UTC with millisecond precision.

    Naive timestamps are taken to be UTC already.

    Example: 2024-05-01T12:30:05.250Z
    """
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    else:
        ts = ts.astimezone(timezone.utc)
    return ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_resource(record: ResourceDeploymentTime) -> str:
    """Render one record as a four-line block."""
    return "\n".join(
        [
            f"Resource: {record.resource_id} ({record.resource_type})",
            f"Start Time: {format_timestamp(record.start_time)}",
            f"End Time: {format_timestamp(record.end_time)}",
            f"Duration: {record.duration_seconds:.2f} seconds",
        ]
    )


def render_report(records: Iterable[ResourceDeploymentTime]) -> str:
    """Render the full report, one blank-line separated block per resource."""
    blocks = [format_resource(record) for record in records]
    return f"\n{REPORT_HEADER}\n\n" + "".join(f"{block}\n\n" for block in blocks)
