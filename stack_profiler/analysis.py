"""Latest-update window selection and per-resource duration pairing."""

import logging
from datetime import datetime
from typing import Iterable, Optional

from .models import (
    COMPLETE_STATUSES,
    IN_PROGRESS_STATUSES,
    STACK_RESOURCE_TYPE,
    UNKNOWN_RESOURCE,
    UNKNOWN_TYPE,
    USER_INITIATED,
    ResourceDeploymentTime,
    StackEvent,
)

logger = logging.getLogger(__name__)


def _or_default(value: Optional[str], default: str) -> str:
    return default if value is None else value


def _is_update_start(event: StackEvent, stack_name: str) -> bool:
    """True for the stack-level event that opens a user-initiated create/update."""
    return (
        event.resource_status in IN_PROGRESS_STATUSES
        and event.resource_status_reason == USER_INITIATED
        and event.resource_type == STACK_RESOURCE_TYPE
        and event.stack_name == stack_name
    )


def filter_events_for_latest_update(
    events: Iterable[StackEvent], stack_name: str
) -> list[StackEvent]:
    """
    Select the events of the most recent user-initiated create/update.

    The window runs from the stack-level "User Initiated" IN_PROGRESS event
    up to the newest event in ``events``. Events with identical timestamps
    keep their input order.

    Args:
        events: Stack events in any order
        stack_name: Name of the stack being analyzed

    Returns:
        Window events, oldest first; empty if no update start was found
    """
    newest_first = sorted(events, key=lambda e: e.timestamp, reverse=True)
    if not newest_first:
        return []

    start_index: Optional[int] = next(
        (i for i, event in enumerate(newest_first) if _is_update_start(event, stack_name)),
        None,
    )
    if start_index is None:
        logger.error("No recent 'User Initiated' update found for the stack.")
        return []

    window = newest_first[: start_index + 1]
    window.reverse()
    logger.debug(
        "Latest update window: %d events starting %s",
        len(window),
        window[0].timestamp.isoformat(),
    )
    return window


def calculate_deployment_times(
    events: Iterable[StackEvent], clear_start_on_complete: bool = False
) -> list[ResourceDeploymentTime]:
    """
    Pair IN_PROGRESS and COMPLETE events per resource and time them.

    The first IN_PROGRESS seen for a (logical id, type) key is its start.
    Unless ``clear_start_on_complete`` is set, that start is kept after the
    resource completes, so a repeated COMPLETE is measured from it too.

    Args:
        events: Window events in chronological order
        clear_start_on_complete: Forget a key's start once it completes

    Returns:
        Records sorted by duration, longest first
    """
    start_times: dict[tuple[Optional[str], Optional[str]], datetime] = {}
    deployment_times: list[ResourceDeploymentTime] = []

    for event in events:
        key = event.resource_key

        if event.resource_status in IN_PROGRESS_STATUSES:
            start_times.setdefault(key, event.timestamp)

        elif event.resource_status in COMPLETE_STATUSES and key in start_times:
            start_time = start_times[key]
            duration_seconds = (event.timestamp - start_time).total_seconds()

            if duration_seconds > 0:
                deployment_times.append(
                    ResourceDeploymentTime(
                        resource_id=_or_default(event.logical_resource_id, UNKNOWN_RESOURCE),
                        resource_type=_or_default(event.resource_type, UNKNOWN_TYPE),
                        start_time=start_time,
                        end_time=event.timestamp,
                        duration_seconds=duration_seconds,
                    )
                )
            if clear_start_on_complete:
                del start_times[key]

    deployment_times.sort(key=lambda r: r.duration_seconds, reverse=True)
    return deployment_times
