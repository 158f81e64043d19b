"""Pydantic models for stack events and derived deployment timings."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

STACK_RESOURCE_TYPE = "AWS::CloudFormation::Stack"
USER_INITIATED = "User Initiated"

IN_PROGRESS_STATUSES = frozenset({"CREATE_IN_PROGRESS", "UPDATE_IN_PROGRESS"})
COMPLETE_STATUSES = frozenset({"CREATE_COMPLETE", "UPDATE_COMPLETE"})

UNKNOWN_RESOURCE = "UnknownResource"
UNKNOWN_TYPE = "UnknownType"


class StackEvent(BaseModel):
    """
    A single CloudFormation stack event.

    Mapped from the ``StackEvents`` entries returned by boto3 so the
    analysis code never touches the raw SDK dictionaries. Keys the
    profiler does not use (EventId, PhysicalResourceId, ...) are dropped.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    logical_resource_id: Optional[str] = Field(default=None, alias="LogicalResourceId")
    resource_type: Optional[str] = Field(default=None, alias="ResourceType")
    resource_status: Optional[str] = Field(default=None, alias="ResourceStatus")
    resource_status_reason: Optional[str] = Field(
        default=None, alias="ResourceStatusReason"
    )
    stack_name: Optional[str] = Field(default=None, alias="StackName")
    timestamp: datetime = Field(alias="Timestamp")

    @classmethod
    def from_boto(cls, raw: dict[str, Any]) -> "StackEvent":
        """Build an event from a boto3 ``describe_stack_events`` entry."""
        return cls.model_validate(raw)

    @property
    def resource_key(self) -> tuple[Optional[str], Optional[str]]:
        return (self.logical_resource_id, self.resource_type)


class ResourceDeploymentTime(BaseModel):
    """Provisioning time of one resource in the latest deployment."""

    resource_id: str
    resource_type: str
    start_time: datetime
    end_time: datetime
    duration_seconds: float
