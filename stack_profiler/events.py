"""Fetch CloudFormation stack events."""

import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .models import StackEvent

logger = logging.getLogger(__name__)


def create_cloudformation_client(profile: str, region: str):
    """
    Create a CloudFormation client for a named credential profile.

    Args:
        profile: AWS profile name from the shared config/credentials files
        region: AWS region

    Returns:
        boto3 CloudFormation client
    """
    session = boto3.session.Session(profile_name=profile, region_name=region)
    return session.client("cloudformation", region_name=region)


def get_stack_events(stack_name: str, profile: str, region: str) -> list[StackEvent]:
    """
    Retrieve the events CloudFormation currently holds for a stack.

    Only the first page of ``describe_stack_events`` is read. Failures are
    logged and reported as an empty list.

    Args:
        stack_name: Stack name or stack ID
        profile: AWS profile name
        region: AWS region

    Returns:
        Events in service order (treat as unordered)
    """
    try:
        client = create_cloudformation_client(profile, region)
        response = client.describe_stack_events(StackName=stack_name)
    except (ClientError, BotoCoreError) as e:
        logger.error("Error fetching stack events: %s", e)
        return []

    events = [StackEvent.from_boto(raw) for raw in response.get("StackEvents", [])]
    logger.info("Fetched %d events for stack %s in %s", len(events), stack_name, region)
    return events
