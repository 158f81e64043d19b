"""Shared fixtures for profiler tests."""

import pytest

from factories import make_event, make_stack_event
from stack_profiler.models import USER_INITIATED


@pytest.fixture
def previous_create_events():
    """Events of an earlier, complete stack creation."""
    return [
        make_stack_event(0, "CREATE_IN_PROGRESS", USER_INITIATED),
        make_event(1, "CREATE_IN_PROGRESS"),
        make_event(31, "CREATE_COMPLETE"),
        make_stack_event(32, "CREATE_COMPLETE"),
    ]


@pytest.fixture
def latest_update_events():
    """Events of the most recent stack update."""
    return [
        make_stack_event(100, "UPDATE_IN_PROGRESS", USER_INITIATED),
        make_event(101, "UPDATE_IN_PROGRESS"),
        make_event(102, "UPDATE_IN_PROGRESS", logical_id="Queue", resource_type="AWS::SQS::Queue"),
        make_event(104, "UPDATE_COMPLETE", logical_id="Queue", resource_type="AWS::SQS::Queue"),
        make_event(120, "UPDATE_COMPLETE"),
        make_stack_event(121, "UPDATE_COMPLETE_CLEANUP_IN_PROGRESS"),
        make_stack_event(122, "UPDATE_COMPLETE"),
    ]


@pytest.fixture
def aws_credentials(monkeypatch, tmp_path):
    """Mock AWS credentials for moto, exposed through a named profile."""
    credentials_file = tmp_path / "credentials"
    credentials_file.write_text(
        "[profiler-test]\n"
        "aws_access_key_id = testing\n"
        "aws_secret_access_key = testing\n"
    )
    config_file = tmp_path / "config"
    config_file.write_text("")

    for var in ("AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY", "AWS_SESSION_TOKEN", "AWS_PROFILE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(credentials_file))
    monkeypatch.setenv("AWS_CONFIG_FILE", str(config_file))
    return "profiler-test"
