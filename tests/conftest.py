"""Pytest configuration and shared fixtures for bootloader tests."""

import os
from collections.abc import Generator
from typing import Any

import pytest

from bootloader.models.state import AWS, BOSH, GCP, LB, KeyPair, Stack, State


@pytest.fixture
def isolated_env() -> Generator[dict[str, str], None, None]:
    """Provide isolated environment variables for testing.

    Saves current environment and restores after test.

    Yields:
        Dictionary of original environment variables
    """
    original_env = os.environ.copy()
    yield original_env
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def gcp_state() -> State:
    """A GCP environment state with a previously stored director state."""
    return State(
        iaas="gcp",
        env_id="some-env-id",
        key_pair=KeyPair(private_key="some-private-key"),
        gcp=GCP(
            zone="some-zone",
            project_id="some-project-id",
            service_account_key="some-credential-json",
        ),
        bosh=BOSH(state={"some-key": "some-value"}),
        tf_state="some-tf-state",
        lb=LB(type="cf"),
    )


@pytest.fixture
def aws_state() -> State:
    """An AWS environment state with a previously stored director state."""
    return State(
        iaas="aws",
        env_id="some-env-id",
        key_pair=KeyPair(name="some-keypair-name", private_key="some-private-key"),
        aws=AWS(region="some-region"),
        stack=Stack(name="some-stack"),
        bosh=BOSH(state={"some-key": "some-value"}),
        lb=LB(type="cf"),
    )


def pytest_configure(config: Any) -> None:
    """Configure pytest with marker options."""
    config.addinivalue_line(
        "markers",
        "unit: marks tests as unit tests",
    )
