"""Pytest fixtures for service layer handler unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest

from tests.fixtures.entities import typical_snapshot

from .fakes import bootstrap_test_bus

if TYPE_CHECKING:
    from studybook.service_layer.messagebus import MessageBus

# pylint: disable=redefined-outer-name


@pytest.fixture
def bus_params():
    """Default bus parameters: the typical snapshot. Classes can override this."""
    return {"snapshot": typical_snapshot()}


@pytest.fixture
def make_test_bus(bus_params) -> Callable[..., MessageBus]:
    """Factory to create a message bus over an in-memory model for testing."""

    def _make():
        return bootstrap_test_bus(**bus_params)

    return _make
