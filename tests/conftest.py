import pytest

from qrframe.features.frames.builder import ScreenBuilder
from qrframe.features.frames.controller import FlowController
from qrframe.features.networks.registry import DEFAULT_REGISTRY
from qrframe.shared.config import FrameConfig


class FakeResolver:
    """Async resolver double that records every lookup."""

    def __init__(self, answers=None, error=None):
        self.answers = answers or {}
        self.error = error
        self.calls = []

    async def resolve_name(self, name):
        self.calls.append(name)
        if self.error is not None:
            raise self.error
        return self.answers.get(name)


@pytest.fixture
def frame_config():
    """Fixture providing the default frame configuration"""
    return FrameConfig()


@pytest.fixture
def builder(frame_config):
    """Fixture providing a screen builder over the default registry"""
    return ScreenBuilder(DEFAULT_REGISTRY, frame_config)


@pytest.fixture
def vitalik_address():
    """Fixture providing the address vitalik.eth resolves to"""
    return "0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045"


@pytest.fixture
def mixed_case_address():
    """Fixture providing a valid mixed-case address"""
    return "0x" + "Aa" * 20


@pytest.fixture
def make_resolver():
    """Fixture providing a factory for fake resolvers"""
    return FakeResolver


@pytest.fixture
def make_controller(frame_config):
    """Fixture providing a factory for controllers wired to a fake resolver"""

    def factory(resolver=None):
        return FlowController(
            registry=DEFAULT_REGISTRY,
            resolver=resolver or FakeResolver(),
            config=frame_config,
        )

    return factory
