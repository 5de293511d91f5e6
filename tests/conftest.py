from __future__ import annotations

import pytest

from invscroll.api.host import ScreenKind
from invscroll.app.screen_helper import ContainerScreenHelper
from invscroll.runtime.config import HelperConfig
from tests.helpers import FakeModifiers, FakeScreen, RecordingFactory, RecordingQueue, make_config


@pytest.fixture
def factory() -> RecordingFactory:
    return RecordingFactory()


@pytest.fixture
def queue() -> RecordingQueue:
    return RecordingQueue()


@pytest.fixture
def modifiers() -> FakeModifiers:
    return FakeModifiers()


@pytest.fixture
def helper_factory(factory: RecordingFactory, queue: RecordingQueue, modifiers: FakeModifiers):
    def _make(screen: FakeScreen, config: HelperConfig | None = None) -> ContainerScreenHelper:
        active = config if config is not None else make_config()
        return ContainerScreenHelper.of(
            screen,
            factory,
            queue=queue,
            modifiers=modifiers,
            config_provider=lambda: active,
        )

    return _make


@pytest.fixture
def container_screen() -> FakeScreen:
    return FakeScreen(ScreenKind.CONTAINER)


@pytest.fixture
def inventory_screen() -> FakeScreen:
    return FakeScreen(ScreenKind.INVENTORY)
