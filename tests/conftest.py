"""Pytest configuration and fixtures."""

import os

# Select test settings before uiseek creates its settings singleton
os.environ.setdefault("UISEEK_ENV", "test")

from collections.abc import Callable

import pytest

from uiseek.config import reset_settings
from uiseek.driver import UiDriver
from uiseek.hal.interfaces import ITreeProvider
from uiseek.mock import MockClock, MockScrollableList
from uiseek.model.element import Bounds, UiElement
from uiseek.polling import DefaultPoller


class SequenceTreeProvider(ITreeProvider):
    """Serves the given roots in order, then keeps serving the last one."""

    def __init__(self, *roots: UiElement) -> None:
        self.roots = list(roots)
        self.fetches = 0

    def get_current_snapshot(self) -> UiElement:
        root = self.roots[min(self.fetches, len(self.roots) - 1)]
        self.fetches += 1
        return root


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop the settings singleton after every test."""
    yield
    reset_settings()


@pytest.fixture
def clock() -> MockClock:
    """Provide a virtual clock."""
    return MockClock()


@pytest.fixture
def poller(clock: MockClock) -> DefaultPoller:
    """Provide a 100 ms poller running on the virtual clock."""
    return DefaultPoller(100, clock=clock.monotonic, sleep=clock.sleep)


@pytest.fixture
def make_driver(poller: DefaultPoller) -> Callable[..., UiDriver]:
    """Build a driver over a provider that may also be the scroll executor."""

    def factory(provider: ITreeProvider, executor=None) -> UiDriver:
        if executor is None and isinstance(provider, MockScrollableList):
            executor = provider
        return UiDriver(provider, executor, poller=poller)

    return factory


@pytest.fixture
def make_list() -> Callable[..., MockScrollableList]:
    """Build a MockScrollableList of items named 'item 0', 'item 1', ..."""

    def factory(count: int, **kwargs) -> MockScrollableList:
        return MockScrollableList([f"item {i}" for i in range(count)], **kwargs)

    return factory


def build_tree() -> UiElement:
    """Build a small settings-like tree.

    root
    ├── toolbar (title "Settings")
    ├── list (scrollable)
    │   ├── row "Wi-Fi"  > switch (checked)
    │   ├── row "Bluetooth" > switch
    │   └── hidden row "Secret" (invisible) > label "Buried"
    └── footer (text "Bluetooth")
    """
    wifi = UiElement(
        resource_id="row",
        class_name="android.widget.LinearLayout",
        bounds=Bounds(0, 100, 1080, 200),
        children=[
            UiElement(text="Wi-Fi", resource_id="label", class_name="android.widget.TextView"),
            UiElement(resource_id="switch", class_name="android.widget.Switch", checked=True),
        ],
    )
    bluetooth = UiElement(
        resource_id="row",
        class_name="android.widget.LinearLayout",
        bounds=Bounds(0, 200, 1080, 300),
        children=[
            UiElement(text="Bluetooth", resource_id="label", class_name="android.widget.TextView"),
            UiElement(resource_id="switch", class_name="android.widget.Switch"),
        ],
    )
    hidden = UiElement(
        text="Secret",
        resource_id="row",
        visible=False,
        children=[UiElement(text="Buried", resource_id="label")],
    )
    return UiElement(
        resource_id="root",
        class_name="android.widget.FrameLayout",
        children=[
            UiElement(
                text="Settings",
                resource_id="toolbar",
                content_description="Navigate up",
                class_name="android.widget.Toolbar",
            ),
            UiElement(
                resource_id="list",
                class_name="androidx.recyclerview.widget.RecyclerView",
                scrollable=True,
                children=[wifi, bluetooth, hidden],
            ),
            UiElement(text="Bluetooth", resource_id="footer", class_name="android.widget.TextView"),
        ],
    )


@pytest.fixture
def tree() -> UiElement:
    return build_tree()


@pytest.fixture
def make_tree() -> Callable[[], UiElement]:
    """Build independent copies of the sample tree."""
    return build_tree


@pytest.fixture
def make_provider() -> Callable[..., SequenceTreeProvider]:
    """Build a provider serving a fixed sequence of snapshots."""

    def factory(*roots: UiElement) -> SequenceTreeProvider:
        return SequenceTreeProvider(*roots)

    return factory
