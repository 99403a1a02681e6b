"""UiDriver - facade over the tree provider, scroll executor and poller.

The driver is the handle passed through the scroll-search core. It owns no
tree state of its own: every lookup fetches a fresh snapshot from the
provider.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from .config import UiseekSettings, get_settings
from .finders import Finder
from .hal.interfaces import IScrollExecutor, ITreeProvider
from .logging import get_logger
from .model.element import UiElement
from .poll_exceptions import TimeoutException
from .polling import EXISTS, GONE, DefaultPoller, Poller

if TYPE_CHECKING:
    from .scroll.direction import PhysicalDirection

logger = get_logger(__name__)


class UiDriver:
    """Entry point for locating elements in a live UI.

    Example:
        >>> driver = UiDriver(provider, executor)
        >>> button = driver.on(by.text("Save"))
    """

    def __init__(
        self,
        tree_provider: ITreeProvider,
        scroll_executor: IScrollExecutor | None = None,
        poller: Poller | None = None,
        settings: UiseekSettings | None = None,
    ) -> None:
        """Initialize the driver.

        Args:
            tree_provider: Source of fresh UI tree snapshots
            scroll_executor: Performs scroll steps; required only for scrolling
            poller: Poller to use; defaults to a DefaultPoller
            settings: Settings to read timeouts from; defaults to get_settings()
        """
        self.settings = settings or get_settings()
        self.tree_provider = tree_provider
        self.scroll_executor = scroll_executor
        self.poller = poller or DefaultPoller(self.settings.poll_interval_millis)

    def get_poller(self) -> Poller:
        return self.poller

    def get_root(self) -> UiElement:
        """Fetch the current tree snapshot."""
        return self.tree_provider.get_current_snapshot()

    def find(self, finder: Finder) -> UiElement:
        """Resolve ``finder`` once against a fresh snapshot.

        Raises:
            ElementNotFoundException: If the finder does not resolve
        """
        return finder.find(self.get_root())

    def has(self, finder: Finder, timeout_millis: int = 0) -> bool:
        """Check whether ``finder`` resolves within ``timeout_millis``."""
        try:
            self.poller.poll_for(self, finder, EXISTS, timeout_millis)
        except TimeoutException:
            return False
        return True

    def on(self, finder: Finder) -> UiElement:
        """Wait for ``finder`` with the default timeout and return the element."""
        return self.check_exists(finder)

    def check_exists(self, finder: Finder, timeout_millis: int | None = None) -> UiElement:
        """Poll until ``finder`` resolves.

        Raises:
            TimeoutException: If it does not resolve in time
        """
        if timeout_millis is None:
            timeout_millis = self.settings.default_timeout_millis
        # EXISTS yields the found element, never None
        return cast(UiElement, self.poller.poll_for(self, finder, EXISTS, timeout_millis))

    def check_gone(self, finder: Finder, timeout_millis: int | None = None) -> None:
        """Poll until ``finder`` no longer resolves.

        Raises:
            TimeoutException: If it is still present when time runs out
        """
        if timeout_millis is None:
            timeout_millis = self.settings.default_timeout_millis
        self.poller.poll_for(self, finder, GONE, timeout_millis)

    def scroll(self, container: UiElement, direction: PhysicalDirection) -> None:
        """Perform one scroll step on ``container``.

        Raises:
            RuntimeError: If the driver has no scroll executor
        """
        if self.scroll_executor is None:
            raise RuntimeError("UiDriver has no scroll executor configured")
        logger.debug("scroll_step", container=str(container), direction=direction.name)
        self.scroll_executor.scroll(container, direction)
