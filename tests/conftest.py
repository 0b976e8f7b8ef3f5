"""
Pytest configuration and fixtures.
"""

import asyncio
from typing import Any, Dict, List, Optional

import pytest

from page_driver.commands import CommandType
from page_driver.config import DriverSettings, Settings
from page_driver.driver import DriverContext
from page_driver.interfaces import (
    IAutomation,
    IBarrier,
    IDomUtils,
    IProgressPanel,
    ISelectorEvaluator,
)
from page_driver.registry import AutomationRegistry


# =============================================================================
# FAKE PAGE
# =============================================================================

class FakeElement:
    """Element stand-in whose state the DOM fake reads directly."""

    def __init__(
        self,
        name: str,
        visible: bool = True,
        editable: bool = False,
        text_area: bool = False,
        content_editable: bool = False,
        value: str = "",
        root: Optional["FakeElement"] = None,
        first_visible_position: int = 0,
        last_visible_position: int = 0,
    ):
        self.name = name
        self.visible = visible
        self.editable = editable or text_area
        self.text_area = text_area
        self.content_editable = content_editable
        self.value = value
        self.root = root
        self.first_visible_position = first_visible_position
        self.last_visible_position = last_visible_position

    def __repr__(self) -> str:
        return f"<FakeElement {self.name}>"


class FakeSelectorEvaluator(ISelectorEvaluator):
    """Looks selectors up in a dict that tests can change while polling runs."""

    def __init__(self, elements: Optional[Dict[str, FakeElement]] = None):
        self.elements: Dict[str, FakeElement] = elements or {}
        self.calls: List[str] = []

    def evaluate(self, selector: str) -> Optional[FakeElement]:
        self.calls.append(selector)
        return self.elements.get(selector)


class FakeDomUtils(IDomUtils):

    def is_element_visible(self, element: Any) -> bool:
        return element.visible

    def is_editable_element(self, element: Any) -> bool:
        return element.editable or element.content_editable

    def is_text_area_element(self, element: Any) -> bool:
        return element.text_area

    def is_content_editable_element(self, element: Any) -> bool:
        return element.content_editable

    def is_text_editable_element(self, element: Any) -> bool:
        return element.editable and not element.content_editable

    def get_element_value(self, element: Any) -> str:
        return element.value

    def get_first_visible_position(self, element: Any) -> int:
        return element.first_visible_position

    def get_last_visible_position(self, element: Any) -> int:
        return element.last_visible_position

    def get_nearest_common_ancestor(self, first: Any, second: Any) -> Optional[Any]:
        if first.root is not None and first.root is second.root:
            return first.root
        return None


class RecordingProgressPanel(IProgressPanel):
    """Progress panel that records every call."""

    def __init__(self):
        self.calls: List[tuple] = []

    def show(self, text: str, timeout_ms: float) -> None:
        self.calls.append(("show", text, timeout_ms))

    def close(self, success: bool) -> None:
        self.calls.append(("close", success))

    @property
    def close_calls(self) -> List[bool]:
        return [call[1] for call in self.calls if call[0] == "close"]


class FakeBarrier(IBarrier):
    """Barrier that settles after an optional delay, or fails."""

    def __init__(self, delay_ms: float = 0, error: Optional[Exception] = None):
        self.delay_ms = delay_ms
        self.error = error
        self.waited = False
        self.closed = False

    async def wait(self) -> None:
        self.waited = True
        if self.delay_ms:
            await asyncio.sleep(self.delay_ms / 1000)
        if self.error:
            raise self.error

    def close(self) -> None:
        self.closed = True


class RecordingAutomation(IAutomation):
    """Automation that records its constructor arguments and runs."""

    instances: List["RecordingAutomation"] = []
    error: Optional[Exception] = None

    def __init__(self, *args: Any):
        self.args = args
        self.ran = False
        RecordingAutomation.instances.append(self)

    async def run(self) -> None:
        self.ran = True
        if RecordingAutomation.error:
            raise RecordingAutomation.error


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def settings():
    """Provide test settings with short timings."""
    return Settings(
        driver=DriverSettings(
            element_availability_timeout_ms=300,
            check_element_delay_ms=10,
            barrier_timeout_ms=100,
            page_unload_timeout_ms=100,
        ),
    )


@pytest.fixture
def evaluator():
    return FakeSelectorEvaluator()


@pytest.fixture
def dom():
    return FakeDomUtils()


@pytest.fixture
def progress_panel():
    return RecordingProgressPanel()


@pytest.fixture
def automations():
    """Provide a registry with a recording automation for every command type."""
    RecordingAutomation.instances = []
    RecordingAutomation.error = None

    registry = AutomationRegistry()
    for command_type in CommandType:
        registry.register(command_type)(RecordingAutomation)

    yield registry

    RecordingAutomation.instances = []
    RecordingAutomation.error = None


@pytest.fixture
def request_barriers():
    """Barriers handed out by the context's request barrier factory."""
    return []


@pytest.fixture
def context(settings, evaluator, dom, progress_panel, automations, request_barriers):
    """Provide a driver context wired to the fakes above."""

    def create_request_barrier() -> FakeBarrier:
        barrier = FakeBarrier()
        request_barriers.append(barrier)
        return barrier

    return DriverContext(
        selector_evaluator=evaluator,
        dom=dom,
        progress_panel=progress_panel,
        automations=automations,
        request_barrier_factory=create_request_barrier,
        page_unload_barrier=FakeBarrier(),
        settings=settings,
    )
