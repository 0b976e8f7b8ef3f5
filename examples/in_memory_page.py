"""
Example: In-Memory Page

This example wires the driver to a tiny dict-based page so the whole
resolve -> run -> settle -> report cycle can be watched in the log.
"""

import asyncio
from typing import Any, Optional

from page_driver import AutomationRegistry, CommandType, DriverContext, execute_action_command, parse_command
from page_driver.config import load_config
from page_driver.driver import LoggingProgressPanel, NetworkActivityMonitor, PageUnloadBarrier
from page_driver.interfaces import IAutomation, IDomUtils, ISelectorEvaluator
from page_driver.utils import setup_logging


class Node:
    def __init__(self, tag: str, visible: bool = True, value: str = ""):
        self.tag = tag
        self.visible = visible
        self.value = value


class DictPage(ISelectorEvaluator, IDomUtils):
    """A page whose elements live in a dict keyed by selector."""
    
    def __init__(self):
        self.nodes = {}
    
    def evaluate(self, selector: str) -> Optional[Any]:
        return self.nodes.get(selector)
    
    def is_element_visible(self, element: Any) -> bool:
        return element.visible
    
    def is_editable_element(self, element: Any) -> bool:
        return element.tag in ("input", "textarea")
    
    def is_text_area_element(self, element: Any) -> bool:
        return element.tag == "textarea"
    
    def is_content_editable_element(self, element: Any) -> bool:
        return False
    
    def is_text_editable_element(self, element: Any) -> bool:
        return self.is_editable_element(element)
    
    def get_element_value(self, element: Any) -> str:
        return element.value
    
    def get_first_visible_position(self, element: Any) -> int:
        return 0
    
    def get_last_visible_position(self, element: Any) -> int:
        return len(element.value)
    
    def get_nearest_common_ancestor(self, first: Any, second: Any) -> Optional[Any]:
        return None


automations = AutomationRegistry()


@automations.register(CommandType.TYPE_TEXT)
class TypeAutomation(IAutomation):
    def __init__(self, element, text, options):
        self.element = element
        self.text = text
        self.options = options
    
    async def run(self) -> None:
        if self.options.replace:
            self.element.value = ""
        for char in self.text:
            self.element.value += char
            await asyncio.sleep(0.01)


async def main():
    """Type into an input that shows up a moment after the command starts."""
    settings = load_config()
    setup_logging("DEBUG")
    print(f"Commands without an automation: {[t.value for t in automations.missing_types()]}")

    page = DictPage()
    context = DriverContext(
        selector_evaluator=page,
        dom=page,
        progress_panel=LoggingProgressPanel(),
        automations=automations,
        request_barrier_factory=NetworkActivityMonitor(settings.driver).create_barrier,
        page_unload_barrier=PageUnloadBarrier(settings.driver),
        settings=settings,
    )
    
    command = parse_command({"type": "type-text", "selector": "#name", "text": "Ada"})
    asyncio.get_running_loop().call_later(0.5, page.nodes.__setitem__, "#name", Node("input"))
    
    handle = execute_action_command(command, 2000, context=context)
    await handle.start
    print("Element found, typing...")
    
    status = await handle.completion
    print(f"Status: {status.to_dict()}")
    print(f"Value: {page.nodes['#name'].value!r}")


if __name__ == "__main__":
    asyncio.run(main())
