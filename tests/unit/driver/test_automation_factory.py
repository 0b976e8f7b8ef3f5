"""
Tests for the automation factory.
"""

import pytest

from conftest import FakeDomUtils, FakeElement, RecordingAutomation
from page_driver.commands import (
    ClickCommand,
    CommandType,
    DoubleClickCommand,
    DragCommand,
    DragToElementCommand,
    HoverCommand,
    RightClickCommand,
    SelectEditableContentCommand,
    SelectTextAreaContentCommand,
    SelectTextCommand,
    TypeTextCommand,
)
from page_driver.driver import create_automation
from page_driver.interfaces import IAutomation
from page_driver.registry import AutomationRegistry


@pytest.fixture
def element():
    return FakeElement("target", editable=True, value="abcdef")


class TestCreateAutomation:
    
    @pytest.mark.parametrize("command", [
        ClickCommand(selector="#a"),
        RightClickCommand(selector="#a"),
        DoubleClickCommand(selector="#a"),
        HoverCommand(selector="#a"),
    ])
    def test_pointer_commands(self, automations, element, command):
        automation = create_automation((element,), command, automations, FakeDomUtils())
        
        assert isinstance(automation, RecordingAutomation)
        assert automation.args == (element, command.options)
    
    def test_drag_by_offset(self, automations, element):
        command = DragCommand(selector="#a", drag_offset_x=15, drag_offset_y=-20)
        
        automation = create_automation((element,), command, automations, FakeDomUtils())
        
        assert automation.args == (element, 15, -20, command.options)
    
    def test_drag_to_element(self, automations, element):
        destination = FakeElement("bin")
        command = DragToElementCommand(selector="#a", destination_selector="#bin")
        
        automation = create_automation((element, destination), command, automations, FakeDomUtils())
        
        assert automation.args == (element, destination, command.options)
    
    def test_type_text(self, automations, element):
        command = TypeTextCommand(selector="#a", text="hello")
        
        automation = create_automation((element,), command, automations, FakeDomUtils())
        
        assert automation.args == (element, "hello", command.options)
    
    def test_select_text(self, automations, element):
        command = SelectTextCommand(selector="#a", start_pos=1, end_pos=4)
        
        automation = create_automation((element,), command, automations, FakeDomUtils())
        
        assert automation.args == (element, 1, 4)
    
    def test_select_text_area_content(self, automations):
        text_area = FakeElement("textarea", text_area=True, value="ab\ncd")
        command = SelectTextAreaContentCommand(selector="#t", start_line=1, start_pos=1)
        
        automation = create_automation((text_area,), command, automations, FakeDomUtils())
        
        assert automation.args == (text_area, 4, 5)
    
    def test_select_editable_content(self, automations):
        start, end = FakeElement("p1"), FakeElement("p2")
        command = SelectEditableContentCommand(start_selector="#p1", end_selector="#p2")
        
        automation = create_automation((start, end), command, automations, FakeDomUtils())
        
        assert automation.args == (start, end)
    
    def test_missing_primary_selector(self, automations):
        automation = create_automation((), ClickCommand(), automations, FakeDomUtils())
        assert automation.args[0] is None
    
    def test_uses_class_registered_for_type(self, element):
        registry = AutomationRegistry()
        
        @registry.register(CommandType.HOVER)
        class HoverAutomation(IAutomation):
            def __init__(self, element, options):
                self.element = element
            
            async def run(self):
                pass
        
        automation = create_automation((element,), HoverCommand(selector="#a"), registry, FakeDomUtils())
        
        assert isinstance(automation, HoverAutomation)
        assert automation.element is element
    
    def test_unregistered_type_raises(self, element):
        with pytest.raises(ValueError, match="Unknown automation"):
            create_automation((element,), ClickCommand(selector="#a"), AutomationRegistry(), FakeDomUtils())
