"""
Selection positions for the select-text automations.
"""

from dataclasses import dataclass
from typing import Any, List, Union

from page_driver.commands import SelectTextAreaContentCommand, SelectTextCommand
from page_driver.interfaces import IDomUtils


@dataclass(frozen=True)
class SelectPositions:
    """Absolute caret positions bounding a selection."""
    start_pos: int
    end_pos: int


def get_select_position_arguments(
    element: Any,
    command: Union[SelectTextCommand, SelectTextAreaContentCommand],
    dom: IDomUtils,
) -> SelectPositions:
    """
    Compute where a selection starts and ends.
    
    Requested positions are clamped to the element's content. Missing
    start positions default to the beginning of the content, missing
    end positions to its end.
    
    Args:
        element: The resolved target element
        command: A select-text or select-text-area-content command
        dom: DOM utilities for reading the element's content
        
    Returns:
        The selection bounds
    """
    if isinstance(command, SelectTextAreaContentCommand):
        return _get_text_area_positions(dom.get_element_value(element), command)
    return _get_text_positions(element, command, dom)


def _get_text_positions(element: Any, command: SelectTextCommand, dom: IDomUtils) -> SelectPositions:
    if dom.is_text_editable_element(element):
        first_pos = 0
        last_pos = len(dom.get_element_value(element))
    else:
        first_pos = dom.get_first_visible_position(element)
        last_pos = dom.get_last_visible_position(element)
    
    start_pos = min(command.start_pos, last_pos) if command.start_pos else first_pos
    end_pos = last_pos if command.end_pos is None else min(command.end_pos, last_pos)
    return SelectPositions(start_pos, end_pos)


def _line_offset(lines: List[str], line_index: int) -> int:
    # Each preceding line contributes its length plus the newline.
    return sum(len(line) + 1 for line in lines[:line_index])


def _get_text_area_positions(value: str, command: SelectTextAreaContentCommand) -> SelectPositions:
    lines = value.split("\n")
    last_line = len(lines) - 1
    
    start_line = min(command.start_line, last_line) if command.start_line else 0
    start_pos = min(command.start_pos, len(lines[start_line])) if command.start_pos else 0
    
    end_line = last_line if command.end_line is None else min(command.end_line, last_line)
    end_line_length = len(lines[end_line])
    end_pos = end_line_length if command.end_pos is None else min(command.end_pos, end_line_length)
    
    return SelectPositions(
        start_pos=_line_offset(lines, start_line) + start_pos,
        end_pos=_line_offset(lines, end_line) + end_pos,
    )
