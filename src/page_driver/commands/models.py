"""
Command Models - Immutable descriptions of action commands.

Each action kind has its own frozen model; together they form the
``Command`` union, discriminated on the ``type`` field. Payloads use
camelCase field names on the wire and snake_case in Python.

Example:
    >>> command = parse_command({
    ...     "type": "drag-to-element",
    ...     "selector": "#item",
    ...     "destinationSelector": "#bin",
    ... })
    >>> command.selector_roles()
    [(<Role.PRIMARY: 'selector'>, '#item'), (<Role.DESTINATION: 'destinationSelector'>, '#bin')]
"""

from typing import Annotated, Any, List, Literal, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from page_driver.commands.type import CommandType, Role
from page_driver.exceptions import CommandValidationError


class _WireModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )


# =============================================================================
# OPTIONS
# =============================================================================

class Modifiers(_WireModel):
    """Modifier keys held down during a pointer action."""
    ctrl: bool = False
    alt: bool = False
    shift: bool = False
    meta: bool = False


class MouseOptions(_WireModel):
    """
    Options shared by all pointer actions.
    
    Attributes:
        offset_x: Horizontal pointer offset from the element's top-left corner
        offset_y: Vertical pointer offset from the element's top-left corner
        modifiers: Modifier keys to hold
    """
    offset_x: Optional[int] = None
    offset_y: Optional[int] = None
    modifiers: Modifiers = Field(default_factory=Modifiers)


class ClickOptions(MouseOptions):
    """Click options; ``caret_pos`` places the caret in editable targets."""
    caret_pos: Optional[int] = Field(default=None, ge=0)


class TypeOptions(ClickOptions):
    """Typing options; ``replace`` clears the current value first."""
    replace: bool = False


# =============================================================================
# COMMANDS
# =============================================================================

SelectorRoles = List[Tuple[Role, str]]


class ActionCommand(_WireModel):
    """Base for every action command."""

    type: str

    @property
    def command_type(self) -> CommandType:
        return CommandType(self.type)

    def selector_roles(self) -> SelectorRoles:
        """
        Selectors that must be resolved before the action runs.
        
        Returns:
            Ordered (role, selector) pairs; the order is the order of the
            resolved elements handed to the automation
        """
        return []


class TargetedCommand(ActionCommand):
    """A command acting on the element matched by ``selector``."""

    selector: Optional[str] = None

    def selector_roles(self) -> SelectorRoles:
        if self.selector:
            return [(Role.PRIMARY, self.selector)]
        return []


class ClickCommand(TargetedCommand):
    type: Literal["click"] = "click"
    options: ClickOptions = Field(default_factory=ClickOptions)


class RightClickCommand(TargetedCommand):
    type: Literal["right-click"] = "right-click"
    options: ClickOptions = Field(default_factory=ClickOptions)


class DoubleClickCommand(TargetedCommand):
    type: Literal["double-click"] = "double-click"
    options: ClickOptions = Field(default_factory=ClickOptions)


class HoverCommand(TargetedCommand):
    type: Literal["hover"] = "hover"
    options: MouseOptions = Field(default_factory=MouseOptions)


class DragCommand(TargetedCommand):
    """Drag the target element by a pixel offset."""
    type: Literal["drag"] = "drag"
    drag_offset_x: int
    drag_offset_y: int
    options: MouseOptions = Field(default_factory=MouseOptions)


class DragToElementCommand(TargetedCommand):
    """Drag the target element onto the element matched by ``destination_selector``."""
    type: Literal["drag-to-element"] = "drag-to-element"
    destination_selector: str
    options: MouseOptions = Field(default_factory=MouseOptions)

    def selector_roles(self) -> SelectorRoles:
        return super().selector_roles() + [(Role.DESTINATION, self.destination_selector)]


class TypeTextCommand(TargetedCommand):
    type: Literal["type-text"] = "type-text"
    text: str
    options: TypeOptions = Field(default_factory=TypeOptions)


class SelectTextCommand(TargetedCommand):
    """Select a range of text inside an editable element."""
    type: Literal["select-text"] = "select-text"
    start_pos: Optional[int] = Field(default=None, ge=0)
    end_pos: Optional[int] = Field(default=None, ge=0)


class SelectTextAreaContentCommand(TargetedCommand):
    """Select text in a textarea by line and column."""
    type: Literal["select-text-area-content"] = "select-text-area-content"
    start_line: Optional[int] = Field(default=None, ge=0)
    start_pos: Optional[int] = Field(default=None, ge=0)
    end_line: Optional[int] = Field(default=None, ge=0)
    end_pos: Optional[int] = Field(default=None, ge=0)


class SelectEditableContentCommand(ActionCommand):
    """
    Select content-editable content between two elements.
    
    When ``end_selector`` is omitted the selection ends in the start element.
    """
    type: Literal["select-editable-content"] = "select-editable-content"
    start_selector: str
    end_selector: Optional[str] = None

    def selector_roles(self) -> SelectorRoles:
        return [
            (Role.START, self.start_selector),
            (Role.END, self.end_selector or self.start_selector),
        ]


Command = Annotated[
    Union[
        ClickCommand,
        RightClickCommand,
        DoubleClickCommand,
        HoverCommand,
        DragCommand,
        DragToElementCommand,
        TypeTextCommand,
        SelectTextCommand,
        SelectTextAreaContentCommand,
        SelectEditableContentCommand,
    ],
    Field(discriminator="type"),
]

_command_adapter = TypeAdapter(Command)


def parse_command(data: Mapping[str, Any]) -> Command:
    """
    Build a command object from a wire payload.
    
    Args:
        data: Mapping with a ``type`` key and the type's fields
        
    Returns:
        The matching command model
        
    Raises:
        CommandValidationError: If the type is unknown or fields are invalid
    """
    command_type = data.get("type") if isinstance(data, Mapping) else None
    try:
        return _command_adapter.validate_python(data)
    except ValidationError as e:
        raise CommandValidationError(
            f"Invalid '{command_type}' command" if command_type else "Invalid command",
            command_type=command_type,
            errors=e.errors(include_url=False),
        ) from e
