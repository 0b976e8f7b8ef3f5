"""
Automation Registry - Maps command types to automation classes.

The host registers one automation class per command type; the
automation factory looks the class up and constructs it with the
arguments that type needs.

Example:
    >>> registry = AutomationRegistry()
    >>> 
    >>> @registry.register(CommandType.CLICK)
    >>> class ClickAutomation(IAutomation):
    ...     def __init__(self, element, options): ...
    ...     async def run(self): ...
    >>> 
    >>> registry.get(CommandType.CLICK)
    <class 'ClickAutomation'>
"""

from typing import Callable, Dict, List, Type, TypeVar

from page_driver.commands.type import CommandType
from page_driver.interfaces.automation import IAutomation


T = TypeVar("T", bound=Type[IAutomation])


class AutomationRegistry:
    """
    Registry of automation classes keyed by command type.
    
    Unlike a process-wide registry, each instance is independent so
    a test or a host can assemble its own set of automations.
    """
    
    def __init__(self) -> None:
        self._automations: Dict[CommandType, Type[IAutomation]] = {}
    
    def register(self, command_type: CommandType) -> Callable[[T], T]:
        """
        Decorator to register an automation class.
        
        Args:
            command_type: The CommandType this automation performs
            
        Returns:
            Decorator function
        """
        def decorator(automation_class: T) -> T:
            if command_type in self._automations:
                raise ValueError(f"Automation '{command_type.value}' is already registered")
            self._automations[command_type] = automation_class
            return automation_class
        return decorator
    
    def get(self, command_type: CommandType) -> Type[IAutomation]:
        """
        Get the automation class for a command type.
        
        Args:
            command_type: The CommandType to get
            
        Returns:
            The automation class
            
        Raises:
            ValueError: If nothing is registered for the type
        """
        if command_type in self._automations:
            return self._automations[command_type]
        
        raise ValueError(
            f"Unknown automation: '{command_type.value}'. "
            f"Available automations: {[t.value for t in self.list_types()]}"
        )
    
    def list_types(self) -> List[CommandType]:
        """List all command types with a registered automation."""
        return [t for t in CommandType if t in self._automations]
    
    def missing_types(self) -> List[CommandType]:
        """List command types that have no automation registered."""
        registered = set(self.list_types())
        return [t for t in CommandType if t not in registered]
    
    def clear(self) -> None:
        """Remove every registration. Useful for testing."""
        self._automations.clear()
