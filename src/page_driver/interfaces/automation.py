"""
Automation Interface - Abstract base classes for execution collaborators.

These are the pieces the command executor drives but does not implement:
the automations that perform pointer and keyboard input, the barriers
that report when page activity has settled, and the progress panel
shown while target elements are being located.
"""

from abc import ABC, abstractmethod


class IAutomation(ABC):
    """
    A ready-to-run action strategy bound to its target elements.
    """

    @abstractmethod
    async def run(self) -> None:
        """
        Perform the action.
        
        Raises:
            Exception: Any failure of the action; the executor reports it
                in the command status
        """
        ...


class IBarrier(ABC):
    """
    Tracks in-flight page activity and waits for it to settle.
    """

    @abstractmethod
    async def wait(self) -> None:
        """Complete once no tracked activity remains pending."""
        ...

    def close(self) -> None:
        """
        Stop tracking activity.

        Called once the command no longer needs the barrier, whether or
        not ``wait`` ever ran. Must be safe to call more than once.
        """
        pass


class IProgressPanel(ABC):
    """
    Waiting indicator shown while the driver looks for target elements.
    """

    @abstractmethod
    def show(self, text: str, timeout_ms: float) -> None:
        """
        Show the indicator.
        
        Args:
            text: Message to display
            timeout_ms: How long the wait may take at most
        """
        ...

    @abstractmethod
    def close(self, success: bool) -> None:
        """
        Hide the indicator.
        
        Args:
            success: Whether the elements were found and validated
        """
        ...
