"""
Registry module - Automation registration and discovery.
"""

from page_driver.registry.registry import AutomationRegistry

__all__ = [
    "AutomationRegistry",
]
