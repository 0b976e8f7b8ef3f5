"""
Utilities module - Common utility functions.
"""

from page_driver.utils.logging import setup_logging

__all__ = [
    "setup_logging",
]
