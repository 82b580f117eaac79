"""flatorm utilities package.

This package contains cross-cutting helpers such as logging setup.
"""

from flatorm.utils.logging import json_formatter, setup_logging

__all__ = ["json_formatter", "setup_logging"]
