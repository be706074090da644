"""Agent message templates."""

from .templates import (
    DISPATCHER_SYSTEM_PROMPT,
    MANAGER_SYSTEM_PROMPT,
    build_check_brief,
    build_dispatch_brief,
    format_product_line,
)

__all__ = [
    "DISPATCHER_SYSTEM_PROMPT",
    "MANAGER_SYSTEM_PROMPT",
    "build_check_brief",
    "build_dispatch_brief",
    "format_product_line",
]
