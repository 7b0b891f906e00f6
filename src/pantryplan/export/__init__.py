"""Output formatters for meals and meal plans."""

from pantryplan.export.formatters import (
    OUTPUT_FORMATS,
    JSONFormatter,
    MarkdownFormatter,
    TableFormatter,
    format_meals,
    format_plans,
    plan_share_text,
    read_plans_json,
)

__all__ = [
    "JSONFormatter",
    "OUTPUT_FORMATS",
    "MarkdownFormatter",
    "TableFormatter",
    "format_meals",
    "format_plans",
    "plan_share_text",
    "read_plans_json",
]
