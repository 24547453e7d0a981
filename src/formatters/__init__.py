from typing import List, Optional, Sequence

from formatters.base import (
    BaseFormatter, SimpleFormatter, CompactFormatter, FormatterConfig, FormatterFactory,
    ColorScheme, OutputWriter, OutputTarget, MARKERS
)
from formatters.side_by_side import (
    SideBySideFormatter, SideBySideRow, SideBySideGenerator, ColumnConfig,
    TextTruncator, PositionFormatter, GutterFormatter
)
from formatters.html import HTMLFormatter, JSONFormatter


__all__ = [
    "BaseFormatter", "SimpleFormatter", "CompactFormatter", "FormatterConfig", "FormatterFactory",
    "ColorScheme", "OutputWriter", "OutputTarget", "MARKERS",
    "SideBySideFormatter", "SideBySideRow", "SideBySideGenerator", "ColumnConfig",
    "TextTruncator", "PositionFormatter", "GutterFormatter",
    "HTMLFormatter", "JSONFormatter"
]


def create_formatter(name: str, config: Optional[FormatterConfig] = None) -> BaseFormatter:
    return FormatterFactory.create(name, config)


def get_available_formatters() -> List[str]:
    return FormatterFactory.available()


def format_diff(
    edits,
    name1: str,
    name2: str,
    formatter_name: str = "simple",
    config: Optional[FormatterConfig] = None,
    left: Optional[Sequence[object]] = None
) -> str:
    formatter = create_formatter(formatter_name, config)
    return formatter.format(list(edits), name1, name2, left)
