from typing import List, Optional, Sequence
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from algorithms.utils import EditKind, Edit
from formatters.base import BaseFormatter, FormatterConfig, FormatterFactory


class ColumnConfig:
    def __init__(self, total_width: int = 130, gutter_width: int = 3, position_width: int = 4):
        self.total_width = total_width
        self.gutter_width = gutter_width
        self.position_width = position_width
        self._calculate_content_width()

    def _calculate_content_width(self):
        available = self.total_width - self.gutter_width - (2 * self.position_width) - 2
        self.content_width = max(1, available // 2)


class TextTruncator:
    def __init__(self, max_width: int, ellipsis: str = "..."):
        self.max_width = max_width
        self.ellipsis = ellipsis

    def truncate(self, text: str) -> str:
        if len(text) <= self.max_width:
            return text
        if self.max_width <= len(self.ellipsis):
            return text[:self.max_width]
        return text[:self.max_width - len(self.ellipsis)] + self.ellipsis

    def truncate_and_pad(self, text: str) -> str:
        return self.truncate(text).ljust(self.max_width)


class PositionFormatter:
    def __init__(self, width: int = 4):
        self.width = width

    def format(self, position: Optional[int]) -> str:
        if position is None:
            return " " * self.width
        return str(position).rjust(self.width)[-self.width:]


class GutterFormatter:
    MARKERS = {
        EditKind.KEEP: " | ",
        EditKind.CHANGE: " ~ ",
        EditKind.REMOVE: " < ",
        EditKind.ADD: " > ",
    }

    def __init__(self, colors):
        self.colors = colors

    def format(self, kind: EditKind) -> str:
        marker = self.MARKERS[kind]
        color = self.colors.for_kind(kind)
        if not color:
            return marker
        return f"{color}{marker}{self.colors.reset}"


class SideBySideRow:
    def __init__(
        self,
        left_pos: Optional[int],
        left_content: str,
        right_pos: Optional[int],
        right_content: str,
        kind: EditKind
    ):
        self.left_pos = left_pos
        self.left_content = left_content
        self.right_pos = right_pos
        self.right_content = right_content
        self.kind = kind


class SideBySideGenerator:
    def generate(self, edits: List[Edit], left: Optional[Sequence[object]] = None) -> List[SideBySideRow]:
        rows = []
        for index, edit in enumerate(edits):
            position = index + 1
            old = "" if left is None or index >= len(left) else str(left[index])
            if edit.kind == EditKind.KEEP:
                rows.append(SideBySideRow(position, old, position, old, edit.kind))
            elif edit.kind == EditKind.CHANGE:
                rows.append(SideBySideRow(position, old, position, str(edit.value), edit.kind))
            elif edit.kind == EditKind.REMOVE:
                rows.append(SideBySideRow(position, old, None, "", edit.kind))
            else:
                rows.append(SideBySideRow(None, "", position, str(edit.value), edit.kind))
        return rows


class SideBySideFormatter(BaseFormatter):
    def __init__(self, config: Optional[FormatterConfig] = None):
        super().__init__(config)
        self.columns = ColumnConfig(self.config.width)
        self.generator = SideBySideGenerator()
        self.truncator = TextTruncator(self.columns.content_width)
        self.positions = PositionFormatter(self.columns.position_width)
        self.gutter = GutterFormatter(self.colors)

    def _format_impl(self, edits: List[Edit], name1: str, name2: str,
                     left: Optional[Sequence[object]]):
        header = TextTruncator(self.columns.content_width + self.columns.position_width + 1)
        self._writeln("=" * self.columns.total_width)
        self._writeln(f"{header.truncate_and_pad(name1)} | {header.truncate(name2)}")
        self._writeln("=" * self.columns.total_width)
        for row in self.generator.generate(edits, left):
            self._writeln(self._format_row(row))

    def _format_row(self, row: SideBySideRow) -> str:
        left_side = f"{self.positions.format(row.left_pos)} {self.truncator.truncate_and_pad(row.left_content)}"
        right_side = f"{self.positions.format(row.right_pos)} {self.truncator.truncate(row.right_content)}"
        if self.config.use_color:
            if row.kind in (EditKind.REMOVE, EditKind.CHANGE):
                left_side = f"{self.colors.red}{left_side}{self.colors.reset}"
            if row.kind in (EditKind.ADD, EditKind.CHANGE):
                right_side = f"{self.colors.green}{right_side}{self.colors.reset}"
        return f"{left_side}{self.gutter.format(row.kind)}{right_side}".rstrip()


FormatterFactory.register("side-by-side", SideBySideFormatter)
