from abc import ABC, abstractmethod
from typing import List, TextIO, Optional, Dict, Sequence
from enum import Enum
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from algorithms.utils import EditKind, Edit, split_into_hunks


class OutputTarget(Enum):
    STDOUT = "stdout"
    FILE = "file"
    STRING = "string"


class FormatterConfig:
    def __init__(
        self,
        context_lines: int = 3,
        width: int = 130,
        use_color: bool = True,
        show_positions: bool = True,
        encoding: str = "utf-8"
    ):
        self.context_lines = context_lines
        self.width = width
        self.use_color = use_color
        self.show_positions = show_positions
        self.encoding = encoding

    def copy(self) -> 'FormatterConfig':
        return FormatterConfig(
            context_lines=self.context_lines,
            width=self.width,
            use_color=self.use_color,
            show_positions=self.show_positions,
            encoding=self.encoding
        )

    def with_context_lines(self, lines: int) -> 'FormatterConfig':
        cfg = self.copy()
        cfg.context_lines = lines
        return cfg

    def with_width(self, width: int) -> 'FormatterConfig':
        cfg = self.copy()
        cfg.width = width
        return cfg

    def with_color(self, use_color: bool) -> 'FormatterConfig':
        cfg = self.copy()
        cfg.use_color = use_color
        return cfg


class ColorScheme:
    def __init__(self):
        self.reset = '\033[0m'
        self.bold = '\033[1m'
        self.red = '\033[31m'
        self.green = '\033[32m'
        self.yellow = '\033[33m'
        self.cyan = '\033[36m'

    def disable_colors(self):
        self.reset = ''
        self.bold = ''
        self.red = ''
        self.green = ''
        self.yellow = ''
        self.cyan = ''

    def for_kind(self, kind: EditKind) -> str:
        return {
            EditKind.KEEP: '',
            EditKind.CHANGE: self.yellow,
            EditKind.REMOVE: self.red,
            EditKind.ADD: self.green,
        }[kind]

    @classmethod
    def no_color(cls) -> 'ColorScheme':
        scheme = cls()
        scheme.disable_colors()
        return scheme


class OutputWriter:
    def __init__(self, target: OutputTarget = OutputTarget.STDOUT, output: Optional[TextIO] = None):
        self.target = target
        self._output = output or sys.stdout
        self._buffer: List[str] = []

    def write(self, text: str):
        if self.target == OutputTarget.STRING:
            self._buffer.append(text)
        else:
            self._output.write(text)

    def writeln(self, text: str = ""):
        self.write(text + "\n")

    def get_output(self) -> str:
        return "".join(self._buffer)

    def flush(self):
        if self.target != OutputTarget.STRING:
            self._output.flush()


MARKERS = {
    EditKind.KEEP: ' ',
    EditKind.CHANGE: '~',
    EditKind.REMOVE: '-',
    EditKind.ADD: '+',
}

_NO_LEFT = object()


class BaseFormatter(ABC):
    """Renders a materialized list of edits.

    ``left`` optionally supplies the left-hand elements so Remove and Change
    rows can show the value that was there; Keep rows show it too. Without
    it, only right-hand values are known.
    """

    def __init__(self, config: Optional[FormatterConfig] = None):
        self.config = config or FormatterConfig()
        self.colors = ColorScheme() if self.config.use_color else ColorScheme.no_color()
        self.writer: Optional[OutputWriter] = None

    def format(
        self,
        edits: List[Edit],
        name1: str,
        name2: str,
        left: Optional[Sequence[object]] = None,
        output: Optional[TextIO] = None
    ) -> str:
        if output is None:
            self.writer = OutputWriter(OutputTarget.STRING)
        else:
            self.writer = OutputWriter(OutputTarget.FILE, output)
        self._format_impl(edits, name1, name2, left)
        if output is None:
            return self.writer.get_output()
        self.writer.flush()
        return ""

    @abstractmethod
    def _format_impl(self, edits: List[Edit], name1: str, name2: str,
                     left: Optional[Sequence[object]]):
        pass

    def has_changes(self, edits: List[Edit]) -> bool:
        return any(edit.kind != EditKind.KEEP for edit in edits)

    def _left_value(self, left: Optional[Sequence[object]], index: int) -> object:
        # None is a real element, so a missing one is told apart by identity.
        if left is None or index >= len(left):
            return _NO_LEFT
        return left[index]

    def _left_text(self, left: Optional[Sequence[object]], index: int) -> str:
        old = self._left_value(left, index)
        return "" if old is _NO_LEFT else str(old)

    def _describe(self, edit: Edit, index: int, left: Optional[Sequence[object]]) -> str:
        old = self._left_value(left, index)
        if edit.kind in (EditKind.KEEP, EditKind.REMOVE):
            return self._left_text(left, index)
        if edit.kind == EditKind.CHANGE and old is not _NO_LEFT:
            return f"{old} -> {edit.value}"
        return str(edit.value)

    def _write(self, text: str):
        if self.writer:
            self.writer.write(text)

    def _writeln(self, text: str = ""):
        if self.writer:
            self.writer.writeln(text)


class SimpleFormatter(BaseFormatter):
    def _format_impl(self, edits: List[Edit], name1: str, name2: str,
                     left: Optional[Sequence[object]]):
        for index, edit in enumerate(edits):
            line = f"{MARKERS[edit.kind]}{self._describe(edit, index, left)}"
            color = self.colors.for_kind(edit.kind)
            if color:
                line = f"{color}{line}{self.colors.reset}"
            self._writeln(line)


class CompactFormatter(BaseFormatter):
    def _format_impl(self, edits: List[Edit], name1: str, name2: str,
                     left: Optional[Sequence[object]]):
        hunks = split_into_hunks(edits, self.config.context_lines)
        if not hunks:
            return
        self._writeln(f"{self.colors.bold}--- {name1}{self.colors.reset}")
        self._writeln(f"{self.colors.bold}+++ {name2}{self.colors.reset}")
        for hunk in hunks:
            first, last = hunk[0][0] + 1, hunk[-1][0] + 1
            self._writeln(f"{self.colors.cyan}@@ positions {first}-{last} @@{self.colors.reset}")
            for index, edit in hunk:
                prefix = f"{index + 1:>4} " if self.config.show_positions else ""
                line = f"{prefix}{MARKERS[edit.kind]}{self._describe(edit, index, left)}"
                color = self.colors.for_kind(edit.kind)
                if color:
                    line = f"{color}{line}{self.colors.reset}"
                self._writeln(line)


class FormatterFactory:
    _formatters: Dict[str, type] = {}

    @classmethod
    def register(cls, name: str, formatter_class: type):
        cls._formatters[name] = formatter_class

    @classmethod
    def create(cls, name: str, config: Optional[FormatterConfig] = None) -> BaseFormatter:
        if name not in cls._formatters:
            raise ValueError(f"Unknown formatter: {name}")
        return cls._formatters[name](config)

    @classmethod
    def available(cls) -> List[str]:
        return list(cls._formatters.keys())


FormatterFactory.register("simple", SimpleFormatter)
FormatterFactory.register("compact", CompactFormatter)
