from typing import List, Optional, Sequence
from html import escape as html_escape
import json
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from algorithms.utils import EditKind, Edit, DiffSummary
from formatters.base import BaseFormatter, FormatterFactory, MARKERS


DEFAULT_STYLES = """
body { font-family: monospace; margin: 20px; background: #fafafa; color: #333; }
.diff-container { border: 1px solid #ddd; border-radius: 4px; overflow: hidden; margin-bottom: 20px; }
.diff-header { background: #f7f7f7; padding: 10px 15px; border-bottom: 1px solid #ddd; font-weight: bold; }
table { width: 100%; border-collapse: collapse; font-size: 13px; }
td { padding: 2px 8px; vertical-align: top; white-space: pre-wrap; word-wrap: break-word; }
.pos { width: 50px; text-align: right; color: #999; background: #f7f7f7; border-right: 1px solid #eee; }
.keep { background: #fff; }
.change { background: #fff8c5; }
.remove { background: #ffeef0; }
.add { background: #e6ffed; }
.marker { width: 20px; text-align: center; font-weight: bold; }
.content { width: 45%; }
.stats { padding: 10px 15px; background: #f7f7f7; border-top: 1px solid #ddd; font-size: 12px; }
.stats .changed { color: #9a6700; }
.stats .added { color: #22863a; }
.stats .removed { color: #cb2431; }
"""


class HTMLFormatter(BaseFormatter):
    def _format_impl(self, edits: List[Edit], name1: str, name2: str,
                     left: Optional[Sequence[object]]):
        rows = []
        for index, edit in enumerate(edits):
            old_cell = html_escape(self._left_text(left, index))
            if edit.kind == EditKind.KEEP:
                new_cell = old_cell
            elif edit.kind == EditKind.REMOVE:
                new_cell = ""
            else:
                new_cell = html_escape(str(edit.value))
            if edit.kind == EditKind.ADD:
                old_cell = ""
            rows.append(f'<tr class="{edit.kind.value}"><td class="pos">{index + 1}</td>'
                        f'<td class="content">{old_cell}</td>'
                        f'<td class="marker">{html_escape(MARKERS[edit.kind])}</td>'
                        f'<td class="content">{new_cell}</td></tr>')
        summary = DiffSummary.from_edits(edits)
        html = f"""<!DOCTYPE html>
<html><head><meta charset="UTF-8"><title>Diff: {html_escape(name1)} vs {html_escape(name2)}</title>
<style>{DEFAULT_STYLES}</style></head><body>
<div class="diff-container">
<div class="diff-header"><span>--- {html_escape(name1)}</span><br><span>+++ {html_escape(name2)}</span></div>
<table>{"".join(rows)}</table>
<div class="stats"><span class="changed">~{summary.changed}</span>, <span class="added">+{summary.added}</span>, <span class="removed">-{summary.removed}</span></div>
</div></body></html>"""
        self._write(html)


def _json_value(value):
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return str(value)
    return value


class JSONFormatter(BaseFormatter):
    def _format_impl(self, edits: List[Edit], name1: str, name2: str,
                     left: Optional[Sequence[object]]):
        summary = DiffSummary.from_edits(edits)
        result = {
            "left": name1,
            "right": name2,
            "edits": [],
            "stats": {
                "positions": summary.positions,
                "kept": summary.kept,
                "changed": summary.changed,
                "removed": summary.removed,
                "added": summary.added,
            },
        }
        for index, edit in enumerate(edits):
            entry = {"position": index + 1, "kind": edit.kind.value}
            if edit.kind.carries_value:
                entry["value"] = _json_value(edit.value)
            result["edits"].append(entry)
        self._write(json.dumps(result, indent=2, ensure_ascii=False))


FormatterFactory.register("html", HTMLFormatter)
FormatterFactory.register("json", JSONFormatter)
