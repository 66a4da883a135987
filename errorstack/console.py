"""Terminal rendering of display trees with rich."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from frozendict import frozendict
from loguru import logger as loguru_logger
from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from errorstack.display import DisplayTree, FrameEntry

loguru_logger = loguru_logger.bind(component="console")

DEFAULT_STYLES: frozendict[str, str] = frozendict(
    {
        "exception": "bold white on red",
        "exceptiontext": "bold red",
        "title": "bold",
        "filename": "cyan",
        "line": "yellow",
        "function": "green",
        "subtext": "dim",
    }
)


def _default_console() -> Console:
    return Console(stderr=True)


@dataclass
class RichConsoleSink:
    """Draws a ``DisplayTree`` as a rich tree on stderr."""

    console: Console = field(default_factory=_default_console)
    styles: Mapping[str, str] = DEFAULT_STYLES

    def _style(self, tag: str) -> str:
        return self.styles.get(tag, DEFAULT_STYLES.get(tag, ""))

    def _root_label(self, tree: DisplayTree) -> Text:
        if tree.header is None:
            return Text("Call stack (most recent call first)", style=self._style("title"))
        label = Text.assemble((f" {tree.header.label} ", self._style("exception")))
        if tree.header.message:
            label.append(": ")
            label.append(tree.header.message, style=self._style("exceptiontext"))
        return label

    def _entry_label(self, entry: FrameEntry) -> Text:
        label = Text.assemble(
            "- ",
            (entry.file_name, self._style("filename")),
            ":",
            (str(entry.line), self._style("line")),
        )
        if entry.function_name:
            label.append("  ")
            label.append(entry.function_name, style=self._style("function"))
        return label

    def build(self, tree: DisplayTree) -> Tree:
        root = Tree(self._root_label(tree), guide_style=self._style("subtext"))
        for entry in tree.entries:
            node = root.add(self._entry_label(entry))
            node.add(Text(entry.subtext, style=self._style("subtext")))
        return root

    def display(self, tree: DisplayTree) -> None:
        self.console.print(self.build(tree))
        loguru_logger.debug("rendered stack with {} entries", len(tree.entries))


__all__ = ["DEFAULT_STYLES", "RichConsoleSink"]
