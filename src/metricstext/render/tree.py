"""Hierarchical metric namespace and its text rendering."""

from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Union

INDENT = "  "


@dataclass
class InlineEntry:
    """A formatted line that lives directly at a tree level.
    
    ``name`` is the sort key (the metric's display name), ``text`` the
    already-indented line.
    """
    
    name: str
    text: str


@dataclass
class NestedEntry:
    """A named child subtree."""
    
    name: str
    tree: "MetricsTree"


SortEntry = Union[InlineEntry, NestedEntry]


class MetricsTree:
    """One namespace level of a metrics snapshot.
    
    Holds the formatted lines that belong directly to this level and the
    child levels keyed by path segment. Children are created on first insert.
    Rendering drains the tree, so a populated tree renders exactly once.
    """
    
    def __init__(self, level: int = 0):
        self.level = level
        self.lines: List[InlineEntry] = []
        self.children: Dict[str, "MetricsTree"] = {}
    
    def insert(
        self,
        path: Sequence[str],
        lines: Sequence[str],
        sort_name: Optional[str] = None,
    ) -> None:
        """Insert formatted lines at the level reached by following ``path``.
        
        Lines are indented for their level on insert. All lines of one call
        share ``sort_name`` and keep their relative order when rendered; when
        no name is given each line sorts by its own text. Inserting the same
        line twice keeps both copies.
        """
        if not path:
            indent = INDENT * self.level
            self.lines.extend(
                InlineEntry(sort_name if sort_name is not None else line, f"{indent}{line}")
                for line in lines
            )
            return
        
        segment = path[0]
        child = self.children.get(segment)
        if child is None:
            child = MetricsTree(self.level + 1)
            self.children[segment] = child
        child.insert(path[1:], lines, sort_name)
    
    def is_empty(self) -> bool:
        return not self.lines and not self.children
    
    def render(self) -> str:
        """Render this level and all children, sorted by name, then clear them.
        
        Lines and child segments share one sort order. The sort is stable, so
        lines with the same name stay in insertion order and come before a
        child segment of that name.
        """
        entries: List[SortEntry] = list(self.lines)
        entries.extend(NestedEntry(name, tree) for name, tree in self.children.items())
        self.lines = []
        self.children = {}
        
        entries.sort(key=lambda entry: entry.name)
        
        indent = INDENT * self.level
        output = []
        for entry in entries:
            if isinstance(entry, InlineEntry):
                output.append(entry.text)
                output.append("\n")
            else:
                output.append(f"{indent}{entry.name}:\n")
                output.append(entry.tree.render())
        
        return "".join(output)
