# sparser/rules/ast.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, List, Optional, Tuple, Union

from ..errors import require

# ---- Rule node definitions ----
# Nodes compare by identity (eq=False): grammars may be cyclic through a Slot.

@dataclass(frozen=True, eq=False)
class Pattern:
    source: str           # pattern text as given by the caller
    compiled: Any = field(repr=False)

@dataclass(frozen=True, eq=False)
class Empty:
    pass

@dataclass(frozen=True, eq=False)
class Seq:
    left: "Node"
    right: "Node"

@dataclass(frozen=True, eq=False)
class Choice:
    left: "Node"   # tried first
    right: "Node"  # tried from the same offset when left fails

@dataclass(frozen=True, eq=False)
class Repeat:
    node: "Node"
    min: int
    max: Optional[int]  # None = no upper limit

@dataclass(frozen=True, eq=False)
class Map:
    node: "Node"
    func: Callable[[List[Any]], Iterable[Any]]

@dataclass(frozen=True, eq=False)
class Splice:
    node: "Node"   # parsed first
    slot: "Slot"   # rule parsed next, resolved after construction

@dataclass(eq=False)
class Slot:
    """Write-once cell shared by every rule derived from the same chain."""
    rule: Optional["Node"] = field(default=None, repr=False)

    @property
    def filled(self) -> bool:
        return self.rule is not None

    def fill(self, node: "Node") -> None:
        require(self.rule is None,
                "injection point already resolved; inject() may be called once per chain")
        self.rule = node

Node = Union[Pattern, Empty, Seq, Choice, Repeat, Map, Splice]


def children(node: Node) -> Tuple[Node, ...]:
    """Direct successors of `node` in the rule graph (slot targets included)."""
    if isinstance(node, (Seq, Choice)):
        return (node.left, node.right)
    if isinstance(node, (Repeat, Map)):
        return (node.node,)
    if isinstance(node, Splice):
        if node.slot.filled:
            return (node.node, node.slot.rule)
        return (node.node,)
    return ()


def describe(node: Node) -> str:
    """Short label for logs and reprs."""
    if isinstance(node, Pattern):
        return f"/{node.source}/"
    if isinstance(node, Empty):
        return "empty"
    if isinstance(node, Seq):
        return "and"
    if isinstance(node, Choice):
        return "or"
    if isinstance(node, Repeat):
        hi = "*" if node.max is None else str(node.max)
        return f"rep({node.min},{hi})"
    if isinstance(node, Map):
        return f"map({getattr(node.func, '__name__', 'func')})"
    if isinstance(node, Splice):
        return "ipoint"
    raise AssertionError(f"unknown node: {node!r}")
