from typing import Any, Callable, Dict, List, Optional

from tree_sitter import Node

from src.main.complexity import syntax
from src.main.complexity.config import ANONYMOUS_SIGNATURE, ROOT_SIGNATURE


class Scope:
    """
    Complexity accumulator for one function body or the top-level program.

    Scopes form a tree mirroring lexical nesting: a scope's `score()` is its
    own local penalty plus the scores of every scope nested inside it.
    """

    def __init__(self, node: Node, parent_node: Optional[Node], depth: int) -> None:
        """
        Args:
            node (Node): Node that opened the scope (function or program).
            parent_node (Optional[Node]): Syntactic parent of `node`, used to
                                          name anonymous functions.
            depth (int): Nesting level, 0 for the program scope.
        """
        self.node = node
        self.parent_node = parent_node
        self.children: List["Scope"] = []
        self.local_score: float = 0
        self._depth = depth

    def add(self, amount: float) -> None:
        self.local_score += amount

    def depth(self) -> int:
        return self._depth

    def score(self) -> float:
        """Local score plus the score of every nested scope, recomputed on each call."""
        return self.local_score + sum(child.score() for child in self.children)

    def root(self) -> bool:
        return self.node.type == syntax.Program

    def location(self) -> int:
        """0 for the program scope, otherwise the function's 1-based start line."""
        return 0 if self.root() else syntax.line(self.node)

    def signature(self) -> str:
        """
        Best-effort readable name: '*' for the program, then the function's
        own name, the variable it initializes, the target it is assigned to,
        and finally 'anonymous'.
        """
        resolvers: List[Callable[[], Optional[str]]] = [
            self._main,
            self._named,
            self._vardec,
            self._assignment,
        ]
        for resolve in resolvers:
            name = resolve()
            if name is not None:
                return name
        return ANONYMOUS_SIGNATURE

    def to_json(self) -> Dict[str, Any]:
        return {
            "score": self.score(),
            "signature": self.signature(),
            "location": self.location(),
        }

    def _main(self) -> Optional[str]:
        return ROOT_SIGNATURE if self.root() else None

    def _named(self) -> Optional[str]:
        return syntax.identifier_name(syntax.field(self.node, "name"))

    def _vardec(self) -> Optional[str]:
        if self.parent_node is None or self.parent_node.type != syntax.VariableDeclarator:
            return None
        return syntax.identifier_name(syntax.field(self.parent_node, "name"))

    def _assignment(self) -> Optional[str]:
        if self.parent_node is None or self.parent_node.type != syntax.AssignmentExpression:
            return None
        left = syntax.field(self.parent_node, "left")
        if left is None:
            return None
        name = syntax.identifier_name(left)
        if name is not None:
            return name
        if left.type not in syntax.MEMBERS:
            return None
        return ".".join(_member_path(left))

    def __repr__(self) -> str:
        return f"Scope({self.signature()!r}, location={self.location()}, depth={self._depth})"


def _member_path(node: Node) -> List[str]:
    """Unwind `a.b['c'][0]` into ['a', 'b', 'c', '0']."""
    obj = syntax.field(node, "object")
    if obj is not None and obj.type in syntax.MEMBERS:
        path = _member_path(obj)
    else:
        path = [_base_name(obj)]
    path.append(_segment_name(node))
    return path


def _base_name(node: Optional[Node]) -> str:
    if node is not None and node.type == syntax.This:
        return "this"
    name = syntax.identifier_name(node)
    return name if name is not None else "?"


def _segment_name(node: Node) -> str:
    if node.type == syntax.MemberExpression:
        prop = syntax.field(node, "property")
    else:
        prop = syntax.field(node, "index")
    name = syntax.identifier_name(prop)
    if name is None:
        name = syntax.literal_value(prop)
    return name if name is not None else "?"
