import logging
from typing import Callable, Dict, List, Mapping, Optional, Protocol

from tree_sitter import Node

from src.main.complexity import syntax
from src.main.complexity.config import WEIGHTS
from src.main.complexity.scope import Scope
from src.main.complexity.traverse import traverse

logger = logging.getLogger(__name__)


class Collector(Protocol):
    def add(self, scope: Scope) -> None: ...


class Analyzer:
    """
    Walks a syntax tree once, keeps a stack of the scopes enclosing the
    current node and charges every scored construct to the innermost one.
    """

    def __init__(self, weights: Optional[Mapping[str, float]] = None) -> None:
        """
        Args:
            weights (Optional[Mapping[str, float]]): Overrides for the default
                penalties in `config.WEIGHTS`. Unknown categories raise KeyError.
        """
        self.weights: Dict[str, float] = dict(WEIGHTS)
        for key, value in (weights or {}).items():
            if key not in self.weights:
                raise KeyError(f"Unknown weight category: {key}")
            self.weights[key] = value
        self.stack: List[Scope] = []
        self.collector: Optional[Collector] = None
        self._rules: Dict[str, Callable[[Node], None]] = {
            syntax.CallExpression: self._add_call,
            syntax.IfStatement: self._add_if,
            syntax.LogicalExpression: self._add_logical,
            syntax.ForInStatement: self._add_for_in,
        }
        for kind in syntax.FUNCTIONS:
            self._rules[kind] = self._add_fn
        for kind in syntax.CASES:
            self._rules[kind] = self._add_case
        for kind in syntax.BRANCHES:
            self._rules[kind] = self._add_branch

    def analyze(self, tree: Optional[Node], collector: Collector) -> None:
        """
        Score `tree`, reporting each new scope to `collector.add` in the
        order the scopes are entered. An absent tree is a no-op.
        """
        self.stack = []
        if tree is None:
            return
        self.collector = collector
        try:
            traverse(tree, self._enter, self._leave)
        finally:
            self.collector = None

    def context(self) -> Optional[Scope]:
        return self.stack[-1] if self.stack else None

    def _enter(self, node: Node, parent: Optional[Node]) -> None:
        self._process(node)
        if node.type in syntax.SCOPES:
            self._push(node, parent)

    def _leave(self, node: Node, parent: Optional[Node]) -> None:
        if self.stack and self.stack[-1].node == node:
            self.stack.pop()

    def _push(self, node: Node, parent_node: Optional[Node]) -> None:
        while parent_node is not None and parent_node.type == syntax.ParenthesizedExpression:
            parent_node = parent_node.parent
        parent = self.context()
        scope = Scope(node, parent_node, len(self.stack))
        if parent is not None:
            parent.children.append(scope)
        self.stack.append(scope)
        logger.debug("Entered scope at line %d, depth %d", syntax.line(node), scope.depth())
        self.collector.add(scope)

    def _add(self, amount: float) -> None:
        scope = self.context()
        if scope is not None:
            scope.add(amount)

    def _process(self, node: Node) -> None:
        rule = self._rules.get(node.type)
        if rule is not None:
            rule(node)

    def _add_fn(self, node: Node) -> None:
        self._add(self.weights["fn"])

    def _add_call(self, node: Node) -> None:
        self._add(self.weights["call"])

    def _add_branch(self, node: Node) -> None:
        self._add(self.weights["branch"])

    def _add_if(self, node: Node) -> None:
        if syntax.field(node, "alternative") is not None:
            self._add(self.weights["branch"])
        self._add(self.weights["branch"])

    def _add_case(self, node: Node) -> None:
        if syntax.fields(node, "body"):
            self._add(self.weights["branch"])
        else:
            self._add(self.weights["branch_empty"])

    def _add_for_in(self, node: Node) -> None:
        # for-of shares the node type
        if syntax.operator(node) == "in":
            self._add(self.weights["branch"])

    def _add_logical(self, node: Node) -> None:
        if syntax.operator(node) == "||":
            self._add(self.weights["branch"])
