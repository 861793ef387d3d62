from typing import List

from tree_sitter import Node

from src.main.complexity.analyzer import Analyzer
from src.main.complexity.scope import Scope
from src.main.metrics import metric


class _Scopes(list):
    def add(self, scope: Scope) -> None:
        self.append(scope)


def _scopes(root: Node) -> List[Scope]:
    found = _Scopes()
    Analyzer().analyze(root, found)
    return found


@metric("Hell Score")
def hell_score(root: Node) -> float:
    scopes = _scopes(root)
    return scopes[0].score() if scopes else 0


@metric("Hell Scopes")
def hell_scopes(root: Node) -> int:
    return len(_scopes(root))


@metric("Hell Max Scope Score")
def hell_max_scope_score(root: Node) -> float:
    return max((s.score() for s in _scopes(root) if s.depth() > 0), default=0)
