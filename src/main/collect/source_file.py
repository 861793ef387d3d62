import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from tree_sitter import Node

from src.main.complexity.analyzer import Analyzer
from src.main.complexity.scope import Scope
from src.main.utils.js_parser import parse

logger = logging.getLogger(__name__)


class SourceFile:
    """
    One JavaScript source: exposes its parsed tree and collects the scopes
    an `Analyzer` finds in it.
    """

    def __init__(self, path: Optional[Path] = None, code: Optional[str] = None) -> None:
        """
        Args:
            path (Optional[Path]): File the code was read from; only used for reporting
                                   when `code` is given.
            code (Optional[str]): Source text. Read from `path` when omitted.
        """
        if path is None and code is None:
            raise ValueError("SourceFile needs a path or source code.")
        self.path: Optional[Path] = Path(path) if path is not None else None
        self.code: str = code if code is not None else self.read(self.path)
        self.records: List[Scope] = []
        self._tree: Optional[Node] = None

    @classmethod
    def from_path(cls, path: Path) -> "SourceFile":
        return cls(path=Path(path))

    @staticmethod
    def read(path: Path) -> str:
        return path.read_text(encoding="utf-8")

    @property
    def name(self) -> str:
        return str(self.path) if self.path is not None else "<string>"

    def ast(self) -> Optional[Node]:
        """Parsed root node, or None when the code is empty."""
        if not self.code:
            return None
        if self._tree is None:
            self._tree = parse(self.code)
            if self._tree.has_error:
                logger.warning("%s: syntax errors, scores may be incomplete", self.name)
        return self._tree

    def add(self, record: Scope) -> None:
        self.records.append(record)

    def analyze(self, analyzer: Optional[Analyzer] = None) -> List[Scope]:
        self.records = []
        (analyzer or Analyzer()).analyze(self.ast(), self)
        return self.records

    def root(self) -> Optional[Scope]:
        return next((r for r in self.records if r.depth() == 0), None)

    def score(self) -> float:
        root = self.root()
        return root.score() if root is not None else 0

    def to_json(self) -> List[Dict[str, Any]]:
        return [record.to_json() for record in self.records]
