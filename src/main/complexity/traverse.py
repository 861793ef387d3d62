from typing import Callable, List, Optional, Tuple

from tree_sitter import Node

Visitor = Callable[[Node, Optional[Node]], None]


def traverse(root: Node, enter: Visitor, leave: Optional[Visitor] = None) -> None:
    """
    Walk the named nodes under `root`, calling `enter(node, parent)` in
    pre-order and `leave(node, parent)` in post-order.

    Anonymous tokens (keywords, punctuation) are skipped. The walk keeps its
    own stack, so deeply nested sources do not hit the recursion limit.
    """
    todo: List[Tuple[Node, Optional[Node], bool]] = [(root, None, False)]
    while todo:
        node, parent, leaving = todo.pop()
        if leaving:
            if leave is not None:
                leave(node, parent)
            continue
        enter(node, parent)
        todo.append((node, parent, True))
        for child in reversed(node.named_children):
            todo.append((child, node, False))
