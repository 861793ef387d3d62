from typing import List, Optional

from src.main.complexity.traverse import traverse


class MockNode:
    """
    Minimal mock for tree_sitter.Node to test traverse.
    """

    def __init__(self, type_: str, children: Optional[List["MockNode"]] = None):
        self.type = type_
        self.named_children = children if children is not None else []


def test_enter_pre_order_and_leave_post_order():
    tree = MockNode("a", [MockNode("b", [MockNode("c")]), MockNode("d")])
    events = []
    traverse(
        tree,
        lambda n, p: events.append(("enter", n.type, p.type if p else None)),
        lambda n, p: events.append(("leave", n.type, p.type if p else None)),
    )
    assert events == [
        ("enter", "a", None),
        ("enter", "b", "a"),
        ("enter", "c", "b"),
        ("leave", "c", "b"),
        ("leave", "b", "a"),
        ("enter", "d", "a"),
        ("leave", "d", "a"),
        ("leave", "a", None),
    ]


def test_leave_is_optional():
    seen = []
    traverse(MockNode("a", [MockNode("b")]), lambda n, p: seen.append(n.type))
    assert seen == ["a", "b"]


def test_deep_tree_does_not_recurse():
    tree = node = MockNode("root")
    for _ in range(5000):
        child = MockNode("block")
        node.named_children.append(child)
        node = child
    count = [0]
    traverse(tree, lambda n, p: None, lambda n, p: count.__setitem__(0, count[0] + 1))
    assert count[0] == 5001
