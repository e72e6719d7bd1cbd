"""Composite: leaves and branches of a tree share one node interface."""

from __future__ import annotations

from ...core import TraceLog, register_pattern
from ...models import PatternCategory
from ...presenters import Presenter


class TreeNode:
    def __init__(self, name: str) -> None:
        self.name = name
        self.children: list[TreeNode] = []

    def add(self, child: TreeNode) -> None:
        self.children.append(child)

    def remove(self, child: TreeNode) -> None:
        """Detach ``child``; removing a node that is not a child is a no-op."""
        if child in self.children:
            self.children.remove(child)

    def get_child(self, index: int) -> TreeNode:
        return self.children[index]

    def has_children(self) -> bool:
        return bool(self.children)


def traverse(log: TraceLog, node: TreeNode, indent: int = 1) -> None:
    log.add(f"{'--' * (indent - 1)}{node.name}")
    for child in node.children:
        traverse(log, child, indent + 1)


@register_pattern(
    "composite",
    title="Composite",
    category=PatternCategory.STRUCTURAL,
    summary="Tree of nodes traversed uniformly",
)
def run(presenter: Presenter | None = None) -> None:
    log = TraceLog(presenter)
    tree = TreeNode("root")
    left = TreeNode("left")
    right = TreeNode("right")

    tree.add(left)
    tree.add(right)
    tree.remove(right)
    tree.add(right)

    left.add(TreeNode("leftleft"))
    left.add(TreeNode("leftright"))
    right.add(TreeNode("rightleft"))
    right.add(TreeNode("rightright"))

    traverse(log, tree)
    log.show()


if __name__ == "__main__":
    run()
