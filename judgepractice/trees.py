"""Exercises on trees: parent finding and binary tree traversals."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping

Children = Mapping[str, "tuple[str | None, str | None]"]

_ROOT = "A"
_MISSING = (None, ".")


def find_parents(count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Parents of nodes 2..count in a tree rooted at node 1.

    Nodes not reachable from node 1 get parent 0.
    """
    neighbours: list[list[int]] = [[] for _ in range(count + 1)]
    for x, y in edges:
        for node in (x, y):
            if not 1 <= node <= count:
                raise ValueError(f"node {node} outside 1..{count}")
        neighbours[x].append(y)
        neighbours[y].append(x)

    parent = [0] * (count + 1)
    if count >= 1:
        visited = [False] * (count + 1)
        visited[1] = True
        pending = [1]
        while pending:
            node = pending.pop()
            for nxt in neighbours[node]:
                if not visited[nxt]:
                    visited[nxt] = True
                    parent[nxt] = node
                    pending.append(nxt)
    return parent[2:]


def _links(children: Children, node: str) -> tuple[str | None, str | None]:
    left, right = children.get(node, (None, None))
    return (
        None if left in _MISSING else left,
        None if right in _MISSING else right,
    )


def _walk(children: Children, node: str, order: str) -> Iterator[str]:
    left, right = _links(children, node)
    if order == "pre":
        yield node
    if left is not None:
        yield from _walk(children, left, order)
    if order == "in":
        yield node
    if right is not None:
        yield from _walk(children, right, order)
    if order == "post":
        yield node


def preorder(children: Children, root: str) -> str:
    """Nodes visited root, left subtree, right subtree.

    children maps a node to its (left, right) pair; None or "." marks no child.
    """
    return "".join(_walk(children, root, "pre"))


def inorder(children: Children, root: str) -> str:
    """Nodes visited left subtree, root, right subtree."""
    return "".join(_walk(children, root, "in"))


def postorder(children: Children, root: str) -> str:
    """Nodes visited left subtree, right subtree, root."""
    return "".join(_walk(children, root, "post"))


def traversals(children: Children) -> tuple[str, str, str]:
    """Preorder, inorder and postorder of the tree rooted at node "A"."""
    return (
        preorder(children, _ROOT),
        inorder(children, _ROOT),
        postorder(children, _ROOT),
    )