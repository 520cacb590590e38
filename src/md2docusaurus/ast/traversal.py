#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2docusaurus/ast/traversal.py
"""Depth-first traversal with in-place sibling mutation.

:func:`visit` walks a tree in pre-order and calls a visitor for every node
accepted by a matcher. The visitor receives ``(node, index, parent)`` and may
splice ``parent``'s child list at or after ``index``: insert new siblings,
delete the node, or replace it with several nodes.

The walk is index based and re-reads the parent's live child list after
every callback, so:

- siblings inserted after ``index`` are visited exactly once, in order;
- nodes before the resume index are never revisited;
- a node removed or replaced by its visitor is not descended into, and
  unless the visitor returns an index the walk resumes after whatever took
  its place (the next sibling when the node was deleted).

Examples
--------
Rewrite every link:

    >>> def rewrite(node, index, parent):
    ...     node.url = node.url.replace("README.md", "index.md")
    >>> visit(doc, "link", rewrite)

Replace a node with two and skip over them:

    >>> def split(node, index, parent):
    ...     parent.children[index:index + 1] = [Paragraph(), Paragraph()]
    ...     return index + 2
    >>> visit(doc, BlockQuote, split)

"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Iterable, Optional, Union

from md2docusaurus.ast.nodes import Node, get_node_children


class Action(Enum):
    """Control signals a visitor may return."""

    CONTINUE = "continue"
    SKIP = "skip"
    EXIT = "exit"


CONTINUE = Action.CONTINUE
SKIP = Action.SKIP
EXIT = Action.EXIT

TestSpec = Union[None, str, type, Iterable[Union[str, type]], Callable[[Node], bool]]
VisitorResult = Union[Action, int, None]
Visitor = Callable[[Node, Optional[int], Optional[Node]], VisitorResult]


def convert_test(test: TestSpec) -> Callable[[Node], bool]:
    """Build a node matcher from a test value.

    Parameters
    ----------
    test : None, str, type, iterable or callable
        ``None`` matches every node. A string matches nodes whose ``kind``
        equals it. A Node subclass matches its instances. An iterable mixes
        kind strings and classes, matching any of them. A callable is used
        as the predicate directly.

    Returns
    -------
    callable
        Predicate taking a node and returning True when it matches

    """
    if test is None:
        return lambda node: True

    if isinstance(test, str):
        return lambda node: node.kind == test

    if isinstance(test, type):
        node_class = test
        return lambda node: isinstance(node, node_class)

    if callable(test):
        return test

    kinds = frozenset(item for item in test if isinstance(item, str))
    classes = tuple(item for item in test if isinstance(item, type))

    def matches(node: Node) -> bool:
        return node.kind in kinds or (bool(classes) and isinstance(node, classes))

    return matches


def visit(tree: Node, test: TestSpec, visitor: Visitor) -> None:
    """Walk ``tree`` depth-first and call ``visitor`` on each matching node.

    Parameters
    ----------
    tree : Node
        Root of the walk; matched itself with ``index`` and ``parent`` None
    test : None, str, type, iterable or callable
        Matcher value, see :func:`convert_test`
    visitor : callable
        Called as ``visitor(node, index, parent)``. May return ``None`` or
        ``CONTINUE`` (descend, then move to the next sibling), ``SKIP`` (do not
        descend), ``EXIT`` (stop the walk), or an int giving the sibling
        index to continue at.

    Raises
    ------
    ValueError
        If a visitor returns a negative index

    Notes
    -----
    Returning an index at or before the current one makes the walk revisit
    nodes; a visitor doing so must itself guarantee termination.

    """
    _walk(tree, None, None, convert_test(test), visitor)


def _is_attached(node: Node, index: Optional[int], parent: Optional[Node]) -> bool:
    if parent is None or index is None:
        return True
    siblings = get_node_children(parent)
    return index < len(siblings) and siblings[index] is node


def _walk(
    node: Node,
    index: Optional[int],
    parent: Optional[Node],
    matches: Callable[[Node], bool],
    visitor: Visitor,
) -> Union[int, Action]:
    """Visit ``node`` and its subtree; return the next sibling index or EXIT."""
    result: VisitorResult = None
    siblings_before = len(get_node_children(parent)) if parent is not None else 0
    if matches(node):
        result = visitor(node, index, parent)

    if result is EXIT:
        return EXIT

    attached = _is_attached(node, index, parent)
    if result is not SKIP and attached:
        position = 0
        # The child list is re-read on every step; visitors may resize it.
        while position < len(get_node_children(node)):
            child = get_node_children(node)[position]
            outcome = _walk(child, position, node, matches, visitor)
            if outcome is EXIT:
                return EXIT
            position = outcome  # type: ignore[assignment]

    if isinstance(result, int) and not isinstance(result, bool):
        if result < 0:
            raise ValueError(f"Visitor returned a negative index: {result}")
        return result

    if index is None or parent is None:
        return 0
    if not attached:
        # Step over whatever replaced the node, never back before it
        resized = len(get_node_children(parent)) - siblings_before
        return max(index, index + 1 + resized)
    return index + 1
