"""Tree traversal helpers for tree-sitter nodes."""

from collections.abc import Iterator

from tree_sitter import Node

_DEFAULT_ENCODING = "utf-8"

# Shown in place of a name whose bytes do not decode
INVALID_TEXT_PLACEHOLDER = "<invalid utf-8>"


def walk_preorder(root: Node) -> Iterator[Node]:
    """Yield every node of the tree in document pre-order.

    Uses an explicit stack so deeply nested sources do not hit the
    recursion limit.

    Args:
        root: Node to start from (yielded first)

    Yields:
        Nodes in pre-order

    """
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def get_node_text(node: Node, source: bytes) -> str:
    """Get the text of a node, substituting a placeholder for undecodable bytes.

    Args:
        node: Tree-sitter node
        source: Source bytes the tree was parsed from

    Returns:
        Text content of the node

    """
    try:
        return source[node.start_byte : node.end_byte].decode(_DEFAULT_ENCODING)
    except UnicodeDecodeError:
        return INVALID_TEXT_PLACEHOLDER
