"""Detection of missing type annotations in Python function definitions."""

import logging

from tree_sitter import Node

from pythcheck.errors import MalformedTreeError
from pythcheck.models import (
    Finding,
    MissingParameterAnnotation,
    MissingReturnAnnotation,
    Position,
)
from pythcheck.node_kinds import NodeKinds
from pythcheck.traversal import get_node_text, walk_preorder

logger = logging.getLogger(__name__)

# The implicit instance parameter is never expected to carry a hint
_SELF_PARAMETER = "self"

# Entry points are conventionally left without a return type
_ENTRY_POINT_NAME = "main"

# Line index offset (tree-sitter uses 0-based, we want 1-based)
_LINE_INDEX_OFFSET = 1


class GapDetector:
    """Finds function definitions and parameters lacking type annotations.

    The detector makes a single pre-order pass over the tree. Each function
    definition, nested ones included, is checked on its own: parameter
    findings first, then the function's return finding.
    """

    def __init__(self, kinds: NodeKinds | None = None) -> None:
        """Initialise the detector.

        Args:
            kinds: Node kind table, defaults to the stock Python grammar names

        """
        self._kinds = kinds or NodeKinds()

    def detect(
        self, source: bytes, root: Node, ignore_return: bool = False
    ) -> list[Finding]:
        """Collect findings for every function definition in a tree.

        Args:
            source: Source bytes the tree was parsed from
            root: Root node of the parsed tree
            ignore_return: Skip missing return type findings

        Returns:
            Findings in document order

        Raises:
            MalformedTreeError: If a function definition lacks its name

        """
        findings: list[Finding] = []
        for node in walk_preorder(root):
            if node.type == self._kinds.function_definition:
                findings.extend(self._check_function(node, source, ignore_return))
        return findings

    def _check_function(
        self, node: Node, source: bytes, ignore_return: bool
    ) -> list[Finding]:
        """Check one function definition node.

        Args:
            node: Function definition node
            source: Source bytes
            ignore_return: Skip the missing return type finding

        Returns:
            Parameter findings followed by the return finding, if any

        """
        findings: list[Finding] = []
        has_return_type = False

        for child in node.children:
            if child.type == self._kinds.return_type:
                has_return_type = True
            elif child.type == self._kinds.parameters:
                findings.extend(self._check_parameters(child, source))

        if has_return_type or ignore_return:
            return findings

        name = self._get_function_name(node, source)
        if name == _ENTRY_POINT_NAME:
            logger.debug(
                "Skipping return type of '%s' at line %d",
                name,
                node.start_point[0] + _LINE_INDEX_OFFSET,
            )
            return findings

        findings.append(
            MissingReturnAnnotation(
                function_name=name, position=Position.from_node(node)
            )
        )
        return findings

    def _check_parameters(
        self, parameters: Node, source: bytes
    ) -> list[MissingParameterAnnotation]:
        """Flag the unannotated parameters in a parameter list.

        Args:
            parameters: Parameter list node
            source: Source bytes

        Returns:
            One finding per unannotated parameter, ``self`` excluded

        """
        results: list[MissingParameterAnnotation] = []
        unannotated = self._kinds.unannotated_parameters

        for parameter in parameters.children:
            if parameter.type not in unannotated:
                continue

            if get_node_text(parameter, source) == _SELF_PARAMETER:
                continue

            results.append(
                MissingParameterAnnotation(
                    parameter_name=self._get_parameter_name(parameter, source),
                    position=Position.from_node(parameter),
                )
            )
        return results

    def _get_parameter_name(self, parameter: Node, source: bytes) -> str:
        """Get a parameter's name, without its default value if it has one."""
        if parameter.type == self._kinds.default_parameter:
            name_node = parameter.child_by_field_name("name")
            if name_node is not None:
                return get_node_text(name_node, source)
        return get_node_text(parameter, source)

    def _get_function_name(self, node: Node, source: bytes) -> str:
        """Get the declared name of a function definition.

        The name is the first identifier after the ``def`` keyword, which also
        covers ``async def`` where the keyword is preceded by ``async``.

        Args:
            node: Function definition node
            source: Source bytes

        Returns:
            Function name

        Raises:
            MalformedTreeError: If no name can be located

        """
        children = node.children
        if len(children) < 2:
            raise MalformedTreeError(
                f"Function definition at line "
                f"{node.start_point[0] + _LINE_INDEX_OFFSET} has "
                f"{len(children)} children, expected a name after 'def'"
            )

        seen_def = False
        for child in children:
            if child.type == self._kinds.def_keyword:
                seen_def = True
            elif seen_def and child.type == self._kinds.identifier:
                return get_node_text(child, source)

        raise MalformedTreeError(
            f"Function definition at line "
            f"{node.start_point[0] + _LINE_INDEX_OFFSET} has no identifier "
            "after 'def'; the grammar does not match the detector"
        )
