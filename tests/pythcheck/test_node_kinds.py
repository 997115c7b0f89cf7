"""Tests for the node kind table."""

from unittest.mock import Mock

import pytest

from pythcheck.errors import GrammarMismatchError
from pythcheck.node_kinds import NodeKinds
from pythcheck.parser import get_python_language


class TestNodeKinds:
    """Test validation of node kinds against a grammar."""

    def test_python_grammar_has_every_kind(self) -> None:
        """Test that the installed grammar validates."""
        kinds = NodeKinds.for_language(get_python_language())

        assert kinds.function_definition == "function_definition"
        assert kinds.return_type == "type"

    def test_unannotated_parameter_kinds(self) -> None:
        """Test the kinds treated as parameters without hints."""
        kinds = NodeKinds()

        assert kinds.unannotated_parameters == {"identifier", "default_parameter"}
        assert kinds.typed_parameter not in kinds.unannotated_parameters
        assert kinds.typed_default_parameter not in kinds.unannotated_parameters

    def test_missing_kind_raises_grammar_mismatch(self) -> None:
        """Test that a grammar lacking a kind fails validation."""
        language = Mock()
        language.id_for_node_kind.side_effect = lambda name, named: (
            None if name == "typed_default_parameter" else 1
        )

        with pytest.raises(GrammarMismatchError, match="typed_default_parameter"):
            NodeKinds.for_language(language)

    def test_keyword_looked_up_as_anonymous_node(self) -> None:
        """Test that 'def' is validated as an anonymous node."""
        language = Mock()
        language.id_for_node_kind.return_value = 1

        NodeKinds.for_language(language)

        language.id_for_node_kind.assert_any_call("def", False)
        language.id_for_node_kind.assert_any_call("function_definition", True)
