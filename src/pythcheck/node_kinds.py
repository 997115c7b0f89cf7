"""Symbolic node kinds of the tree-sitter Python grammar used by the detector.

Kinds are matched by name. ``NodeKinds.for_language`` checks every name
against the loaded grammar once, so a grammar upgrade that renames or drops
a kind fails loudly at startup instead of silently changing results.
"""

from dataclasses import dataclass, fields

from tree_sitter import Language

from pythcheck.errors import GrammarMismatchError


@dataclass(frozen=True)
class NodeKinds:
    """Names of the grammar node kinds the detector matches on."""

    function_definition: str = "function_definition"
    parameters: str = "parameters"
    identifier: str = "identifier"
    default_parameter: str = "default_parameter"
    typed_parameter: str = "typed_parameter"
    typed_default_parameter: str = "typed_default_parameter"
    return_type: str = "type"
    def_keyword: str = "def"

    @property
    def unannotated_parameters(self) -> frozenset[str]:
        """Parameter kinds that carry no type annotation."""
        return frozenset({self.identifier, self.default_parameter})

    @classmethod
    def for_language(cls, language: Language) -> "NodeKinds":
        """Build the kind table and validate it against a grammar.

        Args:
            language: Loaded tree-sitter language

        Returns:
            Validated NodeKinds

        Raises:
            GrammarMismatchError: If the grammar lacks any required kind

        """
        kinds = cls()
        missing: list[str] = []
        for field in fields(kinds):
            name = getattr(kinds, field.name)
            # keywords are anonymous nodes, everything else is named
            named = field.name != "def_keyword"
            if language.id_for_node_kind(name, named) is None:
                missing.append(name)

        if missing:
            raise GrammarMismatchError(
                f"Loaded grammar has no node kinds {missing}; "
                "check the installed tree-sitter-python version"
            )
        return kinds
