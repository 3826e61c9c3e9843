"""Tree-sitter backed syntax trees for TypeScript sources.

The concrete tree produced by tree-sitter nests a function's parentheses
inside a ``formal_parameters`` node and its return-type colon inside a
``type_annotation`` node. The TypeScript compiler exposes both as direct
tokens of the function node, and that is the shape the insertion planner
expects, so conversion splices them into the function-like node:

    function f(a, b): number {}

    function_declaration
      "function"  identifier  "("  syntax_list  ")"  ":"  predefined_type  statement_block
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

import tree_sitter_typescript as ts_typescript
from tree_sitter import Language, Node, Parser

from returntyper.errors import UnsupportedFileError
from returntyper.syntax.nodes import FUNCTION_LIKE_KINDS, NodeKind, SyntaxNode
from returntyper.syntax.source import SourceFile

logger = logging.getLogger(__name__)

# Grammar node types that are always function-like
_FUNCTION_TYPES: dict[str, NodeKind] = {
    "function_declaration": NodeKind.FUNCTION_DECLARATION,
    "generator_function_declaration": NodeKind.FUNCTION_DECLARATION,
    "function_signature": NodeKind.FUNCTION_DECLARATION,
    "function_expression": NodeKind.FUNCTION_EXPRESSION,
    "function": NodeKind.FUNCTION_EXPRESSION,  # tree-sitter-typescript < 0.21
    "generator_function": NodeKind.FUNCTION_EXPRESSION,
    "arrow_function": NodeKind.ARROW_FUNCTION,
    "abstract_method_signature": NodeKind.METHOD_DECLARATION,
}

_TOKEN_KINDS: dict[str, NodeKind] = {
    "(": NodeKind.OPEN_PAREN_TOKEN,
    ")": NodeKind.CLOSE_PAREN_TOKEN,
    ":": NodeKind.COLON_TOKEN,
}

_ACCESSOR_KINDS: dict[str, NodeKind] = {
    "get": NodeKind.GET_ACCESSOR,
    "set": NodeKind.SET_ACCESSOR,
}


@dataclass
class _ParameterList:
    """Parameters between a function's parentheses, as one synthetic node."""

    members: list[Node]
    start_byte: int
    end_byte: int


def _in_class_body(node: Node) -> bool:
    parent = node.parent
    return parent is not None and parent.type == "class_body"


def _is_class_constructor(node: Node, source: bytes) -> bool:
    # `constructor` names an ordinary method in object literals
    name = node.child_by_field_name("name")
    return (
        name is not None
        and source[name.start_byte:name.end_byte] == b"constructor"
        and _in_class_body(node)
    )


def classify(node: Node, source: bytes) -> NodeKind:
    """Map a tree-sitter node onto a ``NodeKind``."""
    if not node.is_named:
        return _TOKEN_KINDS.get(node.type, NodeKind.OTHER)

    if node.type == "method_definition":
        for child in node.children:
            if not child.is_named and child.type in _ACCESSOR_KINDS:
                return _ACCESSOR_KINDS[child.type]
        if _is_class_constructor(node, source):
            return NodeKind.CONSTRUCTOR
        return NodeKind.METHOD_DECLARATION

    if node.type == "method_signature":
        # Overload signatures in a class body; interface members are not callable declarations
        if not _in_class_body(node):
            return NodeKind.OTHER
        if _is_class_constructor(node, source):
            return NodeKind.CONSTRUCTOR
        return NodeKind.METHOD_DECLARATION

    return _FUNCTION_TYPES.get(node.type, NodeKind.OTHER)


def _split_parameters(params: Node) -> list[Node | _ParameterList]:
    opening: list[Node] = []
    closing: list[Node] = []
    members: list[Node] = []
    for child in params.children:
        if child.is_missing:
            continue
        if not child.is_named and child.type == "(":
            opening.append(child)
        elif not child.is_named and child.type == ")":
            closing.append(child)
        else:
            members.append(child)

    start = opening[0].end_byte if opening else params.start_byte
    end = closing[0].start_byte if closing else params.end_byte
    return [*opening, _ParameterList(members, start, max(start, end)), *closing]


def _child_items(node: Node, kind: NodeKind) -> Iterator[tuple[Node | _ParameterList, bool]]:
    """Yield ``(child, is_name)`` pairs in source order."""
    function_like = kind in FUNCTION_LIKE_KINDS
    for index, child in enumerate(node.children):
        if child.is_missing:
            continue
        field_name = node.field_name_for_child(index)

        if function_like and child.type == "formal_parameters":
            for item in _split_parameters(child):
                yield item, False
        elif function_like and field_name == "return_type":
            for part in child.children:
                if not part.is_missing:
                    yield part, False
        else:
            # Constructors are unnamed declarations, the keyword is not a symbol
            is_name = function_like and kind is not NodeKind.CONSTRUCTOR and field_name == "name"
            yield child, is_name


def _offset_converter(source: bytes, text: str) -> Callable[[int], int]:
    """Build a byte offset to character offset mapping for ``source``."""
    if len(source) == len(text):
        return lambda offset: offset

    offsets: list[int] = []
    for index, char in enumerate(text):
        offsets.extend([index] * len(char.encode("utf-8")))
    offsets.append(len(text))
    return lambda offset: offsets[offset]


def build_syntax_tree(root: Node, source: bytes, text: str) -> SyntaxNode:
    """Convert a tree-sitter tree into ``SyntaxNode``s.

    Args:
        root: Root node of the tree-sitter tree
        source: The bytes tree-sitter parsed
        text: ``source`` decoded; node offsets are indices into it

    Returns:
        Root of the converted tree
    """
    to_char = _offset_converter(source, text)
    top: list[SyntaxNode] = []
    stack: list[tuple[Node | _ParameterList, list[SyntaxNode], SyntaxNode | None]] = [
        (root, top, None)
    ]

    while stack:
        item, siblings, name_owner = stack.pop()
        if isinstance(item, _ParameterList):
            node = SyntaxNode(
                NodeKind.SYNTAX_LIST,
                to_char(item.start_byte),
                to_char(item.end_byte),
                type="syntax_list",
            )
            child_items: list[tuple[Node | _ParameterList, bool]] = [
                (member, False) for member in item.members
            ]
        else:
            kind = classify(item, source)
            node = SyntaxNode(kind, to_char(item.start_byte), to_char(item.end_byte), type=item.type)
            child_items = list(_child_items(item, kind))

        siblings.append(node)
        if name_owner is not None:
            name_owner.name = node

        # Reversed so children pop, and so are appended, in source order
        for child, is_name in reversed(child_items):
            stack.append((child, node.children, node if is_name else None))

    return top[0]


class TypeScriptTreeProvider:
    """Parses TypeScript and TSX sources into ``SourceFile``s."""

    # extension -> grammar name
    LANGUAGE_MAP = {
        "ts": "typescript",
        "mts": "typescript",
        "cts": "typescript",
        "tsx": "tsx",
    }

    def __init__(self) -> None:
        self._parsers: dict[str, Parser] = {}
        self._init_languages()

    def _init_languages(self) -> None:
        """Initialize language parsers."""
        language_configs = [
            ("typescript", ts_typescript.language_typescript),
            ("tsx", ts_typescript.language_tsx),
        ]
        for lang_name, lang_func in language_configs:
            self._parsers[lang_name] = Parser(Language(lang_func()))

        logger.debug(f"Initialized tree-sitter for languages: {list(self._parsers.keys())}")

    def supports(self, path: str | Path) -> bool:
        """Check whether a grammar is registered for the file's extension."""
        return Path(path).suffix.lstrip(".") in self.LANGUAGE_MAP

    def _get_parser(self, path: str | Path) -> Parser:
        extension = Path(path).suffix.lstrip(".")
        if extension not in self.LANGUAGE_MAP:
            raise UnsupportedFileError(f"No TypeScript grammar for '{path}'")
        return self._parsers[self.LANGUAGE_MAP[extension]]

    def parse(self, text: str, path: str | Path = "input.ts") -> SourceFile:
        """Parse source text.

        Args:
            text: Source text
            path: File path; its extension selects the grammar

        Returns:
            The parsed source file

        Raises:
            UnsupportedFileError: If the extension has no grammar
        """
        parser = self._get_parser(path)
        source = text.encode("utf-8")
        tree = parser.parse(source)
        if tree.root_node.has_error:
            logger.warning(f"Syntax errors in {path}; results may be incomplete")

        root = build_syntax_tree(tree.root_node, source, text)
        return SourceFile(path=str(path), text=text, root=root)

    def parse_file(self, file_path: Path) -> SourceFile:
        """Read and parse a file, keeping its line endings untouched."""
        # read_text would translate \r\n and shift every offset after it
        text = file_path.read_bytes().decode("utf-8")
        return self.parse(text, file_path)
