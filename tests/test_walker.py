"""Tests for function-like node discovery."""

from conftest import make_node

from returntyper.annotator.walker import discover_function_nodes
from returntyper.syntax.nodes import NodeKind

NESTED_SOURCE = """\
function outer(a) {
  const inner = (b) => b;
  return function named() { return () => 1; };
}
class C {
  constructor() {}
  get x() { return 1; }
  set x(v) {}
  method() {}
  static s() {}
}
const o = { m() {}, p: async () => 2 };
"""


def test_preorder_left_to_right():
    leaf_a = make_node(NodeKind.ARROW_FUNCTION, type="a")
    leaf_b = make_node(NodeKind.FUNCTION_EXPRESSION, type="b")
    inner = make_node(NodeKind.FUNCTION_DECLARATION, children=[leaf_a], type="inner")
    plain = make_node(NodeKind.OTHER, children=[inner, leaf_b])
    last = make_node(NodeKind.METHOD_DECLARATION, type="last")
    root = make_node(NodeKind.OTHER, children=[plain, make_node(NodeKind.COLON_TOKEN), last])

    assert discover_function_nodes(root) == [inner, leaf_a, leaf_b, last]


def test_root_included_when_function_like():
    child = make_node(NodeKind.ARROW_FUNCTION)
    root = make_node(NodeKind.FUNCTION_EXPRESSION, children=[child])

    assert discover_function_nodes(root) == [root, child]


def test_no_function_nodes():
    root = make_node(NodeKind.OTHER, children=[make_node(NodeKind.CLOSE_PAREN_TOKEN)])
    assert discover_function_nodes(root) == []


def test_deep_nesting_does_not_recurse():
    root = make_node(NodeKind.OTHER)
    node = root
    for _ in range(5000):
        child = make_node(NodeKind.ARROW_FUNCTION)
        node.children.append(child)
        node = child

    found = discover_function_nodes(root)
    assert len(found) == 5000
    assert found[-1] is node


def test_discovers_every_function_kind(parse):
    source_file = parse(NESTED_SOURCE)
    found = discover_function_nodes(source_file.root)

    assert [n.kind for n in found] == [
        NodeKind.FUNCTION_DECLARATION,
        NodeKind.ARROW_FUNCTION,
        NodeKind.FUNCTION_EXPRESSION,
        NodeKind.ARROW_FUNCTION,
        NodeKind.CONSTRUCTOR,
        NodeKind.GET_ACCESSOR,
        NodeKind.SET_ACCESSOR,
        NodeKind.METHOD_DECLARATION,
        NodeKind.METHOD_DECLARATION,
        NodeKind.METHOD_DECLARATION,
        NodeKind.ARROW_FUNCTION,
    ]
    assert len({id(n) for n in found}) == len(found)
    starts = [n.start for n in found]
    assert starts == sorted(starts)


def test_deterministic(parse):
    source_file = parse(NESTED_SOURCE)
    first = discover_function_nodes(source_file.root)
    second = discover_function_nodes(source_file.root)
    assert [id(n) for n in first] == [id(n) for n in second]


def test_overload_signatures_are_function_like(parse):
    source_file = parse(
        "function f(a: string): string;\n"
        "function f(a: number): number;\n"
        "function f(a: any) { return a; }\n"
        "class K {\n"
        "  m(a: string): string;\n"
        "  m(a: any) { return a; }\n"
        "}\n"
    )
    found = discover_function_nodes(source_file.root)

    assert [n.kind for n in found] == [NodeKind.FUNCTION_DECLARATION] * 3 + [
        NodeKind.METHOD_DECLARATION
    ] * 2


def test_interface_members_are_not_function_like(parse):
    source_file = parse("interface I {\n  f(): void;\n  g: () => void;\n}\n")
    assert discover_function_nodes(source_file.root) == []
