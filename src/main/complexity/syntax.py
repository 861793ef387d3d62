"""
Node-type vocabulary of the tree-sitter JavaScript grammar, plus the few
field accessors the scoring rules and signature resolution read.
"""

from typing import List, Optional

from tree_sitter import Node

Program = "program"
FunctionDeclaration = "function_declaration"
GeneratorFunctionDeclaration = "generator_function_declaration"
FunctionExpression = "function_expression"
LegacyFunctionExpression = "function"
GeneratorFunction = "generator_function"
MethodDefinition = "method_definition"
CallExpression = "call_expression"
IfStatement = "if_statement"
SwitchCase = "switch_case"
SwitchDefault = "switch_default"
LogicalExpression = "binary_expression"
CatchClause = "catch_clause"
ConditionalExpression = "ternary_expression"
DoWhileStatement = "do_statement"
ForStatement = "for_statement"
ForInStatement = "for_in_statement"
WhileStatement = "while_statement"
VariableDeclarator = "variable_declarator"
AssignmentExpression = "assignment_expression"
MemberExpression = "member_expression"
SubscriptExpression = "subscript_expression"
ParenthesizedExpression = "parenthesized_expression"
This = "this"
String = "string"
StringFragment = "string_fragment"
Number = "number"

FUNCTIONS = frozenset({
    FunctionDeclaration,
    GeneratorFunctionDeclaration,
    FunctionExpression,
    LegacyFunctionExpression,
    GeneratorFunction,
    MethodDefinition,
})
BRANCHES = frozenset({
    CatchClause,
    ConditionalExpression,
    DoWhileStatement,
    ForStatement,
    WhileStatement,
})
SCOPES = FUNCTIONS | {Program}
CASES = frozenset({SwitchCase, SwitchDefault})
MEMBERS = frozenset({MemberExpression, SubscriptExpression})
IDENTIFIERS = frozenset({
    "identifier",
    "property_identifier",
    "shorthand_property_identifier",
    "private_property_identifier",
})


def text(node: Node) -> str:
    return node.text.decode("utf8") if node.text is not None else ""


def line(node: Node) -> int:
    """1-based line on which `node` starts."""
    return node.start_point[0] + 1


def field(node: Node, name: str) -> Optional[Node]:
    return node.child_by_field_name(name)


def fields(node: Node, name: str) -> List[Node]:
    return list(node.children_by_field_name(name))


def operator(node: Node) -> Optional[str]:
    op = field(node, "operator")
    return op.type if op is not None else None


def identifier_name(node: Optional[Node]) -> Optional[str]:
    if node is None or node.type not in IDENTIFIERS:
        return None
    return text(node)


def literal_value(node: Optional[Node]) -> Optional[str]:
    """Value of a string or number literal, strings without their quotes."""
    if node is None:
        return None
    if node.type == Number:
        return text(node)
    if node.type == String:
        return "".join(text(c) for c in node.named_children if c.type == StringFragment)
    return None
