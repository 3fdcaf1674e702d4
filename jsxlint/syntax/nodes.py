"""Syntax tree node types for JSX markup and the expressions embedded in it.

Expressions form a closed set of variants.  Only the shapes the lint rules
reason about get a dedicated class; every other expression is represented by
:class:`OpaqueExpression`, which records its kind and the nested nodes that
still need to be visited.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

from .span import Span


@dataclass(frozen=True)
class JSXElement:
    span: Span
    name: str
    attributes: Tuple["AttributeItem", ...] = ()
    children: Tuple["JSXChild", ...] = ()
    self_closing: bool = False


@dataclass(frozen=True)
class JSXFragment:
    span: Span
    children: Tuple["JSXChild", ...] = ()


@dataclass(frozen=True)
class LogicalExpression:
    span: Span
    operator: str  # "||", "&&" or "??"
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class ConditionalExpression:
    span: Span
    test: "Expression"
    consequent: "Expression"
    alternate: "Expression"


@dataclass(frozen=True)
class ParenthesizedExpression:
    span: Span
    expression: "Expression"


@dataclass(frozen=True)
class OpaqueExpression:
    """Any expression shape without dedicated support (identifiers, calls, ...)."""

    span: Span
    kind: str
    children: Tuple["Node", ...] = ()


Expression = Union[
    JSXElement,
    JSXFragment,
    LogicalExpression,
    ConditionalExpression,
    ParenthesizedExpression,
    OpaqueExpression,
]


@dataclass(frozen=True)
class JSXEmptyExpression:
    """The inside of ``{}`` or ``{/* comment */}``."""

    span: Span


@dataclass(frozen=True)
class JSXExpressionContainer:
    span: Span
    expression: Union[Expression, JSXEmptyExpression]


@dataclass(frozen=True)
class StringLiteral:
    span: Span
    value: str


@dataclass(frozen=True)
class JSXText:
    span: Span
    value: str


AttributeValue = Union[StringLiteral, JSXExpressionContainer, JSXElement, JSXFragment]


@dataclass(frozen=True)
class JSXAttribute:
    span: Span
    name: str
    value: Optional[AttributeValue] = None


@dataclass(frozen=True)
class JSXSpreadAttribute:
    span: Span
    argument: Expression


AttributeItem = Union[JSXAttribute, JSXSpreadAttribute]
JSXChild = Union[JSXText, JSXExpressionContainer, JSXElement, JSXFragment]


@dataclass(frozen=True)
class Program:
    """The JSX roots found in one source file, in source order."""

    span: Span
    body: Tuple[Union[JSXElement, JSXFragment], ...] = ()


Node = Union[
    Program,
    Expression,
    JSXEmptyExpression,
    JSXExpressionContainer,
    StringLiteral,
    JSXText,
    JSXAttribute,
    JSXSpreadAttribute,
]


def unwrap_parentheses(expression: Expression) -> Expression:
    """Strip any number of enclosing parentheses."""

    while isinstance(expression, ParenthesizedExpression):
        expression = expression.expression
    return expression


def iter_child_nodes(node: Node) -> Iterator[Node]:
    """Yield the direct children of ``node`` in source order."""

    if isinstance(node, Program):
        yield from node.body
    elif isinstance(node, JSXElement):
        yield from node.attributes
        yield from node.children
    elif isinstance(node, JSXFragment):
        yield from node.children
    elif isinstance(node, JSXAttribute):
        if node.value is not None:
            yield node.value
    elif isinstance(node, JSXSpreadAttribute):
        yield node.argument
    elif isinstance(node, JSXExpressionContainer):
        yield node.expression
    elif isinstance(node, LogicalExpression):
        yield node.left
        yield node.right
    elif isinstance(node, ConditionalExpression):
        yield node.test
        yield node.consequent
        yield node.alternate
    elif isinstance(node, ParenthesizedExpression):
        yield node.expression
    elif isinstance(node, OpaqueExpression):
        yield from node.children


def walk(node: Node) -> Iterator[Node]:
    """Yield ``node`` and all of its descendants depth-first, parents first."""

    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(list(iter_child_nodes(current))))
