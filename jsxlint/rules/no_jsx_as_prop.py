"""Detect JSX elements created inline as the value of a JSX attribute.

A JSX literal builds a new element object on every render, so passing one as
a prop defeats referential-equality memoization (``React.memo``,
``PureComponent``) in the receiving component::

    <Item jsx={<SubItem />} />                                    // flagged
    <Item jsx={this.props.jsx || <SubItem />} />                  // flagged
    <Item jsx={this.props.jsx ? this.props.jsx : <SubItem />} />  // flagged
    <Item callback={this.props.jsx} />                            // fine

Elements reached through calls, spreads, destructuring or variables are not
followed.
"""

from __future__ import annotations

from typing import Optional

from jsxlint.severity import Severity
from jsxlint.syntax.nodes import (
    ConditionalExpression,
    Expression,
    JSXElement,
    JSXEmptyExpression,
    JSXExpressionContainer,
    LogicalExpression,
    Node,
    unwrap_parentheses,
)
from jsxlint.syntax.span import Span
from jsxlint.utils import get_prop_value

from . import LintContext, Rule

MESSAGE = "JSX attribute values should not contain other JSX."
HELP = (
    "simplify props or memoize props in the parent component "
    "(https://react.dev/reference/react/memo#my-component-rerenders-when-a-prop-is-an-object-or-array)."
)


class NoJsxAsPropRule:
    """Warn when a prop value can evaluate to a freshly created JSX element."""

    name = "no-jsx-as-prop"
    plugin = "react-perf"
    category = "restriction"
    default_severity = Severity.WARNING

    def run(self, node: Node, context: LintContext) -> None:
        if isinstance(node, JSXElement):
            self._check_element(node, context)

    def _check_element(self, element: JSXElement, context: LintContext) -> None:
        for item in element.attributes:
            value = get_prop_value(item)
            # a spread or value-less attribute ends the scan of this element
            if value is None:
                return
            if not isinstance(value, JSXExpressionContainer):
                continue
            if isinstance(value.expression, JSXEmptyExpression):
                continue
            span = check_expression(value.expression)
            if span is not None:
                context.diagnostic(span, MESSAGE, HELP)


def check_expression(expression: Expression) -> Optional[Span]:
    """Return the span of the first JSX element ``expression`` can evaluate to.

    Logical operands are tried left to right and conditional branches
    consequent first; the test of a conditional is never inspected.
    """

    expression = unwrap_parentheses(expression)
    if isinstance(expression, JSXElement):
        return expression.span
    if isinstance(expression, LogicalExpression):
        span = check_expression(expression.left)
        if span is not None:
            return span
        return check_expression(expression.right)
    if isinstance(expression, ConditionalExpression):
        span = check_expression(expression.consequent)
        if span is not None:
            return span
        return check_expression(expression.alternate)
    return None


def get_rule() -> Rule:
    return NoJsxAsPropRule()
