import pytest

from jsxlint.result import LintResult
from jsxlint.rules import LintContext
from jsxlint.rules.no_jsx_as_prop import HELP, MESSAGE, NoJsxAsPropRule, check_expression
from jsxlint.severity import Severity
from jsxlint.syntax import Span, parse_jsx
from jsxlint.syntax.nodes import (
    ConditionalExpression,
    JSXElement,
    LogicalExpression,
    OpaqueExpression,
    ParenthesizedExpression,
)


def span_of(source, text):
    start = source.rindex(text)
    return Span(start, start + len(text))


def run_rule(source):
    rule = NoJsxAsPropRule()
    result = LintResult()
    context = LintContext(path="Item.jsx", source=source, result=result, rule=rule, severity=Severity.WARNING)
    rule.run(parse_jsx(source), context)
    return result


def test_member_access_prop_passes():
    result = run_rule("<Item callback={this.props.jsx} />")

    assert result.summary.total == 0
    assert result.passed


@pytest.mark.parametrize(
    "source",
    [
        "<Item jsx={<SubItem />} />",
        "<Item jsx={this.props.jsx || <SubItem />} />",
        "<Item jsx={this.props.jsx ? this.props.jsx : <SubItem />} />",
        "<Item jsx={this.props.jsx || (this.props.component ? this.props.component : <SubItem />)} />",
    ],
)
def test_jsx_prop_is_reported_at_nested_element(source):
    result = run_rule(source)

    assert result.summary.warning == 1
    diagnostic = result.diagnostics[0]
    assert diagnostic.span == span_of(source, "<SubItem />")
    assert diagnostic.rule == "react-perf/no-jsx-as-prop"
    assert diagnostic.code == "eslint-plugin-react-perf(no-jsx-as-prop)"
    assert diagnostic.message == MESSAGE
    assert diagnostic.help == HELP
    assert diagnostic.severity is Severity.WARNING


def test_logical_left_operand_wins():
    source = "<Item jsx={<First /> || <Second />} />"

    result = run_rule(source)

    assert len(result.diagnostics) == 1
    assert result.diagnostics[0].span == span_of(source, "<First />")


def test_and_and_nullish_operators_are_followed():
    source = "<Item a={ready && <Ready />} b={value ?? <Fallback />} />"

    result = run_rule(source)

    assert [d.span for d in result.diagnostics] == [span_of(source, "<Ready />"), span_of(source, "<Fallback />")]


def test_conditional_consequent_wins_over_alternate():
    source = "<Item jsx={cond ? <Yes /> : <No />} />"

    result = run_rule(source)

    assert len(result.diagnostics) == 1
    assert result.diagnostics[0].span == span_of(source, "<Yes />")


def test_conditional_test_is_not_inspected():
    result = run_rule("<Item jsx={<Probe /> ? left : right} />")

    assert result.summary.total == 0


def test_parentheses_are_transparent():
    source = "<Item jsx={((a || ((b ? c : (<Deep />)))))} />"

    result = run_rule(source)

    assert result.diagnostics[0].span == span_of(source, "<Deep />")


@pytest.mark.parametrize(
    "source",
    [
        "<Item jsx={render(<SubItem />)} />",
        "<Item jsx={[<SubItem />]} />",
        "<Item jsx={{ icon: <SubItem /> }} />",
        "<Item jsx={() => <SubItem />} />",
        "<Item jsx={(element = <SubItem />)} />",
        "<Item jsx={<></>} />",
        "<Item jsx={<>text</> || fallback} />",
        "<Item jsx=<SubItem /> />",
        '<Item label="<SubItem />" />',
        "<Item jsx={} />",
        "<Item jsx={/* nothing */} />",
    ],
)
def test_unsupported_shapes_are_not_reported(source):
    result = run_rule(source)

    assert result.summary.total == 0


def test_one_diagnostic_per_matching_attribute():
    source = '<Item title="x" first={<A />} plain={value} second={cond ? value : <B />} />'

    result = run_rule(source)

    assert [d.span for d in result.diagnostics] == [span_of(source, "<A />"), span_of(source, "<B />")]


def test_valueless_attribute_stops_scanning_the_element():
    # Regression: attributes after a value-less one are never inspected.
    source = "<Item first={<A />} disabled second={<B />} />"

    result = run_rule(source)

    assert [d.span for d in result.diagnostics] == [span_of(source, "<A />")]


def test_spread_attribute_stops_scanning_the_element():
    result = run_rule("<Item {...this.props} jsx={<SubItem />} />")

    assert result.summary.total == 0


def test_empty_container_does_not_stop_scanning():
    source = "<Item first={} second={<B />} />"

    result = run_rule(source)

    assert [d.span for d in result.diagnostics] == [span_of(source, "<B />")]


def test_rule_ignores_fragments():
    rule = NoJsxAsPropRule()
    result = LintResult()
    source = "<><Item jsx={<A />} /></>"
    context = LintContext(path="Item.jsx", source=source, result=result, rule=rule, severity=Severity.WARNING)

    rule.run(parse_jsx(source), context)

    assert result.summary.total == 0


def test_configured_severity_is_used():
    rule = NoJsxAsPropRule()
    result = LintResult()
    source = "<Item jsx={<A />} />"
    context = LintContext(path="Item.jsx", source=source, result=result, rule=rule, severity=Severity.ERROR)

    rule.run(parse_jsx(source), context)

    assert result.summary.error == 1
    assert not result.passed


def test_check_expression_on_constructed_nodes():
    first = JSXElement(Span(0, 5), "A")
    second = JSXElement(Span(10, 15), "B")
    other = OpaqueExpression(Span(20, 21), "Identifier")

    assert check_expression(first) == Span(0, 5)
    assert check_expression(other) is None
    assert check_expression(LogicalExpression(Span(0, 15), "||", other, second)) == Span(10, 15)
    assert check_expression(LogicalExpression(Span(0, 15), "||", first, second)) == Span(0, 5)
    assert check_expression(ConditionalExpression(Span(0, 30), first, other, second)) == Span(10, 15)
    wrapped = ParenthesizedExpression(Span(0, 40), ParenthesizedExpression(Span(1, 39), second))
    assert check_expression(wrapped) == Span(10, 15)
    assert check_expression(ConditionalExpression(Span(0, 30), other, other, other)) is None
