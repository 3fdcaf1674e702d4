from jsxlint.result import Diagnostic, LintResult, format_summary_table, render_diagnostic
from jsxlint.severity import Severity
from jsxlint.syntax import Span


def make_diagnostic(severity=Severity.WARNING, path="Item.jsx", start=11):
    return Diagnostic(
        rule="react-perf/no-jsx-as-prop",
        code="eslint-plugin-react-perf(no-jsx-as-prop)",
        severity=severity,
        message="JSX attribute values should not contain other JSX.",
        help="simplify props",
        path=path,
        span=Span(start, start + 11),
        line=1,
        column=start + 1,
        source_line="<Item jsx={<SubItem />} />",
    )


def test_render_diagnostic_underlines_span():
    rendered = render_diagnostic(make_diagnostic())

    assert rendered.splitlines() == [
        "Item.jsx:1:12: warning[eslint-plugin-react-perf(no-jsx-as-prop)] "
        "JSX attribute values should not contain other JSX.",
        " 1 | <Item jsx={<SubItem />} />",
        "   |            ^^^^^^^^^^^",
        "  help: simplify props",
    ]


def test_exit_code_policy():
    result = LintResult()
    assert result.exit_code() == 0

    result.add_diagnostic(make_diagnostic())
    assert result.passed
    assert result.exit_code() == 0
    assert result.exit_code(deny_warnings=True) == 1
    assert result.exit_code(max_warnings=1) == 0
    assert result.exit_code(max_warnings=0) == 1

    result.add_diagnostic(make_diagnostic(severity=Severity.ERROR))
    assert not result.passed
    assert result.exit_code() == 1


def test_to_dict_orders_diagnostics_and_serializes_severity():
    result = LintResult()
    result.add_diagnostic(make_diagnostic(path="b.jsx"))
    result.add_diagnostic(make_diagnostic(path="a.jsx", severity=Severity.ADVICE))

    data = result.to_dict()

    assert data["summary"]["warning"] == 1
    assert data["summary"]["advice"] == 1
    assert [entry["path"] for entry in data["diagnostics"]] == ["a.jsx", "b.jsx"]
    assert data["diagnostics"][0]["severity"] == "advice"
    assert data["diagnostics"][0]["span"] == {"start": 11, "end": 22}
    assert "source_line" not in data["diagnostics"][0]
    assert data["passed"] is True


def test_summary_table_reports_status():
    result = LintResult()
    result.add_diagnostic(make_diagnostic(severity=Severity.ERROR))
    result.summary.files = 2

    table = format_summary_table(result)

    assert "Lint Summary" in table
    assert "error      |     1" in table
    assert "Status    : FAIL" in table
    assert "Files     : 2" in table
