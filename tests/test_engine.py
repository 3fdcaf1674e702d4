import logging

import pytest

from jsxlint.config import ConfigError, LintConfig
from jsxlint.engine import Linter, load_rules
from jsxlint.severity import Severity


def test_load_rules_includes_no_jsx_as_prop():
    assert [rule.name for rule in load_rules()] == ["no-jsx-as-prop"]


def test_nested_elements_are_all_visited():
    source = """
const List = () => (
  <List>
    <Item jsx={<Inner child={<Deep />} />} />
  </List>
);
"""

    result = Linter().lint_source("List.jsx", source)

    assert result.summary.warning == 2
    flagged = [d.span.source_text(source) for d in result.diagnostics]
    assert flagged == ["<Inner child={<Deep />} />", "<Deep />"]


def test_markup_inside_render_props_is_visited():
    source = "<List render={() => <Item jsx={<SubItem />} />} />"

    result = Linter().lint_source("List.jsx", source)

    assert result.summary.warning == 1
    assert result.diagnostics[0].span.source_text(source) == "<SubItem />"


def test_diagnostic_location_is_one_based():
    source = "function F() {\n  return <Item jsx={<SubItem />} />;\n}\n"

    result = Linter().lint_source("F.jsx", source)

    diagnostic = result.diagnostics[0]
    assert (diagnostic.line, diagnostic.column) == (2, 21)
    assert diagnostic.source_line == "  return <Item jsx={<SubItem />} />;"
    assert diagnostic.path == "F.jsx"
    assert result.summary.files == 1


def test_rule_can_be_disabled_by_config():
    config = LintConfig(rules={"react-perf/no-jsx-as-prop": None})

    linter = Linter(config)
    result = linter.lint_source("Item.jsx", "<Item jsx={<SubItem />} />")

    assert linter.enabled_rules == []
    assert result.summary.total == 0


def test_rule_level_can_be_raised_to_error():
    config = LintConfig(rules={"no-jsx-as-prop": Severity.ERROR})

    result = Linter(config).lint_source("Item.jsx", "<Item jsx={<SubItem />} />")

    assert result.summary.error == 1
    assert result.exit_code() == 1


def test_unknown_rule_in_config_is_rejected():
    with pytest.raises(ConfigError):
        Linter(LintConfig(rules={"react/no-such-rule": Severity.WARNING}))


def test_lint_paths_filters_extensions_and_ignores(tmp_path):
    (tmp_path / "App.jsx").write_text("<Item jsx={<A />} />", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("<Item jsx={<A />} />", encoding="utf-8")
    vendored = tmp_path / "node_modules" / "lib"
    vendored.mkdir(parents=True)
    (vendored / "index.jsx").write_text("<Item jsx={<A />} />", encoding="utf-8")

    result = Linter().lint_paths([str(tmp_path)])

    assert result.summary.files == 1
    assert result.summary.warning == 1
    assert result.diagnostics[0].path.endswith("App.jsx")


def test_lint_paths_accepts_explicit_files(tmp_path):
    target = tmp_path / "Widget.tsx"
    target.write_text("export const W = () => <Item jsx={a || <B />} />;", encoding="utf-8")

    result = Linter().lint_paths([str(target)])

    assert result.summary.warning == 1


def test_unreadable_file_is_counted(tmp_path, caplog):
    (tmp_path / "Broken.jsx").write_bytes(b"\xff\xfe\x00<Item jsx={<A />} />")

    with caplog.at_level(logging.WARNING, logger="jsxlint"):
        result = Linter().lint_paths([str(tmp_path)])

    assert result.summary.unreadable == 1
    assert result.summary.files == 0
    assert "Unable to read" in caplog.text


def test_deeply_nested_render_callbacks_are_linted():
    depth = 30
    markup = "<Leaf jsx={<Icon />} />"
    for _ in range(depth):
        markup = f"<Row>{{rows.map((row) => (open ? ({markup}) : null))}}</Row>"
    source = f"export const Table = ({{ rows, open }}) => ({markup});\n"

    result = Linter().lint_source("Table.jsx", source)

    assert result.summary.warning == 1
    assert result.diagnostics[0].span.source_text(source) == "<Icon />"


def test_unusual_digit_does_not_abort_the_file():
    source = "const n = \U0001F100;\nconst A = <Item jsx={<B />} />;"

    result = Linter().lint_source("A.js", source)

    assert result.summary.warning == 1
    assert result.diagnostics[0].span.source_text(source) == "<B />"
