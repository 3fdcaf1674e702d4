"""Rule protocol and the context rules report through."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Protocol

from jsxlint.result import Diagnostic, LintResult
from jsxlint.severity import Severity
from jsxlint.syntax.nodes import Node
from jsxlint.syntax.span import LineIndex, Span


class Rule(Protocol):
    """Protocol implemented by all lint rules."""

    name: str
    plugin: str
    category: str
    default_severity: Severity

    def run(self, node: Node, context: "LintContext") -> None:
        """Inspect one syntax node and report problems through ``context``."""


def rule_id(rule: Rule) -> str:
    """Return the ``plugin/name`` identifier used in configuration files."""

    return f"{rule.plugin}/{rule.name}"


def rule_code(rule: Rule) -> str:
    return f"eslint-plugin-{rule.plugin}({rule.name})"


@dataclass
class LintContext:
    """Bundle the file under analysis, the running rule and the diagnostic sink."""

    path: str
    source: str
    result: LintResult
    rule: Rule
    severity: Severity
    line_index: Optional[LineIndex] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.line_index is None:
            self.line_index = LineIndex(self.source)

    def diagnostic(self, span: Span, message: str, help: Optional[str] = None) -> None:
        """Record a problem located at ``span``."""

        line, column = self.line_index.line_col(span.start)
        self.result.add_diagnostic(
            Diagnostic(
                rule=rule_id(self.rule),
                code=rule_code(self.rule),
                severity=self.severity,
                message=message,
                help=help,
                path=self.path,
                span=span,
                line=line,
                column=column,
                source_line=self.line_index.line_text(line),
            )
        )
