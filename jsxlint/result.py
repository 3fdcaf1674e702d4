"""Core result data structures for the linter."""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional, Sequence, Tuple

from .severity import Severity
from .syntax.span import Span

SEVERITY_ORDER: Sequence[Severity] = (
    Severity.ERROR,
    Severity.WARNING,
    Severity.ADVICE,
)


@dataclass
class Diagnostic:
    """Capture a single problem reported by a rule."""

    rule: str
    code: str
    severity: Severity
    message: str
    help: Optional[str]
    path: str
    span: Span
    line: int
    column: int
    source_line: str = ""

    def to_dict(self) -> Dict[str, object]:
        data = asdict(self)
        data["severity"] = self.severity.value
        data.pop("source_line")
        return data


@dataclass
class Summary:
    """Aggregate diagnostic counts by severity."""

    error: int = 0
    warning: int = 0
    advice: int = 0
    files: int = 0
    unreadable: int = 0

    def increment(self, severity: Severity) -> None:
        attr = severity.value
        setattr(self, attr, getattr(self, attr) + 1)

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

    def as_rows(self) -> List[Tuple[str, int]]:
        """Return severity/count pairs ordered for reporting."""

        return [(severity.value, getattr(self, severity.value)) for severity in SEVERITY_ORDER]

    @property
    def total(self) -> int:
        return sum(getattr(self, severity.value) for severity in SEVERITY_ORDER)


@dataclass
class LintResult:
    """Bundle lint summary and diagnostics list."""

    summary: Summary = field(default_factory=Summary)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return self.summary.error == 0

    def add_diagnostic(self, diagnostic: Diagnostic) -> None:
        self.summary.increment(diagnostic.severity)
        self.diagnostics.append(diagnostic)

    def to_dict(self) -> Dict[str, object]:
        return {
            "summary": self.summary.to_dict(),
            "diagnostics": [diagnostic.to_dict() for diagnostic in self.sorted_diagnostics()],
            "passed": self.passed,
        }

    def exit_code(self, deny_warnings: bool = False, max_warnings: Optional[int] = None) -> int:
        if self.summary.error > 0:
            return 1
        if deny_warnings and self.summary.warning > 0:
            return 1
        if max_warnings is not None and self.summary.warning > max_warnings:
            return 1
        return 0

    def sorted_diagnostics(self) -> List[Diagnostic]:
        """Return diagnostics ordered by file and position."""

        return sorted(
            self.diagnostics,
            key=lambda diagnostic: (diagnostic.path, diagnostic.span.start, diagnostic.rule),
        )


def render_diagnostic(diagnostic: Diagnostic) -> str:
    """Render a diagnostic with its source line and an underline of the span."""

    severity = diagnostic.severity.value
    lines = [
        f"{diagnostic.path}:{diagnostic.line}:{diagnostic.column}: "
        f"{severity}[{diagnostic.code}] {diagnostic.message}"
    ]
    if diagnostic.source_line:
        gutter = str(diagnostic.line)
        start = diagnostic.column - 1
        # underline only the part of the span on its first line
        width = max(1, min(len(diagnostic.span), len(diagnostic.source_line) - start))
        lines.append(f" {gutter} | {diagnostic.source_line}")
        lines.append(f" {' ' * len(gutter)} | {' ' * start}{'^' * width}")
    if diagnostic.help:
        lines.append(f"  help: {diagnostic.help}")
    return "\n".join(lines)


def format_summary_table(result: LintResult) -> str:
    """Create a human-readable summary table for console output."""

    lines: List[str] = []
    lines.append("Lint Summary")
    lines.append("=" * 40)
    header = f"{'Severity':<10} | {'Count':>5}"
    lines.append(header)
    lines.append("-" * len(header))
    for severity, count in result.summary.as_rows():
        lines.append(f"{severity:<10} | {count:>5}")
    lines.append("-" * len(header))
    status = "PASS" if result.passed else "FAIL"
    lines.append(f"Status    : {status}")
    lines.append(f"Files     : {result.summary.files}")
    lines.append(f"Problems  : {result.summary.total}")
    if result.summary.unreadable:
        lines.append(f"Unreadable: {result.summary.unreadable}")
    return "\n".join(lines)
