"""Drive the enabled rules over every JSX node of the files being linted."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from .config import ConfigError, LintConfig
from .result import LintResult
from .rules import LintContext, Rule, no_jsx_as_prop, rule_id
from .severity import Severity
from .syntax import LineIndex, extract_program, walk
from .utils import iter_code_files, read_text_file

logger = logging.getLogger(__name__)


def load_rules() -> List[Rule]:
    return [
        no_jsx_as_prop.get_rule(),
    ]


class Linter:
    """Run rules against source text and collect their diagnostics."""

    def __init__(self, config: Optional[LintConfig] = None, rules: Optional[List[Rule]] = None) -> None:
        self.config = config or LintConfig()
        available = rules if rules is not None else load_rules()
        self._check_rule_names(available)
        self._enabled: List[Tuple[Rule, Severity]] = []
        for rule in available:
            severity = self._severity_for(rule)
            if severity is None:
                logger.debug("Rule %s is disabled", rule_id(rule))
                continue
            self._enabled.append((rule, severity))

    @property
    def enabled_rules(self) -> List[Rule]:
        return [rule for rule, _ in self._enabled]

    def lint_source(self, path: str, source: str, result: Optional[LintResult] = None) -> LintResult:
        """Lint one file's text, appending diagnostics to ``result``."""

        if result is None:
            result = LintResult()
        program = extract_program(source)
        line_index = LineIndex(source)
        contexts = [
            LintContext(path=path, source=source, result=result, rule=rule, severity=severity, line_index=line_index)
            for rule, severity in self._enabled
        ]
        for node in walk(program):
            for context in contexts:
                context.rule.run(node, context)
        result.summary.files += 1
        return result

    def lint_paths(self, paths: Iterable[str]) -> LintResult:
        """Lint every matching file named in or found beneath ``paths``."""

        result = LintResult()
        for path in iter_code_files(paths, self.config.extensions, self.config.ignore_patterns):
            try:
                source = read_text_file(path)
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Unable to read %s: %s", path, exc)
                result.summary.unreadable += 1
                continue
            logger.debug("Linting %s", path)
            self.lint_source(str(path), source, result)
        return result

    def _severity_for(self, rule: Rule) -> Optional[Severity]:
        for key in (rule_id(rule), rule.name):
            if key in self.config.rules:
                return self.config.rules[key]
        return rule.default_severity

    def _check_rule_names(self, rules: List[Rule]) -> None:
        known = {rule_id(rule) for rule in rules} | {rule.name for rule in rules}
        unknown = sorted(set(self.config.rules) - known)
        if unknown:
            raise ConfigError(f"Unknown rules in configuration: {', '.join(unknown)}")
