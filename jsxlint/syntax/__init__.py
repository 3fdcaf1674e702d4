"""JSX syntax tree, lexer and parser."""

from .lexer import JSXSyntaxError
from .nodes import walk
from .parser import extract_program, parse_expression, parse_jsx
from .span import LineIndex, Span

__all__ = [
    "JSXSyntaxError",
    "LineIndex",
    "Span",
    "extract_program",
    "parse_expression",
    "parse_jsx",
    "walk",
]
