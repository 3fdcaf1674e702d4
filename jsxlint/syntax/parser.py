"""Recursive-descent parser for JSX markup and the expressions embedded in it.

Only JSX and JavaScript *expressions* are parsed into nodes.  Statement-level
code (function bodies, class bodies, whole modules) is scanned lexically and
every JSX root found in expression position is parsed on the spot, so the
lint engine sees all markup in a file without a full ECMAScript grammar.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple, Union

from .lexer import (
    EOF,
    JSX_IDENTIFIER_PATTERN,
    NUMBER_PATTERN,
    JSXSyntaxError,
    Token,
    match_identifier,
    next_token,
    read_regex,
    read_string,
    skip_trivia,
)
from .nodes import (
    AttributeItem,
    AttributeValue,
    ConditionalExpression,
    Expression,
    JSXAttribute,
    JSXChild,
    JSXElement,
    JSXEmptyExpression,
    JSXExpressionContainer,
    JSXFragment,
    JSXSpreadAttribute,
    JSXText,
    LogicalExpression,
    Node,
    OpaqueExpression,
    ParenthesizedExpression,
    Program,
    StringLiteral,
)
from .span import Span

logger = logging.getLogger(__name__)

JSXRoot = Union[JSXElement, JSXFragment]

LOGICAL_OPERATORS = {"||", "&&", "??"}
BINARY_PRECEDENCE = {
    "??": 1,
    "||": 1,
    "&&": 2,
    "|": 3,
    "^": 4,
    "&": 5,
    "==": 6,
    "!=": 6,
    "===": 6,
    "!==": 6,
    "<": 7,
    ">": 7,
    "<=": 7,
    ">=": 7,
    "instanceof": 7,
    "in": 7,
    "<<": 8,
    ">>": 8,
    ">>>": 8,
    "+": 9,
    "-": 9,
    "*": 10,
    "/": 10,
    "%": 10,
    "**": 11,
}
ASSIGNMENT_OPERATORS = {
    "=", "+=", "-=", "*=", "/=", "%=", "**=", "<<=", ">>=", ">>>=", "&=", "|=", "^=", "&&=", "||=", "??=",
}
UNARY_OPERATORS = {"!", "~", "+", "-", "++", "--"}
UNARY_KEYWORDS = {"typeof", "void", "delete", "await"}
TYPE_OPERATORS = {"as", "satisfies"}
TYPE_PREFIX_KEYWORDS = {"keyof", "typeof", "readonly", "unique", "infer", "extends", "is"}
LITERAL_KEYWORDS = {
    "this": "ThisExpression",
    "super": "Super",
    "null": "Literal",
    "true": "Literal",
    "false": "Literal",
}
RESERVED_WORDS = {"function", "class", "new", "this", "super", "null", "true", "false"} | UNARY_KEYWORDS
# A `<` after one of these starts markup rather than a comparison.
EXPRESSION_KEYWORDS = {
    "return", "yield", "default", "case", "await", "typeof", "void", "delete", "in", "of", "else", "do", "throw",
}
CLOSERS = {"(": ")", "[": "]", "{": "}"}
JSX_TEXT_PATTERN = re.compile(r"[^<{]+")
OPERAND = "<operand>"


def _expression_expected(previous: Optional[str]) -> bool:
    if previous is None or previous in EXPRESSION_KEYWORDS:
        return True
    return previous != OPERAND and previous not in (")", "]")


class Parser:
    """Parse JSX and expressions out of ``source`` starting at ``pos``."""

    def __init__(self, source: str, pos: int = 0) -> None:
        self.source = source
        self.pos = pos

    # ------------------------------------------------------------------
    # Public entry points
    # ------------------------------------------------------------------
    def parse_program(self) -> Program:
        roots, _ = self._scan_until(self.pos, None)
        return Program(Span(0, len(self.source)), tuple(roots))

    def parse_expression(self) -> Expression:
        start = self._skip()
        expression = self._parse_assignment()
        if not self._at(","):
            return expression
        expressions: List[Node] = [expression]
        while self._eat(","):
            expressions.append(self._parse_assignment())
        return OpaqueExpression(Span(start, self.pos), "SequenceExpression", tuple(expressions))

    def parse_jsx(self) -> JSXRoot:
        start = self._skip()
        self._expect_char("<")
        self._skip()
        if self._char() == ">":
            self.pos += 1
            children = self._parse_jsx_children()
            self._parse_closing_tag(None)
            return JSXFragment(Span(start, self.pos), children)
        name = self._parse_jsx_element_name()
        attributes = self._parse_jsx_attributes()
        self._skip()
        if self.source.startswith("/>", self.pos):
            self.pos += 2
            return JSXElement(Span(start, self.pos), name, attributes, (), True)
        self._expect_char(">")
        children = self._parse_jsx_children()
        self._parse_closing_tag(name)
        return JSXElement(Span(start, self.pos), name, attributes, children)

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------
    def _skip(self) -> int:
        self.pos = skip_trivia(self.source, self.pos)
        return self.pos

    def _char(self) -> str:
        return self.source[self.pos:self.pos + 1]

    def _expect_char(self, text: str) -> None:
        if not self.source.startswith(text, self.pos):
            found = self._char() or "end of input"
            raise JSXSyntaxError(f"Expected {text!r} but found {found!r}", self.pos)
        self.pos += len(text)

    def _peek(self) -> Token:
        return next_token(self.source, self.pos)

    def _at(self, value: str) -> bool:
        token = self._peek()
        return token.kind in ("punct", "name") and token.value == value

    def _eat(self, value: str) -> bool:
        token = self._peek()
        if token.kind in ("punct", "name") and token.value == value:
            self.pos = token.end
            return True
        return False

    def _expect(self, value: str) -> None:
        token = self._peek()
        if token.kind not in ("punct", "name") or token.value != value:
            found = token.value or "end of input"
            raise JSXSyntaxError(f"Expected {value!r} but found {found!r}", token.start)
        self.pos = token.end

    # ------------------------------------------------------------------
    # Lexical scanning of code that is not parsed into nodes
    # ------------------------------------------------------------------
    def _scan_until(
        self, pos: int, closer: Optional[str], collect: bool = True
    ) -> Tuple[List[JSXRoot], int]:
        """Collect JSX roots from ``pos`` up to the unbalanced ``closer``.

        Returns the roots and the offset just past ``closer``.  With ``closer``
        set to ``None`` the whole remaining source is scanned and lexical errors
        are tolerated.  With ``collect`` false markup is not parsed and only
        brackets, strings, templates and comments are tracked.
        """

        source = self.source
        length = len(source)
        strict = closer is not None
        roots: List[JSXRoot] = []
        stack: List[str] = []
        previous: Optional[str] = None
        while pos < length:
            char = source[pos]
            if char.isspace():
                pos += 1
                continue
            if source.startswith("//", pos) or source.startswith("/*", pos):
                try:
                    pos = skip_trivia(source, pos)
                except JSXSyntaxError:
                    if strict:
                        raise
                    pos = length
                continue
            if char in "'\"`":
                try:
                    if char == "`":
                        inner, pos = self._scan_template(pos, collect)
                        roots.extend(inner)
                    else:
                        pos = read_string(source, pos)
                except JSXSyntaxError:
                    if strict:
                        raise
                    pos += 1
                previous = OPERAND
                continue
            if collect and char == "<" and _expression_expected(previous) and self._starts_markup(pos):
                self.pos = pos
                try:
                    roots.append(self.parse_jsx())
                except JSXSyntaxError as exc:
                    logger.debug("Skipping JSX candidate at offset %d: %s", pos, exc)
                else:
                    pos = self.pos
                    previous = OPERAND
                    continue
            word = match_identifier(source, pos)
            if word:
                pos += len(word)
                previous = word if word in EXPRESSION_KEYWORDS else OPERAND
                continue
            number = NUMBER_PATTERN.match(source, pos) if char.isdigit() else None
            if number:
                pos = number.end()
                previous = OPERAND
                continue
            if char == "/" and _expression_expected(previous):
                try:
                    pos = read_regex(source, pos)
                except JSXSyntaxError:
                    pass
                else:
                    previous = OPERAND
                    continue
            if char in CLOSERS:
                stack.append(CLOSERS[char])
            elif char in ")]}":
                if stack:
                    stack.pop()
                elif char == closer:
                    return roots, pos + 1
            previous = char
            pos += 1
        if strict:
            raise JSXSyntaxError(f"Expected {closer!r} before end of input", pos)
        return roots, pos

    def _scan_template(self, pos: int, collect: bool = True) -> Tuple[List[JSXRoot], int]:
        source = self.source
        roots: List[JSXRoot] = []
        index = pos + 1
        while index < len(source):
            char = source[index]
            if char == "\\":
                index += 2
            elif char == "`":
                return roots, index + 1
            elif source.startswith("${", index):
                inner, index = self._scan_until(index + 2, "}", collect)
                roots.extend(inner)
            else:
                index += 1
        raise JSXSyntaxError("Unterminated template literal", pos)

    def _starts_markup(self, pos: int) -> bool:
        following = self.source[pos + 1:pos + 2]
        return following == ">" or bool(JSX_IDENTIFIER_PATTERN.match(following))

    def _scan_block(self) -> Tuple[JSXRoot, ...]:
        """Scan a bracketed region starting at the current opener."""

        opener = self.source[self.pos]
        roots, self.pos = self._scan_until(self.pos + 1, CLOSERS[opener])
        return tuple(roots)

    def _skip_block(self) -> None:
        """Move past a bracketed region without parsing the markup inside it."""

        opener = self.source[self.pos]
        _, self.pos = self._scan_until(self.pos + 1, CLOSERS[opener], collect=False)

    def _skip_type(self, allow_arrow: bool = True) -> None:
        """Skip a TypeScript type annotation."""

        depth = 0
        expect_operand = True
        while True:
            token = self._peek()
            value = token.value
            if token.kind == "punct" and value in CLOSERS:
                if not expect_operand and depth == 0 and value != "[":
                    return
                self.pos = token.start
                self._skip_block()
                expect_operand = False
            elif token.kind == "template":
                _, self.pos = self._scan_template(token.start, collect=False)
                expect_operand = False
            elif token.kind in ("name", "string", "number"):
                if token.kind == "name" and value in TYPE_PREFIX_KEYWORDS:
                    self.pos = token.end
                    expect_operand = True
                    continue
                if not expect_operand and depth == 0:
                    return
                self.pos = token.end
                expect_operand = False
            elif token.kind == "punct" and value == "<":
                depth += 1
                self.pos = token.end
                expect_operand = True
            elif token.kind == "punct" and value in (">", ">>", ">>>") and depth:
                depth = max(0, depth - len(value))
                self.pos = token.end
                expect_operand = False
            elif token.kind == "punct" and value in ("|", "&", "."):
                self.pos = token.end
                expect_operand = True
            elif token.kind == "punct" and value == "=>" and (allow_arrow or depth):
                self.pos = token.end
                expect_operand = True
            elif token.kind == "punct" and value in (",", "?", ":") and depth:
                self.pos = token.end
                expect_operand = True
            else:
                return

    # ------------------------------------------------------------------
    # Expressions
    # ------------------------------------------------------------------
    def _parse_assignment(self) -> Expression:
        start = self._skip()
        arrow = self._try_arrow_function(start)
        if arrow is not None:
            return arrow
        if self._at("yield"):
            self._eat("yield")
            self._eat("*")
            if self._peek().kind == EOF or self._peek().value in (")", "]", "}", ",", ";", ":"):
                return OpaqueExpression(Span(start, self.pos), "YieldExpression")
            argument = self._parse_assignment()
            return OpaqueExpression(Span(start, self.pos), "YieldExpression", (argument,))
        left = self._parse_conditional()
        token = self._peek()
        if token.kind == "punct" and token.value in ASSIGNMENT_OPERATORS:
            self.pos = token.end
            right = self._parse_assignment()
            return OpaqueExpression(Span(start, self.pos), "AssignmentExpression", (left, right))
        return left

    def _try_arrow_function(self, start: int) -> Optional[Expression]:
        token = self._peek()
        if token.kind == "name" and token.value == "async":
            following = next_token(self.source, token.end)
            if following.kind == "name" and following.value != "function" or following.value == "(":
                token = following
        params: Tuple[JSXRoot, ...] = ()
        if token.kind == "name" and token.value not in RESERVED_WORDS:
            arrow = next_token(self.source, token.end)
        elif token.kind == "punct" and token.value == "(":
            try:
                arrow = self._token_after_parameters(token.start)
                if arrow.kind == "punct" and arrow.value == "=>":
                    self.pos = token.start
                    params = self._scan_block()
            except JSXSyntaxError:
                self.pos = start
                return None
        else:
            return None
        if arrow.kind != "punct" or arrow.value != "=>":
            self.pos = start
            return None
        self.pos = arrow.end
        self._skip()
        if self._char() == "{":
            body = self._scan_block()
        else:
            body = (self._parse_assignment(),)
        return OpaqueExpression(Span(start, self.pos), "ArrowFunctionExpression", params + body)

    def _token_after_parameters(self, pos: int) -> Token:
        """Return the token following a parameter list and its return type."""

        self.pos = pos
        self._skip_block()
        if self._at(":"):
            self._eat(":")
            self._skip_type(allow_arrow=False)
        return self._peek()

    def _parse_conditional(self) -> Expression:
        start = self._skip()
        test = self._parse_binary(1)
        if not self._eat("?"):
            return test
        consequent = self._parse_assignment()
        self._expect(":")
        alternate = self._parse_assignment()
        return ConditionalExpression(Span(start, self.pos), test, consequent, alternate)

    def _parse_binary(self, min_precedence: int) -> Expression:
        start = self._skip()
        left = self._parse_unary()
        while True:
            token = self._peek()
            if token.kind == "name" and token.value in TYPE_OPERATORS:
                self.pos = token.end
                self._skip_type()
                left = OpaqueExpression(Span(start, self.pos), "TSAsExpression", (left,))
                continue
            if token.kind not in ("punct", "name"):
                break
            precedence = BINARY_PRECEDENCE.get(token.value)
            if precedence is None or precedence < min_precedence:
                break
            self.pos = token.end
            # exponentiation is right-associative
            right = self._parse_binary(precedence if token.value == "**" else precedence + 1)
            span = Span(start, self.pos)
            if token.value in LOGICAL_OPERATORS:
                left = LogicalExpression(span, token.value, left, right)
            else:
                left = OpaqueExpression(span, "BinaryExpression", (left, right))
        return left

    def _parse_unary(self) -> Expression:
        start = self._skip()
        token = self._peek()
        if (token.kind == "punct" and token.value in UNARY_OPERATORS) or (
            token.kind == "name" and token.value in UNARY_KEYWORDS
        ):
            self.pos = token.end
            argument = self._parse_unary()
            if token.value == "await":
                kind = "AwaitExpression"
            elif token.value in ("++", "--"):
                kind = "UpdateExpression"
            else:
                kind = "UnaryExpression"
            return OpaqueExpression(Span(start, self.pos), kind, (argument,))
        expression = self._parse_call_member()
        token = self._peek()
        if token.kind == "punct" and token.value in ("++", "--"):
            self.pos = token.end
            expression = OpaqueExpression(Span(start, self.pos), "UpdateExpression", (expression,))
        return expression

    def _parse_call_member(self) -> Expression:
        start = self._skip()
        if self._at("new"):
            expression = self._parse_new()
        else:
            expression = self._parse_primary()
        while True:
            token = self._peek()
            if token.kind == "template":
                roots, self.pos = self._scan_template(token.start)
                expression = OpaqueExpression(
                    Span(start, self.pos), "TaggedTemplateExpression", (expression, *roots)
                )
                continue
            if token.kind != "punct":
                break
            if token.value == ".":
                self.pos = token.end
                self._expect_property_name()
                expression = OpaqueExpression(Span(start, self.pos), "MemberExpression", (expression,))
            elif token.value == "?.":
                self.pos = token.end
                if self._at("("):
                    arguments = self._parse_arguments()
                    expression = OpaqueExpression(Span(start, self.pos), "CallExpression", (expression, *arguments))
                elif self._eat("["):
                    prop = self.parse_expression()
                    self._expect("]")
                    expression = OpaqueExpression(Span(start, self.pos), "MemberExpression", (expression, prop))
                else:
                    self._expect_property_name()
                    expression = OpaqueExpression(Span(start, self.pos), "MemberExpression", (expression,))
            elif token.value == "[":
                self.pos = token.end
                prop = self.parse_expression()
                self._expect("]")
                expression = OpaqueExpression(Span(start, self.pos), "MemberExpression", (expression, prop))
            elif token.value == "(":
                arguments = self._parse_arguments()
                expression = OpaqueExpression(Span(start, self.pos), "CallExpression", (expression, *arguments))
            elif token.value == "!":
                self.pos = token.end
                expression = OpaqueExpression(Span(start, self.pos), "TSNonNullExpression", (expression,))
            else:
                break
        return expression

    def _parse_new(self) -> Expression:
        start = self._skip()
        self._expect("new")
        if self._eat("."):
            self._expect_property_name()
            return OpaqueExpression(Span(start, self.pos), "MetaProperty")
        callee = self._parse_primary()
        while True:
            if self._eat("."):
                self._expect_property_name()
                callee = OpaqueExpression(Span(start, self.pos), "MemberExpression", (callee,))
            elif self._eat("["):
                prop = self.parse_expression()
                self._expect("]")
                callee = OpaqueExpression(Span(start, self.pos), "MemberExpression", (callee, prop))
            else:
                break
        arguments = self._parse_arguments() if self._at("(") else ()
        return OpaqueExpression(Span(start, self.pos), "NewExpression", (callee, *arguments))

    def _parse_arguments(self) -> Tuple[Expression, ...]:
        self._expect("(")
        arguments: List[Expression] = []
        while not self._eat(")"):
            arguments.append(self._parse_spread_or_assignment())
            if not self._eat(","):
                self._expect(")")
                break
        return tuple(arguments)

    def _parse_spread_or_assignment(self) -> Expression:
        start = self._skip()
        if self._eat("..."):
            argument = self._parse_assignment()
            return OpaqueExpression(Span(start, self.pos), "SpreadElement", (argument,))
        return self._parse_assignment()

    def _expect_property_name(self) -> None:
        self._eat("#")
        token = self._peek()
        if token.kind != "name":
            raise JSXSyntaxError(f"Expected property name but found {token.value or 'end of input'!r}", token.start)
        self.pos = token.end

    def _parse_primary(self) -> Expression:
        start = self._skip()
        char = self._char()
        if char == "<":
            return self.parse_jsx()
        if char == "/":
            self.pos = read_regex(self.source, start)
            return OpaqueExpression(Span(start, self.pos), "RegExpLiteral")
        token = self._peek()
        if token.kind == EOF:
            raise JSXSyntaxError("Unexpected end of input", start)
        if token.kind == "template":
            roots, self.pos = self._scan_template(start)
            return OpaqueExpression(Span(start, self.pos), "TemplateLiteral", tuple(roots))
        if token.kind in ("string", "number"):
            self.pos = token.end
            return OpaqueExpression(Span(start, self.pos), "Literal")
        if token.kind == "punct":
            if token.value == "(":
                self.pos = token.end
                inner = self.parse_expression()
                self._expect(")")
                return ParenthesizedExpression(Span(start, self.pos), inner)
            if token.value == "[":
                return self._parse_array(start)
            if token.value == "{":
                properties = self._scan_block()
                return OpaqueExpression(Span(start, self.pos), "ObjectExpression", properties)
            if token.value == "#":
                self._expect_property_name()
                return OpaqueExpression(Span(start, self.pos), "PrivateName")
            raise JSXSyntaxError(f"Unexpected token {token.value!r}", token.start)
        if token.value == "function" or (
            token.value == "async" and next_token(self.source, token.end).value == "function"
        ):
            return self._parse_function(start)
        if token.value == "class":
            return self._parse_class(start)
        self.pos = token.end
        return OpaqueExpression(Span(start, self.pos), LITERAL_KEYWORDS.get(token.value, "Identifier"))

    def _parse_array(self, start: int) -> Expression:
        self._expect("[")
        elements: List[Expression] = []
        while not self._eat("]"):
            if self._eat(","):
                continue  # hole
            elements.append(self._parse_spread_or_assignment())
            if not self._eat(","):
                self._expect("]")
                break
        return OpaqueExpression(Span(start, self.pos), "ArrayExpression", tuple(elements))

    def _parse_function(self, start: int) -> Expression:
        self._eat("async")
        self._expect("function")
        self._eat("*")
        if self._peek().kind == "name":
            self._expect_property_name()
        if self._at("<"):
            self._skip_type()
        self._skip()
        if self._char() != "(":
            raise JSXSyntaxError("Expected function parameters", self.pos)
        params = self._scan_block()
        if self._eat(":"):
            self._skip_type(allow_arrow=False)
        self._skip()
        if self._char() != "{":
            raise JSXSyntaxError("Expected function body", self.pos)
        body = self._scan_block()
        return OpaqueExpression(Span(start, self.pos), "FunctionExpression", params + body)

    def _parse_class(self, start: int) -> Expression:
        self._expect("class")
        token = self._peek()
        if token.kind == "name" and token.value != "extends":
            self.pos = token.end
        children: Tuple[Node, ...] = ()
        if self._eat("extends"):
            children = (self._parse_call_member(),)
        self._skip()
        if self._char() != "{":
            raise JSXSyntaxError("Expected class body", self.pos)
        body = self._scan_block()
        return OpaqueExpression(Span(start, self.pos), "ClassExpression", children + body)

    # ------------------------------------------------------------------
    # JSX
    # ------------------------------------------------------------------
    def _read_jsx_identifier(self) -> str:
        match = JSX_IDENTIFIER_PATTERN.match(self.source, self.pos)
        if not match:
            raise JSXSyntaxError("Expected JSX identifier", self.pos)
        self.pos = match.end()
        return match.group(0)

    def _parse_jsx_element_name(self) -> str:
        name = self._read_jsx_identifier()
        if self._char() == ":":
            self.pos += 1
            return f"{name}:{self._read_jsx_identifier()}"
        while self._char() == ".":
            self.pos += 1
            name = f"{name}.{self._read_jsx_identifier()}"
        return name

    def _parse_jsx_attributes(self) -> Tuple[AttributeItem, ...]:
        attributes: List[AttributeItem] = []
        while True:
            start = self._skip()
            char = self._char()
            if char in ("/", ">", ""):
                break
            if char == "{":
                attributes.append(self._parse_jsx_spread_attribute())
                continue
            name = self._read_jsx_identifier()
            if self._char() == ":":
                self.pos += 1
                name = f"{name}:{self._read_jsx_identifier()}"
            name_end = self.pos
            self._skip()
            if self._char() != "=":
                attributes.append(JSXAttribute(Span(start, name_end), name))
                continue
            self.pos += 1
            self._skip()
            value = self._parse_jsx_attribute_value()
            attributes.append(JSXAttribute(Span(start, self.pos), name, value))
        return tuple(attributes)

    def _parse_jsx_spread_attribute(self) -> JSXSpreadAttribute:
        start = self.pos
        self._expect_char("{")
        self._skip()
        self._expect_char("...")
        argument = self._parse_assignment()
        self._skip()
        self._expect_char("}")
        return JSXSpreadAttribute(Span(start, self.pos), argument)

    def _parse_jsx_attribute_value(self) -> AttributeValue:
        char = self._char()
        if char in ("'", '"'):
            start = self.pos
            close = self.source.find(char, start + 1)
            if close == -1:
                raise JSXSyntaxError("Unterminated JSX attribute string", start)
            self.pos = close + 1
            return StringLiteral(Span(start, self.pos), self.source[start + 1:close])
        if char == "{":
            return self._parse_jsx_expression_container()
        if char == "<":
            return self.parse_jsx()
        raise JSXSyntaxError("Expected JSX attribute value", self.pos)

    def _parse_jsx_expression_container(self, allow_spread: bool = False) -> JSXExpressionContainer:
        start = self.pos
        self._expect_char("{")
        inner_start = self.pos
        self._skip()
        if self._char() == "}":
            empty = JSXEmptyExpression(Span(inner_start, self.pos))
            self.pos += 1
            return JSXExpressionContainer(Span(start, self.pos), empty)
        if allow_spread and self.source.startswith("...", self.pos):
            spread_start = self.pos
            self.pos += 3
            argument = self._parse_assignment()
            expression: Expression = OpaqueExpression(
                Span(spread_start, self.pos), "JSXSpreadChild", (argument,)
            )
        else:
            expression = self.parse_expression()
        self._skip()
        self._expect_char("}")
        return JSXExpressionContainer(Span(start, self.pos), expression)

    def _parse_jsx_children(self) -> Tuple[JSXChild, ...]:
        children: List[JSXChild] = []
        length = len(self.source)
        while True:
            if self.pos >= length:
                raise JSXSyntaxError("Unterminated JSX element", self.pos)
            char = self.source[self.pos]
            if char == "<":
                after = skip_trivia(self.source, self.pos + 1)
                if self.source[after:after + 1] == "/":
                    break
                children.append(self.parse_jsx())
            elif char == "{":
                children.append(self._parse_jsx_expression_container(allow_spread=True))
            else:
                match = JSX_TEXT_PATTERN.match(self.source, self.pos)
                children.append(JSXText(Span(match.start(), match.end()), match.group(0)))
                self.pos = match.end()
        return tuple(children)

    def _parse_closing_tag(self, name: Optional[str]) -> None:
        self._expect_char("<")
        self._skip()
        self._expect_char("/")
        self._skip()
        closing = None if self._char() == ">" else self._parse_jsx_element_name()
        if closing != name:
            expected = f"</{name}>" if name else "</>"
            raise JSXSyntaxError(f"Expected corresponding closing tag {expected}", self.pos)
        self._skip()
        self._expect_char(">")


def parse_jsx(source: str, start: int = 0) -> JSXRoot:
    """Parse the JSX element or fragment that begins at ``start``."""

    return Parser(source, start).parse_jsx()


def parse_expression(source: str, start: int = 0) -> Expression:
    """Parse ``source[start:]`` as a single expression, rejecting trailing input."""

    parser = Parser(source, start)
    expression = parser.parse_expression()
    trailing = skip_trivia(source, parser.pos)
    if trailing != len(source):
        raise JSXSyntaxError("Unexpected trailing input", trailing)
    return expression


def extract_program(source: str) -> Program:
    """Find every JSX root in a JavaScript/TypeScript module."""

    return Parser(source).parse_program()
