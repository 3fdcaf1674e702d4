"""Low-level lexical helpers shared by the JSX parser and the source scanner."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional


class JSXSyntaxError(ValueError):
    """Raised when source text cannot be read as JSX or as an embedded expression."""

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f"{message} (offset {offset})")
        self.offset = offset


IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_$\u0080-\uffff][\w$\u0080-\uffff]*")
JSX_IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_$\u0080-\uffff][\w$\-\u0080-\uffff]*")
NUMBER_PATTERN = re.compile(
    r"(?:0[xX][0-9a-fA-F_]+|0[oO][0-7_]+|0[bB][01_]+"
    r"|(?:\d[\d_]*(?:\.[\d_]*)?|\.\d[\d_]*)(?:[eE][+-]?\d+)?)n?"
)

PUNCTUATORS = sorted(
    [
        ">>>=", "...", "===", "!==", "**=", "<<=", ">>=", ">>>", "&&=", "||=", "??=",
        "=>", "==", "!=", "<=", ">=", "&&", "||", "??", "?.", "++", "--", "+=", "-=",
        "*=", "/=", "%=", "&=", "|=", "^=", "**", "<<", ">>",
        "{", "}", "(", ")", "[", "]", ";", ",", "<", ">", "+", "-", "*", "/", "%",
        "&", "|", "^", "!", "~", "?", ":", "=", ".", "@", "#",
    ],
    key=len,
    reverse=True,
)


@dataclass(frozen=True)
class Token:
    kind: str  # "name", "number", "string", "template", "punct" or "eof"
    value: str
    start: int
    end: int


EOF = "eof"


def skip_trivia(source: str, pos: int) -> int:
    """Skip whitespace and comments starting at ``pos``."""

    length = len(source)
    while pos < length:
        char = source[pos]
        if char.isspace():
            pos += 1
        elif source.startswith("//", pos):
            newline = source.find("\n", pos)
            pos = length if newline == -1 else newline + 1
        elif source.startswith("/*", pos):
            close = source.find("*/", pos + 2)
            if close == -1:
                raise JSXSyntaxError("Unterminated comment", pos)
            pos = close + 2
        else:
            break
    return pos


def read_string(source: str, pos: int) -> int:
    """Return the offset just past the quoted JavaScript string starting at ``pos``."""

    quote = source[pos]
    index = pos + 1
    length = len(source)
    while index < length:
        char = source[index]
        if char == "\\":
            index += 2
            continue
        if char == quote:
            return index + 1
        if char == "\n":
            break
        index += 1
    raise JSXSyntaxError("Unterminated string literal", pos)


def read_regex(source: str, pos: int) -> int:
    """Return the offset just past the regular expression literal starting at ``pos``."""

    index = pos + 1
    length = len(source)
    in_class = False
    while index < length:
        char = source[index]
        if char == "\\":
            index += 2
            continue
        if char == "\n":
            break
        if char == "[":
            in_class = True
        elif char == "]":
            in_class = False
        elif char == "/" and not in_class:
            index += 1
            while index < length and (source[index].isalnum() or source[index] == "_"):
                index += 1
            return index
        index += 1
    raise JSXSyntaxError("Unterminated regular expression", pos)


def match_identifier(source: str, pos: int) -> Optional[str]:
    match = IDENTIFIER_PATTERN.match(source, pos)
    return match.group(0) if match else None


def next_token(source: str, pos: int) -> Token:
    """Read the expression-mode token that follows ``pos`` (after trivia)."""

    pos = skip_trivia(source, pos)
    if pos >= len(source):
        return Token(EOF, "", pos, pos)
    char = source[pos]
    if char in "'\"":
        end = read_string(source, pos)
        return Token("string", source[pos:end], pos, end)
    if char == "`":
        return Token("template", "`", pos, pos + 1)
    if char.isdigit() or (char == "." and source[pos + 1:pos + 2].isdigit()):
        match = NUMBER_PATTERN.match(source, pos)
        if match:
            return Token("number", match.group(0), pos, match.end())
    name = match_identifier(source, pos)
    if name:
        return Token("name", name, pos, pos + len(name))
    for punctuator in PUNCTUATORS:
        if source.startswith(punctuator, pos):
            # `a?.5:b` is a conditional, not optional chaining
            if punctuator == "?." and source[pos + 2:pos + 3].isdigit():
                continue
            return Token("punct", punctuator, pos, pos + len(punctuator))
    raise JSXSyntaxError(f"Unexpected character {char!r}", pos)
