"""Turns Lox source text into a list of tokens."""

from __future__ import annotations

import string
from typing import List

from loxlang.errors import ScanError, ScanErrorKind, ScanningError
from loxlang.tokens import LiteralValue, Token, TokenType, keyword_from_str

_DIGITS = frozenset(string.digits)
_IDENT_START = frozenset(string.ascii_letters + "_")
_IDENT_PART = _IDENT_START | _DIGITS

_SINGLE = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
    "-": TokenType.MINUS,
    "+": TokenType.PLUS,
    ";": TokenType.SEMICOLON,
    "*": TokenType.STAR,
}

# Character -> (type when followed by '=', type otherwise).
_WITH_EQUAL = {
    "!": (TokenType.BANG_EQUAL, TokenType.BANG),
    "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
    "<": (TokenType.LESS_EQUAL, TokenType.LESS),
    ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
}

_WHITESPACE = frozenset(" \r\t")
_NUL = "\0"


class Scanner:
    """Scans one source text into tokens."""

    def __init__(self, source: str) -> None:
        self.source = source
        self._reset()

    def _reset(self) -> None:
        self._tokens: List[Token] = []
        self._errors: List[ScanningError] = []
        self._start = 0
        self._current = 0
        self._line = 1

    def scan_tokens(self) -> List[Token]:
        """Return every token of the source, ending with EOF.

        Raises ScanError holding every problem found if scanning failed.
        """
        self._reset()
        while not self._at_end():
            self._start = self._current
            self._scan_token()

        self._tokens.append(Token(TokenType.EOF, "", self._line))

        if self._errors:
            raise ScanError(self._errors)
        return list(self._tokens)

    def _scan_token(self) -> None:
        c = self._advance()
        if c in _SINGLE:
            self._add_token(_SINGLE[c])
        elif c in _WITH_EQUAL:
            with_equal, alone = _WITH_EQUAL[c]
            self._add_token(with_equal if self._match("=") else alone)
        elif c == "/":
            if self._match("/"):
                while self._peek() != "\n" and not self._at_end():
                    self._advance()
            elif self._match("*"):
                self._block_comment()
            else:
                self._add_token(TokenType.SLASH)
        elif c in _WHITESPACE:
            pass
        elif c == "\n":
            self._line += 1
        elif c == '"':
            self._string()
        elif c in _DIGITS:
            self._number()
        elif c in _IDENT_START:
            self._identifier()
        else:
            self._error(ScanErrorKind.UNEXPECTED_CHARACTER)

    def _identifier(self) -> None:
        while self._peek() in _IDENT_PART:
            self._advance()
        text = self.source[self._start:self._current]
        self._add_token(keyword_from_str(text) or TokenType.IDENTIFIER)

    def _number(self) -> None:
        while self._peek() in _DIGITS:
            self._advance()

        if self._peek() == "." and self._peek_next() in _DIGITS:
            self._advance()
            while self._peek() in _DIGITS:
                self._advance()

        text = self.source[self._start:self._current]
        self._add_token(TokenType.NUMBER, float(text))

    def _block_comment(self) -> None:
        nesting = 1
        while not self._at_end():
            if self._peek() == "*" and self._peek_next() == "/":
                self._current += 2
                nesting -= 1
                if nesting == 0:
                    return
            elif self._peek() == "/" and self._peek_next() == "*":
                nesting += 1
                self._current += 2
            else:
                self._advance()
        self._error(ScanErrorKind.UNTERMINATED_COMMENT)

    def _string(self) -> None:
        while self._peek() != '"' and not self._at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._at_end():
            self._error(ScanErrorKind.UNTERMINATED_STRING)
            return

        self._advance()
        value = self.source[self._start + 1:self._current - 1]
        self._add_token(TokenType.STRING, value)

    def _peek(self) -> str:
        return _NUL if self._at_end() else self.source[self._current]

    def _peek_next(self) -> str:
        position = self._current + 1
        return _NUL if position >= len(self.source) else self.source[position]

    def _advance(self) -> str:
        c = self.source[self._current]
        self._current += 1
        return c

    def _match(self, expected: str) -> bool:
        if self._at_end() or self.source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _add_token(self, token_type: TokenType, literal: LiteralValue = None) -> None:
        lexeme = self.source[self._start:self._current]
        self._tokens.append(Token(token_type, lexeme, self._line, literal))

    def _error(self, kind: ScanErrorKind) -> None:
        self._errors.append(ScanningError(kind, self._line))

    def _at_end(self) -> bool:
        return self._current >= len(self.source)


def scan_tokens(source: str) -> List[Token]:
    """Scan ``source`` and return its tokens; raises ScanError on failure."""
    return Scanner(source).scan_tokens()