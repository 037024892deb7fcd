"""
  Mallet Reader: Lexer and Parser

- A single regular-expression scan produces tokens; whitespace, commas and
  comments produce none.
- A recursive-descent parser turns tokens into values:

    - nil / true / false -> Nil / True / False
    - integers            -> int
    - strings             -> str (unescaped)
    - :name               -> Keyword
    - other names         -> Symbol
    - ( ... )             -> List
    - [ ... ]             -> Vector
    - { ... }             -> HashMap
    - quote family        -> (quote x), (quasiquote x), ... (see reader_macros)

Parse failures raise MalletSyntaxError internally; the public entry points
read_forms/read_str return them as Error values.
"""

from __future__ import annotations

import logging
import re
from typing import NamedTuple, Optional

from mallet import SExpression
from mallet.errors import MalletError, MalletSyntaxError
from mallet.types.containers import HashMap, List, Vector
from mallet.types.error import Error
from mallet.types.nil import Nil
from mallet.types.symbol import Keyword, Symbol
from mallet.reader.reader_macros import META_PREFIX, QUOTE_FORMS, WITH_META

logger = logging.getLogger(__name__)

TOKEN_RE = re.compile(
    r"[\s,]*("
    r"~@"  # splice-unquote
    r"|[\[\]{}()'`~^@]"  # structural and reader-macro punctuation
    r'|"(?:\\.|[^\\"])*"?'  # strings, possibly unterminated
    r"|;[^\n]*"  # single-line comment
    r"|[^\s\[\]{}('\"`,;)]*"  # fallback: simple tokens
    r")",
    re.DOTALL,
)

STRING_RE = re.compile(r'"(?:\\.|[^\\"])*"', re.DOTALL)
NUMBER_RE = re.compile(r"[+-]?\d+")
ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)

PUNCTUATION: dict[str, str] = {
    "(": "lparen",
    ")": "rparen",
    "[": "lbracket",
    "]": "rbracket",
    "{": "lbrace",
    "}": "rbrace",
    "'": "quote",
    "`": "quasiquote",
    "~": "unquote",
    "~@": "splice_unquote",
    "@": "deref",
    "^": "meta",
}

RESERVED: dict[str, SExpression] = {
    "nil": Nil,
    "true": True,
    "false": False,
}

CLOSERS: dict[str, tuple[str, type]] = {
    "lparen": ("rparen", List),
    "lbracket": ("rbracket", Vector),
    "lbrace": ("rbrace", HashMap),
}

UNESCAPES: dict[str, str] = {
    "n": "\n",
    "\\": "\\",
    '"': '"',
}


class Token(NamedTuple):
    type: str
    value: str


def classify(text: str) -> str:
    """Lexical token class; semantic resolution happens in the parser."""
    if text in PUNCTUATION:
        return PUNCTUATION[text]
    if text.startswith('"'):
        return "string"
    if text in RESERVED:
        return text
    if NUMBER_RE.fullmatch(text):
        return "number"
    return "other"


def tokenize(source: str) -> list[Token]:
    """Split source text into tokens, dropping blanks and comments."""
    tokens = []
    for match in TOKEN_RE.finditer(source):
        text = match.group(1)
        if not text or text.startswith(";"):
            continue
        tokens.append(Token(classify(text), text))
    return tokens


def unescape(body: str) -> str:
    """Resolve \\n, \\\\ and \\"; any other backslash pair is kept literally."""
    return ESCAPE_RE.sub(lambda m: UNESCAPES.get(m.group(1), m.group(0)), body)


class Reader:
    """Recursive-descent parser over a token list."""

    def __init__(self, tokens: list[Token]):
        self.tokens = tokens
        self.pos = 0

    def peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def advance(self) -> Optional[Token]:
        tok = self.peek()
        if tok is not None:
            self.pos += 1
        return tok

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def read_form(self) -> SExpression:
        tok = self.advance()
        if tok is None:
            raise MalletSyntaxError("unexpected end of input")

        if tok.type in CLOSERS:
            return self.read_collection(tok.type)

        if tok.value in QUOTE_FORMS:
            return List([QUOTE_FORMS[tok.value], self.read_form()])

        if tok.value == META_PREFIX:
            meta = self.read_form()
            target = self.read_form()
            return List([WITH_META, target, meta])

        if tok.type in ("rparen", "rbracket", "rbrace"):
            raise MalletSyntaxError(f"unexpected '{tok.value}'")

        return self.read_atom(tok)

    def read_collection(self, opener: str) -> SExpression:
        closer, kind = CLOSERS[opener]
        items = []
        while True:
            tok = self.peek()
            if tok is None:
                raise MalletSyntaxError(f"unterminated form: expected '{_closing_text(closer)}', got EOF")
            if tok.type == closer:
                self.advance()
                break
            items.append(self.read_form())
        if kind is HashMap:
            return HashMap.from_flat(items)
        return kind(items)

    def read_atom(self, tok: Token) -> SExpression:
        if tok.type == "number":
            return int(tok.value)
        if tok.type in RESERVED:
            return RESERVED[tok.type]
        if tok.type == "string":
            if not STRING_RE.fullmatch(tok.value):
                raise MalletSyntaxError("unterminated string: expected '\"', got EOF")
            return unescape(tok.value[1:-1])
        if tok.value.startswith(":"):
            return Keyword(tok.value[1:])
        return Symbol(tok.value)

    def read_all(self) -> list[SExpression]:
        forms = []
        while not self.at_end():
            forms.append(self.read_form())
        return forms


def _closing_text(closer: str) -> str:
    return next(text for text, kind in PUNCTUATION.items() if kind == closer)


def read_forms(source: str) -> list[SExpression] | Error:
    """Parse every top-level form in `source`, or return the reader Error."""
    try:
        return Reader(tokenize(source)).read_all()
    except MalletError as exc:
        logger.debug("reader failed on %r: %s", source, exc)
        return Error.from_exception(exc)


def read_str(source: str) -> SExpression:
    """Parse `source` and return its last form (nil when it holds none)."""
    forms = read_forms(source)
    if isinstance(forms, Error):
        return forms
    return forms[-1] if forms else Nil
