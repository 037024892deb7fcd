"""Reader macros: single-character prefixes that expand to two-element forms.

    'x   -> (quote x)
    `x   -> (quasiquote x)
    ~x   -> (unquote x)
    ~@x  -> (splice-unquote x)
    @x   -> (deref x)
    ^m x -> (with-meta x m)
"""

from mallet.types.symbol import Symbol

QUOTE_FORMS = {
    "'": Symbol("quote"),
    "`": Symbol("quasiquote"),
    "~": Symbol("unquote"),
    "~@": Symbol("splice-unquote"),
    "@": Symbol("deref"),
}

WITH_META = Symbol("with-meta")
META_PREFIX = "^"
