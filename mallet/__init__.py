# Core type aliases for Mallet's data model.
# Atoms are plain Python values (int, bool, str) plus the Nil singleton; the
# compound variants (List, Vector, HashMap, Function, Atom, Error) and the
# identifiers (Symbol, Keyword) live in mallet.types.
#
# Naming guidance:
# - SExpression: Use in reader/macro code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
# Forms alias (used interchangeably with LispValue in this codebase)
SExpression = LispValue

# Evaluator function type: passed into special forms and the macro expander
EvaluatorFn = Callable[..., LispValue]
