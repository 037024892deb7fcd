from mallet.types.nil import Nil, NilType
from mallet.types.symbol import Symbol, Keyword
from mallet.types.containers import List, Vector, HashMap
from mallet.types.atom import Atom
from mallet.types.error import Error
from mallet.types.environment import Environment
from mallet.types.tail_call import TailCall
from mallet.types.function import Function, NativeFunction, Closure, native_functions
from mallet.types.predicates import is_truthy, is_sequential, is_number, values_equal

__all__ = (
    "Nil",
    "NilType",
    "Symbol",
    "Keyword",
    "List",
    "Vector",
    "HashMap",
    "Atom",
    "Error",
    "Environment",
    "TailCall",
    "Function",
    "NativeFunction",
    "Closure",
    "native_functions",
    "is_truthy",
    "is_sequential",
    "is_number",
    "values_equal",
)
