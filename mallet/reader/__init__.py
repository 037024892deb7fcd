from mallet.reader.parser import Reader, Token, tokenize, read_forms, read_str

__all__ = ("Reader", "Token", "tokenize", "read_forms", "read_str")
