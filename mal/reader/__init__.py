from mal.reader.parser import lex, read, Token, TokenKind, TokenStream, Delimiter

__all__ = ["lex", "read", "Token", "TokenKind", "TokenStream", "Delimiter"]
