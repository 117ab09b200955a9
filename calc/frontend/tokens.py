from __future__ import annotations
from enum import Enum, auto
from typing import NamedTuple

class TokenId(Enum):
    OP_PLUS = auto()
    OP_MINUS = auto()
    OP_MUL = auto()
    OP_DIV = auto()
    RBRACE_LEFT = auto()
    RBRACE_RIGHT = auto()
    NUMBER = auto()
    EOS = auto()
    INVALID = auto()

class Token(NamedTuple):
    token_id: TokenId
    value: int|str|None = None

    def __repr__(self) -> str:
        return f'Token({self.token_id}, {self.value})'

    def __str__(self) -> str:
        if self.token_id is TokenId.NUMBER:
            return str(self.value)
        if self.token_id is TokenId.INVALID:
            return repr(self.value)
        return token_names[self.token_id]

# Single character tokens
char_tokens = {
    '+': TokenId.OP_PLUS,
    '-': TokenId.OP_MINUS,
    '*': TokenId.OP_MUL,
    '/': TokenId.OP_DIV,
    '(': TokenId.RBRACE_LEFT,
    ')': TokenId.RBRACE_RIGHT,
}

token_names = {tok_id: f"'{char}'" for char, tok_id in char_tokens.items()}
token_names.update({
    TokenId.NUMBER: 'number',
    TokenId.EOS: 'end of input',
    TokenId.INVALID: 'invalid character',
})

PLUS = Token(TokenId.OP_PLUS)
MINUS = Token(TokenId.OP_MINUS)
STAR = Token(TokenId.OP_MUL)
SLASH = Token(TokenId.OP_DIV)
LPAREN = Token(TokenId.RBRACE_LEFT)
RPAREN = Token(TokenId.RBRACE_RIGHT)
EOS = Token(TokenId.EOS)

def number(value: int) -> Token:
    return Token(TokenId.NUMBER, value)

def invalid(char: str) -> Token:
    return Token(TokenId.INVALID, char)
