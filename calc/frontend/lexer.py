from __future__ import annotations
from io import StringIO
from typing import List, TextIO
import logging

from calc.frontend.tokens import *

logger = logging.getLogger(__name__)

# Trace tags for the operators, parentheses print as themselves
_trace_tags = {
    TokenId.OP_PLUS: 'ADDOP',
    TokenId.OP_MINUS: 'SUBOP',
    TokenId.OP_MUL: 'MULOP',
    TokenId.OP_DIV: 'DIVOP',
}

digits = '0123456789'

class Lexer:
    """
    Pulls characters from a text stream and hands out one token per call.

    The only state kept between calls is a single pushed-back character: the
    first non-digit read while scanning a number.
    """
    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.pushback: str|None = None

    def getchar(self) -> str:
        if self.pushback is not None:
            c, self.pushback = self.pushback, None
            return c
        return self.stream.read(1)

    def ungetc(self, c: str) -> None:
        self.pushback = c

    def next_token(self) -> Token:
        while True:
            c = self.getchar()
            if c == ' ' or c == '\t':
                continue
            if c == '\n' or c == '':
                logger.debug('[EOS]')
                return EOS
            if c in char_tokens:
                tok_id = char_tokens[c]
                if tok_id in _trace_tags:
                    logger.debug(f'[{_trace_tags[tok_id]}:{c}]')
                else:
                    logger.debug(f'[{c}]')
                return Token(tok_id)
            if c in digits:
                return self.scan_number(c)
            logger.debug(f'{{{c}}}')
            return invalid(c)

    def scan_number(self, first: str) -> Token:
        value = int(first)
        while (c := self.getchar()) and c in digits:
            value = 10 * value + int(c)
        if c:
            self.ungetc(c)
        logger.debug(f'[NUM: {value}]')
        return number(value)

def tokenize(src: str) -> List[Token]:
    lexer = Lexer(StringIO(src))
    tokens = []
    while (tok := lexer.next_token()) != EOS:
        tokens.append(tok)
    tokens.append(tok)
    return tokens
