from __future__ import annotations
from io import StringIO
from typing import List, TextIO
import logging

from calc.errors import ExpressionSyntaxError, LexicalError, NestingTooDeepError, TrailingInputError
from calc.frontend.lexer import Lexer
from calc.frontend.tokens import *
from calc.frontend.tree import TreeNode, TreeOp, mktree, mkleaf

logger = logging.getLogger(__name__)

# Grammar, left recursion replaced by iteration:
# expression = term, { add_op, term } ;
# term       = factor, { mul_op, factor } ;
# factor     = "(", expression, ")" | "-", factor | number ;
# add_op     = "+" | "-" ;
# mul_op     = "*" | "/" ;
# number     = digit, { digit } ;

add_ops = {TokenId.OP_PLUS: TreeOp.ADD, TokenId.OP_MINUS: TreeOp.SUB}
mul_ops = {TokenId.OP_MUL: TreeOp.MUL, TokenId.OP_DIV: TreeOp.DIV}

def describe(expected: List[TokenId]) -> str:
    return ' or '.join(token_names[tok_id] for tok_id in expected)

class Parser:
    def __init__(self, lexer: Lexer) -> None:
        self.lexer = lexer
        self.lookahead: Token = lexer.next_token()

    def look(self) -> TokenId:
        return self.lookahead.token_id

    def error(self, expected: List[TokenId]) -> ExpressionSyntaxError:
        found = self.lookahead
        if found.token_id is TokenId.INVALID:
            return LexicalError(found.value, expected)
        return ExpressionSyntaxError(
            f"Expected {describe(expected)}, got {found}", expected, found)

    def match(self, token_id: TokenId) -> Token:
        tok = self.lookahead
        if tok.token_id is not token_id:
            raise self.error([token_id])
        self.lookahead = self.lexer.next_token()
        return tok

    def expression(self) -> TreeNode:
        tree = self.term()
        while self.look() in add_ops:
            op = add_ops[self.match(self.look()).token_id]
            rhs = self.term()
            tree = mktree(op, tree, rhs) # LHS of '-' in (a-b)-c is (a-b)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug('expression: %s', tree.to_infix())
        return tree

    def term(self) -> TreeNode:
        tree = self.factor()
        while self.look() in mul_ops:
            op = mul_ops[self.match(self.look()).token_id]
            rhs = self.factor()
            tree = mktree(op, tree, rhs)
        return tree

    def factor(self) -> TreeNode:
        if self.look() is TokenId.RBRACE_LEFT:
            self.match(TokenId.RBRACE_LEFT)
            tree = self.expression()
            self.match(TokenId.RBRACE_RIGHT)
        elif self.look() is TokenId.OP_MINUS:
            self.match(TokenId.OP_MINUS)
            tree = mktree(TreeOp.SUB, self.factor())
        elif self.look() is TokenId.NUMBER:
            tree = mkleaf(self.lookahead.value)
            self.match(TokenId.NUMBER)
        else:
            raise self.error([TokenId.RBRACE_LEFT, TokenId.OP_MINUS, TokenId.NUMBER])
        return tree

    def parse(self) -> TreeNode:
        try:
            tree = self.expression()
        except RecursionError:
            raise NestingTooDeepError("Expression nested too deeply") from None
        if self.look() is not TokenId.EOS:
            if self.look() is TokenId.INVALID:
                raise self.error([TokenId.EOS])
            raise TrailingInputError(
                f"Unexpected {self.lookahead} after complete expression",
                [TokenId.EOS], self.lookahead)
        return tree

def parse_stream(stream: TextIO) -> TreeNode:
    return Parser(Lexer(stream)).parse()

def parse(src: str) -> TreeNode:
    return parse_stream(StringIO(src))
