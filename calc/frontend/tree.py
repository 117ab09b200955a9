from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

class TreeOp(Enum):
    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    LITERAL = auto()

op_symbols = {
    TreeOp.ADD: '+',
    TreeOp.SUB: '-',
    TreeOp.MUL: '*',
    TreeOp.DIV: '/',
}

@dataclass(frozen=True)
class TreeNode:
    """
    One production of the expression grammar.

    A node is either binary (both children), a unary minus (SUB with only a
    left child) or a literal (no children, `value` set).
    """
    op: TreeOp
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None
    value: int = 0

    def is_literal(self) -> bool:
        return self.op is TreeOp.LITERAL and self.left is None and self.right is None

    def is_unary(self) -> bool:
        return self.op is TreeOp.SUB and self.left is not None and self.right is None

    def is_binary(self) -> bool:
        return self.op in op_symbols and self.left is not None and self.right is not None

    def label(self) -> str:
        if self.is_literal():
            return str(self.value)
        if self.is_unary():
            return 'neg'
        return op_symbols.get(self.op, self.op.name)

    def children(self) -> List[TreeNode]:
        return [child for child in (self.left, self.right) if child is not None]

    def __str__(self) -> str:
        lines = []
        stack = [(self, 0)]
        while stack:
            node, level = stack.pop()
            lines.append("\t" * level + node.label() + "\n")
            for child in reversed(node.children()):
                stack.append((child, level + 1))
        return ''.join(lines)

    def to_infix(self) -> str:
        """
        Fully parenthesised rendering, e.g. '((1 - 2) - 3)'.

        Walks the tree with an explicit stack, a left-deep tree is as deep as
        the flat sum it came from is long.
        """
        parts = []
        stack = [self]
        while stack:
            item = stack.pop()
            if isinstance(item, str):
                parts.append(item)
            elif item.is_literal():
                parts.append(str(item.value))
            elif item.is_unary():
                stack.extend([')', item.left, '(-'])
            else:
                stack.extend([')', item.right, f' {op_symbols[item.op]} ', item.left, '('])
        return ''.join(parts)

def mktree(op: TreeOp, left: TreeNode, right: TreeNode|None = None) -> TreeNode:
    return TreeNode(op, left, right)

def mkleaf(value: int) -> TreeNode:
    return TreeNode(TreeOp.LITERAL, value=value)
