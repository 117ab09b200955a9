from __future__ import annotations

from calc.errors import DivisionByZeroError, MalformedTreeError
from calc.frontend.tree import TreeNode, TreeOp

def div_trunc(x: int, y: int) -> int:
    """Integer division truncating toward zero, so -7/2 == -3."""
    if y == 0:
        raise DivisionByZeroError(f"Division by zero in {x} / {y}", found=y)
    quotient = abs(x) // abs(y)
    return quotient if (x < 0) == (y < 0) else -quotient

op_map = {
    TreeOp.ADD: lambda x, y: x + y,
    TreeOp.SUB: lambda x, y: x - y,
    TreeOp.MUL: lambda x, y: x * y,
    TreeOp.DIV: div_trunc,
}

def evaluate(tree: TreeNode) -> int:
    """
    Post-order walk with an explicit stack. Chains like 1+1+...+1 build a
    left-deep tree as deep as the chain is long.
    """
    values = []
    stack = [(tree, False)]
    while stack:
        node, children_done = stack.pop()
        if node.is_literal():
            values.append(node.value)
        elif children_done:
            if node.is_unary():
                values.append(-values.pop())
            else:
                rhs = values.pop()
                lhs = values.pop()
                values.append(op_map[node.op](lhs, rhs))
        elif node.is_unary() or node.is_binary():
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            stack.append((node.left, False))
        else:
            raise MalformedTreeError(f"Malformed {node.op.name} node", found=node)
    return values.pop()
