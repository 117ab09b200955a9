import unittest
from io import StringIO
from calc.errors import *
from calc.frontend.parser import parse, parse_stream
from calc.frontend.tokens import TokenId, invalid
from calc.frontend.tree import TreeOp, mktree, mkleaf

class TestParserShape(unittest.TestCase):
    def test_literal(self):
        self.assertEqual(parse('42'), mkleaf(42))

    def test_left_associative_sub(self):
        tree = parse('1-2-3')
        self.assertEqual(tree, mktree(TreeOp.SUB,
                                      mktree(TreeOp.SUB, mkleaf(1), mkleaf(2)),
                                      mkleaf(3)))
        self.assertEqual(tree.to_infix(), '((1 - 2) - 3)')

    def test_left_associative_div(self):
        self.assertEqual(parse('8/4/2').to_infix(), '((8 / 4) / 2)')

    def test_precedence(self):
        self.assertEqual(parse('2+3*4').to_infix(), '(2 + (3 * 4))')
        self.assertEqual(parse('2*3+4').to_infix(), '((2 * 3) + 4)')
        self.assertEqual(parse('(2+3)*4').to_infix(), '((2 + 3) * 4)')

    def test_unary_minus(self):
        tree = parse('-5')
        self.assertTrue(tree.is_unary())
        self.assertIsNone(tree.right)
        self.assertEqual(tree.left, mkleaf(5))

    def test_unary_minus_binds_tightest(self):
        self.assertEqual(parse('-5+3').to_infix(), '((-5) + 3)')
        self.assertEqual(parse('2*-3').to_infix(), '(2 * (-3))')
        self.assertEqual(parse('--5').to_infix(), '(-(-5))')
        self.assertEqual(parse('-(2+3)').to_infix(), '(-(2 + 3))')

    def test_binary_minus_has_right_child(self):
        tree = parse('5-3')
        self.assertTrue(tree.is_binary())
        self.assertFalse(tree.is_unary())

    def test_nested_parens(self):
        self.assertEqual(parse('((7))'), mkleaf(7))

    def test_stream_stops_at_newline(self):
        stream = StringIO('1+2\n3*4\n')
        self.assertEqual(parse_stream(stream).to_infix(), '(1 + 2)')
        self.assertEqual(parse_stream(stream).to_infix(), '(3 * 4)')

    def test_tree_str(self):
        self.assertEqual(str(parse('1+-2')), '+\n\t1\n\tneg\n\t\t2\n')

class TestParserErrors(unittest.TestCase):
    def test_missing_operand(self):
        with self.assertRaises(ExpressionSyntaxError) as cm:
            parse('2+')
        self.assertEqual(cm.exception.found.token_id, TokenId.EOS)
        self.assertIn(TokenId.NUMBER, cm.exception.expected)

    def test_unclosed_paren(self):
        with self.assertRaises(ExpressionSyntaxError) as cm:
            parse('(2+3')
        self.assertEqual(cm.exception.expected, [TokenId.RBRACE_RIGHT])
        self.assertIn("')'", cm.exception.message)

    def test_missing_operator(self):
        with self.assertRaises(TrailingInputError) as cm:
            parse('2 3')
        self.assertEqual(cm.exception.found.value, 3)

    def test_trailing_paren(self):
        self.assertRaises(TrailingInputError, parse, '(1))')

    def test_invalid_character(self):
        with self.assertRaises(LexicalError) as cm:
            parse('2+a')
        self.assertEqual(cm.exception.char, 'a')

    def test_invalid_trailing_character(self):
        self.assertRaises(LexicalError, parse, '2 a')

    def test_lexical_is_syntax_error(self):
        self.assertTrue(issubclass(LexicalError, ExpressionSyntaxError))
        self.assertTrue(issubclass(TrailingInputError, ExpressionSyntaxError))

    def test_empty_input(self):
        self.assertRaises(ExpressionSyntaxError, parse, '')
        self.assertRaises(ExpressionSyntaxError, parse, '\n')

    def test_lone_operator(self):
        self.assertRaises(ExpressionSyntaxError, parse, '*3')
        self.assertRaises(ExpressionSyntaxError, parse, '()')

    def test_invalid_found_is_token(self):
        with self.assertRaises(LexicalError) as cm:
            parse('2+a')
        self.assertEqual(cm.exception.found, invalid('a'))
        self.assertEqual(cm.exception.found.token_id, TokenId.INVALID)

    def test_deep_parens(self):
        with self.assertRaises(NestingTooDeepError):
            parse('(' * 5000 + '1' + ')' * 5000)

    def test_deep_unary_minus(self):
        self.assertRaises(NestingTooDeepError, parse, '-' * 5000 + '1')
        self.assertTrue(issubclass(NestingTooDeepError, CalcError))

    def test_moderate_nesting(self):
        self.assertEqual(parse('(' * 50 + '1' + ')' * 50), mkleaf(1))
        self.assertEqual(parse('-' * 100 + '2').to_infix(), '(-' * 100 + '2' + ')' * 100)

    def test_long_flat_sum_shape(self):
        tree = parse('+'.join(['1'] * 5000))
        self.assertTrue(tree.is_binary())
        self.assertEqual(tree.right, mkleaf(1))
