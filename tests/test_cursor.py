"""
Tests for the parser cursor, operator helpers and precedence table.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from exprparse.lexer import TokenType, tokenize_string, end_of_input
from exprparse.parser import (
    Cursor, CursorError, NodeKind, Variable, Precedence,
    is_binary_operator, to_operator_kind, token_precedence, node_precedence
)


class TestCursor(unittest.TestCase):
    """Test cases for next / push_back / parse_leaf."""

    def test_next_walks_the_tokens(self):
        cursor = Cursor(tokenize_string("a + b"))
        self.assertEqual(cursor.next().type, TokenType.VARIABLE)
        self.assertEqual(cursor.next().type, TokenType.PLUS)
        self.assertEqual(cursor.next().type, TokenType.VARIABLE)
        self.assertEqual(cursor.offset, 3)

    def test_end_of_input_does_not_advance(self):
        cursor = Cursor(tokenize_string("a"))
        cursor.next()
        self.assertEqual(cursor.next().type, TokenType.END_OF_INPUT)
        self.assertEqual(cursor.next().type, TokenType.END_OF_INPUT)
        self.assertEqual(cursor.offset, 1)

    def test_empty_stream(self):
        cursor = Cursor([])
        self.assertEqual(cursor.next().type, TokenType.END_OF_INPUT)
        self.assertEqual(cursor.offset, 0)

    def test_push_back_rereads_token(self):
        cursor = Cursor(tokenize_string("a * b"))
        cursor.next()
        operator = cursor.next()
        cursor.push_back()
        self.assertEqual(cursor.offset, 1)
        self.assertEqual(cursor.next(), operator)

    def test_push_back_after_end_of_input_keeps_offset(self):
        """Undoing a synthesized END_OF_INPUT must not move the cursor."""
        cursor = Cursor(tokenize_string("a"))
        cursor.next()
        cursor.next()
        cursor.push_back()
        self.assertEqual(cursor.offset, 1)

    def test_push_back_without_next(self):
        cursor = Cursor(tokenize_string("a"))
        with self.assertRaises(CursorError):
            cursor.push_back()

    def test_only_one_push_back(self):
        cursor = Cursor(tokenize_string("a b"))
        cursor.next()
        cursor.next()
        cursor.push_back()
        with self.assertRaises(CursorError) as ctx:
            cursor.push_back()
        self.assertEqual(ctx.exception.diagnostic.code, "P011")
        self.assertEqual(cursor.offset, 1)

    def test_parse_leaf_variable(self):
        cursor = Cursor(tokenize_string("x"))
        leaf = cursor.parse_leaf()
        self.assertIsInstance(leaf, Variable)
        self.assertEqual(leaf.name, "x")
        self.assertEqual(leaf.kind, NodeKind.VARIABLE)
        self.assertEqual(leaf.children(), [])

    def test_parse_leaf_consumes_non_variable(self):
        """A malformed leaf yields None and the token stays consumed."""
        cursor = Cursor(tokenize_string("+ a"))
        self.assertIsNone(cursor.parse_leaf())
        self.assertEqual(cursor.offset, 1)

    def test_parse_leaf_at_end(self):
        cursor = Cursor([])
        self.assertIsNone(cursor.parse_leaf())
        self.assertEqual(cursor.offset, 0)


class TestOperatorHelpers(unittest.TestCase):
    """Test cases for is_binary_operator and to_operator_kind."""

    EXPECTED_KINDS = {
        "+": NodeKind.ADD,
        "-": NodeKind.SUB,
        "*": NodeKind.MUL,
        "/": NodeKind.DIV,
        "<": NodeKind.COMPARE_LESS_THAN,
        ">": NodeKind.COMPARE_GREATER_THAN,
    }

    def test_operator_kinds(self):
        for char, kind in self.EXPECTED_KINDS.items():
            token = tokenize_string(char)[0]
            self.assertTrue(is_binary_operator(token), char)
            self.assertEqual(to_operator_kind(token), kind)

    def test_non_operators_map_to_invalid(self):
        for token in (tokenize_string("a")[0], end_of_input()):
            self.assertFalse(is_binary_operator(token))
            self.assertEqual(to_operator_kind(token), NodeKind.INVALID)


class TestPrecedenceTable(unittest.TestCase):

    def test_token_precedences(self):
        self.assertEqual(token_precedence(TokenType.VARIABLE), 0)
        self.assertEqual(token_precedence(TokenType.END_OF_INPUT), 0)
        self.assertEqual(token_precedence(TokenType.LESS_THAN), 1)
        self.assertEqual(token_precedence(TokenType.GREATER_THAN), 1)
        self.assertEqual(token_precedence(TokenType.PLUS), 2)
        self.assertEqual(token_precedence(TokenType.MINUS), 2)
        self.assertEqual(token_precedence(TokenType.ASTERISK), 3)
        self.assertEqual(token_precedence(TokenType.SLASH), 3)

    def test_node_precedences_agree_with_tokens(self):
        for char, kind in TestOperatorHelpers.EXPECTED_KINDS.items():
            token = tokenize_string(char)[0]
            self.assertEqual(node_precedence(kind), token_precedence(token.type))

    def test_leaves_have_no_precedence(self):
        self.assertEqual(node_precedence(NodeKind.VARIABLE), Precedence.NONE)
        self.assertEqual(node_precedence(NodeKind.INVALID), Precedence.NONE)


if __name__ == "__main__":
    unittest.main(verbosity=2)
