# tests/parser_tests/test_parser_basic.py
# This file is part of Truthtable - A propositional truth-table generator
#
# Test suite for formula tree construction and atom collection

"""Test suite for basic parser functionality.

Checks the trees built for well-formed text in parser order, the atom sets
collected alongside them, the right-associative chaining of connectives and
the round trip through ``str``.
"""

import pytest
from parser import parse, parse_line, reverse_formula, ParseResult
from parser.ast_nodes import Atom, Not, And, Or, Xor, Implies, Iff
from utils.logger import get_logger


a, b, c, d = Atom("a"), Atom("b"), Atom("c"), Atom("d")


class TestFormulaParserBasic:
    """Test cases for tree structure of well-formed formulas."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    STRUCTURE_CASES = [
        # Leaves and single connectives
        ("a", a),
        ("!a", Not(a)),
        ("a & b", And(a, b)),
        ("a | b", Or(a, b)),
        ("a ^ b", Xor(a, b)),
        ("a > b", Implies(a, b)),
        ("a = b", Iff(a, b)),
        # Connectives chain to the right
        ("a & b & c", And(a, And(b, c))),
        ("a & b | c", And(a, Or(b, c))),
        ("a | b & c", Or(a, And(b, c))),
        ("a > b > c", Implies(a, Implies(b, c))),
        # Negation swallows the rest of its scope
        ("!a & b", Not(And(a, b))),
        ("!!a", Not(Not(a))),
        ("a & !b", And(a, Not(b))),
        ("a & !b | c", And(a, Not(Or(b, c)))),
        # Parentheses delimit scopes
        ("(!a) & b", And(Not(a), b)),
        ("(a & b) | c", Or(And(a, b), c)),
        ("((a))", a),
        ("(a | b) & (c | d)", And(Or(a, b), Or(c, d))),
        ("!(a & b) | c", Not(Or(And(a, b), c))),
        # Spaces are insignificant
        ("  a&b  ", And(a, b)),
        ("( a ) ^ ( b )", Xor(a, b)),
    ]

    @pytest.mark.parametrize("text, expected", STRUCTURE_CASES)
    def test_tree_structure(self, text, expected):
        result = parse(text)
        self.logger.debug(f"{text!r} -> {result}")
        assert result.root == expected

    ATOM_CASES = [
        ("a", {"a"}),
        ("a & a", {"a"}),
        ("(p > q) = (!q > !p)", {"p", "q"}),
        ("rain | sprinkler > wet_grass", {"rain", "sprinkler", "wet_grass"}),
        ("x1^x2^x3^x1", {"x1", "x2", "x3"}),
    ]

    @pytest.mark.parametrize("text, expected", ATOM_CASES)
    def test_atom_set_matches_tree(self, text, expected):
        result = parse(text)
        assert result.atoms == frozenset(expected)

    def test_atoms_may_contain_unusual_characters(self):
        result = parse("x.1 & y-2 & z\tw")
        assert result.atoms == {"x.1", "y-2", "z\tw"}

    @pytest.mark.parametrize("text", ["", " ", "     "])
    def test_blank_text_gives_empty_result(self, text):
        result = parse(text)
        assert result.is_empty
        assert result.atoms == frozenset()
        assert result == ParseResult.empty()

    ROUND_TRIP_CASES = [
        "a",
        "!a & b",
        "(!a) & b",
        "a & b | c ^ d",
        "(a > b) = (!b > !a)",
        "((a | b) & c) ^ !(d = a)",
    ]

    @pytest.mark.parametrize("text", ROUND_TRIP_CASES)
    def test_string_form_reparses_to_same_tree(self, text):
        original = parse(text)
        reparsed = parse(str(original.root))
        assert reparsed == original

    def test_parsing_is_deterministic(self):
        text = "(a | b) & !c > d"
        assert parse(text) == parse(text)

    def test_result_is_immutable(self):
        result = parse("a & b")
        with pytest.raises(AttributeError):
            result.root = None
        with pytest.raises(AttributeError):
            result.root.left = Atom("z")


class TestParseLine:
    """Test cases for parsing raw input lines, which are reversed first."""

    def test_reverse_formula_strips_line_terminator(self):
        assert reverse_formula("a&bc\n") == "cb&a"
        assert reverse_formula("a>b\r\n") == "b>a"

    def test_binary_connective_operands_swap(self):
        assert parse_line("a&b").root == And(b, a)
        assert parse_line("a>b").root == Implies(b, a)

    def test_atom_names_are_reversed_too(self):
        result = parse_line("rain|snow")
        assert result.atoms == {"niar", "wons"}

    def test_negation_is_typed_after_its_operand(self):
        assert parse_line("a!").root == Not(a)
        assert parse_line("b&)a!(").root == And(Not(a), b)

    def test_parentheses_are_typed_mirrored(self):
        assert parse_line(")a&b(").root == And(b, a)

    def test_trailing_newline_is_not_an_atom(self):
        assert parse_line("a^b\n").atoms == {"a", "b"}
