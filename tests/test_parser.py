import pytest

from minilang.lexer      import tokenize
from minilang.parser     import Parser
from minilang.reporter   import ParseError
from minilang.statement  import *
from minilang.expression import *


def parse(source):
    return Parser().parse(tokenize(source))


def test_full_program(sample):
    block = parse(sample)
    assert [type(s) for s in block] == [
        Declaration, Declaration, Assignment, Assignment, IfStatement, WhileStatement,
    ]

    ifelse = block.statements[4]
    assert isinstance(ifelse.condition, BinaryExpression)
    assert ifelse.condition.operator == Operator.GREATER
    assert isinstance(ifelse.success.statements[0], PrintStatement)
    assert ifelse.failure is not None


def test_empty_program():
    block = parse("")
    assert len(block) == 0


def test_if_without_else():
    ifelse = parse("if (x == 1) { x = 2; }").statements[0]
    assert ifelse.failure is None
    assert ifelse.condition.operator == Operator.EQUAL


def test_nested_block_statement():
    block = parse("{ int x; { x = 1; } }")
    inner = block.statements[0]
    assert isinstance(inner, Block)
    assert isinstance(inner.statements[1], Block)


def test_multiplication_binds_tighter():
    value = parse("x = a + b * c;").statements[0].value
    assert value.operator == Operator.PLUS
    assert value.left == Variable(line=1, name="a")
    assert value.right.operator == Operator.MULT


def test_additive_is_left_associative():
    value = parse("x = a - b - c;").statements[0].value
    assert value.operator == Operator.MINUS
    assert value.left.operator == Operator.MINUS
    assert value.right == Variable(line=1, name="c")


def test_parentheses_group():
    value = parse("x = (a + 1) / 2;").statements[0].value
    assert value.operator == Operator.DIV
    assert value.left.operator == Operator.PLUS
    assert value.right == NumberLiteral(line=1, value=2)


def test_comparison_does_not_chain():
    with pytest.raises(ParseError) as e:
        parse("if (a < b < c) { }")
    assert e.value.token.lexeme == "<"


@pytest.mark.parametrize("source, offending", [
    ("int x\nx = 1;", "x"),
    ("int x; if x > 1) { print(x); }", "x"),
    ("int x; if (x > 1 { print(x); }", "{"),
    ("int x; while (x < 1) print(x); }", "print"),
    ("int x; while (x < 1) { print(x);", None),
    ("int x; print(x)", None),
])
def test_missing_punctuation(source, offending):
    with pytest.raises(ParseError) as e:
        parse(source)
    if offending is None:
        assert e.value.token is None
        assert "end of input" in str(e.value)
    else:
        assert e.value.token.lexeme == offending
        assert f"'{offending}'" in str(e.value)


def test_unknown_leading_token():
    with pytest.raises(ParseError) as e:
        parse("else { }")
    assert "expected a valid statement" in str(e.value)


def test_bad_atom():
    with pytest.raises(ParseError) as e:
        parse("x = * 2;")
    assert "expected number, variable" in str(e.value)


def test_validate(sample):
    parser = Parser()
    assert parser.validate(tokenize(sample))
    assert not parser.validate(tokenize("int x"))


def test_pprint():
    text = parse("int x; if (x > 1) { print(x); } else { x = x + 1; }").pprint()
    assert "Declaration int x" in text
    assert "IfStatement" in text
    assert "else:" in text
    assert "BinaryExpression PLUS (+)" in text
