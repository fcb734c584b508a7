import pytest

from minilang.codegen  import CodeGenerator
from minilang.lexer    import tokenize
from minilang.reporter import CodeGenError


def generate(source):
    return CodeGenerator().generate(tokenize(source)).pprint()


def test_copy():
    assert generate("int x; x = 5;") == ["x = 5"]


def test_single_operator():
    assert generate("int a; int b; int c; a = b + c;") == ["t1 = b + c", "a = t1"]


def test_no_precedence():
    assert generate("x = a + b * c;") == ["t1 = a + b", "t2 = t1 * c", "x = t2"]


def test_comparison_operators_kept_as_written():
    assert generate("f = a != b;") == ["t1 = a != b", "f = t1"]


def test_temps_continue_within_a_run():
    assert generate("x = a + b; y = x - 1;") == [
        "t1 = a + b", "x = t1", "t2 = x - 1", "y = t2",
    ]


def test_temps_restart_per_run():
    generator = CodeGenerator()
    tokens = tokenize("x = a / 2;")
    first = generator.generate(tokens).pprint()
    second = generator.generate(tokens).pprint()
    assert first == second == ["t1 = a / 2", "x = t1"]


def test_control_flow_is_not_lowered(sample):
    assert generate(sample) == [
        "x = 10",
        "t1 = x + 2",
        "t2 = t1 * 3",
        "y = t2",
        "t3 = x + 1",
        "x = t3",
    ]


def test_missing_expression():
    generator = CodeGenerator()
    with pytest.raises(CodeGenError) as e:
        generator.generate(tokenize("x = ;"))
    assert "missing expression" in str(e.value)
    assert e.value.token.lexeme == ";"


def test_missing_expression_at_end():
    with pytest.raises(CodeGenError) as e:
        generate("x =")
    assert e.value.token is None


@pytest.mark.parametrize("source, offending", [
    ("x = a + ;", ";"),
    ("x = a *", None),
])
def test_missing_operand(source, offending):
    with pytest.raises(CodeGenError) as e:
        generate(source)
    assert "missing operand after operator" in str(e.value)
    if offending is None:
        assert e.value.token is None
    else:
        assert e.value.token.lexeme == offending


def test_unexpected_operand():
    with pytest.raises(CodeGenError) as e:
        generate("x = (a + b);")
    assert "unexpected token" in str(e.value)
    assert e.value.token.kind == "LPAREN"


def test_missing_semicolon():
    with pytest.raises(CodeGenError) as e:
        generate("x = a b;")
    assert "missing ';'" in str(e.value)
    assert e.value.token.lexeme == "b"


def test_json():
    tac = CodeGenerator().generate(tokenize("x = a - 1;"))
    assert tac.json() == [
        {"opcode": "sub", "args": ["a", "1"], "result": "t1"},
        {"opcode": "copy", "args": ["t1"], "result": "x"},
    ]
