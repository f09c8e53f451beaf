import pytest

from tests.utils import lex, parse_text
from ast_nodes import *
from errors import ExpectedToken, ParseError, UnexpectedEndOfInput, UnknownConstruct
from parser import Parser, parse
from tokens import TokenKind


def num(v):
    return NumberLiteralNode(value=v)


def var(n):
    return VariableNode(name=n)


def test_parser_parses_literals_and_variables():
    ast = parse_text("1 2.5 'hi' \"there\" x")
    assert ast == ProgramNode(
        body=(
            num("1"),
            num("2.5"),
            StringLiteralNode(value="hi"),
            StringLiteralNode(value="there"),
            var("x"),
        )
    )


def test_empty_and_blank_sources_give_empty_program():
    assert parse_text("") == ProgramNode(body=())
    assert parse_text("  \n\t \r\n") == ProgramNode(body=())


def test_binary_expressions_are_left_associative_with_flat_precedence():
    ast = parse_text("print(1+2*3)")
    assert ast.body[0].argument == BinaryExpressionNode(
        operator="*",
        left=BinaryExpressionNode(operator="+", left=num("1"), right=num("2")),
        right=num("3"),
    )


def test_logical_and_arithmetic_share_one_level():
    ast = parse_text("(a < b + 1 && c)")
    inner = ast.body[0].inner
    assert inner.operator == "&&"
    assert inner.left.operator == "+"
    assert inner.left.left == BinaryExpressionNode(
        operator="<", left=var("a"), right=var("b")
    )


def test_parenthesized_expression():
    ast = parse_text("(1 + (2 * 3))")
    assert ast.body[0] == ParenthesizedNode(
        inner=BinaryExpressionNode(
            operator="+",
            left=num("1"),
            right=ParenthesizedNode(
                inner=BinaryExpressionNode(operator="*", left=num("2"), right=num("3"))
            ),
        )
    )


def test_if_else_if_else_chain():
    src = "if (x>1) { print(x) } else if (x==1) { print(0) } else { print(y) }"
    ast = parse_text(src)
    assert len(ast.body) == 1
    node = ast.body[0]
    assert isinstance(node, IfNode)
    assert node.condition == BinaryExpressionNode(
        operator=">", left=var("x"), right=num("1")
    )
    assert node.consequent == (PrintNode(argument=var("x")),)

    nested = node.alternate
    assert isinstance(nested, IfNode)
    assert nested.condition == BinaryExpressionNode(
        operator="==", left=var("x"), right=num("1")
    )
    assert nested.consequent == (PrintNode(argument=num("0")),)
    assert nested.alternate == (PrintNode(argument=var("y")),)


def test_negative_number_is_not_a_term():
    src = "if (x>1) { print(x) } else if (x==1) { print(0) } else { print(-1) }"
    tokens = lex(src)
    with pytest.raises(UnknownConstruct) as info:
        Parser(tokens).parse()
    assert info.value.token_kind == TokenKind.OP
    assert tokens[info.value.position].lexeme == "-"


def test_if_without_else_has_no_alternate():
    ast = parse_text("if (a) { b = 1 }\nc")
    assert ast.body[0].alternate is None
    assert ast.body[1] == var("c")


def test_if_blocks_span_lines():
    src = "if (a)\n{\n  print a\n  print b\n}\nelse\n{\n}\n"
    node = parse_text(src).body[0]
    assert node.consequent == (PrintNode(argument=var("a")), PrintNode(argument=var("b")))
    assert node.alternate == ()


def test_while_with_empty_body():
    ast = parse_text("while (x) { }")
    assert ast.body == (WhileNode(condition=var("x"), body=()),)


def test_while_with_body():
    ast = parse_text("while (i < 10) { print(i) i = 1 }")
    loop = ast.body[0]
    assert loop.condition.operator == "<"
    assert loop.body == (
        PrintNode(argument=var("i")),
        AssignmentNode(name="i", operator="=", value=num("1")),
    )


@pytest.mark.parametrize("op", ["=", ":"])
def test_assignment_operator_is_preserved(op):
    ast = parse_text(f"x{op}5")
    assert ast.body == (AssignmentNode(name="x", operator=op, value=num("5")),)


def test_assignment_value_is_a_single_term():
    with pytest.raises(UnknownConstruct) as info:
        parse_text("x = 1 + 2")
    assert info.value.token_kind == TokenKind.OP


def test_call_with_arguments():
    ast = parse_text("f(1, 'a', g(x), y = 2)")
    assert ast.body[0] == CallNode(
        name="f",
        arguments=(
            num("1"),
            StringLiteralNode(value="a"),
            CallNode(name="g", arguments=(var("x"),)),
            AssignmentNode(name="y", operator="=", value=num("2")),
        ),
    )


def test_call_without_arguments():
    assert parse_text("f()").body[0] == CallNode(name="f", arguments=())


def test_print_without_parentheses_takes_one_term():
    ast = parse_text("print x y")
    assert ast.body == (PrintNode(argument=var("x")), var("y"))


def test_print_without_parentheses_does_not_take_an_operator_chain():
    tokens = lex("print x+1")
    with pytest.raises(UnknownConstruct) as info:
        Parser(tokens).parse()
    assert tokens[info.value.position].lexeme == "+"


def test_print_with_parentheses_takes_an_expression():
    ast = parse_text("print (x + 1)")
    assert ast.body == (
        PrintNode(argument=BinaryExpressionNode(operator="+", left=var("x"), right=num("1"))),
    )


def test_console_log_parses_as_print():
    assert parse_text("console.log('hi')").body == (
        PrintNode(argument=StringLiteralNode(value="hi")),
    )


def test_missing_paren_close_in_condition():
    with pytest.raises(ExpectedToken) as info:
        parse_text("if (x { print(x) }")
    assert info.value.expected_kind == TokenKind.PAREN_CLOSE
    assert info.value.found == TokenKind.BRACE_OPEN
    assert "PAREN_CLOSE" in str(info.value)
    assert "BRACE_OPEN" in str(info.value)


def test_missing_brace_open_after_condition():
    with pytest.raises(ExpectedToken) as info:
        parse_text("while (x) print(x)")
    assert info.value.expected_kind == TokenKind.BRACE_OPEN
    assert info.value.found == TokenKind.KEYWORD_PRINT


def test_missing_paren_open_after_if():
    with pytest.raises(ExpectedToken) as info:
        parse_text("if x { }")
    assert info.value.expected_kind == TokenKind.PAREN_OPEN
    assert info.value.found == TokenKind.IDENTIFIER


def test_unclosed_block_reports_end_of_input():
    with pytest.raises(ExpectedToken) as info:
        parse_text("while (x) { print(x)\n")
    assert info.value.expected_kind == TokenKind.BRACE_CLOSE
    assert info.value.found is None
    assert "end of input" in str(info.value)


def test_unclosed_call_reports_end_of_input():
    with pytest.raises(ExpectedToken) as info:
        parse_text("f(1, 2")
    assert info.value.expected_kind == TokenKind.PAREN_CLOSE
    assert info.value.found is None


def test_unclosed_print_paren():
    with pytest.raises(ExpectedToken) as info:
        parse_text("print(x")
    assert info.value.expected_kind == TokenKind.PAREN_CLOSE
    assert info.value.found is None


def test_bad_else_shape():
    with pytest.raises(ExpectedToken) as info:
        parse_text("if (a) { } else print(a)")
    assert info.value.expected == (TokenKind.BRACE_OPEN, TokenKind.KEYWORD_IF)
    assert info.value.found == TokenKind.KEYWORD_PRINT


@pytest.mark.parametrize("src", ["print", "print(", "x =", "(1 +", "f(1, x ="])
def test_unexpected_end_of_input(src):
    with pytest.raises(UnexpectedEndOfInput):
        parse_text(src)


@pytest.mark.parametrize(
    "src, kind",
    [
        ("function f", TokenKind.KEYWORD_FUNCTION),
        ("return 1", TokenKind.KEYWORD_RETURN),
        ("for (i) { }", TokenKind.KEYWORD_FOR),
        ("x = 1;", TokenKind.SEMICOLON),
        ("@", TokenKind.UNRECOGNIZED),
        ("}", TokenKind.BRACE_CLOSE),
        ("else { }", TokenKind.KEYWORD_ELSE),
        ("print return", TokenKind.KEYWORD_RETURN),
    ],
)
def test_unknown_construct(src, kind):
    with pytest.raises(UnknownConstruct) as info:
        parse_text(src)
    assert info.value.token_kind == kind


def test_all_parse_errors_are_syntax_errors():
    with pytest.raises(SyntaxError):
        parse_text("@")
    assert issubclass(ParseError, SyntaxError)


def test_unknown_construct_position_skips_layout():
    tokens = lex("a\n  ;")
    with pytest.raises(UnknownConstruct) as info:
        parse(tokens)
    assert info.value.position == 3
    assert tokens[3].kind == TokenKind.SEMICOLON


def test_trace_hook_sees_every_term():
    seen = []
    parse(lex("x = 1\nprint(x)"), trace=lambda pos, tok: seen.append((pos, tok.lexeme)))
    assert [lexeme for _, lexeme in seen] == ["x", "1", "print", "x"]
    assert [pos for pos, _ in seen] == [0, 4, 6, 8]


def test_trace_hook_is_off_by_default():
    assert Parser([]).trace is None
