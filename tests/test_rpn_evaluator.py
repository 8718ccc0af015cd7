import logging

import pytest

from rpn import (
    EmptySequenceError, InvalidOperatorError, InvalidSequenceError, Operand, Operator,
    RPNEvaluator, RPNError, calculate, evaluate, parse
)


@pytest.mark.parametrize("seq, expected", [
    ("1 2 +", 3),
    ("1 2 -", -1),
    ("1 2 + 3 *", 9),
    ("1 2 + 3 * 5 - 2 /", 2),
    ("10 4 /", 2),
    ("5 1 2 + 4 * + 3 -", 14),
    ("-3 4 *", -12),
])
def test_calculate(seq, expected):
    assert calculate(seq) == expected


def test_result_is_python_int():
    assert type(calculate("1 2 +")) is int


def test_integer_division_of_smaller_by_larger():
    assert evaluate(parse("2 3 /")) == 0


def test_operator_before_operands():
    with pytest.raises(InvalidSequenceError):
        calculate("+ 1 2")


def test_operator_with_single_operand():
    with pytest.raises(InvalidSequenceError):
        evaluate([Operand(1), Operator("*")])


def test_unknown_operator_names_symbol():
    with pytest.raises(InvalidOperatorError) as excinfo:
        calculate("1 2 ?")
    assert excinfo.value.symbol == "?"
    assert "?" in str(excinfo.value)


def test_unknown_operator_checked_before_stack_depth():
    with pytest.raises(InvalidOperatorError):
        calculate("? 1 2")


def test_double_space_surfaces_as_invalid_operator():
    with pytest.raises(InvalidOperatorError) as excinfo:
        calculate("1  2 +")
    assert excinfo.value.symbol == ""


@pytest.mark.parametrize("seq, expected", [
    ("1 2", 2),
    ("1 2 3 +", 5),
    ("4 1 2 + 7", 7),
])
def test_surplus_operands_return_most_recent(seq, expected):
    assert calculate(seq) == expected


def test_surplus_operands_logged(caplog):
    caplog.set_level(logging.DEBUG, logger="rpn.rpn_evaluator")
    calculate("1 2 3")
    assert "Ignoring 2 extra stack elements" in caplog.text


def test_empty_sequence():
    with pytest.raises(EmptySequenceError):
        evaluate([])
    with pytest.raises(EmptySequenceError):
        calculate()


def test_empty_sequence_allowed():
    assert evaluate([], allow_empty=True) is None
    assert calculate("", allow_empty=True) is None


def test_errors_share_base_class():
    for seq in ["+", "1 ?", ""]:
        with pytest.raises(RPNError):
            calculate(seq)


def test_static_entry_point_matches_function():
    tokens = parse("3 4 *")
    assert RPNEvaluator.evaluate(tokens) == evaluate(tokens) == 12


def test_evaluate_does_not_consume_tokens():
    tokens = parse("6 2 /")
    assert evaluate(tokens) == 3
    assert evaluate(tokens) == 3
    assert len(tokens) == 3


def test_handle_token_pushes_operand():
    assert RPNEvaluator.handle_token(Operand(1), []) == [1]
    assert RPNEvaluator.handle_token(Operand(2), [1]) == [1, 2]


def test_handle_token_reduces_top_two():
    assert RPNEvaluator.handle_token(Operator("+"), [1, 2]) == [3]
    assert RPNEvaluator.handle_token(Operator("-"), [7, 1, 2]) == [7, -1]


def test_handle_token_modifies_stack_in_place():
    stack = [6, 3]
    assert RPNEvaluator.handle_token(Operator("/"), stack) is stack
    assert stack == [2]


@pytest.mark.parametrize("stack", [[], [1]])
def test_handle_token_insufficient_operands(stack):
    with pytest.raises(InvalidSequenceError):
        RPNEvaluator.handle_token(Operator("+"), stack)
    assert len(stack) < 2


def test_handle_token_unknown_operator():
    with pytest.raises(InvalidOperatorError):
        RPNEvaluator.handle_token(Operator("?"), [1, 2])
