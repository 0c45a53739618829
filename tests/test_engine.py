'''
Engine tests
'''

import math

from calcinput.engine import Engine, evaluate
from calcinput.result import InvalidValue, NoValue, Value

from pytest import mark


@mark.parametrize('text, expected', [
    ('2+3', 5),
    ('2*3+4', 10),
    ('2*(3+4)', 14),
    ('-5+2', -3),
    ('-(2+3)', -5),
    ('+5', 5),
    ('2 + 3', 5),
    ('10/4', 2.5),
    ('1-1', 0),
    ('-2*(3+4)+5/5', -13),
    ('((2))', 2),
    ('.5+1.', 1.5),
])
def test_values(text, expected):
    assert evaluate(text) == Value(expected)


def test_whitespace_insensitive():
    assert evaluate('2 + 3') == evaluate('2+3')


def test_empty_is_no_value():
    result = evaluate('')
    assert result == NoValue()
    assert result != InvalidValue()
    assert result != Value(0)


def test_zero_is_a_value():
    assert evaluate('0') == Value(0)
    assert evaluate('0') != NoValue()


@mark.parametrize('text', ['5/0', '-5/0', '0/0', '1' * 400])
def test_non_finite_has_no_message(text, engine):
    assert engine.set_text(text) == InvalidValue()
    assert engine.message is None


@mark.parametrize('text', ['2++', '(2+3', '2+3)', '2#3', '1.2.3', '*2',
                           '2*-3', '1 2', '()', '   '])
def test_malformed_has_message(text, engine):
    result = engine.set_text(text)
    assert isinstance(result, InvalidValue)
    assert result.message
    assert engine.message == result.message


def test_current_result_tracks_last_text(engine):
    assert engine.current_result() == NoValue()
    engine.set_text('2+2')
    assert engine.current_result() == Value(4)
    assert engine.text == '2+2'
    engine.set_text('2+')
    assert isinstance(engine.current_result(), InvalidValue)
    engine.set_text('')
    assert engine.current_result() == NoValue()
    assert engine.message is None


def test_same_text_same_result(engine):
    assert engine.set_text('7*6') == engine.set_text('7*6') == Value(42)


def test_initial_text():
    assert Engine('1+1').current_result() == Value(2)


def test_engines_independent():
    a, b = Engine(), Engine()
    a.set_text('1')
    b.set_text('2#')
    assert a.current_result() == Value(1)
    assert math.isclose(evaluate('0.1+0.2').value, 0.3)
