'''
Input box model tests
'''

from calcinput.inputs import Input, calc_input, numeric_input
from calcinput.notifier import Event
from calcinput.result import InvalidValue, NoValue, Value

from pytest import fixture, raises


@fixture
def events():
    return []


def watch(box, events):
    for event in Event:
        box.subscribe(event,
                      lambda detail, event=event: events.append((event,
                                                                 detail)))
    return box


def test_calc_input(events):
    box = watch(calc_input(), events)
    box.text = '2*(3+4)'
    assert box.value == 14
    assert box.is_valid
    assert events == [
        (Event.VALUE_CHANGED, Value(14)),
        (Event.IS_VALID_CHANGED, True),
        (Event.TEXT_CHANGED, '2*(3+4)'),
    ]


def test_same_text_no_change_signal(events):
    box = watch(calc_input(), events)
    box.text = '1+1'
    del events[:]
    box.text = '1+1'
    assert box.result == Value(2)
    assert events == [(Event.TEXT_CHANGED, '1+1')]


def test_different_text_same_value(events):
    box = watch(calc_input(), events)
    box.text = '1+1'
    del events[:]
    box.text = '4/2'
    assert events == [(Event.TEXT_CHANGED, '4/2')]


def test_invalid_then_empty(events):
    box = watch(calc_input(), events)
    box.text = '5/0'
    assert box.value is None
    assert box.result == InvalidValue()
    assert not box.is_valid
    assert events == [(Event.VALUE_CHANGED, InvalidValue()),
                      (Event.TEXT_CHANGED, '5/0')]
    del events[:]
    box.text = ''
    assert box.result == NoValue()
    assert events == [(Event.VALUE_CHANGED, NoValue()),
                      (Event.TEXT_CHANGED, '')]


def test_numeric_input():
    box = numeric_input()
    box.text = '1e3'
    assert box.value == 1000
    box.text = '2+3'
    assert box.result == InvalidValue('Invalid number "2+3"')
    box.text = 'inf'
    assert box.result == InvalidValue()
    box.text = ''
    assert box.result == NoValue()


def test_set_value(events):
    box = watch(numeric_input(), events)
    box.value = 2.5
    assert box.text == '2.5'
    del events[:]
    box.value = 2.5
    assert events == []
    with raises(TypeError):
        box.value = '3'


def test_custom_interpreter():
    class Upper:
        def interpret(self, text):
            return Value(len(text)) if text.isupper() else InvalidValue()

    box = Input(Upper())
    box.text = 'ABC'
    assert box.value == 3


def test_border_class():
    box = calc_input()
    assert box.border_class is None
    box.focus()
    assert box.border_class == Input.FOCUS_CLASS
    box.text = '2+'
    assert box.border_class == Input.FOCUS_INVALID_CLASS
    box.blur()
    assert box.border_class == Input.INVALID_CLASS
    box.text = '2'
    assert box.border_class is None
    box.text = ''
    box.focus()
    assert box.border_class == Input.FOCUS_CLASS


def test_destroy(events):
    box = watch(calc_input(), events)
    box.destroy()
    box.text = '1'
    assert events == []
    assert box.value == 1


def test_new_message_same_invalid_no_change_signal(events):
    box = watch(calc_input(), events)
    box.text = '(2'
    del events[:]
    box.text = '2)'
    assert box.result == InvalidValue('")" has no matching "("')
    assert events == [(Event.TEXT_CHANGED, '2)')]


def test_set_value_rejects_bool():
    box = numeric_input()
    with raises(TypeError):
        box.value = True
    assert box.text == ''
    assert box.result == NoValue()
