import pytest

from tourbot.blackboard import BlackboardComponent, field_key


def test_field_key_prefix():
    assert field_key(3) == "PoiDone3"


def test_set_then_get():
    board = BlackboardComponent()
    board.set_int(1, 42)
    assert board.get_int(1) == 42


def test_overwrite():
    board = BlackboardComponent()
    board.set_int(2, 5)
    board.set_int(2, 9)
    assert board.get_int(2) == 9


def test_fields_are_independent():
    board = BlackboardComponent()
    board.set_int(1, 10)
    board.set_int(2, 20)
    assert (board.get_int(1), board.get_int(2)) == (10, 20)


def test_missing_field():
    board = BlackboardComponent()
    with pytest.raises(KeyError):
        board.get_int(7)


def test_empty_name_is_rejected():
    board = BlackboardComponent()
    board.set_int("", 4)
    with pytest.raises(KeyError):
        board.get_int("")