import pytest

from ferrule.lessons.modules_macros import favorite_snacks, hello, make_sausage, my_macro


def test_my_macro_world():
    assert hello("world!") == "Hello world!"


def test_my_macro_goodbye():
    assert hello("goodbye!") == "Hello goodbye!"


def test_make_sausage(capsys):
    make_sausage()
    assert capsys.readouterr().out == "sausage!\n"


def test_favorite_snacks():
    assert favorite_snacks() == "favorite snacks: Pear and Cucumber"


def test_my_macro_without_argument(capsys):
    my_macro()
    assert capsys.readouterr().out == "Check out my macro!\n"


def test_my_macro_with_argument(capsys):
    my_macro(7777)
    assert capsys.readouterr().out == "Look at this other macro: 7777\n"


def test_my_macro_too_many_arguments():
    with pytest.raises(TypeError):
        my_macro(1, 2)