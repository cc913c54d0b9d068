import pytest
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from app.config import MENU_OPTIONS
from ui.menu import Selector

ITEMS = [mode.label for mode in MENU_OPTIONS]


def pick(keys, default=0):
    with create_pipe_input() as inp:
        inp.send_text(keys)
        sel = Selector("Please select a game type", ITEMS, default=default, input=inp, output=DummyOutput())
        return sel.interact()


def test_enter_picks_default():
    assert pick("\r") == 0
    assert pick("\r", default=2) == 2


def test_arrows_move():
    assert pick("\x1b[B\x1b[B\r") == 2
    assert pick("\x1b[B\x1b[A\r") == 0


def test_vim_keys_and_clamping():
    assert pick("jjjjjjj\r") == 3
    assert pick("kkk\r") == 0


@pytest.mark.parametrize("keys", ["q", "\x03"])
def test_cancel(keys):
    assert pick(keys) is None


def test_default_is_clamped():
    assert Selector("p", ITEMS, default=99).default == 3


def test_needs_items():
    with pytest.raises(ValueError):
        Selector("p", [])


def test_render_marks_active_item():
    sel = Selector("Pick", ["one", "two"])
    text = "".join(t for _, t in sel.render(1))
    assert text == "Pick\n  one\n> two\n"
