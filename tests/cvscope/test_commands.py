import pytest

from cvscope import constants
from cvscope.core import DEFAULT_KEYMAP, Command, translate_key


@pytest.mark.parametrize(
    "key, command",
    [
        (ord("z"), Command.CYCLE_PREV),
        (ord("x"), Command.CYCLE_NEXT),
        (ord("p"), Command.EMIT_PRIMARY_CODE),
        (ord("g"), Command.EMIT_SECONDARY_CODE),
        (32, Command.TOGGLE_PAUSE),
        (27, Command.TERMINATE),
        (ord("q"), Command.TERMINATE),
    ],
)
def test_default_keymap(key, command):
    assert translate_key(key) is command


def test_no_key_translates_to_none():
    assert translate_key(constants.NO_KEY) is None


def test_unmapped_key_translates_to_none():
    assert translate_key(ord("a")) is None


def test_modifier_bits_are_masked():
    assert translate_key(0x100000 | constants.KEY_ESC) is Command.TERMINATE


def test_custom_keymap():
    keymap = {ord("n"): Command.CYCLE_NEXT}
    assert translate_key(ord("n"), keymap) is Command.CYCLE_NEXT
    assert translate_key(ord("x"), keymap) is None


def test_default_keymap_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_KEYMAP[ord("a")] = Command.TERMINATE  # type: ignore[index]
