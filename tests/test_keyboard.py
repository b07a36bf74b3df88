import pytest

from pearlos.keyboard import Keyboard

KEY_A = 0x1E
KEY_C = 0x2E
KEY_7 = 0x08
LEFT_SHIFT = 0x2A
LEFT_CTRL = 0x1D
LEFT_ALT = 0x38
CAPS_LOCK = 0x3A
NUM_LOCK = 0x45
KEYPAD_7 = 0x47
KEYPAD_6 = 0x4D
KEYPAD_5 = 0x4C
RELEASE = 0x80
EXTENDED = 0xE0


def _press_and_release(keyboard, code):
    keyboard.feed(code)
    keyboard.feed(code | RELEASE)


def test_plain_letter():
    assert Keyboard().feed(KEY_A) == "a"


def test_held_key_reports_once():
    keyboard = Keyboard()
    first = keyboard.feed(KEY_A)
    assert keyboard.feed(KEY_A) is None
    assert keyboard.feed(KEY_A) is None
    assert first == Keyboard().feed(KEY_A)


def test_release_then_press_reports_again():
    keyboard = Keyboard()
    first = keyboard.feed(KEY_A)
    assert keyboard.feed(KEY_A | RELEASE) is None
    assert keyboard.feed(KEY_A) == first


def test_shift_gives_uppercase():
    plain = Keyboard().feed(KEY_A)
    keyboard = Keyboard()
    assert keyboard.feed(LEFT_SHIFT) is None
    assert keyboard.feed(KEY_A) == plain.upper()


def test_shift_release_restores_lowercase():
    plain = Keyboard().feed(KEY_A)
    keyboard = Keyboard()
    keyboard.feed(LEFT_SHIFT)
    keyboard.feed(KEY_A)
    keyboard.feed(KEY_A | RELEASE)
    keyboard.feed(LEFT_SHIFT | RELEASE)
    assert keyboard.feed(KEY_A) == plain


def test_caps_lock_uppercases_and_shift_inverts():
    plain = Keyboard().feed(KEY_A)
    keyboard = Keyboard()
    _press_and_release(keyboard, CAPS_LOCK)
    assert keyboard.feed(KEY_A) == plain.upper()
    keyboard.feed(KEY_A | RELEASE)
    keyboard.feed(LEFT_SHIFT)
    assert keyboard.feed(KEY_A) == plain


def test_control_gives_ascii_control_code():
    keyboard = Keyboard()
    keyboard.feed(LEFT_CTRL)
    assert keyboard.feed(KEY_C) == "\x03"


def test_num_lock_toggles_led_and_back():
    keyboard = Keyboard()
    before = keyboard.led_state()
    _press_and_release(keyboard, NUM_LOCK)
    after = keyboard.led_state()
    assert before ^ after == 2
    _press_and_release(keyboard, NUM_LOCK)
    assert keyboard.led_state() == before


def test_caps_lock_led_bit_is_independent_of_num_lock():
    keyboard = Keyboard()
    before = keyboard.led_state()
    _press_and_release(keyboard, CAPS_LOCK)
    _press_and_release(keyboard, NUM_LOCK)
    _press_and_release(keyboard, NUM_LOCK)
    _press_and_release(keyboard, CAPS_LOCK)
    assert keyboard.led_state() == before


def test_keypad_with_num_lock_gives_digit():
    assert Keyboard().feed(KEYPAD_7) == Keyboard().feed(KEY_7)


def test_keypad_without_num_lock_acts_as_extended_key():
    extended = Keyboard()
    extended.feed(EXTENDED)
    expected = extended.feed(KEYPAD_7)
    keyboard = Keyboard()
    _press_and_release(keyboard, NUM_LOCK)
    assert keyboard.feed(KEYPAD_7) == expected


def test_key_down_tracking():
    keyboard = Keyboard()
    keyboard.feed(KEY_A)
    assert keyboard.is_down(KEY_A) is True
    keyboard.feed(KEY_A | RELEASE)
    assert keyboard.is_down(KEY_A) is False


def test_extended_key_down_tracking():
    keyboard = Keyboard()
    keyboard.feed(EXTENDED)
    keyboard.feed(KEYPAD_7)
    assert keyboard.is_down(KEYPAD_7, extended=True) is True
    assert keyboard.is_down(KEYPAD_7) is False


def test_right_alt_keypad_code_produces_character():
    keyboard = Keyboard()
    keyboard.feed(EXTENDED)
    keyboard.feed(LEFT_ALT)
    assert keyboard.feed(KEYPAD_6) is None
    assert keyboard.feed(KEYPAD_5) is None
    keyboard.feed(KEYPAD_6 | RELEASE)
    keyboard.feed(KEYPAD_5 | RELEASE)
    keyboard.feed(EXTENDED)
    assert keyboard.feed(LEFT_ALT | RELEASE) == chr(int("65"))
    assert keyboard.alt_char is True


def test_scan_code_out_of_range():
    with pytest.raises(ValueError):
        Keyboard().feed(256)
    with pytest.raises(ValueError):
        Keyboard().feed(-1)