"""
Key code names accepted by --keycode.

Names are the upper-case spelling of the keys the pyautogui backend can
press. The table is declared statically so option parsing and help output
never need to import the backend.
"""

import string

NAMED_KEYS = (
    "ACCEPT", "ADD", "ALT", "ALTLEFT", "ALTRIGHT", "APPS", "BACKSPACE",
    "BROWSERBACK", "BROWSERFAVORITES", "BROWSERFORWARD", "BROWSERHOME",
    "BROWSERREFRESH", "BROWSERSEARCH", "BROWSERSTOP", "CAPSLOCK", "CLEAR",
    "COMMAND", "CONVERT", "CTRL", "CTRLLEFT", "CTRLRIGHT", "DECIMAL", "DEL",
    "DELETE", "DIVIDE", "DOWN", "END", "ENTER", "ESC", "ESCAPE", "EXECUTE",
    "FINAL", "FN", "HANGUEL", "HANGUL", "HANJA", "HELP", "HOME", "INSERT",
    "JUNJA", "KANA", "KANJI", "LAUNCHAPP1", "LAUNCHAPP2", "LAUNCHMAIL",
    "LAUNCHMEDIASELECT", "LEFT", "MODECHANGE", "MULTIPLY", "NEXTTRACK",
    "NONCONVERT", "NUMLOCK", "OPTION", "OPTIONLEFT", "OPTIONRIGHT",
    "PAGEDOWN", "PAGEUP", "PAUSE", "PGDN", "PGUP", "PLAYPAUSE", "PREVTRACK",
    "PRINT", "PRINTSCREEN", "PRNTSCRN", "PRTSC", "PRTSCR", "RETURN", "RIGHT",
    "SCROLLLOCK", "SELECT", "SEPARATOR", "SHIFT", "SHIFTLEFT", "SHIFTRIGHT",
    "SLEEP", "SPACE", "STOP", "SUBTRACT", "TAB", "UP", "VOLUMEDOWN",
    "VOLUMEMUTE", "VOLUMEUP", "WIN", "WINLEFT", "WINRIGHT", "YEN",
)

FUNCTION_KEYS = tuple(f"F{n}" for n in range(1, 25))
NUMPAD_KEYS = tuple(f"NUM{n}" for n in range(10))

KEY_NAMES = (
    tuple(string.ascii_uppercase)
    + tuple(string.digits)
    + FUNCTION_KEYS
    + NUMPAD_KEYS
    + NAMED_KEYS
)
_KEY_SET = frozenset(KEY_NAMES)


def lookup_key(name: str) -> str:
    """Return the canonical key code name, raising KeyError if unknown"""
    canonical = name.strip().upper()
    if canonical not in _KEY_SET:
        raise KeyError(f"Requested value '{name}' is not a known key code name.")
    return canonical
