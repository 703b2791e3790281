"""
Input injection: the two synthetic events the idle loop sends.

The loop never calls an injector directly. It goes through emit_move and
emit_key_press, which turn any backend failure into an EmissionResult.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EmissionResult:
    """Outcome of a single emission attempt"""

    ok: bool
    message: str

    @classmethod
    def success(cls, message: str) -> "EmissionResult":
        return cls(True, message)

    @classmethod
    def failure(cls, message: str) -> "EmissionResult":
        return cls(False, message)


class InputInjector:
    """Interface for anything that can move the cursor and press keys"""

    def move_cursor_by(self, dx: int, dy: int):
        raise NotImplementedError

    def press_key(self, key_code: str):
        raise NotImplementedError


class PyAutoGuiInjector(InputInjector):
    """Sends events through pyautogui"""

    def __init__(self):
        # Imported here: pyautogui needs a display as soon as it is imported.
        import pyautogui

        # Flinging the cursor to a corner makes every emission fail.
        pyautogui.FAILSAFE = True
        self._pyautogui = pyautogui

    def move_cursor_by(self, dx: int, dy: int):
        self._pyautogui.move(dx, dy)

    def press_key(self, key_code: str):
        self._pyautogui.press(key_code.lower())


def _describe(exc: Exception) -> str:
    text = str(exc)
    return text if text else type(exc).__name__


def emit_move(injector: InputInjector, dx: int = 0, dy: int = 0) -> EmissionResult:
    """Move the cursor by (dx, dy), reporting failure instead of raising"""
    try:
        injector.move_cursor_by(dx, dy)
    except Exception as exc:
        return EmissionResult.failure(_describe(exc))
    return EmissionResult.success(f"Sent mouse move by ({dx}, {dy}).")


def emit_key_press(injector: InputInjector, key_code: str) -> EmissionResult:
    """Press key_code once, reporting failure instead of raising"""
    try:
        injector.press_key(key_code)
    except Exception as exc:
        return EmissionResult.failure(_describe(exc))
    return EmissionResult.success(f"Sent key press on {key_code}.")
