"""Line-based terminal input and output."""
import sys

# Matches CPython's default int string conversion limit.
MAX_DIGITS = 4300


class Console:
    def __init__(self, input_fn=input, output=None):
        self._input = input_fn
        self._output = output if output is not None else sys.stdout

    def say(self, text: str = "") -> None:
        print(text, file=self._output)

    def read_text(self, prompt: str) -> str:
        return self._input(prompt).strip()

    def read_number(self, prompt: str) -> int | None:
        """Read a non-negative integer. None means the line was not one."""
        raw = self.read_text(prompt)
        if not raw.isascii() or not raw.isdigit() or len(raw) > MAX_DIGITS:
            return None
        return int(raw)

    def pause(self) -> None:
        self.say()
        self._input("Press Enter to go back to the main menu...")
