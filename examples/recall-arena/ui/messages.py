"""English strings for status signals and labels."""
from __future__ import annotations

from typing import Any

from tick_recall import Status

LABEL_HOW_MANY = "How many buttons to create?"
PLACEHOLDER_RANGE = "3 - 7"
BTN_GO = "Go!"
TITLE = "Memory Scramble"


def _plural(word: str, n: int) -> str:
    return word if n == 1 else f"{word}s"


def format_status(signal: str, data: dict[str, Any]) -> str:
    """Render a status signal for the status line."""
    if signal == Status.READY:
        return "Enter a number and press Go to start."
    if signal == Status.INVALID_COUNT:
        return "Please enter a whole number between 3 and 7."
    if signal == Status.MEMORIZE:
        secs = int(data["seconds"])
        return (
            f"Memorize the order! Scrambling starts in {secs} "
            f"{_plural('second', secs)}..."
        )
    if signal == Status.SCRAMBLE:
        return f"Scramble {data['step']} of {data['total']}..."
    if signal == Status.RECALL:
        return "Now click the buttons in the original order."
    if signal == Status.SUCCESS:
        return "Excellent memory!"
    if signal == Status.WRONG_ORDER:
        return "Wrong order! Revealing the correct sequence..."
    return signal
