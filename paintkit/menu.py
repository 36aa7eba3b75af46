"""Text menus shown in the terminal before and while the editor runs."""

from __future__ import annotations

import os
import re
import subprocess
from collections.abc import Callable
from pathlib import Path

from paintkit.drawings import DEFAULT_DIRECTORY, list_drawings, load_drawing
from paintkit.shape import Shape
from paintkit.storage import ShapeStack

Reader = Callable[[str], str]
Writer = Callable[[str], object]

_RULE = "############################################"
_INVALID = "Invalid option. Try again."
_PROMPT = "Choose an option: "
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_BINDINGS = (
    "Press 'p' to create a point.",
    "Press 'l' to create a line segment.",
    "Press 'k' to start free drawing.",
    "Press 'j' to start free drawing with a filled shape.",
    "Press 't' to translate a shape.",
    "Press 'r' to rotate a shape.",
    "Press 'e' to scale a shape.",
    "Press 'i' to reflect a shape.",
    "Press 'z' to shear a shape.",
    "Press 'c' to choose the colour of the selected shape.",
    "Press 's' to select a shape.",
    "Press 'x' to delete the selected shape.",
    "Press 'd' to save the current drawing.",
    "Press 'a' to animate the drawing.",
)


def clear_screen() -> None:
    """Clear the terminal with the system's own command."""
    try:
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        pass


def _leading_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def start_menu(read: Reader = input, write: Writer = print) -> int:
    """Show the start menu and return the chosen option, 1 to 4."""
    clear_screen()
    write("Welcome to Paint 2025 updated Premium!")
    write(_RULE)
    write("Press '1' to start free drawing mode")
    write("Press '2' to load a saved drawing")
    write("Press '3' to quit.")
    write("Press '4' for keyboard shortcut tips.")
    write(_RULE)
    while True:
        choice = _leading_int(read(_PROMPT))
        if choice is not None and 1 <= choice <= 4:
            return choice
        write(_INVALID)


def keybinds_menu(read: Reader = input, write: Writer = print) -> None:
    """Show the editor's shortcuts until the user answers 'q'."""
    clear_screen()
    write("Controls inside the program:")
    write(_RULE)
    for line in _BINDINGS:
        write(line)
    write(_RULE)
    write("Press 'q' to go back to the start.")
    write(_RULE)
    while True:
        answer = read(_PROMPT).strip()
        if not answer:
            continue
        if answer[0] == "q":
            return
        write(_INVALID)


def drawings_menu(
    stack: ShapeStack,
    directory: str | Path = DEFAULT_DIRECTORY,
    read: Reader = input,
    write: Writer = print,
) -> list[Shape]:
    """List saved drawings and load the one chosen onto ``stack``.

    Choosing 0 or anything out of range loads nothing, leaving a blank canvas.
    Returns the shapes that were loaded.
    """
    clear_screen()
    drawings = list_drawings(directory)
    for number, path in enumerate(drawings, start=1):
        write(f"{number}: {path}")

    if not drawings:
        write("")
        write("No saved drawings.")
        read("Press ENTER to return to the menu...")
        return []

    write("")
    choice = _leading_int(read("Choose a drawing to load: "))
    if choice is None or not 1 <= choice <= len(drawings):
        return []
    loaded = load_drawing(stack, drawings[choice - 1])
    write("Drawing loaded!")
    return loaded


def program_help(write: Writer = print) -> None:
    """Show the controls available while drawing."""
    clear_screen()
    write("Controls inside the program:")
    write(_RULE)
    for line in _BINDINGS:
        write(line)
    write("Press 'q' to close.")
    write(_RULE)