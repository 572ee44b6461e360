"""Checking exercises in order and showing the learner's progress."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from contextlib import AbstractContextManager

from rich.console import Console
from rich.text import Text

from . import ui
from .exercise import CompiledExercise, Exercise, ExerciseFailed, Mode

_BAR_WIDTH = 60


class VerificationFailed(Exception):
    """An exercise did not compile, did not pass or is still marked as pending."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} is not done yet")
        self.exercise = exercise


def _draw_bar(position: int, total: int, message: str) -> None:
    filled = _BAR_WIDTH if total <= 0 else min(_BAR_WIDTH, position * _BAR_WIDTH // total)
    head = ">" if filled < _BAR_WIDTH else ""
    bar = "#" * filled + head + "-" * (_BAR_WIDTH - filled - len(head))
    print(f"Progress: [{bar}] {position}/{total} {message}".rstrip(), file=sys.stderr)


def _spinner(message: str) -> AbstractContextManager:
    return Console(stderr=True, highlight=False).status(message)


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True, emoji=False)


def verify(exercises: Iterable[Exercise], progress: tuple[int, int], verbose: bool = False) -> None:
    """Check exercises in order; raise VerificationFailed at the first one not done."""
    num_done, total = progress
    position = num_done
    _draw_bar(position, total, "")
    for exercise in exercises:
        if exercise.mode is Mode.TEST:
            passed = _compile_and_test(exercise, interactive=True, verbose=verbose)
        elif exercise.mode is Mode.COMPILE:
            passed = _compile_and_run_interactively(exercise)
        else:
            passed = _compile_only(exercise)
        if not passed:
            raise VerificationFailed(exercise)
        percentage = num_done / total * 100.0 if total else float("nan")
        position += 1
        _draw_bar(position, total, f"({percentage:.1f} %)")


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run an exercise's tests without prompting."""
    _compile_and_test(exercise, interactive=False, verbose=verbose)


def _compile(exercise: Exercise, message: str) -> CompiledExercise:
    try:
        with _spinner(message):
            return exercise.compile()
    except ExerciseFailed as failure:
        ui.warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(failure.output.stderr)
        raise VerificationFailed(exercise) from failure


def _compile_only(exercise: Exercise) -> bool:
    _compile(exercise, f"Compiling {exercise}...").close()
    return _prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    with _compile(exercise, f"Compiling {exercise}...") as compiled:
        try:
            with _spinner(f"Running {exercise}..."):
                output = compiled.run()
        except ExerciseFailed as failure:
            ui.warn(f"Ran {exercise} with errors")
            print(failure.output.stdout)
            print(failure.output.stderr)
            raise VerificationFailed(exercise) from failure
    return _prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, interactive: bool, verbose: bool) -> bool:
    with _compile(exercise, f"Testing {exercise}...") as compiled:
        try:
            with _spinner(f"Testing {exercise}..."):
                output = compiled.run()
        except ExerciseFailed as failure:
            ui.warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
            print(failure.output.stdout)
            raise VerificationFailed(exercise) from failure
    if verbose:
        print(output.stdout)
    if interactive:
        return _prompt_for_completion(exercise, None)
    return True


def _prompt_for_completion(exercise: Exercise, prompt_output: str | None) -> bool:
    state = exercise.state()
    if state.done:
        return True

    if exercise.mode is Mode.COMPILE:
        ui.success(f"Successfully ran {exercise}!")
        success_msg = "The code is compiling!"
    elif exercise.mode is Mode.TEST:
        ui.success(f"Successfully tested {exercise}!")
        success_msg = "The code is compiling, and the tests pass!"
    else:
        ui.success(f"Successfully compiled {exercise}!")
        if ui.emoji_enabled():
            success_msg = "The code is compiling, and 📎 Clippy 📎 is happy!"
        else:
            success_msg = "The code is compiling, and Clippy is happy!"

    console = _console()
    separator = Text("====================", style="bold")
    console.print()
    if ui.emoji_enabled():
        console.print(Text(f"🎉 🎉  {success_msg} 🎉 🎉"))
    else:
        console.print(Text(f"~*~ {success_msg} ~*~"))
    console.print()

    if prompt_output is not None:
        console.print(Text("Output:"))
        console.print(separator)
        console.print(Text(prompt_output))
        console.print(separator)
        console.print()

    console.print(Text("You can keep working on this exercise,"))
    console.print(
        Text.assemble(
            "or jump into the next one by removing the ",
            ("`I AM NOT DONE`", "bold"),
            " comment:",
        )
    )
    console.print()
    for context_line in state.context:
        console.print(
            Text.assemble(
                (f"{context_line.number:>2}", "bold blue"),
                " ",
                ("|", "blue"),
                "  ",
                (context_line.line, "bold" if context_line.important else ""),
            )
        )
    return False