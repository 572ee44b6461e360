"""Exercises: their description, completion state and compilation."""

from __future__ import annotations

import contextlib
import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path

from . import ui

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = Path("./exercises/clippy/Cargo.toml")


def temp_file() -> str:
    """Return a path for the compiled binary, unique per process and thread."""
    return f"./temp_{os.getpid()}_ThreadId{threading.get_ident()}"


def _clean() -> None:
    with contextlib.suppress(OSError):
        os.remove(temp_file())


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the pending marker."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Completion state; pending exercises carry the lines around the marker."""

    context: tuple[ContextLine, ...] = ()

    @property
    def done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a compiler or of a compiled exercise."""

    stdout: str
    stderr: str


class ExerciseFailed(Exception):
    """Compiling or running an exercise did not succeed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr or output.stdout or "exercise failed")
        self.output = output


def _output(proc: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=(proc.stdout or b"").decode("utf-8", "replace"),
        stderr=(proc.stderr or b"").decode("utf-8", "replace"),
    )


def _source_lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


@dataclass
class Exercise:
    """One exercise as listed in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def __str__(self) -> str:
        return str(self.path)

    def compile(self) -> CompiledExercise:
        """Compile the exercise; raise ExerciseFailed with the compiler output on failure."""
        source = str(self.path)
        target = temp_file()
        if self.mode is Mode.COMPILE:
            proc = subprocess.run(
                ["rustc", source, "-o", target, *RUSTC_COLOR_ARGS], capture_output=True
            )
        elif self.mode is Mode.TEST:
            proc = subprocess.run(
                ["rustc", "--test", source, "-o", target, *RUSTC_COLOR_ARGS],
                capture_output=True,
            )
        else:
            proc = self._clippy(source, target)

        if proc.returncode == 0:
            return CompiledExercise(self)
        _clean()
        raise ExerciseFailed(_output(proc))

    def _clippy(self, source: str, target: str) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        if ui.emoji_enabled():
            message = "Failed to write 📎 Clippy 📎 Cargo.toml file."
        else:
            message = "Failed to write Clippy Cargo.toml file."
        try:
            CLIPPY_CARGO_TOML_PATH.write_text(cargo_toml, encoding="utf-8")
        except OSError as err:
            raise OSError(message) from err
        # A binary is built as well so that clippy exercises can be run.
        subprocess.run(["rustc", source, "-o", target, *RUSTC_COLOR_ARGS], capture_output=True)
        # Clippy only reports every lint after a clean build.
        manifest = str(CLIPPY_CARGO_TOML_PATH)
        subprocess.run(
            ["cargo", "clean", "--manifest-path", manifest, *RUSTC_COLOR_ARGS],
            capture_output=True,
        )
        return subprocess.run(
            [
                "cargo", "clippy", "--manifest-path", manifest, *RUSTC_COLOR_ARGS,
                "--", "-D", "warnings", "-D", "clippy::float_cmp",
            ],
            capture_output=True,
        )

    def state(self) -> State:
        """Inspect the source for the pending marker."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()
        lines = _source_lines(source)
        matched = next(
            (index for index, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)),
            None,
        )
        if matched is None:
            raise RuntimeError(f"pending marker in {self} does not sit on a single line")
        first = max(matched - CONTEXT, 0)
        last = matched + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=index + 1, important=index == matched)
                for index, line in enumerate(lines[first : last + 1], start=first)
            )
        )

    def looks_done(self) -> bool:
        """Whether the pending marker has been removed."""
        return self.state().done


class CompiledExercise:
    """A compiled exercise; closing it removes the built binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise

    def run(self) -> ExerciseOutput:
        """Run the binary; raise ExerciseFailed when it exits unsuccessfully."""
        arg = "--show-output" if self.exercise.mode is Mode.TEST else ""
        proc = subprocess.run([temp_file(), arg], capture_output=True)
        output = _output(proc)
        if proc.returncode != 0:
            raise ExerciseFailed(output)
        return output

    def close(self) -> None:
        _clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *args) -> None:
        self.close()


def load_exercises(text: str) -> list[Exercise]:
    """Parse the exercise list from info.toml text."""
    data = tomllib.loads(text)
    entries = data.get("exercises")
    if not isinstance(entries, list):
        raise ValueError("missing field `exercises`")
    exercises = []
    for entry in entries:
        try:
            exercises.append(
                Exercise(
                    name=entry["name"],
                    path=Path(entry["path"]),
                    mode=Mode(entry["mode"]),
                    hint=entry["hint"],
                )
            )
        except KeyError as err:
            raise ValueError(f"missing field `{err.args[0]}`") from err
    return exercises


def read_exercises(path: str | os.PathLike) -> list[Exercise]:
    """Read and parse an info.toml file."""
    return load_exercises(Path(path).read_text(encoding="utf-8"))