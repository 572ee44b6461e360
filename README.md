# ferrule

`ferrule` is a library for working through a course of small programming
exercises. Each exercise is a source file that does not yet compile, or whose
tests do not yet pass. `ferrule` compiles it, runs it or its tests, and tells
you whether you can move on.

An exercise counts as unfinished while its file still holds the marker comment

```
// I AM NOT DONE
```

Once the exercise compiles and runs (or its tests pass, or the linter is
happy), delete that line to move on.

## Installing

```
pip install .
```

Checking exercises drives the exercise toolchain (`rustc`, and `cargo` for
lint exercises), so that must be on your `PATH`.

## The exercise list

A course directory holds an `info.toml` listing the exercises in order, each
with a `name`, a `path`, a `mode` (`compile`, `test` or `clippy`) and a `hint`.

```python
from ferrule.exercise import read_exercises

exercises = read_exercises("info.toml")
```

`load_exercises(text)` does the same for TOML text already in memory. A
missing field raises `ValueError`.

## Exercises

`ferrule.exercise.Exercise` has `name`, `path`, `mode` (a `Mode`) and `hint`.

- `state()` reads the file and returns a `State`. Its `done` property is true
  when the marker is gone; otherwise `context` holds `ContextLine`s (`line`,
  `number`, `important`) for the marker line and up to two lines either side.
- `looks_done()` is a shortcut for `state().done`.
- `compile()` builds the exercise and returns a `CompiledExercise`; on failure
  it raises `ExerciseFailed`, whose `output` is an `ExerciseOutput` with the
  compiler's `stdout` and `stderr`.

A `CompiledExercise` is a context manager: leaving it (or calling `close()`)
removes the built binary. `run()` returns the program's `ExerciseOutput`, or
raises `ExerciseFailed` when it exits unsuccessfully. Test exercises are run
with `--show-output`.

## Verifying a course

```python
from ferrule.exercise import read_exercises
from ferrule.verify import VerificationFailed, verify

exercises = read_exercises("info.toml")
try:
    verify(exercises, (0, len(exercises)))
except VerificationFailed as failure:
    print(failure.exercise.hint)
```

`verify(exercises, progress, verbose)` checks the exercises in order, drawing
a progress bar on standard error. It raises `VerificationFailed` at the first
exercise that does not compile, does not pass, or still carries the marker.
For such a pending exercise it prints a success message and the lines around
the marker. With `verbose`, the output of test exercises is printed.

`test(exercise, verbose)` compiles and runs one test exercise without looking
at the marker.

## Editor support

`ferrule.project.RustAnalyzerProject` builds a `rust-project.json`:

```python
from ferrule.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.get_sysroot_src()      # asks `rustc --print sysroot`
project.exercises_to_json()    # one Crate per .rs file below exercises/
project.write_to_disk()        # writes ./rust-project.json
```

`to_json()` returns the same text without writing it.

## Messages

`ferrule.ui.warn(message)` and `ferrule.ui.success(message)` print a red or
green status line and return its plain text. Set the environment variable
`NO_EMOJI` to replace emoji with plain characters; `emoji_enabled()` reports
which is in effect.

## Worked solutions

The `ferrule.lessons` package holds worked solutions to course topics, each
covered by its own tests: `basics`, `enums`, `errors`, `iterators`,
`containers`, `threads`, `hashmaps`, `structs`, `traits` and `quizzes`.

## What it does not do

`ferrule` has no command-line program. There is no watch mode that re-checks
exercises when files change, no command to run, reset, list or show the hint
of a single exercise, and no welcome screen; use the library functions above
from your own code. The lessons do not cover type conversions.

## Running the tests

```
pip install ".[test]"
pytest
```