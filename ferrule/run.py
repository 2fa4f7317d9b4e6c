"""Running a single exercise outside the guided sequence."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console

from .exercise import Exercise, ExerciseFailed, Mode
from .ui import success, warn
from .verify import test


@contextmanager
def _spinner(message: str) -> Iterator[None]:
    console = Console(highlight=False, soft_wrap=True, emoji=False, markup=False)
    if console.is_terminal:
        with console.status(message):
            yield
    else:
        yield


def run(exercise: Exercise, verbose: bool = False) -> bool:
    """Build and run one exercise, showing its output; True on success.

    Test exercises run their test harness, whose output is shown only
    when ``verbose`` is set.
    """
    if exercise.mode is Mode.TEST:
        return test(exercise, verbose)
    return compile_and_run(exercise)


def compile_and_run(exercise: Exercise) -> bool:
    """Compile the exercise as a program, run it and show what it printed."""
    failure: ExerciseFailed | None = None
    with _spinner(f"Compiling {exercise}..."):
        try:
            compiled = exercise.compile()
        except ExerciseFailed as exc:
            failure = exc
    if failure is not None:
        warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
        print(failure.output.stderr)
        return False

    with compiled:
        try:
            with _spinner(f"Running {exercise}..."):
                output = compiled.run()
        except ExerciseFailed as exc:
            print(exc.output.stdout)
            print(exc.output.stderr)
            warn(f"Ran {exercise} with errors")
            return False

    print(output.stdout)
    success(f"Successfully ran {exercise}")
    return True