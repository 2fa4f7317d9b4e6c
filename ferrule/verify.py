"""Checking exercises one after another and prompting the learner."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from rich.console import Console
from rich.text import Text

from .exercise import CompiledExercise, Exercise, ExerciseFailed, Mode
from .ui import no_emoji, success, warn

_SEPARATOR = Text("====================", style="bold")


def _console() -> Console:
    return Console(highlight=False, soft_wrap=True, emoji=False, markup=False)


@contextmanager
def _spinner(message: str) -> Iterator[None]:
    console = _console()
    if console.is_terminal:
        with console.status(message):
            yield
    else:
        yield


def verify(exercises: Iterable[Exercise], verbose: bool = False) -> Exercise | None:
    """Check exercises in order; return the first one not yet finished, else None."""
    for exercise in exercises:
        match exercise.mode:
            case Mode.TEST:
                finished = _compile_and_test(exercise, interactive=True, verbose=verbose)
            case Mode.COMPILE:
                finished = _compile_and_run_interactively(exercise)
            case Mode.CLIPPY:
                finished = _compile_only(exercise)
        if not finished:
            return exercise
    return None


def test(exercise: Exercise, verbose: bool = False) -> bool:
    """Build and run an exercise's tests without prompting; True on success."""
    return _compile_and_test(exercise, interactive=False, verbose=verbose)


def _compile(exercise: Exercise, message: str) -> CompiledExercise | None:
    with _spinner(message):
        try:
            return exercise.compile()
        except ExerciseFailed as failure:
            output = failure.output
    warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
    print(output.stderr)
    return None


def _compile_only(exercise: Exercise) -> bool:
    compiled = _compile(exercise, f"Compiling {exercise}...")
    if compiled is None:
        return False
    compiled.close()
    success(f"Successfully compiled {exercise}!")
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise) -> bool:
    compiled = _compile(exercise, f"Compiling {exercise}...")
    if compiled is None:
        return False
    with compiled:
        try:
            with _spinner(f"Running {exercise}..."):
                output = compiled.run()
        except ExerciseFailed as failure:
            warn(f"Ran {exercise} with errors")
            print(failure.output.stdout)
            print(failure.output.stderr)
            return False
        success(f"Successfully ran {exercise}!")
        return prompt_for_completion(exercise, output.stdout)


def _compile_and_test(exercise: Exercise, interactive: bool, verbose: bool) -> bool:
    message = f"Testing {exercise}..."
    compiled = _compile(exercise, message)
    if compiled is None:
        return False
    with compiled:
        try:
            with _spinner(message):
                output = compiled.run()
        except ExerciseFailed as failure:
            warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
            print(failure.output.stdout)
            return False
        if verbose:
            print(output.stdout)
        success(f"Successfully tested {exercise}")
        return prompt_for_completion(exercise, None) if interactive else True


def prompt_for_completion(exercise: Exercise, prompt_output: str | None = None) -> bool:
    """Return True if the exercise is done; otherwise show where the marker is."""
    state = exercise.state()
    if state.done():
        return True

    quiet = no_emoji()
    clippy_message = (
        "The code is compiling, and Clippy is happy!"
        if quiet
        else "The code is compiling, and 📎 Clippy 📎 is happy!"
    )
    success_message = {
        Mode.COMPILE: "The code is compiling!",
        Mode.TEST: "The code is compiling, and the tests pass!",
        Mode.CLIPPY: clippy_message,
    }[exercise.mode]

    console = _console()
    print()
    print(f"~*~ {success_message} ~*~" if quiet else f"🎉 🎉  {success_message} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        console.print(_SEPARATOR)
        print(prompt_output)
        console.print(_SEPARATOR)
        print()

    print("You can keep working on this exercise,")
    console.print(
        Text.assemble(
            "or jump into the next one by removing the ",
            ("`I AM NOT DONE`", "bold"),
            " comment:",
        )
    )
    print()
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