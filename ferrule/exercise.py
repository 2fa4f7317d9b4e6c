"""Exercises: their description, compilation, execution and progress state."""

from __future__ import annotations

import os
import re
import subprocess
import threading
import tomllib
from contextlib import suppress
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .ui import no_emoji

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = Path("./exercises/clippy/Cargo.toml")


def temp_file() -> str:
    """Return a binary name unique to this process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def clean() -> None:
    """Remove the compiled binary, if any."""
    with suppress(OSError):
        os.remove(temp_file())


class Mode(Enum):
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
    """Progress of an exercise; an empty context means it is done."""

    context: tuple[ContextLine, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "context", tuple(self.context))

    def done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a finished process."""

    stdout: str
    stderr: str


class ExerciseFailed(Exception):
    """Compiling or running an exercise did not succeed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr or output.stdout)
        self.output = output


def _execute(args: list[str]) -> subprocess.CompletedProcess:
    return subprocess.run(args, capture_output=True, check=False)


def _output(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=(result.stdout or b"").decode("utf-8", errors="replace"),
        stderr=(result.stderr or b"").decode("utf-8", errors="replace"),
    )


def _lines(source: str) -> list[str]:
    lines = source.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


@dataclass
class Exercise:
    """One exercise as described in info.toml."""

    name: str
    path: Path
    mode: Mode
    hint: str = ""

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self.mode = Mode(self.mode)

    def __str__(self) -> str:
        return str(self.path)

    def compile(self) -> CompiledExercise:
        """Build the exercise; raise ExerciseFailed with the compiler output."""
        source = str(self.path)
        match self.mode:
            case Mode.COMPILE:
                result = _execute(["rustc", source, "-o", temp_file(), *RUSTC_COLOR_ARGS])
            case Mode.TEST:
                result = _execute(
                    ["rustc", "--test", source, "-o", temp_file(), *RUSTC_COLOR_ARGS]
                )
            case Mode.CLIPPY:
                result = self._lint()
        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise ExerciseFailed(_output(result))

    def _lint(self) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2018"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        error_message = (
            "Failed to write Clippy Cargo.toml file."
            if no_emoji()
            else "Failed to write 📎 Clippy 📎 Cargo.toml file."
        )
        try:
            CLIPPY_CARGO_TOML_PATH.write_text(cargo_toml)
        except OSError as exc:
            raise OSError(error_message) from exc
        # Build a binary as well so the exercise can be run; failures here
        # are reported again by clippy below.
        _execute(["rustc", str(self.path), "-o", temp_file(), *RUSTC_COLOR_ARGS])
        # A clean is needed for clippy to report every lint.
        _execute(["cargo", "clean", "--manifest-path", str(CLIPPY_CARGO_TOML_PATH), *RUSTC_COLOR_ARGS])
        return _execute(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                str(CLIPPY_CARGO_TOML_PATH),
                *RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
            ]
        )

    def run(self) -> ExerciseOutput:
        """Run the compiled binary; raise ExerciseFailed if it exits non-zero."""
        args = [temp_file()]
        if self.mode is Mode.TEST:
            args.append("--show-output")
        result = _execute(args)
        output = _output(result)
        if result.returncode != 0:
            raise ExerciseFailed(output)
        return output

    def state(self) -> State:
        """Find the pending marker and the lines around it."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()

        lines = _lines(source)
        matched = next(
            (index for index, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)),
            None,
        )
        if matched is None:
            raise RuntimeError(f"{self.path}: pending marker does not fit on one line")

        first = max(matched - CONTEXT, 0)
        last = matched + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=index + 1, important=index == matched)
                for index, line in enumerate(lines[first : last + 1], start=first)
            )
        )

    def looks_done(self) -> bool:
        """True once the pending marker has been removed."""
        return self.state().done()


class CompiledExercise:
    """A built exercise; closing it removes the binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        return self.exercise.run()

    def close(self) -> None:
        if not self._closed:
            clean()
            self._closed = True

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def load_exercises(text: str) -> list[Exercise]:
    """Parse the exercise list from info.toml text."""
    data = tomllib.loads(text)
    return [
        Exercise(
            name=entry["name"],
            path=Path(entry["path"]),
            mode=Mode(entry["mode"]),
            hint=entry["hint"],
        )
        for entry in data["exercises"]
    ]


def read_exercises(path: str | os.PathLike) -> list[Exercise]:
    """Read the exercise list from an info.toml file."""
    return load_exercises(Path(path).read_text(encoding="utf-8"))