"""Command line: list, run, hint, verify and watch exercises."""

from __future__ import annotations

import argparse
import os
import queue
import subprocess
import sys
import threading
from collections.abc import Iterable, Iterator, Sequence
from itertools import chain, dropwhile
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .exercise import Exercise, read_exercises
from .run import run
from .ui import no_emoji
from .verify import verify

INFO_FILE = "info.toml"
DEFAULT_OUT_FILE = "default_out.txt"
EXERCISES_DIR = "./exercises"
WATCH_DELAY = 2.0

_BANNER = r"""
       welcome to...
   __                      _
  / _| ___ _ __ _ __ _   _| | ___
 | |_ / _ \ '__| '__| | | | |/ _ \
 |  _|  __/ |  | |  | |_| | |  __/
 |_|  \___|_|  |_|   \__,_|_|\___|
"""


class _Parser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _non_empty(value: str) -> str:
    if not value:
        raise argparse.ArgumentTypeError("the value must not be empty")
    return value


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="ferrule",
        description="Small exercises to get you used to writing and reading Rust code",
    )
    parser.set_defaults(command=None)
    parser.add_argument(
        "--nocapture", action="store_true", help="Show outputs from the test exercises"
    )
    commands = parser.add_subparsers(metavar="COMMAND")

    verify_cmd = commands.add_parser(
        "verify", aliases=["v"], help="Verifies all exercises according to the recommended order"
    )
    verify_cmd.set_defaults(command="verify")

    watch_cmd = commands.add_parser(
        "watch", aliases=["w"], help="Reruns `verify` when files were edited"
    )
    watch_cmd.set_defaults(command="watch")

    run_cmd = commands.add_parser("run", aliases=["r"], help="Runs/Tests a single exercise")
    run_cmd.add_argument("name")
    run_cmd.set_defaults(command="run")

    hint_cmd = commands.add_parser(
        "hint", aliases=["h"], help="Returns a hint for the current exercise"
    )
    hint_cmd.add_argument("name")
    hint_cmd.set_defaults(command="hint")

    list_cmd = commands.add_parser(
        "list", aliases=["l"], help="Lists the exercises available"
    )
    shown = list_cmd.add_mutually_exclusive_group()
    shown.add_argument(
        "-p", "--paths", action="store_true", help="Show only the paths of the exercises"
    )
    shown.add_argument(
        "-n", "--names", action="store_true", help="Show only the names of the exercises"
    )
    list_cmd.add_argument(
        "-f",
        "--filter",
        type=_non_empty,
        default=None,
        help="Provide a string to match the exercise names. "
        "Comma separated patterns are acceptable.",
    )
    progress = list_cmd.add_mutually_exclusive_group()
    progress.add_argument(
        "-u", "--unsolved", action="store_true", help="Display only exercises not yet solved"
    )
    progress.add_argument(
        "-s", "--solved", action="store_true", help="Display only exercises that have been solved"
    )
    list_cmd.set_defaults(command="list")
    return parser


def _exit_code(exc: SystemExit) -> int:
    if exc.code is None:
        return 0
    if isinstance(exc.code, int):
        return exc.code
    return 1


def rustc_exists() -> bool:
    """True if the compiler can be started and reports its version."""
    try:
        result = subprocess.run(
            ["rustc", "--version"], stdout=subprocess.DEVNULL, check=False
        )
    except OSError:
        return False
    return result.returncode == 0


def list_exercises(
    exercises: Iterable[Exercise],
    paths: bool = False,
    names: bool = False,
    filter_text: str | None = None,
    solved: bool = False,
    unsolved: bool = False,
) -> Iterator[str]:
    """Yield the lines of the exercise listing, header first when shown."""
    if not paths and not names:
        yield f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}"
    filters = [f for f in (filter_text or "").lower().split(",") if f.strip()]
    for exercise in exercises:
        fname = str(exercise.path)
        done = exercise.looks_done()
        matches_filter = any(f in exercise.name or f in fname for f in filters)
        wanted = (done and solved) or (not done and unsolved) or (not solved and not unsolved)
        if not wanted or not (matches_filter or filter_text is None):
            continue
        if paths:
            yield fname
        elif names:
            yield exercise.name
        else:
            status = "Done" if done else "Pending"
            yield f"{exercise.name:<17}\t{fname:<46}\t{status:<7}"


def find_exercise(exercises: Iterable[Exercise], name: str) -> Exercise:
    """Return the exercise with this name; raise LookupError if there is none."""
    for exercise in exercises:
        if exercise.name == name:
            return exercise
    raise LookupError("No exercise found for your given name!")


class _SharedHint:
    """The hint of the exercise that failed last, shared with the input thread."""

    def __init__(self, text: str | None = None) -> None:
        self._lock = threading.Lock()
        self._text = text

    def get(self) -> str | None:
        with self._lock:
            return self._text

    def set(self, text: str) -> None:
        with self._lock:
            self._text = text


def _watch_shell(hint: _SharedHint) -> None:
    while True:
        try:
            line = sys.stdin.readline()
        except (OSError, ValueError) as error:
            print(f"error reading command: {error}")
            return
        if not line:
            return
        command = line.strip()
        if command == "hint":
            text = hint.get()
            if text is not None:
                print(text)
        elif command == "clear":
            print("\x1b[2J\x1b[1;1H")
        else:
            print(f"unknown command: {command}")


def _spawn_watch_shell(hint: _SharedHint) -> None:
    print("Type 'hint' to get help or 'clear' to clear the screen")
    threading.Thread(target=_watch_shell, args=(hint,), daemon=True).start()


class _ChangeHandler(FileSystemEventHandler):
    def __init__(self, events: queue.Queue) -> None:
        super().__init__()
        self._events = events

    def on_created(self, event: FileSystemEvent) -> None:
        self._push(event)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._push(event)

    def _push(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            self._events.put(Path(os.fsdecode(event.src_path)))


def _debounced(events: queue.Queue) -> list[Path]:
    """Wait for a change, then gather changes until things are quiet."""
    pending = {events.get(): None}
    while True:
        try:
            pending[events.get(timeout=WATCH_DELAY)] = None
        except queue.Empty:
            return list(pending)


def _ends_with(path: Path, suffix: Path) -> bool:
    tail = Path(suffix).parts
    start = len(path.parts) - len(tail)
    return start >= 0 and path.parts[start:] == tail


def _clear_screen() -> None:
    print("\x1bc")


def watch(exercises: Sequence[Exercise], verbose: bool = False) -> None:
    """Verify, then re-verify whenever an exercise file changes, until all pass.

    Raises OSError when the exercises directory cannot be watched.
    """
    exercises = list(exercises)
    if not Path(EXERCISES_DIR).is_dir():
        raise FileNotFoundError(f"no such directory: {EXERCISES_DIR}")

    events: queue.Queue = queue.Queue()
    observer = Observer()
    observer.schedule(_ChangeHandler(events), EXERCISES_DIR, recursive=True)
    observer.start()
    try:
        _clear_screen()
        failed = verify(exercises, verbose)
        if failed is None:
            return
        hint = _SharedHint(failed.hint)
        _spawn_watch_shell(hint)
        while True:
            for changed in _debounced(events):
                if changed.suffix != ".rs" or not changed.exists():
                    continue
                filepath = changed.resolve()
                pending = chain(
                    dropwhile(lambda e: not _ends_with(filepath, e.path), exercises),
                    (
                        e
                        for e in exercises
                        if not e.looks_done() and not _ends_with(filepath, e.path)
                    ),
                )
                _clear_screen()
                failed = verify(pending, verbose)
                if failed is None:
                    return
                hint.set(failed.hint)
    finally:
        observer.stop()
        observer.join()


def _print_completion() -> None:
    mark = "★" if no_emoji() else "🎉"
    print(f"{mark} All exercises completed! {mark}")
    print()
    print("+----------------------------------------------------+")
    print("|          You made it to the Fe-nish line!          |")
    print("+----------------------------------------------------+")
    print()
    print("We hope you enjoyed learning about the various aspects of Rust!")
    print("If you noticed any issues, please report them.")
    print("You can also contribute your own exercises to help the greater community!")


def _print_list(args: argparse.Namespace, exercises: list[Exercise]) -> int:
    lines = list_exercises(
        exercises,
        paths=args.paths,
        names=args.names,
        filter_text=args.filter,
        solved=args.solved,
        unsolved=args.unsolved,
    )
    try:
        for line in lines:
            sys.stdout.write(line + "\n")
        sys.stdout.flush()
    except BrokenPipeError:
        return 0
    except OSError:
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the command; returns the exit status."""
    try:
        args = _build_parser().parse_args(argv)
    except SystemExit as exc:
        return _exit_code(exc)

    if args.command is None:
        print(_BANNER)

    if not Path(INFO_FILE).exists():
        print(f"{sys.argv[0]} must be run from the exercises directory")
        print(f"Try `cd` into the directory that holds {INFO_FILE}!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = read_exercises(INFO_FILE)
    verbose = args.nocapture

    match args.command:
        case "list":
            return _print_list(args, exercises)
        case "run" | "hint":
            try:
                exercise = find_exercise(exercises, args.name)
            except LookupError as error:
                print(error)
                return 1
            if args.command == "hint":
                print(exercise.hint)
            elif not run(exercise, verbose):
                return 1
        case "verify":
            if verify(exercises, verbose) is not None:
                return 1
        case "watch":
            try:
                watch(exercises, verbose)
            except OSError as error:
                print(f"Error: Could not watch your progress. Error message was {error!r}.")
                print(
                    "Most likely you've run out of disk space or your "
                    "'inotify limit' has been reached."
                )
                return 1
            _print_completion()
        case None:
            print(Path(DEFAULT_OUT_FILE).read_text(encoding="utf-8"))
    return 0