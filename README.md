# ferrule

ferrule walks you through a directory of small exercises, one at a time.
Each exercise is a source file that carries a marker comment,
`// I AM NOT DONE`. ferrule compiles the file (as a program, as a test
harness, or under the linter, depending on the exercise's mode), runs it and
tells you whether it passed. Once it passes and you delete the marker line,
ferrule moves on to the next exercise.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

Exercises are compiled with `rustc`, and the lint exercises are checked with
`cargo clippy`, so those tools must be on your `PATH`. At start-up ferrule
runs `rustc --version` and exits with status 1 if that fails.

## The exercise directory

Run ferrule from the directory that holds `info.toml`. That file lists the
exercises in their recommended order:

```toml
[[exercises]]
name = "variables1"
path = "exercises/variables/variables1.rs"
mode = "compile"
hint = "Declare the variable with `let`."
```

`mode` is one of `compile`, `test` or `clippy`. If `info.toml` is missing,
ferrule prints a reminder and exits with status 1.

Compiled binaries are written to a temporary file in the current directory
and removed afterwards. Lint exercises also write
`exercises/clippy/Cargo.toml` before running `cargo clean` and
`cargo clippy -- -D warnings` against it.

## Commands

With no command, ferrule prints a welcome banner followed by the contents of
`default_out.txt` from the current directory:

```
ferrule
```

Verify every exercise in order, stopping at the first one that fails to
build, fails to run, or still carries its marker (exit status 1 in that case):

```
ferrule verify
```

Verify, then watch the `exercises/` directory and re-verify whenever a `.rs`
file is created or changed (changes are gathered until things have been
quiet for two seconds). Type `hint` for the hint of the exercise that failed
last, or `clear` to clear the screen. When every exercise passes, a
completion message is printed:

```
ferrule watch
```

Compile and run (or test) one exercise by name; the marker is not checked:

```
ferrule run variables1
```

Print the hint for one exercise:

```
ferrule hint variables1
```

`run` and `hint` print `No exercise found for your given name!` and exit
with status 1 for an unknown name.

List the exercises with their path and status (`Done` or `Pending`):

```
ferrule list
ferrule list --names
ferrule list --paths
ferrule list --solved
ferrule list --unsolved
ferrule list --filter vec,hashmap
```

`--names` and `--paths` cannot be combined, nor can `--solved` and
`--unsolved`; usage errors exit with status 1. `--filter` takes
comma-separated, lower-cased patterns matched as substrings of the exercise
name or path, and must not be empty.

Pass `--nocapture` before the command to see the output of test exercises:

```
ferrule --nocapture run testSuccess
```

The short aliases `v`, `w`, `r`, `h` and `l` work too.

Set `NO_EMOJI` in the environment for plain-text status marks.

## Using it from Python

```python
from ferrule.exercise import read_exercises
from ferrule.verify import verify

exercises = read_exercises("info.toml")
for exercise in exercises:
    print(exercise.name, "done" if exercise.looks_done() else "pending")

failed = verify(exercises, verbose=False)
if failed is not None:
    print("stopped at", failed.name)
```

- `ferrule.exercise` holds `Exercise`, `Mode`, `State`, `ContextLine`,
  `ExerciseOutput`, `ExerciseFailed` and `CompiledExercise`, plus
  `load_exercises` and `read_exercises`. `Exercise.compile()` returns a
  `CompiledExercise` (a context manager that removes the binary on exit) or
  raises `ExerciseFailed`; `Exercise.state()` returns the lines around the
  marker, and an empty context once the marker is gone.
- `ferrule.verify` holds `verify`, `test` and `prompt_for_completion`.
- `ferrule.run` holds `run` and `compile_and_run`.
- `ferrule.cli` holds `main`, `list_exercises`, `find_exercise`, `watch`
  and `rustc_exists`.

## Worked solutions

The `ferrule.lessons` package holds worked solutions to an exercise set,
grouped by topic, each with its own tests: `basics`, `ownership`, `structs`,
`enums`, `containers`, `modules_macros`, `generics`, `traits`, `options`,
`concurrency`, `errors`, `conversions` and `std_types`.

## What ferrule does not do

ferrule does not ship an exercise directory: there is no `info.toml`,
`default_out.txt` or set of exercise source files in the package. Bring
your own, laid out as described above. ferrule does not compile anything
itself either; it relies on `rustc` and `cargo` being installed.