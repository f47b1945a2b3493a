# rustlings

A command that drives small Rust exercises. Each exercise is a Rust source
file with a compile error, a failing test or a lint to fix. `rustlings`
compiles and runs the exercises for you, tracks which ones are done, and shows
hints when you are stuck.

## Requirements

- Python 3.11 or later
- A Rust toolchain with `rustc` on your `PATH` (and `cargo clippy` for the
  Clippy exercises)
- An exercises directory holding an `info.toml` file and the exercise sources
  it lists

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Usage

Run every command from the directory that holds `info.toml`. Without a
subcommand, `rustlings` prints a welcome message and a short introduction.

```
rustlings watch              # verify exercises in order, re-run on every edit
rustlings verify             # verify all exercises once, in the listed order
rustlings run <name>         # compile and run (or test) a single exercise
rustlings run next           # run the first exercise that is not yet done
rustlings hint <name>        # show the hint for an exercise
rustlings list               # list exercises with their path and status
rustlings lsp                # write rust-project.json for rust-analyzer
rustlings --version          # print the version
```

`--nocapture` shows the output of test exercises:

```
rustlings --nocapture run <name>
```

The command exits with status 1 when it is not started next to an
`info.toml`, when `rustc` cannot be run, when an exercise is not found, or
when running or verifying an exercise fails.

### Listing exercises

`rustlings list` accepts these options:

- `-p`, `--paths`: show only the paths of the exercises
- `-n`, `--names`: show only the names of the exercises
- `-f`, `--filter PATTERNS`: show exercises whose name or path contains one of
  the comma-separated patterns
- `-u`, `--unsolved`: show only exercises not yet solved
- `-s`, `--solved`: show only exercises that have been solved

It ends with a line giving how many exercises you have completed.

### Watch mode

Watch mode verifies the exercises, then re-verifies whenever a `.rs` file
below `./exercises` is created or changed. Type one of these commands and
press Enter:

- `hint`: print the hint for the current exercise
- `clear`: clear the screen
- `quit`: leave watch mode
- `help`: list the commands

### Marking an exercise done

An exercise counts as done once it compiles, its tests pass, and you have
removed the `// I AM NOT DONE` comment from its file. Until then, `rustlings`
shows the lines around that comment so you can find it.

Set the `NO_EMOJI` environment variable to get plain-text markers in place of
emoji.

## Using it from Python

- `rustlings.exercise.load_exercises(path)` reads `info.toml` into a list of
  `Exercise` objects. `Exercise.compile()` returns a `CompiledExercise` (a
  context manager whose `run()` returns an `ExerciseOutput`) or raises
  `ExerciseError`; `Exercise.state()` and `Exercise.looks_done()` report the
  progress marker.
- `rustlings.verify.verify(exercises, (done, total), verbose)` raises
  `VerificationFailed` at the first exercise that is not finished.
- `rustlings.run.run(exercise, verbose)` raises `RunFailed` on failure.
- `rustlings.project.RustAnalyzerProject` builds and writes
  `rust-project.json`.
- `rustlings.cli.main(argv)` runs the command line and returns the exit status.

## Worked solutions

The `rustlings.lessons` package holds Python versions of worked solutions to
the exercises, one module per topic: `lifetimes`, `as_ref_mut`, `from_into`,
`from_str`, `try_from_into`, `conditionals`, `quiz1`, `functions`, `errors`,
`hashmaps`, `generics`, `threads`, `pointers`, `iterators`, `strings`,
`quiz2`, `vecs`, `structs`, `traits`, `quiz3`, `options` and
`move_semantics`.

## What it does not do

- It does not ship the Rust exercises or their `info.toml`; it works on
  whatever exercises directory you run it in.
- The lessons have no worked solutions for enums or for casting with `as`.