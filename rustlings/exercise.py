"""Exercises: loading, compiling, running and checking their progress marker."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import threading
import tomllib
from dataclasses import dataclass
from pathlib import Path

from .ui import use_emoji

RUSTC_COLOR_ARGS = ("--color", "always")
I_AM_DONE_REGEX = re.compile(r"^\s*///?\s*I\s+AM\s+NOT\s+DONE", re.MULTILINE)
CONTEXT = 2
CLIPPY_CARGO_TOML_PATH = "./exercises/clippy/Cargo.toml"


def temp_file() -> str:
    """Return a temporary binary name unique to this process and thread."""
    return f"./temp_{os.getpid()}_{threading.get_ident()}"


def clean() -> None:
    """Remove the temporary binary, if there is one."""
    try:
        os.remove(temp_file())
    except OSError:
        pass


class Mode(enum.Enum):
    """How an exercise is checked."""

    COMPILE = "compile"
    TEST = "test"
    CLIPPY = "clippy"


@dataclass(frozen=True)
class ContextLine:
    """A source line shown around the progress marker of a pending exercise."""

    line: str
    number: int
    important: bool


@dataclass(frozen=True)
class State:
    """Progress of an exercise: done when there is no pending context."""

    context: tuple[ContextLine, ...] = ()

    def done(self) -> bool:
        return not self.context


@dataclass(frozen=True)
class ExerciseOutput:
    """Captured output of a compiler or binary run."""

    stdout: str
    stderr: str


class ExerciseError(Exception):
    """Compiling or running an exercise failed."""

    def __init__(self, output: ExerciseOutput) -> None:
        super().__init__(output.stderr or output.stdout)
        self.output = output


def _execute(args: list[str], failure: str) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(args, capture_output=True, check=False)
    except OSError as err:
        raise RuntimeError(failure) from err


def _output(result: subprocess.CompletedProcess) -> ExerciseOutput:
    return ExerciseOutput(
        stdout=(result.stdout or b"").decode("utf-8", errors="replace"),
        stderr=(result.stderr or b"").decode("utf-8", errors="replace"),
    )


def _lines(source: str) -> list[str]:
    parts = source.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part.removesuffix("\r") for part in parts]


def _run_binary(exercise: Exercise) -> ExerciseOutput:
    arg = "--show-output" if exercise.mode is Mode.TEST else ""
    result = _execute([temp_file(), arg], "Failed to run 'run' command")
    output = _output(result)
    if result.returncode != 0:
        raise ExerciseError(output)
    return output


class CompiledExercise:
    """A successfully compiled exercise; closing it removes the binary."""

    def __init__(self, exercise: Exercise) -> None:
        self.exercise = exercise
        self._closed = False

    def run(self) -> ExerciseOutput:
        """Run the binary; raise ExerciseError if it exits unsuccessfully."""
        return _run_binary(self.exercise)

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            clean()

    def __enter__(self) -> CompiledExercise:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


@dataclass
class Exercise:
    """An exercise as described in info.toml."""

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
        """Compile the exercise; raise ExerciseError with the compiler output on failure."""
        source = str(self.path)
        match self.mode:
            case Mode.COMPILE:
                result = _execute(
                    ["rustc", source, "-o", temp_file(), *RUSTC_COLOR_ARGS],
                    "Failed to run 'compile' command.",
                )
            case Mode.TEST:
                result = _execute(
                    ["rustc", "--test", source, "-o", temp_file(), *RUSTC_COLOR_ARGS],
                    "Failed to run 'compile' command.",
                )
            case Mode.CLIPPY:
                result = self._clippy(source)
        if result.returncode == 0:
            return CompiledExercise(self)
        clean()
        raise ExerciseError(_output(result))

    def _clippy(self, source: str) -> subprocess.CompletedProcess:
        cargo_toml = (
            "[package]\n"
            f'name = "{self.name}"\n'
            'version = "0.0.1"\n'
            'edition = "2021"\n'
            "[[bin]]\n"
            f'name = "{self.name}"\n'
            f'path = "{self.name}.rs"'
        )
        if use_emoji():
            message = "Failed to write 📎 Clippy 📎 Cargo.toml file."
        else:
            message = "Failed to write Clippy Cargo.toml file."
        try:
            Path(CLIPPY_CARGO_TOML_PATH).write_text(cargo_toml, encoding="utf-8")
        except OSError as err:
            raise RuntimeError(message) from err
        # A binary is built as well so clippy exercises can be run afterwards.
        _execute(["rustc", source, "-o", temp_file(), *RUSTC_COLOR_ARGS], "Failed to compile!")
        # A clean build is needed for clippy to report every lint.
        _execute(
            ["cargo", "clean", "--manifest-path", CLIPPY_CARGO_TOML_PATH, *RUSTC_COLOR_ARGS],
            "Failed to run 'cargo clean'",
        )
        return _execute(
            [
                "cargo",
                "clippy",
                "--manifest-path",
                CLIPPY_CARGO_TOML_PATH,
                *RUSTC_COLOR_ARGS,
                "--",
                "-D",
                "warnings",
                "-D",
                "clippy::float_cmp",
            ],
            "Failed to run 'compile' command.",
        )

    def state(self) -> State:
        """Read the source and report whether the progress marker is still present."""
        source = self.path.read_text(encoding="utf-8")
        if not I_AM_DONE_REGEX.search(source):
            return State()
        lines = _lines(source)
        matched = next(
            (index for index, line in enumerate(lines) if I_AM_DONE_REGEX.search(line)),
            None,
        )
        if matched is None:
            raise RuntimeError("This should not happen at all")
        low = max(matched - CONTEXT, 0)
        high = matched + CONTEXT
        return State(
            tuple(
                ContextLine(line=line, number=index + 1, important=index == matched)
                for index, line in enumerate(lines[low : high + 1], start=low)
            )
        )

    def looks_done(self) -> bool:
        """Whether the progress marker has been removed from the source."""
        return self.state().done()


def load_exercises(path: str | os.PathLike = "info.toml") -> list[Exercise]:
    """Load the exercise list from an info.toml file."""
    with open(path, "rb") as handle:
        data = tomllib.load(handle)
    return [
        Exercise(
            name=entry["name"],
            path=Path(entry["path"]),
            mode=Mode(entry["mode"]),
            hint=entry["hint"],
        )
        for entry in data["exercises"]
    ]