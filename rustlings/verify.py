"""Checking exercises in order and reporting progress."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, TextColumn
from rich.text import Text

from .exercise import CompiledExercise, Exercise, ExerciseError, Mode
from .ui import success, use_emoji, warn

Notify = Callable[[str], None]


class RunMode(enum.Enum):
    """Whether a successful test run prompts the learner to move on."""

    INTERACTIVE = enum.auto()
    NON_INTERACTIVE = enum.auto()


class VerificationFailed(Exception):
    """An exercise failed to compile, run, pass its tests or is not marked done."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"{exercise} is not finished")
        self.exercise = exercise


def verify(
    exercises: Iterable[Exercise], progress: tuple[int, int], verbose: bool = False
) -> None:
    """Check each exercise in turn; raise VerificationFailed at the first one not done."""
    num_done, total = progress
    console = Console(highlight=False)
    with Progress(
        TextColumn("Progress:"),
        BarColumn(bar_width=60, style="red", complete_style="green", finished_style="green"),
        MofNCompleteColumn(),
        TextColumn("{task.fields[status]}"),
        console=console,
    ) as bar:
        task = bar.add_task("", total=total, completed=num_done, status="")

        def notify(message: str) -> None:
            bar.update(task, status=message)

        for exercise in exercises:
            match exercise.mode:
                case Mode.TEST:
                    passed = _compile_and_test(exercise, RunMode.INTERACTIVE, verbose, notify)
                case Mode.COMPILE:
                    passed = _compile_and_run_interactively(exercise, notify)
                case Mode.CLIPPY:
                    passed = _compile_only(exercise, notify)
            if not passed:
                raise VerificationFailed(exercise)
            bar.advance(task)


def test(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run an exercise's tests without prompting."""
    with Console().status(f"Testing {exercise}...") as status:
        _compile_and_test(exercise, RunMode.NON_INTERACTIVE, verbose, status.update)


def _compile(exercise: Exercise, notify: Notify) -> CompiledExercise:
    try:
        return exercise.compile()
    except ExerciseError as err:
        notify("")
        warn(f"Compiling of {exercise} failed! Please try again. Here's the output:")
        print(err.output.stderr)
        raise VerificationFailed(exercise) from err


def _compile_only(exercise: Exercise, notify: Notify) -> bool:
    notify(f"Compiling {exercise}...")
    _compile(exercise, notify).close()
    notify("")
    return prompt_for_completion(exercise, None)


def _compile_and_run_interactively(exercise: Exercise, notify: Notify) -> bool:
    notify(f"Compiling {exercise}...")
    with _compile(exercise, notify) as compiled:
        notify(f"Running {exercise}...")
        try:
            output = compiled.run()
        except ExerciseError as err:
            notify("")
            warn(f"Ran {exercise} with errors")
            print(err.output.stdout)
            print(err.output.stderr)
            raise VerificationFailed(exercise) from err
    notify("")
    return prompt_for_completion(exercise, output.stdout)


def _compile_and_test(
    exercise: Exercise, run_mode: RunMode, verbose: bool, notify: Notify
) -> bool:
    notify(f"Testing {exercise}...")
    with _compile(exercise, notify) as compiled:
        try:
            output = compiled.run()
        except ExerciseError as err:
            notify("")
            warn(f"Testing of {exercise} failed! Please try again. Here's the output:")
            print(err.output.stdout)
            raise VerificationFailed(exercise) from err
    notify("")
    if verbose:
        print(output.stdout)
    if run_mode is RunMode.INTERACTIVE:
        return prompt_for_completion(exercise, None)
    return True


def _separator() -> Text:
    return Text("=" * 20, style="bold")


def prompt_for_completion(exercise: Exercise, prompt_output: str | None = None) -> bool:
    """Return True if the exercise is done; otherwise show where its marker is and return False."""
    state = exercise.state()
    if state.done():
        return True

    match exercise.mode:
        case Mode.COMPILE:
            success(f"Successfully ran {exercise}!")
        case Mode.TEST:
            success(f"Successfully tested {exercise}!")
        case Mode.CLIPPY:
            success(f"Successfully compiled {exercise}!")

    no_emoji = not use_emoji()
    if no_emoji:
        clippy_message = "The code is compiling, and Clippy is happy!"
    else:
        clippy_message = "The code is compiling, and 📎 Clippy 📎 is happy!"
    success_message = {
        Mode.COMPILE: "The code is compiling!",
        Mode.TEST: "The code is compiling, and the tests pass!",
        Mode.CLIPPY: clippy_message,
    }[exercise.mode]

    console = Console(highlight=False, soft_wrap=True, emoji=False)
    print()
    if no_emoji:
        print(f"~*~ {success_message} ~*~")
    else:
        print(f"🎉 🎉  {success_message} 🎉 🎉")
    print()

    if prompt_output is not None:
        print("Output:")
        console.print(_separator())
        print(prompt_output)
        console.print(_separator())
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