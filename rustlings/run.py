"""Running a single exercise on request."""

from __future__ import annotations

from rich.console import Console

from .exercise import Exercise, ExerciseError, Mode
from .ui import success, warn
from .verify import VerificationFailed, test


class RunFailed(Exception):
    """An exercise failed to compile, run or pass its tests."""

    def __init__(self, exercise: Exercise) -> None:
        super().__init__(f"running {exercise} failed")
        self.exercise = exercise


def run(exercise: Exercise, verbose: bool = False) -> None:
    """Compile and run an exercise, or run its tests; raise RunFailed on any failure.

    For test exercises, ``verbose`` shows the output of the test harness.
    """
    if exercise.mode is Mode.TEST:
        try:
            test(exercise, verbose)
        except VerificationFailed as err:
            raise RunFailed(exercise) from err
    else:
        _compile_and_run(exercise)


def _compile_and_run(exercise: Exercise) -> None:
    with Console().status(f"Compiling {exercise}...") as status:
        try:
            compiled = exercise.compile()
        except ExerciseError as err:
            status.stop()
            warn(f"Compilation of {exercise} failed!, Compiler error message:\n")
            print(err.output.stderr)
            raise RunFailed(exercise) from err

        with compiled:
            status.update(f"Running {exercise}...")
            try:
                output = compiled.run()
            except ExerciseError as err:
                status.stop()
                print(err.output.stdout)
                print(err.output.stderr)
                warn(f"Ran {exercise} with errors")
                raise RunFailed(exercise) from err

    print(output.stdout)
    success(f"Successfully ran {exercise}")