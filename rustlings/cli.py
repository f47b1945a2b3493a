"""Command line interface: list, run, hint, verify, watch and lsp."""

from __future__ import annotations

import argparse
import contextlib
import enum
import itertools
import math
import os
import subprocess
import sys
import threading
import time
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_MODIFIED,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer

from .exercise import Exercise, load_exercises
from .project import RustAnalyzerProject
from .run import RunFailed
from .run import run as run_exercise
from .ui import use_emoji
from .verify import VerificationFailed, verify

VERSION = "5.0.0"
WATCH_DELAY = 2.0

DEFAULT_OUT = """Thanks for installing Rustlings!

Is this your first time? Don't worry, Rustlings was made for beginners! We are
going to teach you a lot of things about Rust, but before we can get
started, here's a couple of notes about how Rustlings operates:

1. The central concept behind Rustlings is that you solve exercises. These
   exercises usually have some sort of syntax error in them, which will cause
   them to fail compilation or testing. Sometimes there's a logic error instead
   of a syntax error. No matter what error, it's your job to find it and fix it!
   You'll know when you fixed it because then, the exercise will compile and
   Rustlings will be able to move on to the next exercise.
2. If you run Rustlings in watch mode (which we recommend), it'll automatically
   start with the first exercise. Don't get confused by an error message popping
   up as soon as you run Rustlings! This is part of the exercise that you're
   supposed to solve, so open the exercise file in an editor and start your
   detective work!
3. If you're stuck on an exercise, there is a helpful hint you can view by typing
   'hint' (in watch mode), or running `rustlings hint exercise_name`.
4. If an exercise doesn't make sense to you, feel free to open an issue on the
   project's issue tracker. We look at every issue, and sometimes, other
   learners do too so you can help each other out!
5. If you want to use `rust-analyzer` with exercises, which provides features like
   autocompletion, run the command `rustlings lsp`.

Got all that? Great! To get started, run `rustlings watch` in order to get the first
exercise. Make sure to have your editor open!"""

FENISH_LINE = r"""+----------------------------------------------------+
|          You made it to the Fe-nish line!          |
+--------------------------  ------------------------+
                          \\/
     ▒▒          ▒▒▒▒▒▒▒▒      ▒▒▒▒▒▒▒▒          ▒▒
   ▒▒▒▒  ▒▒    ▒▒        ▒▒  ▒▒        ▒▒    ▒▒  ▒▒▒▒
   ▒▒▒▒  ▒▒  ▒▒            ▒▒            ▒▒  ▒▒  ▒▒▒▒
 ░░▒▒▒▒░░▒▒  ▒▒            ▒▒            ▒▒  ▒▒░░▒▒▒▒
   ▓▓▓▓▓▓▓▓  ▓▓      ▓▓██  ▓▓  ▓▓██      ▓▓  ▓▓▓▓▓▓▓▓
     ▒▒▒▒    ▒▒      ████  ▒▒  ████      ▒▒░░  ▒▒▒▒
       ▒▒  ▒▒▒▒▒▒        ▒▒▒▒▒▒        ▒▒▒▒▒▒  ▒▒
         ▒▒▒▒▒▒▒▒▒▒▓▓▓▓▓▓▒▒▒▒▒▒▒▒▓▓▒▒▓▓▒▒▒▒▒▒▒▒
           ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒
             ▒▒▒▒▒▒▒▒▒▒██▒▒▒▒▒▒██▒▒▒▒▒▒▒▒▒▒
           ▒▒  ▒▒▒▒▒▒▒▒▒▒██████▒▒▒▒▒▒▒▒▒▒  ▒▒
         ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒
       ▒▒    ▒▒    ▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒▒    ▒▒    ▒▒
       ▒▒  ▒▒    ▒▒                  ▒▒    ▒▒  ▒▒
           ▒▒  ▒▒                      ▒▒  ▒▒

We hope you enjoyed learning about the various aspects of Rust!
If you noticed any issues, please don't hesitate to report them to our repo.
You can also contribute your own exercises to help the greater community!

Before reporting an issue or contributing, please read our contributing guidelines."""

WELCOME = r"""       welcome to...
                 _   _ _
  _ __ _   _ ___| |_| (_)_ __   __ _ ___
 | '__| | | / __| __| | | '_ \ / _` / __|
 | |  | |_| \__ \ |_| | | | | | (_| \__ \
 |_|   \__,_|___/\__|_|_|_| |_|\__, |___/
                               |___/"""


class WatchStatus(enum.Enum):
    """How watch mode ended."""

    FINISHED = enum.auto()
    UNFINISHED = enum.auto()


def find_exercise(name: str, exercises: Iterable[Exercise]) -> Exercise:
    """Find an exercise by name, or the first pending one for 'next'; raise LookupError."""
    if name == "next":
        found = next((exercise for exercise in exercises if not exercise.looks_done()), None)
        if found is None:
            raise LookupError(
                "🎉 Congratulations! You have done all the exercises!\n"
                "🔚 There are no more exercises to do next!"
            )
        return found
    found = next((exercise for exercise in exercises if exercise.name == name), None)
    if found is None:
        raise LookupError(f"No exercise found for '{name}'!")
    return found


def list_exercises(
    exercises: Iterable[Exercise],
    paths: bool = False,
    names: bool = False,
    filter: str | None = None,
    unsolved: bool = False,
    solved: bool = False,
) -> Iterator[str]:
    """Yield the lines of the exercise listing, ending with a progress summary."""
    exercises = list(exercises)
    if not paths and not names:
        yield f"{'Name':<17}\t{'Path':<46}\t{'Status':<7}"
    patterns = [pattern for pattern in (filter or "").lower().split(",") if pattern.strip()]
    done_count = 0
    for exercise in exercises:
        fname = str(exercise.path)
        done = exercise.looks_done()
        done_count += done
        matches = filter is None or any(
            pattern in exercise.name or pattern in fname for pattern in patterns
        )
        wanted = (done and solved) or (not done and unsolved) or (not solved and not unsolved)
        if not (wanted and matches):
            continue
        if paths:
            yield fname
        elif names:
            yield exercise.name
        else:
            status = "Done" if done else "Pending"
            yield f"{exercise.name:<17}\t{fname:<46}\t{status:<7}"
    total = len(exercises)
    percentage = done_count / total * 100 if total else math.nan
    yield f"Progress: You completed {done_count} / {total} exercises ({percentage:.2f} %)."


def rustc_exists() -> bool:
    """Whether `rustc --version` can be started and succeeds."""
    try:
        result = subprocess.run(["rustc", "--version"], stdout=subprocess.DEVNULL, check=False)
    except OSError:
        return False
    return result.returncode == 0


@dataclass
class _SharedHint:
    hint: str | None = None
    lock: threading.Lock = field(default_factory=threading.Lock)


class _Debouncer(FileSystemEventHandler):
    """Collects created or modified files and releases them once they settle."""

    def __init__(self, delay: float) -> None:
        super().__init__()
        self._delay = delay
        self._lock = threading.Lock()
        self._pending: dict[str, float] = {}

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory or event.event_type not in (EVENT_TYPE_CREATED, EVENT_TYPE_MODIFIED):
            return
        with self._lock:
            self._pending[os.fsdecode(event.src_path)] = time.monotonic()

    def ready(self) -> list[str]:
        now = time.monotonic()
        with self._lock:
            settled = [path for path, seen in self._pending.items() if now - seen >= self._delay]
            for path in settled:
                del self._pending[path]
        return settled


def _clear_screen() -> None:
    print("\x1bc")


def _ends_with(path: Path, suffix: Path) -> bool:
    tail = Path(suffix).parts
    parts = path.parts
    return len(tail) <= len(parts) and parts[len(parts) - len(tail):] == tail


def _spawn_watch_shell(shared: _SharedHint, should_quit: threading.Event) -> None:
    print(
        "Welcome to watch mode! You can type 'help' to get an overview "
        "of the commands you can use here."
    )

    def shell() -> None:
        while True:
            try:
                raw = sys.stdin.readline()
            except (OSError, ValueError) as err:
                print(f"error reading command: {err}")
                return
            if not raw:
                return
            command = raw.strip()
            if command == "hint":
                with shared.lock:
                    hint = shared.hint
                if hint is not None:
                    print(hint)
            elif command == "clear":
                print("\x1b[2J\x1b[1;1H")
            elif command == "quit":
                should_quit.set()
                print("Bye!")
            elif command == "help":
                print("Commands available to you in watch mode:")
                print("  hint  - prints the current exercise's hint")
                print("  clear - clears the screen")
                print("  quit  - quits watch mode")
                print("  help  - displays this help message")
                print()
                print("Watch mode automatically re-evaluates the current exercise")
                print("when you edit a file's contents.")
            else:
                print(f"unknown command: {command}")

    threading.Thread(target=shell, daemon=True).start()


def _recheck(
    changed: str, exercises: list[Exercise], verbose: bool, shared: _SharedHint
) -> bool:
    """Re-verify after a change; return True once every exercise is finished."""
    filepath = Path(changed)
    if filepath.suffix != ".rs" or not filepath.exists():
        return False
    filepath = filepath.resolve()
    edited = next((e for e in exercises if _ends_with(filepath, e.path)), None)
    pending = itertools.chain(
        [edited] if edited is not None else [],
        (e for e in exercises if not e.looks_done() and not _ends_with(filepath, e.path)),
    )
    num_done = sum(exercise.looks_done() for exercise in exercises)
    _clear_screen()
    try:
        verify(pending, (num_done, len(exercises)), verbose)
    except VerificationFailed as failed:
        with shared.lock:
            shared.hint = failed.exercise.hint
        return False
    return True


def watch(exercises: Iterable[Exercise], verbose: bool = False) -> WatchStatus:
    """Verify exercises, then re-verify whenever a file below ./exercises changes."""
    exercises = list(exercises)
    handler = _Debouncer(WATCH_DELAY)
    observer = Observer()
    observer.schedule(handler, "./exercises", recursive=True)
    observer.start()
    try:
        _clear_screen()
        try:
            verify(exercises, (0, len(exercises)), verbose)
        except VerificationFailed as failed:
            shared = _SharedHint(failed.exercise.hint)
        else:
            return WatchStatus.FINISHED

        should_quit = threading.Event()
        _spawn_watch_shell(shared, should_quit)
        while True:
            for changed in handler.ready():
                if _recheck(changed, exercises, verbose, shared):
                    return WatchStatus.FINISHED
            if should_quit.wait(1.0):
                return WatchStatus.UNFINISHED
    finally:
        observer.stop()
        observer.join()


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="rustlings",
        description=(
            "Rustlings is a collection of small exercises to get you used to "
            "writing and reading Rust code"
        ),
    )
    parser.add_argument(
        "--nocapture", action="store_true", help="show outputs from the test exercises"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="show the executable version"
    )
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("verify", help="Verifies all exercises according to the recommended order")
    commands.add_parser("watch", help="Reruns `verify` when files were edited")
    run_parser = commands.add_parser("run", help="Runs/Tests a single exercise")
    run_parser.add_argument("name", help="the name of the exercise")
    hint_parser = commands.add_parser("hint", help="Returns a hint for the given exercise")
    hint_parser.add_argument("name", help="the name of the exercise")
    list_parser = commands.add_parser("list", help="Lists the exercises available in Rustlings")
    list_parser.add_argument(
        "-p", "--paths", action="store_true", help="show only the paths of the exercises"
    )
    list_parser.add_argument(
        "-n", "--names", action="store_true", help="show only the names of the exercises"
    )
    list_parser.add_argument(
        "-f",
        "--filter",
        help="provide a string to match exercise names; comma separated patterns are acceptable",
    )
    list_parser.add_argument(
        "-u", "--unsolved", action="store_true", help="display only exercises not yet solved"
    )
    list_parser.add_argument(
        "-s", "--solved", action="store_true", help="display only exercises that have been solved"
    )
    commands.add_parser("lsp", help="Enable rust-analyzer for exercises")
    return parser


def _command_list(args: argparse.Namespace, exercises: list[Exercise]) -> int:
    lines = list_exercises(
        exercises, args.paths, args.names, args.filter, args.unsolved, args.solved
    )
    try:
        for line in lines:
            sys.stdout.write(f"{line}\n")
        sys.stdout.flush()
    except BrokenPipeError:
        with contextlib.suppress(OSError, ValueError):
            os.dup2(os.open(os.devnull, os.O_WRONLY), sys.stdout.fileno())
        return 0
    except OSError:
        return 1
    return 0


def _command_lsp() -> int:
    project = RustAnalyzerProject()
    try:
        project.get_sysroot_src()
    except OSError:
        print("Couldn't find toolchain path, do you have `rustc` installed?")
        return 1
    try:
        project.exercises_to_json()
    except OSError:
        print("Couldn't parse rustlings exercises files")
        return 1
    if not project.crates:
        print("Failed find any exercises, make sure you're in the `rustlings` folder")
        return 0
    try:
        project.write_to_disk()
    except OSError:
        print("Failed to write rust-project.json to disk for rust-analyzer")
        return 0
    print("Successfully generated rust-project.json")
    print("rust-analyzer will now parse exercises, restart your language server or editor")
    return 0


def _command_watch(exercises: list[Exercise], verbose: bool) -> int:
    try:
        status = watch(exercises, verbose)
    except OSError as err:
        print(f"Error: Could not watch your progress. Error message was {err!r}.")
        print(
            "Most likely you've run out of disk space or your 'inotify limit' has been reached."
        )
        return 1
    if status is WatchStatus.FINISHED:
        emoji = "🎉" if use_emoji() else "★"
        print(f"{emoji} All exercises completed! {emoji}")
        print(f"\n{FENISH_LINE}\n")
    else:
        print("We hope you're enjoying learning about Rust!")
        print(
            "If you want to continue working on the exercises at a later point, "
            "you can simply run `rustlings watch` again"
        )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface and return the exit status."""
    try:
        args = _build_parser().parse_args(argv)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1

    if args.version:
        print(f"v{VERSION}")
        return 0

    if args.command is None:
        print(f"\n{WELCOME}\n")

    if not Path("info.toml").exists():
        print(f"{sys.argv[0]} must be run from the rustlings directory")
        print("Try `cd rustlings/`!")
        return 1

    if not rustc_exists():
        print("We cannot find `rustc`.")
        print("Try running `rustc --version` to diagnose your problem.")
        print("For instructions on how to install Rust, check the README.")
        return 1

    exercises = load_exercises("info.toml")
    verbose = args.nocapture

    match args.command:
        case None:
            print(f"{DEFAULT_OUT}\n")
            return 0
        case "list":
            return _command_list(args, exercises)
        case "run" | "hint":
            try:
                exercise = find_exercise(args.name, exercises)
            except LookupError as err:
                print(err.args[0])
                return 1
            if args.command == "hint":
                print(exercise.hint)
                return 0
            try:
                run_exercise(exercise, verbose)
            except RunFailed:
                return 1
            return 0
        case "verify":
            try:
                verify(exercises, (0, len(exercises)), verbose)
            except VerificationFailed:
                return 1
            return 0
        case "lsp":
            return _command_lsp()
        case "watch":
            return _command_watch(exercises, verbose)
    return 1