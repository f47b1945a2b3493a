import subprocess
from pathlib import Path

import pytest

from rustlings.exercise import Exercise, Mode, temp_file
from rustlings.run import RunFailed, run


class FakeToolchain:
    def __init__(self, *, compile_ok=True, run_ok=True, stdout="", stderr=""):
        self.compile_ok = compile_ok
        self.run_ok = run_ok
        self.stdout = stdout
        self.stderr = stderr
        self.calls = []

    def __call__(self, args, **kwargs):
        args = [str(arg) for arg in args]
        self.calls.append(args)
        if args[0] == "rustc":
            if not self.compile_ok:
                return subprocess.CompletedProcess(args, 1, b"", self.stderr.encode())
            Path(args[args.index("-o") + 1]).write_bytes(b"")
            return subprocess.CompletedProcess(args, 0, b"", b"")
        if args[0] == "cargo":
            return subprocess.CompletedProcess(args, 0, b"", b"")
        code = 0 if self.run_ok else 101
        return subprocess.CompletedProcess(
            args, code, self.stdout.encode(), self.stderr.encode()
        )


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def install(monkeypatch, **kwargs):
    fake = FakeToolchain(**kwargs)
    monkeypatch.setattr(subprocess, "run", fake)
    return fake


def make_exercise(root, name, mode, source="fn main() {\n}\n"):
    (root / f"{name}.rs").write_text(source, encoding="utf-8")
    return Exercise(name=name, path=Path(f"{name}.rs"), mode=mode)


def test_compile_exercise_prints_output_and_success(workspace, monkeypatch, capsys):
    install(monkeypatch, stdout="hello from exercise")
    exercise = make_exercise(workspace, "compSuccess", Mode.COMPILE)
    run(exercise)
    out = capsys.readouterr().out
    assert "hello from exercise" in out
    assert "Successfully ran compSuccess.rs" in out


def test_compiled_binary_is_removed_after_run(workspace, monkeypatch):
    fake = install(monkeypatch)
    exercise = make_exercise(workspace, "compSuccess", Mode.COMPILE)
    run(exercise)
    produced = [call[call.index("-o") + 1] for call in fake.calls if call[0] == "rustc"]
    assert produced == [temp_file()]
    assert not Path(temp_file()).exists()


def test_compile_failure_raises_with_compiler_output(workspace, monkeypatch, capsys):
    install(monkeypatch, compile_ok=False, stderr="error: expected pattern")
    exercise = make_exercise(workspace, "compFailure", Mode.COMPILE, "fn main() {\n    let\n}\n")
    with pytest.raises(RunFailed) as caught:
        run(exercise)
    assert caught.value.exercise is exercise
    out = capsys.readouterr().out
    assert "error: expected pattern" in out
    assert "Compilation of compFailure.rs failed!" in out


def test_runtime_failure_raises(workspace, monkeypatch, capsys):
    install(monkeypatch, run_ok=False, stderr="thread 'main' panicked")
    exercise = make_exercise(workspace, "panics", Mode.COMPILE)
    with pytest.raises(RunFailed):
        run(exercise)
    out = capsys.readouterr().out
    assert "thread 'main' panicked" in out
    assert "Ran panics.rs with errors" in out


def test_test_exercise_shows_output_when_verbose(workspace, monkeypatch, capsys):
    fake = install(monkeypatch, stdout="THIS TEST TOO SHALL PASS")
    exercise = make_exercise(workspace, "testSuccess", Mode.TEST)
    run(exercise, verbose=True)
    assert "THIS TEST TOO SHALL PASS" in capsys.readouterr().out
    assert [temp_file(), "--show-output"] in fake.calls


def test_test_exercise_hides_output_when_not_verbose(workspace, monkeypatch, capsys):
    install(monkeypatch, stdout="THIS TEST TOO SHALL PASS")
    exercise = make_exercise(workspace, "testSuccess", Mode.TEST)
    run(exercise, verbose=False)
    assert "THIS TEST TOO SHALL PASS" not in capsys.readouterr().out


def test_failing_tests_raise(workspace, monkeypatch, capsys):
    install(monkeypatch, run_ok=False, stdout="test not_passing ... FAILED")
    exercise = make_exercise(workspace, "testNotPassed", Mode.TEST)
    with pytest.raises(RunFailed) as caught:
        run(exercise)
    assert caught.value.exercise is exercise
    assert "Testing of testNotPassed.rs failed!" in capsys.readouterr().out


def test_pending_exercise_is_run_without_prompt(workspace, monkeypatch, capsys):
    install(monkeypatch)
    exercise = make_exercise(
        workspace, "pending_exercise", Mode.COMPILE, "// I AM NOT DONE\nfn main() {}\n"
    )
    run(exercise)
    assert "I AM NOT DONE" not in capsys.readouterr().out


def test_clippy_exercise_writes_manifest_and_runs(workspace, monkeypatch, capsys):
    (workspace / "exercises" / "clippy").mkdir(parents=True)
    fake = install(monkeypatch)
    exercise = make_exercise(workspace, "clippy1", Mode.CLIPPY)
    run(exercise)
    manifest = (workspace / "exercises" / "clippy" / "Cargo.toml").read_text(encoding="utf-8")
    assert 'name = "clippy1"' in manifest
    assert any(call[:2] == ["cargo", "clippy"] for call in fake.calls)
    assert "Successfully ran clippy1.rs" in capsys.readouterr().out