import subprocess
from pathlib import Path
from unittest import mock

import pytest

from ferrule import verify as verify_mod
from ferrule.exercise import Exercise, Mode

PENDING = "// fake_exercise\n\n// I AM NOT DONE\n\nfn main() {\n\n}\n"
FINISHED = "// fake_exercise\n\nfn main() {\n\n}\n"
PENDING_TEST = "// I AM NOT DONE\n\n#[test]\nfn it_works() {}\n"


class FakeProcesses:
    def __init__(self, failing_sources=(), run_code=0, stdout=b""):
        self.failing_sources = set(failing_sources)
        self.run_code = run_code
        self.stdout = stdout
        self.calls = []

    def __call__(self, args, **kwargs):
        self.calls.append(list(args))
        if args[0] in ("rustc", "cargo"):
            code = 1 if self.failing_sources & set(args) else 0
            return subprocess.CompletedProcess(args, code, b"", b"compiler says no")
        return subprocess.CompletedProcess(args, self.run_code, self.stdout, b"")


@pytest.fixture(autouse=True)
def _workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("NO_EMOJI", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


def _exercise(name, text, mode=Mode.COMPILE):
    path = Path(f"{name}.rs")
    path.write_text(text)
    return Exercise(name=name, path=path, mode=mode, hint="Hello!")


def test_verify_all_success(capsys):
    exercises = [
        _exercise("compSuccess", FINISHED),
        _exercise("testSuccess", FINISHED, Mode.TEST),
    ]
    with mock.patch("subprocess.run", FakeProcesses()):
        assert verify_mod.verify(exercises) is None
    out = capsys.readouterr().out
    assert "Successfully ran compSuccess.rs!" in out
    assert "Successfully tested testSuccess.rs" in out


def test_verify_stops_at_first_failure(capsys):
    first = _exercise("a", FINISHED)
    broken = _exercise("b", FINISHED)
    last = _exercise("c", FINISHED)
    fake = FakeProcesses(failing_sources={"b.rs"})
    with mock.patch("subprocess.run", fake):
        assert verify_mod.verify([first, broken, last]) is broken
    assert not any("c.rs" in call for call in fake.calls)
    out = capsys.readouterr().out
    assert "Compiling of b.rs failed! Please try again. Here's the output:" in out
    assert "compiler says no" in out


def test_verify_returns_pending_exercise(capsys):
    pending = _exercise("pending_exercise", PENDING)
    with mock.patch("subprocess.run", FakeProcesses()):
        assert verify_mod.verify([pending]) is pending
    out = capsys.readouterr().out
    assert "You can keep working on this exercise," in out
    assert " 3 |  // I AM NOT DONE" in out


def test_verify_reports_runtime_errors(capsys):
    exercise = _exercise("a", FINISHED)
    with mock.patch("subprocess.run", FakeProcesses(run_code=101)):
        assert verify_mod.verify([exercise]) is exercise
    assert "Ran a.rs with errors" in capsys.readouterr().out


def test_test_does_not_prompt(capsys):
    exercise = _exercise("pending_test_exercise", PENDING_TEST, Mode.TEST)
    with mock.patch("subprocess.run", FakeProcesses()):
        assert verify_mod.test(exercise, False) is True
    assert "I AM NOT DONE" not in capsys.readouterr().out


def test_test_verbose_shows_output(capsys):
    exercise = _exercise("testSuccess", FINISHED, Mode.TEST)
    fake = FakeProcesses(stdout=b"THIS TEST TOO SHALL PASS\n")
    with mock.patch("subprocess.run", fake):
        assert verify_mod.test(exercise, True) is True
    assert "THIS TEST TOO SHALL PASS" in capsys.readouterr().out


def test_test_quiet_hides_output(capsys):
    exercise = _exercise("testSuccess", FINISHED, Mode.TEST)
    fake = FakeProcesses(stdout=b"THIS TEST TOO SHALL PASS\n")
    with mock.patch("subprocess.run", fake):
        assert verify_mod.test(exercise, False) is True
    assert "THIS TEST TOO SHALL PASS" not in capsys.readouterr().out


def test_test_failure(capsys):
    exercise = _exercise("testNotPassed", FINISHED, Mode.TEST)
    with mock.patch("subprocess.run", FakeProcesses(run_code=101)):
        assert verify_mod.test(exercise, False) is False
    assert "Testing of testNotPassed.rs failed!" in capsys.readouterr().out


def test_prompt_for_done_exercise(capsys):
    assert verify_mod.prompt_for_completion(_exercise("done", FINISHED), None) is True
    assert capsys.readouterr().out == ""


def test_prompt_shows_output(capsys):
    exercise = _exercise("pending_exercise", PENDING)
    assert verify_mod.prompt_for_completion(exercise, "hello output") is False
    out = capsys.readouterr().out
    assert "Output:" in out
    assert "hello output" in out
    assert out.count("====================") == 2


def test_prompt_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    exercise = _exercise("pending_exercise", PENDING)
    assert verify_mod.prompt_for_completion(exercise, None) is False
    out = capsys.readouterr().out
    assert "~*~ The code is compiling! ~*~" in out
    assert "Output:" not in out
    assert "or jump into the next one by removing the `I AM NOT DONE` comment:" in out


def test_clippy_pending_prompts(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    Path("exercises/clippy").mkdir(parents=True)
    exercise = _exercise("clippy1", PENDING, Mode.CLIPPY)
    with mock.patch("subprocess.run", FakeProcesses()):
        assert verify_mod.verify([exercise]) is exercise
    out = capsys.readouterr().out
    assert "Successfully compiled clippy1.rs!" in out
    assert "The code is compiling, and Clippy is happy!" in out