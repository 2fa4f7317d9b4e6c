import pytest

from ferrule import ui


@pytest.fixture(autouse=True)
def _plain_env(monkeypatch):
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_EMOJI", raising=False)


def test_no_emoji_follows_environment(monkeypatch):
    assert ui.no_emoji() is False
    monkeypatch.setenv("NO_EMOJI", "1")
    assert ui.no_emoji() is True


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("Ran exercises/a.rs with errors")
    assert capsys.readouterr().out == "! Ran exercises/a.rs with errors\n"


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.success("Successfully ran exercises/a.rs!")
    assert capsys.readouterr().out == "✓ Successfully ran exercises/a.rs!\n"


def test_warn_with_emoji(capsys):
    ui.warn("broken")
    out = capsys.readouterr().out
    assert out.startswith("⚠️")
    assert out.endswith(" broken\n")


def test_success_with_emoji(capsys):
    ui.success("fine")
    assert capsys.readouterr().out == "✅ fine\n"


def test_message_is_not_interpreted_as_markup(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    ui.warn("[bold]x[/bold] :smile:")
    assert capsys.readouterr().out == "! [bold]x[/bold] :smile:\n"