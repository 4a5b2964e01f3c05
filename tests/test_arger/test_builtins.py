import pytest

from arger import Arger, MissingArgumentError, RequiresArg, UnknownOptionError


def make_arger(*args: str) -> Arger:
    arger = Arger(["prog", *args])
    arger.set_app_name("Example App")
    arger.add_help_option("Reads and writes example files.")
    arger.add_version_option("1.0.0")
    arger.add_option("file", "-f|--file", "The file to read", RequiresArg.YES)
    arger.add_option("read", "-r|--read", "Read the file", RequiresArg.NO)
    return arger


def test_help_stops_before_invalid_usage(capsys):
    arger = make_arger("--help", "-f", "bogus")
    arger.set_continue_on_help(False)
    assert arger.parse() is False

    captured = capsys.readouterr()
    assert "Help: Example App" in captured.out
    assert arger.get_passed_options() == ("help",)
    assert arger.get_option_argument("file") is None


def test_help_stops_before_unknown_option(capsys):
    arger = make_arger("-h", "--nope")
    arger.set_continue_on_help(False)
    assert arger.parse() is False
    assert "Help: Example App" in capsys.readouterr().out


def test_help_lists_every_option(capsys):
    arger = make_arger("-h")
    arger.set_continue_on_help(False)
    arger.parse()

    out = capsys.readouterr().out
    lines = out.splitlines()
    assert lines[0] == "Help: Example App"
    assert lines[1] == "Reads and writes example files."
    option_lines = lines[2:]
    assert len(option_lines) == 4
    for name, line in zip(("help", "version", "file", "read"), option_lines):
        assert line.startswith(f"  {name} ")
    assert "-f, --file" in option_lines[2]
    assert "The file to read" in option_lines[2]


def test_help_continues_by_default(capsys):
    arger = make_arger("-h", "-r")
    assert arger.parse() is True
    assert arger.option_exists("read")
    # Printed once inline, then again when the queued callback is dispatched.
    assert capsys.readouterr().out.count("Help: Example App") == 2


def test_version_continues_by_default(capsys):
    arger = make_arger("--version")
    assert arger.parse() is True
    assert capsys.readouterr().out.count("Version: Example App") == 2


def test_overridden_help_callback_is_dispatched(capsys):
    calls = []
    arger = make_arger("-h")
    arger.add_option_event("help", "-h", "", RequiresArg.NO, lambda a: calls.append(a))
    assert arger.parse() is True
    assert calls == [arger]
    # The built-in help still prints inline while auto help is enabled.
    assert capsys.readouterr().out.count("Help: Example App") == 1


def test_long_help_message_is_not_wrapped(capsys):
    message = " ".join(["word"] * 40)
    arger = Arger(["prog", "-h"])
    arger.set_app_name("Example App")
    arger.add_help_option(message)
    arger.set_continue_on_help(False)
    arger.parse()
    assert message in capsys.readouterr().out.splitlines()


def test_help_continuing_still_validates(capsys):
    arger = make_arger("-h", "-f")
    with pytest.raises(MissingArgumentError):
        arger.parse()
    assert "Help: Example App" in capsys.readouterr().out


def test_help_runs_inline_against_partial_state(capsys):
    arger = make_arger("-r", "-h", "-f", "late.txt")
    arger.set_continue_on_help(False)
    assert arger.parse() is False
    assert arger.get_passed_options() == ("read", "help")
    assert arger.get_option_argument("file") is None


def test_invalid_option_before_help_still_fails(capsys):
    arger = make_arger("-x", "-h")
    arger.set_continue_on_help(False)
    with pytest.raises(UnknownOptionError):
        arger.parse()
    assert capsys.readouterr().out == ""


def test_version_stops(capsys):
    arger = make_arger("--version", "-x")
    arger.set_continue_on_version(False)
    assert arger.parse() is False
    assert capsys.readouterr().out.strip() == "Version: Example App"


def test_version_output_shows_app_name_not_version(capsys):
    """The version line only shows the app name; the version is kept for queries."""
    arger = make_arger("-v")
    assert arger.parse() is True
    out = capsys.readouterr().out
    assert "Version: Example App" in out
    assert "1.0.0" not in out
    assert arger.get_app_version() == "1.0.0"


def test_help_before_version_wins(capsys):
    arger = make_arger("-h", "-v")
    arger.set_continue_on_help(False)
    arger.set_continue_on_version(False)
    assert arger.parse() is False
    out = capsys.readouterr().out
    assert "Help: Example App" in out
    assert "Version:" not in out


def test_version_before_help_wins(capsys):
    arger = make_arger("-v", "-h")
    arger.set_continue_on_help(False)
    arger.set_continue_on_version(False)
    assert arger.parse() is False
    out = capsys.readouterr().out
    assert "Version: Example App" in out
    assert "Help:" not in out


def test_both_run_when_continuing(capsys):
    arger = make_arger("-v", "-h", "-r")
    assert arger.parse() is True
    out = capsys.readouterr().out
    assert out.index("Version: Example App") < out.index("Help: Example App")
    assert arger.get_passed_options() == ("version", "help", "read")


def test_manual_help_option_is_an_ordinary_event(capsys):
    calls = []
    arger = Arger(["prog", "-h", "-x"])
    arger.add_option_event("help", "-h", "", RequiresArg.NO, lambda a: calls.append(1))
    arger.set_continue_on_help(False)
    with pytest.raises(UnknownOptionError):
        arger.parse()
    assert calls == []
    assert capsys.readouterr().out == ""


def test_help_escapes_markup(capsys):
    arger = Arger(["prog", "-h"])
    arger.set_app_name("[bold]App[/bold]")
    arger.add_help_option()
    arger.add_option("debug", "-d", "Enable [debug] output")
    arger.parse()
    out = capsys.readouterr().out
    assert "Help: [bold]App[/bold]" in out
    assert "Enable [debug] output" in out


def test_builtins_set_config_flags():
    arger = Arger(["prog"])
    assert not arger.config.using_auto_help
    assert not arger.config.using_auto_version
    arger.add_help_option("message")
    arger.add_version_option("2.3.4")
    assert arger.config.using_auto_help
    assert arger.config.using_auto_version
    assert arger.config.help_text == "message"
    assert arger.get_app_version() == "2.3.4"
    assert arger.get_option("help").identifiers == ("-h", "--help")
    assert arger.get_option("version").identifiers == ("-v", "--version")
