"""Tests for the interactive shell and its history."""

from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from journy_cli.main import JournyShell
from journy_cli.utils.history import RedactingInMemoryHistory, contains_secret, create_history


def run_shell(config, text):
    with create_pipe_input() as pipe:
        pipe.send_text(text)
        return JournyShell(config, input=pipe, output=DummyOutput()).run()


class TestShellHistory:
    """Accepted lines are recorded once and credentials never are."""

    def test_api_key_not_written_to_history_file(self, config):
        status = run_shell(config, "config set --api-key SUPERSECRET123\rhelp\rquit\r")

        assert status == 0
        assert config.api_key == "SUPERSECRET123"
        text = config.history_file.read_text()
        assert "SUPERSECRET123" not in text
        assert "--api-key" not in text

    def test_lines_recorded_once(self, config):
        run_shell(config, "help\rquit\r")

        text = config.history_file.read_text()
        assert text.count("+help") == 1
        assert text.count("+quit") == 1

    def test_in_memory_history_skips_secrets(self):
        history = create_history()
        history.append_string("config set --api-key abc")
        history.append_string("validate")

        assert isinstance(history, RedactingInMemoryHistory)
        assert list(history.get_strings()) == ["validate"]

    def test_contains_secret(self):
        assert contains_secret("config set --api-key=abc")
        assert not contains_secret("config show")


class TestShellLoop:
    def test_ctrl_d_exits_cleanly(self, config):
        assert run_shell(config, "\x04") == 0

    def test_unparseable_line_keeps_running(self, config, capsys):
        assert run_shell(config, 'user upsert "u1\rquit\r') == 0
        assert "Could not parse input" in capsys.readouterr().err
