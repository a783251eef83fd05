from __future__ import annotations

import sys

import pytest

from upload_release.errors import CommandError
from upload_release.process import SubprocessRunner, format_command


def test_format_command_quotes_arguments() -> None:
    assert format_command(["gh", "--notes", "two words"]) == "gh --notes 'two words'"


def test_run_prints_command_and_captures_stdout(capfd: pytest.CaptureFixture[str]) -> None:
    runner = SubprocessRunner()

    out = runner.run([sys.executable, "-c", "print('hello')"], capture_stdout=True)

    assert out.strip() == "hello"
    assert "Running command: " in capfd.readouterr().out


def test_run_streams_stdout(capfd: pytest.CaptureFixture[str]) -> None:
    runner = SubprocessRunner()

    assert runner.run([sys.executable, "-c", "print('streamed')"]) == ""
    assert "streamed" in capfd.readouterr().out


def test_nonzero_exit_raises_with_stderr(tmp_path) -> None:
    runner = SubprocessRunner(cwd=tmp_path)
    script = "import sys; sys.stderr.write('bad things'); sys.exit(3)"

    with pytest.raises(CommandError) as excinfo:
        runner.run([sys.executable, "-c", script])

    assert excinfo.value.returncode == 3
    assert excinfo.value.stderr == "bad things"
    assert "command output: bad things" in str(excinfo.value)


def test_missing_program_raises_command_error() -> None:
    runner = SubprocessRunner()

    with pytest.raises(CommandError) as excinfo:
        runner.run(["definitely-not-a-real-program-xyz"])

    assert excinfo.value.returncode == -1


def test_undecodable_stderr_still_raises_command_error() -> None:
    runner = SubprocessRunner()
    script = "import sys; sys.stderr.buffer.write(b'\\xff\\xfe bad'); sys.exit(2)"

    with pytest.raises(CommandError) as excinfo:
        runner.run([sys.executable, "-c", script])

    assert excinfo.value.returncode == 2
    assert "bad" in excinfo.value.stderr
    assert "\ufffd" in excinfo.value.stderr


def test_undecodable_stdout_is_replaced() -> None:
    runner = SubprocessRunner()
    script = "import sys; sys.stdout.buffer.write(b'ok \\xff')"

    out = runner.run([sys.executable, "-c", script], capture_stdout=True)

    assert out.startswith("ok ")
    assert out.endswith("\ufffd")
