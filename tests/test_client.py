import os
import signal

import pytest

from sigtalk.client import UsageError, main, send_message, validate_args


def test_validate_args_returns_pid_and_message():
    assert validate_args(["42", "hello"]) == (42, "hello")


@pytest.mark.parametrize("argv", [[], ["42"], ["42", "a", "b"]])
def test_validate_args_wrong_count(argv):
    with pytest.raises(UsageError) as info:
        validate_args(argv)
    assert "Wrong number of arguments" in str(info.value)


@pytest.mark.parametrize("pid_text", ["0", "-5", "+5", "12a", "", " 7"])
def test_validate_args_bad_pid(pid_text):
    with pytest.raises(UsageError) as info:
        validate_args([pid_text, "msg"])
    assert "PID is invalid" in str(info.value)


def test_usage_error_exit_code():
    assert UsageError("x").exit_code == 22


def test_send_message_to_self_with_echo(capsys):
    sent = send_message(os.getpid(), "A", echo=True)
    assert sent == 2
    assert capsys.readouterr().out == "01000001 00001010 "


def test_send_message_without_echo_writes_nothing(capsys):
    sent = send_message(os.getpid(), "hi")
    assert sent == len("hi") + 1
    assert capsys.readouterr().out == ""


def test_send_message_restores_handlers():
    before = (signal.getsignal(signal.SIGUSR1), signal.getsignal(signal.SIGUSR2))
    sent = send_message(os.getpid(), b"z")
    after = (signal.getsignal(signal.SIGUSR1), signal.getsignal(signal.SIGUSR2))
    assert sent == 2
    assert after == before


def test_main_wrong_arguments(capsys):
    assert main(["only-one"]) == 22
    assert "Usage" in capsys.readouterr().out


def test_main_invalid_pid(capsys):
    assert main(["0", "hello"]) == 22
    assert "PID is invalid" in capsys.readouterr().out


def test_main_sends_to_self_with_echo(capsys):
    assert main(["--echo", str(os.getpid()), "A"]) == 0
    assert capsys.readouterr().out == "01000001 00001010 "


def test_main_unknown_process(capsys):
    assert main(["1073741823", "hello"]) == 1
    assert "cannot signal process 1073741823" in capsys.readouterr().out