import pytest

from powercheck.app import parse_args


def test_parse_args_defaults_to_window_mode():
    assert parse_args([]).smode is False


@pytest.mark.parametrize("flag", ["-smode", "--smode"])
def test_parse_args_silence_mode(flag):
    assert parse_args([flag]).smode is True


def test_parse_args_rejects_unknown_option():
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["--bogus"])
    assert excinfo.value.code == 2


def test_parse_args_rejects_positional():
    with pytest.raises(SystemExit) as excinfo:
        parse_args(["extra"])
    assert excinfo.value.code == 2