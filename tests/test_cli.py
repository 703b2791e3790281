import pytest

from neveridle.cli import ExitCode, build_parser, format_exit_code, main
from neveridle.config import OptionsBuilder


def run_main(argv, injector, sleep=None):
    return main(argv, injector_factory=lambda: injector, sleep=sleep or (lambda s: None))


def test_once_no_default_space(injector, capsys):
    naps = []
    code = run_main(["--once", "--noDefault", "--keycode=SPACE"], injector, sleep=naps.append)
    assert code == ExitCode.SUCCESS
    assert injector.calls == [("key", "SPACE")]
    assert naps == []


def test_fixed_delay_every_cycle(injector, recording_sleep):
    sleep = recording_sleep(stop_after=4)
    code = run_main(["--minDelay=5", "--maxDelay=5", "--noRandomDelay"], injector, sleep=sleep)
    assert code == ExitCode.SUCCESS
    assert sleep.delays == [5, 5, 5, 5]


def test_unparseable_max_delay_keeps_default(injector, recording_sleep, capsys):
    sleep = recording_sleep(stop_after=2)
    code = run_main(["--maxDelay=abc", "-r"], injector, sleep=sleep)
    assert code == ExitCode.SUCCESS
    assert sleep.delays == [30, 30]
    assert "Maximal delay reverts to 30." in capsys.readouterr().err


def test_huge_max_delay_keeps_default(injector, recording_sleep, capsys):
    sleep = recording_sleep(stop_after=2)
    code = run_main(["--maxDelay=99999999999999999999", "-r"], injector, sleep=sleep)
    assert code == ExitCode.SUCCESS
    assert sleep.delays == [30, 30]
    assert "Maximal delay reverts to 30." in capsys.readouterr().err


def test_help_prints_usage_and_skips_loop(injector, capsys):
    code = run_main(["--help", "-k", "enter"], injector)
    assert code == ExitCode.SUCCESS
    assert injector.calls == []
    out = capsys.readouterr().out
    assert "--keycode" in out
    assert "Command-line options:" in out
    assert "Option values:" in out
    assert "key_code=ENTER" in out
    assert "0xFFFFFFFF\tOTHER_ERROR" in out
    assert "SCROLLLOCK" in out


def test_malformed_option_exits_with_parsing_error(injector, capsys):
    with pytest.raises(SystemExit) as excinfo:
        run_main(["--bogus"], injector)
    assert excinfo.value.code == ExitCode.OPTION_PARSING_ERROR
    assert "unrecognized arguments" in capsys.readouterr().err
    assert injector.calls == []


def test_missing_option_argument_exits_with_parsing_error(injector):
    with pytest.raises(SystemExit) as excinfo:
        run_main(["--keycode"], injector)
    assert excinfo.value.code == 1


def test_validation_error(injector, monkeypatch, capsys):
    def broken_build(self):
        raise TypeError("bad delay type")

    monkeypatch.setattr(OptionsBuilder, "build", broken_build)
    assert run_main(["-1"], injector) == ExitCode.OPTION_VALIDATION_ERROR
    assert "bad delay type" in capsys.readouterr().err
    assert injector.calls == []


def test_unexpected_error_is_other_error(injector, capsys):
    def failing_factory():
        raise RuntimeError("no display")

    code = main(["-1"], injector_factory=failing_factory)
    assert code == ExitCode.OTHER_ERROR == -1
    assert "no display" in capsys.readouterr().err


def test_injection_failure_is_not_fatal(fake_injector_cls, capsys):
    injector = fake_injector_cls(fail_move=True)
    assert run_main(["-1", "-v"], injector) == ExitCode.SUCCESS
    assert "move rejected" in capsys.readouterr().err


def test_ctrl_c_stops_cleanly(injector, recording_sleep, capsys):
    assert run_main([], injector, sleep=recording_sleep(stop_after=1)) == ExitCode.SUCCESS
    assert "Stopped by user (Ctrl+C)" in capsys.readouterr().out


def test_parser_last_flag_wins_and_verbose_stacks():
    options = build_parser().parse_args(
        ["--maxDelay=10", "--maxDelay=20", "-vv", "-v", "-k", "a", "-k", "b"],
        namespace=OptionsBuilder(),
    )
    config = options.build()
    assert config.max_delay == 20
    assert config.verbosity == 3
    assert config.key_code == "B"


def test_negative_and_reversed_delays_are_corrected():
    options = build_parser().parse_args(
        ["--minDelay=-40", "--maxDelay", "10"], namespace=OptionsBuilder()
    )
    config = options.build()
    assert (config.min_delay, config.max_delay) == (10, 40)


def test_format_exit_code():
    assert format_exit_code(ExitCode.OPTION_VALIDATION_ERROR) == "0x00000002\tOPTION_VALIDATION_ERROR"
