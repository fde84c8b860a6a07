import pytest

from blockfall.__main__ import main, parse_args


def test_ascii_frame_has_board_dimensions(capsys):
    main(["--ascii", "--seed", "3"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 32
    assert all(len(line) == 16 for line in lines)
    # Only the freshly spawned piece is on the board.
    assert sum(line.count("#") for line in lines) == 4


def test_ascii_frame_after_ticks_custom_size(capsys):
    main(["--ascii", "--seed", "7", "--width", "8", "--height", "10", "--ticks", "3"])
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 10
    assert all(len(line) == 8 for line in lines)


def test_parse_args_builds_config():
    args = parse_args(["--updates-per-second", "2", "--cell-size", "20"])
    assert args.config.period_ms == 500.0
    assert args.config.screen_size == (320, 640)


@pytest.mark.parametrize(
    "argv", [["--width", "0"], ["--updates-per-second", "-1"], ["--ticks", "-2"]]
)
def test_invalid_arguments_exit(argv):
    with pytest.raises(SystemExit):
        parse_args(argv)
