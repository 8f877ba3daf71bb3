from colorguide.viewer import crosshair_box, parse_args


def test_crosshair_is_centered():
    x1, y1, x2, y2 = crosshair_box(1280, 720)
    assert (x1 + x2) // 2 == 640
    assert (y1 + y2) // 2 == 360
    assert x2 - x1 == 72


def test_parse_args_defaults():
    args = parse_args([])
    assert args.fps == 1.0
    assert args.sample_point == "center"
    assert not args.no_hue_wrap


def test_parse_args_overrides():
    args = parse_args(["--fps", "0", "--sample-point", "legacy", "--no-hue-wrap", "-v"])
    assert args.fps == 0
    assert args.sample_point == "legacy"
    assert args.no_hue_wrap and args.verbose
