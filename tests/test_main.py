import pytest

import main


def test_parse_args_defaults():
    args = main.parse_args([])
    assert args.tick_interval == 20
    assert (args.width, args.height) == (800, 800)
    assert args.log_level == "INFO"


def test_parse_args_rejects_non_positive_tick():
    with pytest.raises(SystemExit):
        main.parse_args(["--tick-interval", "0"])


def test_main_runs_app(monkeypatch):
    created = {}

    class DummyApp:
        def __init__(self, **kwargs):
            created.update(kwargs)

        def run(self):
            created["ran"] = True

    monkeypatch.setattr(main, "App", DummyApp)
    assert main.main(["--tick-interval", "35", "--width", "640"]) == 0
    assert created == {"tick_interval_ms": 35, "width": 640, "height": 800, "ran": True}
