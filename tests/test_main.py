"""
Command-line entry point tests
"""

import pytest

import main


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    """Keep main() from replacing pytest's root logger handlers"""
    monkeypatch.setattr(main, "configure_logging", lambda verbose=False: None)


class TestMain:
    """Tests for main()"""

    def test_relative(self, capsys):
        exit_code = main.main([
            "2026-10-13T04:30", "--base", "2026-10-14T12:00",
            "--time-zone", "UTC", "--locale", "en-US",
        ])

        assert exit_code == 0
        assert capsys.readouterr().out == "yesterday at 4:30 AM\n"

    def test_locale_and_week_start(self, capsys):
        exit_code = main.main([
            "2026-10-18T10:00", "--base", "2026-10-14T12:00",
            "--time-zone", "UTC", "--locale", "it", "--week-starts-on", "0",
        ])

        assert exit_code == 0
        assert capsys.readouterr().out == "domenica prossima alle 10:00\n"

    def test_pattern(self, capsys):
        exit_code = main.main([
            "2026-10-08T16:05", "--pattern", "PP", "--time-zone", "UTC", "--locale", "en-US",
        ])

        assert exit_code == 0
        assert capsys.readouterr().out == "Oct 8, 2026\n"

    def test_invalid_date(self, capsys):
        exit_code = main.main(["garbage", "--base", "2026-10-14T12:00", "--time-zone", "UTC"])

        assert exit_code == 1
        assert capsys.readouterr().out == ""

    def test_unknown_locale(self):
        assert main.main(["2026-10-13T04:30", "--locale", "xx"]) == 1

    def test_unknown_time_zone(self):
        assert main.main(["2026-10-13T04:30", "--time-zone", "Nowhere/Special"]) == 1
