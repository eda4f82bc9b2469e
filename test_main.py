from datetime import date

import main
from converter import convert_to_hijri
from settings import DisplayConfig


def test_print_today(monkeypatch, capsys):
    monkeypatch.setattr(main, "load_settings",
                        lambda: DisplayConfig(show_week_day=False, hijri_lang="en"))

    main.print_today(lambda: date(2024, 3, 11))

    assert capsys.readouterr().out == "1 Ramadan 1445\n"


def test_print_flag(monkeypatch, capsys):
    monkeypatch.setattr(main, "setup_logging", lambda **kwargs: None)
    monkeypatch.setattr(main, "load_settings", lambda: DisplayConfig(show_week_day=False))

    main.main(["--print"])

    expected = convert_to_hijri(date.today()).format()
    assert capsys.readouterr().out.strip() == expected
