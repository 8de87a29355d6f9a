import pytest

from tpclases.clock import AM, PM, Clock, DisplayKind, main, prompt_in_range


def _feed(monkeypatch, answers):
    remaining = iter(answers)

    def fake_input(*_args):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_seconds_carry_into_hours():
    assert Clock(1, 0, 3600) == Clock(2)


def test_minutes_carry_into_hours():
    assert Clock(0, 125) == Clock(2, 5)


def test_seconds_and_minutes_carry_together():
    assert Clock(3, 59, 61) == Clock(4, 0, 1)


def test_hours_above_eleven_rejected():
    with pytest.raises(ValueError):
        Clock(12)


def test_carry_past_eleven_rejected():
    with pytest.raises(ValueError):
        Clock(11, 60)


def test_negative_values_rejected():
    with pytest.raises(ValueError):
        Clock(1, -1)


def test_set_seconds_carries():
    clock = Clock(1, 59, 0)
    clock.set_seconds(60)
    assert clock == Clock(2, 0, 0)


def test_set_seconds_overflow_leaves_clock_unchanged():
    clock = Clock(11, 59, 10)
    with pytest.raises(ValueError):
        clock.set_seconds(60)
    assert clock == Clock(11, 59, 10)


def test_set_minutes_keeps_seconds():
    clock = Clock(1, 0, 30)
    clock.set_minutes(90)
    assert clock == Clock(2, 30, 30)


def test_set_hours():
    clock = Clock(1, 2, 3)
    clock.set_hours(7)
    assert clock == Clock(7, 2, 3)
    with pytest.raises(ValueError):
        clock.set_hours(12)
    assert clock.hours == 7


def test_set_period():
    clock = Clock(5)
    clock.set_period(PM)
    assert clock.render(DisplayKind.PERIOD) == PM


def test_render_full():
    assert Clock(11, 4, 59, AM).render(DisplayKind.FULL) == "11h, 04m, 59s a.m."


def test_render_minutes_padded():
    assert Clock(11, 4, 59).render(2) == "04m"


def test_render_hours_includes_period():
    clock = Clock(11, 4, 59, PM)
    assert clock.render(DisplayKind.HOURS).endswith(PM)
    assert clock.render(DisplayKind.FULL).startswith(clock.render(DisplayKind.HOURS).split()[0])


def test_render_seconds_matches_full():
    clock = Clock(3, 7, 9)
    assert clock.render(DisplayKind.SECONDS) in clock.render(DisplayKind.FULL)


def test_render_24h_pm():
    assert Clock(3, period=PM).render(DisplayKind.TWENTY_FOUR) == "15h"


def test_render_24h_am_matches_hours():
    clock = Clock(3)
    assert clock.render(6) == clock.render(1).split()[0]


@pytest.mark.parametrize("kind", [0, 7, -1])
def test_render_invalid_kind(kind):
    with pytest.raises(ValueError):
        Clock().render(kind)


def test_show_prints_render(capsys):
    clock = Clock(9, 8, 7, PM)
    clock.show(DisplayKind.FULL)
    assert capsys.readouterr().out == clock.render(DisplayKind.FULL) + "\n"


def test_prompt_in_range_accepts(monkeypatch):
    _feed(monkeypatch, ["1", "5"])
    assert prompt_in_range(0, 11) == 5


def test_prompt_in_range_retries(monkeypatch):
    _feed(monkeypatch, ["1", "20", "1", "3"])
    assert prompt_in_range(0, 11) == 3


def test_prompt_in_range_give_up(monkeypatch):
    _feed(monkeypatch, ["0"])
    assert prompt_in_range(0, 11) is None


def test_main_full_session(monkeypatch, capsys):
    _feed(
        monkeypatch,
        ["3", "3", "30", "3", "30", "15", "3", "30", "15", "1",
         "5", "10", "20", "0", "0"],
    )
    assert main([]) == 0
    out = capsys.readouterr().out
    assert Clock(3, 30, 15, PM).render(DisplayKind.FULL) in out
    assert Clock(11, 4, 59, AM).render(DisplayKind.FULL) in out
    assert Clock(5, 10, 20, AM).render(DisplayKind.FULL) in out


def test_main_overflow_fails(monkeypatch):
    _feed(monkeypatch, ["3", "11", "120"])
    assert main([]) == 1


def test_main_give_up_fails(monkeypatch):
    _feed(monkeypatch, ["20", "0"])
    assert main([]) == 1