"""A 12-hour clock that carries overflowing seconds and minutes, with an interactive demo."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from enum import IntEnum

AM = "a.m."
PM = "p.m."
MAX_HOUR = 11


class DisplayKind(IntEnum):
    """What part of the clock to render."""

    HOURS = 1
    MINUTES = 2
    SECONDS = 3
    PERIOD = 4
    FULL = 5
    TWENTY_FOUR = 6


def _normalize(hours: int, minutes: int, seconds: int) -> tuple[int, int, int]:
    """Carry seconds into minutes and minutes into hours; reject hours above the limit."""
    for label, value in (("hours", hours), ("minutes", minutes), ("seconds", seconds)):
        if value < 0:
            raise ValueError(f"{label} must not be negative, got {value}")
    minutes += seconds // 60
    seconds %= 60
    hours += minutes // 60
    minutes %= 60
    if hours > MAX_HOUR:
        raise ValueError(f"hours has a value > {MAX_HOUR}: {hours}")
    return hours, minutes, seconds


@dataclass
class Clock:
    """Time of day on a 12-hour dial, hours 0 to 11 plus an a.m./p.m. period."""

    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    period: str = AM

    def __post_init__(self) -> None:
        self.hours, self.minutes, self.seconds = _normalize(
            self.hours, self.minutes, self.seconds
        )

    def set_seconds(self, seconds: int) -> None:
        """Set the seconds, carrying any overflow into minutes and hours."""
        self.hours, self.minutes, self.seconds = _normalize(
            self.hours, self.minutes, seconds
        )

    def set_minutes(self, minutes: int) -> None:
        """Set the minutes, carrying any overflow into hours."""
        self.hours, self.minutes, _ = _normalize(self.hours, minutes, 0)

    def set_hours(self, hours: int) -> None:
        """Set the hours; they must lie in [0, 11]."""
        self.hours, _, _ = _normalize(hours, 0, 0)

    def set_period(self, period: str) -> None:
        """Set the a.m./p.m. period."""
        self.period = period

    def render(self, kind: int) -> str:
        """Return the requested part of the time as text."""
        try:
            kind = DisplayKind(kind)
        except ValueError:
            raise ValueError(f"display kind must be in [1, 6], got {kind!r}") from None
        if kind is DisplayKind.HOURS:
            return f"{self.hours:02d}h {self.period}"
        if kind is DisplayKind.MINUTES:
            return f"{self.minutes:02d}m"
        if kind is DisplayKind.SECONDS:
            return f"{self.seconds:02d}s"
        if kind is DisplayKind.PERIOD:
            return self.period
        if kind is DisplayKind.FULL:
            return (
                f"{self.hours:02d}h, {self.minutes:02d}m, "
                f"{self.seconds:02d}s {self.period}"
            )
        hours = self.hours + 12 if self.period == PM else self.hours
        return f"{hours:02d}h"

    def show(self, kind: int) -> None:
        """Print the requested part of the time."""
        print(self.render(kind))


def _read_int() -> int:
    return int(input().strip())


def prompt_in_range(low: int, high: int) -> int | None:
    """Ask again until a value in [low, high] is given; None if the user gives up."""
    while True:
        print("Error: los datos son erroneos, quiere volver a intentarlo?: [si≠0] [no=0] ")
        if _read_int() == 0:
            return None
        print("Ingrese los datos correctamente")
        value = _read_int()
        if low <= value <= high:
            return value


class _Cancelled(Exception):
    """The user chose to stop instead of correcting a value."""


def _read_checked(low: int, high: int) -> int:
    value = _read_int()
    if low <= value <= high:
        return value
    corrected = prompt_in_range(low, high)
    if corrected is None:
        raise _Cancelled
    return corrected


def _read_period() -> str:
    return PM if _read_checked(0, 1) == 1 else AM


_EXERCISES = (
    "a) Inicializacion sin parametros",
    "b) Inicializacion con solo la hora",
    "c) Inicializacion con la hora y los minutos",
    "d) Inicializacion con la hora, los minutos y los segundos",
    "e) Incializacion con la hora, los minutos, los segundos y a.m. o p.m. segun corresponda",
)


def _run() -> None:
    print("Utilizando los ejercicios siguientes se puede testear el ejercicio f")
    for stage, title in enumerate(_EXERCISES):
        print(title)
        hours = minutes = seconds = 0
        period = AM
        if stage >= 1:
            print("Ingrese una hora: ")
            hours = _read_checked(0, MAX_HOUR)
        if stage >= 2:
            print("ingrese los minutos: ")
            minutes = _read_int()
        if stage >= 3:
            print("ingrese los segundos: ")
            seconds = _read_int()
        if stage >= 4:
            print("ingrese si es a.m. o p.m.  [0 = a.m.] [1 = p.m.]: ")
            period = _read_period()
        Clock(hours, minutes, seconds, period).show(DisplayKind.FULL)

    clock = Clock(11, 4, 59, AM)
    print()
    print("g) Leer por partes: Se va leer un reloj: 11h 4m 59s a.m.")
    for heading, kind in (
        ("Solo horas  con a.m. o p.m.", DisplayKind.HOURS),
        ("Solo minutos", DisplayKind.MINUTES),
        ("Solo segundos", DisplayKind.SECONDS),
        ("Solo a.m. o p.m.", DisplayKind.PERIOD),
        ("Todo junto", DisplayKind.FULL),
    ):
        print()
        print(heading)
        clock.show(kind)

    print()
    print("g) Cambiar por partes")
    keep_going = True
    while keep_going:
        print("reloj actual: ")
        clock.show(DisplayKind.FULL)

        print("Ingrese nueva hora: ")
        clock.set_hours(_read_checked(0, MAX_HOUR))
        clock.show(DisplayKind.FULL)

        print("Ingrese nuevos minutos: ")
        clock.set_minutes(_read_int())
        clock.show(DisplayKind.FULL)

        print("Ingrese nuevos segundos: ")
        clock.set_seconds(_read_int())
        clock.show(DisplayKind.FULL)

        print("Cambie si es a.m. o p.m. : [0 = a.m.] [1 = p.m.]")
        clock.set_period(_read_period())

        print("Desea seguir cambiando los datos del reloj? [si≠0] [no=0]")
        keep_going = _read_int() != 0


def main(argv: list[str] | None = None) -> int:
    """Run the interactive clock demo."""
    argparse.ArgumentParser(
        prog="tpclases-clock", description="Interactive 12-hour clock demo."
    ).parse_args(argv)
    try:
        _run()
    except _Cancelled:
        print("Error: no se ingreso un valor valido", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except EOFError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())