"""Sum, difference and product of integer, real and complex operand pairs."""

from __future__ import annotations

import argparse
import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any


class Operation(ABC):
    """A pair of operands and the result of the last operation applied to them."""

    first: Any
    second: Any
    result: Any

    def add(self) -> Any:
        """Store and return the sum of the operands."""
        self.result = self.first + self.second
        return self.result

    def subtract(self) -> Any:
        """Store and return the first operand minus the second."""
        self.result = self.first - self.second
        return self.result

    def multiply(self) -> Any:
        """Store and return the product of the operands."""
        self.result = self.first * self.second
        return self.result

    @abstractmethod
    def _format(self, value: Any) -> str:
        """Render a result value as text."""

    def __str__(self) -> str:
        return self._format(self.result)


class IntegerOperation(Operation):
    """Integer operands; non-integral values are truncated toward zero."""

    def __init__(self, first: float, second: float) -> None:
        self.first = int(first)
        self.second = int(second)
        self.result = 0

    def _format(self, value: int) -> str:
        return str(value)


class RealOperation(Operation):
    """Floating-point operands, rendered with six decimals."""

    def __init__(self, first: float, second: float) -> None:
        self.first = float(first)
        self.second = float(second)
        self.result = 0.0

    def _format(self, value: float) -> str:
        return f"{value:f}"


def _to_complex(parts: Sequence[float]) -> complex:
    values = tuple(parts)
    if len(values) != 2:
        raise ValueError(
            f"a complex number needs exactly 2 parts (real, imaginary), got {len(values)}"
        )
    real, imaginary = values
    return complex(float(real), float(imaginary))


class ComplexOperation(Operation):
    """Complex operands given as (real, imaginary) pairs."""

    def __init__(self, first: Sequence[float], second: Sequence[float]) -> None:
        self.first = _to_complex(first)
        self.second = _to_complex(second)
        self.result = 0j

    def _format(self, value: complex) -> str:
        return f"{value.real:f}+{value.imag:f}i"


def _report(operation: Operation) -> None:
    for label, apply in (
        ("suma", operation.add),
        ("resta", operation.subtract),
        ("multiplicacion", operation.multiply),
    ):
        apply()
        print(f"Resultado de la {label}: {operation}")


def main(argv: list[str] | None = None) -> int:
    """Run the arithmetic demonstration."""
    argparse.ArgumentParser(
        prog="tpclases-arithmetic", description="Arithmetic on number pairs."
    ).parse_args(argv)

    print()
    print("Realizo operaciones entre los complejos: 3+2i y 5+6i")
    print()
    _report(ComplexOperation((3, 2), (5, 6)))

    print()
    print("Realizo operaciones entre los enteros: 3 y 4")
    print()
    _report(IntegerOperation(3, 4))

    print()
    print("Realizo operaciones entre los enteros: (valor no entero) 3.5 y 4")
    print()
    _report(IntegerOperation(3.5, 4))

    print()
    print("Realizo operaciones entre los reales:  3 y 4.123")
    print()
    _report(RealOperation(3, 4.123))
    return 0


if __name__ == "__main__":
    sys.exit(main())