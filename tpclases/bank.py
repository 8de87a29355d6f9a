"""Savings and checking accounts; checking accounts fall back on a linked savings account."""

from __future__ import annotations

import argparse
import sys
from abc import ABC, abstractmethod

VIEW_FEE = 20.0
FREE_VIEWS = 2
_TOP = "┌-------------------------------------┐"
_BOTTOM = "└-------------------------------------┘"


class InsufficientFundsError(ValueError):
    """An account does not hold enough money for the requested operation."""


class Account(ABC):
    """An account holder and a balance."""

    kind = ""

    def __init__(self, holder: str, balance: float = 0.0) -> None:
        self.holder = holder
        self.balance = float(balance)

    def deposit(self, amount: float) -> None:
        """Add money to the account."""
        self.balance += amount

    @abstractmethod
    def withdraw(self, amount: float) -> object:
        """Take money out of the account."""

    @abstractmethod
    def info(self) -> str:
        """Return a statement of the account."""

    def _statement(self) -> str:
        return "\n".join(
            [
                _TOP,
                " Estado de la cuenta:",
                f" {self.kind}",
                f" Titular= {self.holder}",
                f" Balance= {self.balance:.2f} $",
                _BOTTOM,
            ]
        )


class SavingsAccount(Account):
    """A savings account; statements after the first FREE_VIEWS cost VIEW_FEE each."""

    kind = "CUENTA DE AHORRO"

    def __init__(self, holder: str, balance: float = 0.0) -> None:
        super().__init__(holder, balance)
        self._views = 0

    def withdraw(self, amount: float) -> None:
        """Take money out; raise InsufficientFundsError if the balance would go negative."""
        if self.balance - amount < 0:
            raise InsufficientFundsError(
                "El proceso ha fallado. No hay suficiente dinero en la caja de ahorro"
            )
        self.balance -= amount

    def info(self) -> str:
        """Return the statement, charging the fee once the free views are used."""
        if self._views >= FREE_VIEWS:
            try:
                self.withdraw(VIEW_FEE)
            except InsufficientFundsError as exc:
                raise InsufficientFundsError(
                    "No se puede mostrar el estado de la cuenta"
                ) from exc
        self._views += 1
        return self._statement()


class CheckingAccount(Account):
    """A checking account that draws any shortfall from a linked savings account."""

    kind = "CUENTA CORRIENTE"

    def __init__(self, holder: str, savings: SavingsAccount, balance: float = 0.0) -> None:
        super().__init__(holder, balance)
        self.savings = savings

    def withdraw(self, amount: float) -> float:
        """Take money out and return how much came from the savings account."""
        if self.balance - amount < 0:
            shortfall = amount - self.balance
            self.savings.withdraw(shortfall)
            self.balance = 0.0
            return shortfall
        self.balance -= amount
        return 0.0

    def info(self) -> str:
        return self._statement()


def _show(account: Account) -> None:
    try:
        print(account.info())
    except InsufficientFundsError as exc:
        print(f"[ERROR: {exc}]")


def _withdraw(account: Account, amount: float) -> None:
    try:
        taken = account.withdraw(amount)
    except InsufficientFundsError as exc:
        if isinstance(account, CheckingAccount):
            print(
                "[Error:La cuenta corriente no posee suficiente balance, "
                "se retirara lo que falte de la caja de ahorro]"
            )
        print(f"[ERROR: {exc}]")
        return
    if taken:
        print(
            "[Error:La cuenta corriente no posee suficiente balance, "
            "se retirara lo que falte de la caja de ahorro]"
        )


def main(argv: list[str] | None = None) -> int:
    """Run the bank account demonstration."""
    argparse.ArgumentParser(
        prog="tpclases-bank", description="Bank account demonstration."
    ).parse_args(argv)

    savings = SavingsAccount("Zoe Larisson", 100)
    checking = CheckingAccount("Zoe Larisson", savings, 50)

    print("Primero pruebo el funcionamiento de mi caja de ahorro")
    print("Estado incial: ")
    print()
    _show(savings)

    print()
    print("ingresan 100 pesos a la cuenta de ahorro")
    print()
    savings.deposit(100)
    _show(savings)
    print()
    print(
        "A partir de ahora cada vez que muestre el estado de la cuenta se quitaran 20$, como ahora:"
    )
    print()
    _show(savings)

    print()
    print("Primero retiro toda la plata que hay en la cuenta de ahorro ")
    _withdraw(savings, 180)

    print()
    print(
        "Ahora como no tengo dinero en la cuenta suficiente como para imprimir, no me dejar "
        "imprimir la informacion, pero no se cortara el programa"
    )
    print()
    _show(savings)
    print()
    print("Pero si ingreso 20 pesos si va a poder")
    print()
    savings.deposit(20)
    _show(savings)

    print("-" * 77)
    print()
    print("Prueba de la cuenta corriente: ")
    print()
    print("Establezco que hay 100 pesos en la caja de ahorro asociada y 50 en la cuenta corriente ")
    print()
    savings.deposit(100)
    _show(checking)

    print()
    print("Deposito 100 pesos y despues retiro 50")
    print()
    checking.deposit(100)
    _show(checking)
    _withdraw(checking, 50)
    _show(checking)
    print()
    print("Retiro 100 y despues 1")
    print()
    _withdraw(checking, 100)
    _show(checking)
    _withdraw(checking, 1)
    _show(checking)
    _show(savings)
    print()
    print("Ahora retiro 80 de la cuenta corriente y obtengo error: ")
    print()
    _withdraw(checking, 80)
    _show(checking)
    return 0


if __name__ == "__main__":
    sys.exit(main())