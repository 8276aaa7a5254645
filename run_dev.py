import sys
import os
import logging

# Ensure src is in python path
sys.path.append(os.path.join(os.path.dirname(__file__), "src"))

from src.config.settings import settings
from src.teller.services.limited_teller_machine import LimitedTellerMachine


def print_inventory(machine: LimitedTellerMachine) -> None:
    for denomination, count in machine.counts().items():
        print(f"  {denomination:>4}: {count}")
    print(f"  total value: {machine.total_value()}")


def main():
    logging.basicConfig(level=settings.LOG_LEVEL)
    print("Initializing DEV teller machine...")

    # 1. Machine
    machine = LimitedTellerMachine.from_settings(settings)

    # 2. Stock it
    machine.deposit(10, 1, 20, 2)
    print("After deposit(10, 1, 20, 2):")
    print_inventory(machine)

    # 3. Withdraw with change making
    result = machine.withdraw_detailed(1, 11)
    print(f"withdraw(1, 11) -> {result.outcome.value}")
    for breakdown in result.breakdowns:
        print(f"  broke {breakdown.units_broken} x {breakdown.source} into {breakdown.units_produced} x {breakdown.target}")
    print_inventory(machine)

    # 4. An unfulfillable request leaves everything untouched
    fulfilled = machine.withdraw(20, 5)
    print(f"withdraw(20, 5) -> {fulfilled}")
    print_inventory(machine)

    print(f"Journaled operations: {len(machine.history())}")
    print("Dev run complete.")


if __name__ == "__main__":
    main()
