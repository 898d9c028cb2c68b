"""Example: preview a payout through the service layer (no Flask).

Controllers are a thin layer; the payroll rules live in the calculator.
"""

import importlib

from config import get_settings_module

from src.hr_payroll.hr_payroll.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    result = container.payout_calculator.calculate_payout(1, "2024-01")
    print(result.total_days_worked, result.gross_pay, result.deductions, result.net_pay, result.details)


if __name__ == "__main__":
    main()
