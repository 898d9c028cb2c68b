from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

import pytest

from src.hr_payroll.hr_payroll.core.constants import (
    NO_ASSIGNMENT_MESSAGE,
    NO_ATTENDANCE_MESSAGE,
    NO_WAGE_RATE_MESSAGE,
)
from src.hr_payroll.hr_payroll.core.enums import AttendanceStatus
from src.hr_payroll.hr_payroll.core.exceptions import ValidationError
from src.hr_payroll.hr_payroll.payroll.calculator.standard_calculator import StandardPayoutCalculator

EMP = 7


@pytest.fixture
def calc(attendance_repo, assignments_repo):
    return StandardPayoutCalculator(attendance_repo, assignments_repo)


def test_monthly_rate_is_prorated_by_days_in_month(calc, attendance_repo, assignments_repo):
    attendance_repo.add_days(EMP, date(2024, 1, 2), 20)
    assignments_repo.add(EMP, start=date(2023, 6, 1), per_month=24000)

    result = calc.calculate_payout(EMP, "2024-01")

    # 24000 / 31 * 20 = 15483.870...
    assert result.total_days_worked == 20
    assert result.gross_pay == Decimal("15483.87")
    assert result.deductions == Decimal("774.19")
    assert result.net_pay == Decimal("14709.68")
    assert result.details["wage_source"] == "monthly"
    assert result.details["days_in_month"] == 31
    assert result.details["site_name"] == "Main Site"
    assert result.details["deduction_percentage"] == 5


def test_monthly_rate_small_salary(calc, attendance_repo, assignments_repo):
    attendance_repo.add_days(EMP, date(2024, 1, 2), 20)
    assignments_repo.add(EMP, start=date(2023, 6, 1), per_month=2400)

    result = calc.calculate_payout(EMP, "2024-01")

    assert result.gross_pay == Decimal("1548.39")
    assert result.deductions == Decimal("77.42")
    assert result.net_pay == Decimal("1470.97")


def test_leap_february_uses_29_days(calc, attendance_repo, assignments_repo):
    attendance_repo.add_days(EMP, date(2024, 2, 1), 20)
    assignments_repo.add(EMP, start=date(2024, 1, 1), per_month=24000)

    result = calc.calculate_payout(EMP, "2024-02")

    assert result.details["days_in_month"] == 29
    assert result.gross_pay == Decimal("16551.72")
    assert result.deductions == Decimal("827.59")
    assert result.net_pay == Decimal("15724.13")


def test_daily_rate_when_no_monthly_rate(calc, attendance_repo, assignments_repo):
    attendance_repo.add_days(EMP, date(2024, 3, 1), 15)
    assignments_repo.add(EMP, start=date(2024, 1, 1), per_day=800)

    result = calc.calculate_payout(EMP, "2024-03")

    assert result.gross_pay == Decimal("12000.00")
    assert result.deductions == Decimal("600.00")
    assert result.net_pay == Decimal("11400.00")
    assert result.details["wage_source"] == "daily"


def test_monthly_rate_wins_over_daily_rate(calc, attendance_repo, assignments_repo):
    attendance_repo.add_days(EMP, date(2024, 4, 1), 10)
    assignments_repo.add(EMP, start=date(2024, 1, 1), per_day=800, per_month=30000)

    result = calc.calculate_payout(EMP, "2024-04")

    assert result.gross_pay == Decimal("10000.00")
    assert result.details["wage_source"] == "monthly"


def test_zero_monthly_rate_falls_back_to_daily(calc, attendance_repo, assignments_repo):
    attendance_repo.add_days(EMP, date(2024, 4, 1), 2)
    assignments_repo.add(EMP, start=date(2024, 1, 1), per_day=500, per_month=0)

    result = calc.calculate_payout(EMP, "2024-04")

    assert result.gross_pay == Decimal("1000.00")
    assert result.details["wage_source"] == "daily"


def test_no_attendance_returns_zero_result_not_error(calc, assignments_repo):
    assignments_repo.add(EMP, start=date(2024, 1, 1), per_month=24000)

    result = calc.calculate_payout(EMP, "2024-01")

    assert result.total_days_worked == 0
    assert result.gross_pay == 0
    assert result.deductions == 0
    assert result.net_pay == 0
    assert result.message == NO_ATTENDANCE_MESSAGE


def test_only_approved_records_count(calc, attendance_repo, assignments_repo):
    attendance_repo.add_days(EMP, date(2024, 5, 1), 3, status=AttendanceStatus.PENDING)
    attendance_repo.add_days(EMP, date(2024, 5, 10), 2, status=AttendanceStatus.REJECTED)
    attendance_repo.add_days(EMP, date(2024, 5, 20), 4)
    assignments_repo.add(EMP, start=date(2024, 1, 1), per_day=100)

    result = calc.calculate_payout(EMP, "2024-05")

    assert result.total_days_worked == 4
    assert result.gross_pay == Decimal("400.00")


def test_attendance_outside_period_is_ignored(calc, attendance_repo, assignments_repo):
    attendance_repo.add_days(EMP, date(2024, 5, 30), 4)  # May 30 .. June 2
    assignments_repo.add(EMP, start=date(2024, 1, 1), per_day=100)

    assert calc.calculate_payout(EMP, "2024-05").total_days_worked == 2
    assert calc.calculate_payout(EMP, "2024-06").total_days_worked == 2


def test_no_assignment_keeps_days_but_pays_zero(calc, attendance_repo):
    attendance_repo.add_days(EMP, date(2024, 1, 1), 10)

    result = calc.calculate_payout(EMP, "2024-01")

    assert result.total_days_worked == 10
    assert result.gross_pay == 0
    assert result.deductions == 0
    assert result.net_pay == 0
    assert result.message == NO_ASSIGNMENT_MESSAGE
    assert result.details["days_worked"] == 10


def test_assignment_closed_before_period_does_not_overlap(calc, attendance_repo, assignments_repo):
    attendance_repo.add_days(EMP, date(2024, 2, 1), 5)
    assignments_repo.add(EMP, start=date(2023, 1, 1), end=date(2024, 1, 31), per_day=100)

    result = calc.calculate_payout(EMP, "2024-02")

    assert result.message == NO_ASSIGNMENT_MESSAGE


def test_assignment_starting_after_period_does_not_overlap(calc, attendance_repo, assignments_repo):
    attendance_repo.add_days(EMP, date(2024, 2, 1), 5)
    assignments_repo.add(EMP, start=date(2024, 3, 1), per_day=100)

    assert calc.calculate_payout(EMP, "2024-02").message == NO_ASSIGNMENT_MESSAGE


def test_assignment_ending_on_first_day_still_overlaps(calc, attendance_repo, assignments_repo):
    attendance_repo.add_days(EMP, date(2024, 2, 1), 5)
    assignments_repo.add(EMP, start=date(2023, 1, 1), end=date(2024, 2, 1), per_day=100)

    assert calc.calculate_payout(EMP, "2024-02").gross_pay == Decimal("500.00")


def test_no_wage_rate_pays_zero(calc, attendance_repo, assignments_repo):
    attendance_repo.add_days(EMP, date(2024, 1, 1), 8)
    assignments_repo.add(EMP, start=date(2024, 1, 1))

    result = calc.calculate_payout(EMP, "2024-01")

    assert result.total_days_worked == 8
    assert result.net_pay == 0
    assert result.message == NO_WAGE_RATE_MESSAGE


def test_first_overlapping_assignment_pays_for_whole_period(calc, attendance_repo, assignments_repo):
    # Preserved legacy behavior, not necessarily correct: a mid-month transfer
    # is paid entirely at the rate of whichever assignment the store returns first.
    attendance_repo.add_days(EMP, date(2024, 6, 3), 10)
    assignments_repo.add(EMP, start=date(2024, 1, 1), end=date(2024, 6, 14), per_day=100, site_name="Old Site")
    assignments_repo.add(EMP, start=date(2024, 6, 15), per_day=300, site_name="New Site")

    result = calc.calculate_payout(EMP, "2024-06")

    assert result.gross_pay == Decimal("1000.00")
    assert result.details["site_name"] == "Old Site"


def test_deduction_rounds_half_up(calc, attendance_repo, assignments_repo):
    # 10.10 * 5% = 0.505 exactly; binary floats would round this down.
    attendance_repo.add_days(EMP, date(2024, 1, 1), 1)
    assignments_repo.add(EMP, start=date(2024, 1, 1), per_day="10.10")

    result = calc.calculate_payout(EMP, "2024-01")

    assert result.gross_pay == Decimal("10.10")
    assert result.deductions == Decimal("0.51")
    assert result.net_pay == Decimal("9.59")


@pytest.mark.parametrize("per_day,days", [(333.33, 7), (1234.56, 22), (99.99, 31), (0.07, 3)])
def test_net_pay_is_gross_minus_deductions(calc, attendance_repo, assignments_repo, per_day, days):
    attendance_repo.add_days(EMP, date(2024, 1, 1), days)
    assignments_repo.add(EMP, start=date(2024, 1, 1), per_day=per_day)

    result = calc.calculate_payout(EMP, "2024-01")

    assert result.deductions == (result.gross_pay * Decimal("0.05")).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    assert result.net_pay == result.gross_pay - result.deductions


def test_recalculation_is_identical(calc, attendance_repo, assignments_repo):
    attendance_repo.add_days(EMP, date(2024, 1, 2), 13)
    assignments_repo.add(EMP, start=date(2023, 6, 1), per_month=27500)

    assert calc.calculate_payout(EMP, "2024-01") == calc.calculate_payout(EMP, "2024-01")


def test_invalid_period_is_rejected(calc):
    with pytest.raises(ValidationError):
        calc.calculate_payout(EMP, "2024-13")


def test_batch_keeps_only_employees_with_worked_days(calc, attendance_repo, assignments_repo):
    for employee_id in range(1, 11):
        assignments_repo.add(employee_id, start=date(2024, 1, 1), per_day=100)
    for employee_id in (2, 5, 9):
        attendance_repo.add_days(employee_id, date(2024, 1, 1), employee_id)

    results = calc.calculate_payouts_for_period("2024-01")

    assert [r.employee_id for r in results] == [2, 5, 9]
    assert all(r.total_days_worked > 0 for r in results)


def test_batch_candidates_need_an_open_ended_assignment(calc, attendance_repo, assignments_repo):
    # Employee 1 worked in January under an assignment closed later; no open
    # assignment means they are not a batch candidate.
    assignments_repo.add(1, start=date(2024, 1, 1), end=date(2024, 2, 28), per_day=100)
    assignments_repo.add(2, start=date(2024, 1, 1), per_day=100)
    attendance_repo.add_days(1, date(2024, 1, 1), 5)
    attendance_repo.add_days(2, date(2024, 1, 1), 5)

    results = calc.calculate_payouts_for_period("2024-01")

    assert [r.employee_id for r in results] == [2]


def test_batch_keeps_days_without_wage(calc, attendance_repo, assignments_repo):
    assignments_repo.add(3, start=date(2024, 1, 1))
    attendance_repo.add_days(3, date(2024, 1, 1), 4)

    results = calc.calculate_payouts_for_period("2024-01")

    assert len(results) == 1
    assert results[0].total_days_worked == 4
    assert results[0].net_pay == 0
