"""Generate payouts for a period from the command line (e.g. a monthly cron job).

    python scripts/generate_payouts.py 2024-01
    python scripts/generate_payouts.py 2024-01 --employee-id 42
"""

from __future__ import annotations

import argparse
import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.hr_payroll.hr_payroll.container import build_container
from src.hr_payroll.hr_payroll.core.exceptions import DomainError
from src.hr_payroll.hr_payroll.main import configure_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate payroll payouts for a YYYY-MM period.")
    parser.add_argument("period")
    parser.add_argument("--employee-id", type=int, default=None)
    args = parser.parse_args(argv)

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(
        db_config=dict(settings.DB_CONFIG),
        payslip_dir=getattr(settings, "PAYSLIP_DIR", "payslips"),
        payslip_url_prefix=getattr(settings, "PAYSLIP_URL_PREFIX", "/payslips"),
    )
    try:
        created = container.payout_service.generate_payouts(period=args.period, employee_id=args.employee_id)
    except DomainError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    for r in created:
        print(f"{r.employee_id}\t{r.period}\tdays={r.total_days_worked}\tgross={r.gross_pay}\tnet={r.net_pay}")
    print(f"OK: generated {len(created)} payouts")
    return 0


if __name__ == "__main__":
    sys.exit(main())
