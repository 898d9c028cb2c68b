from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, send_from_directory

from config import get_settings_module

from .common.errors import register_error_handlers
from .container import Container, build_container
from .core.constants import DEFAULT_PAYOUT_LOCK_TIMEOUT
from .database.bootstrap import apply_schema, list_tables
from .payroll.controller import register as register_payroll

log = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, str(level).upper(), logging.INFO), format=LOG_FORMAT)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PAYSLIP_DIR"] = str(getattr(settings, "PAYSLIP_DIR", "payslips"))
    app.config["PAYSLIP_URL_PREFIX"] = str(getattr(settings, "PAYSLIP_URL_PREFIX", "/payslips"))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    log.info(
        "settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if container is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(db_config, schema_path=schema_path)
            log.info("schema ready (tables=%d)", len(list_tables(db_config)))

        container = build_container(
            db_config=db_config,
            payslip_dir=app.config["PAYSLIP_DIR"],
            payslip_url_prefix=app.config["PAYSLIP_URL_PREFIX"],
            payout_lock_timeout=int(getattr(settings, "PAYOUT_LOCK_TIMEOUT", DEFAULT_PAYOUT_LOCK_TIMEOUT)),
        )

    register_error_handlers(app)
    register_payroll(app, container)

    @app.route(f"{app.config['PAYSLIP_URL_PREFIX'].rstrip('/')}/<path:filename>", endpoint="payslip_file")
    def payslip_file(filename: str):
        return send_from_directory(Path(app.config["PAYSLIP_DIR"]).resolve(), filename)

    return app
