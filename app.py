"""WSGI entry point: ``flask --app app run`` or ``gunicorn app:app``."""

from src.hr_payroll.hr_payroll.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=app.config.get("DEBUG", False))
