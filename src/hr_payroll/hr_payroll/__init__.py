"""HR Payroll package.

Feature modules (attendance, assignments, users, payroll) follow the same
layering: frozen dataclass models, Protocol repositories with MySQL
implementations, services holding the business rules, and a thin Flask
controller on top.
"""
