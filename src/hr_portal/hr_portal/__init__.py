"""HR portal client package.

Feature modules (users, attendance, leaves, payroll, ...) sit on top of a
remote collection store; the session layer keeps an in-memory snapshot of the
store consistent across login, auto-marked attendance and cascading deletes.
A thin Flask controller layer exposes the operations as JSON endpoints.
"""
