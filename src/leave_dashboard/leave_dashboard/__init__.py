"""Leave Dashboard package.

This package is organized by feature modules (absences, holidays, leave, reports, ...)
with a thin Flask controller layer and service/repository layers around a pure
leave-hour reconciliation engine.
"""
