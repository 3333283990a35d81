"""HR use cases: loans and attendance."""

from app.application.use_cases.hr.attendance_operations import AttendanceService
from app.application.use_cases.hr.loan_operations import LoanService

__all__ = ["AttendanceService", "LoanService"]
