"""
Employee timesheet tracker.
Time entry validation, weekly submission and approval, and payroll reporting.
"""

__version__ = "0.1.0"
