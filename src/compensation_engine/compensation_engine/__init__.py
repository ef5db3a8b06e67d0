"""Compensation Engine package.

Turns per-day attendance (scheduled shift, actual time-in/out, holiday
calendar, attendance policy) into payroll lines. Organized by feature
modules (settings, holidays, attendance, compensation, ...) with pure
calculation layers and thin service/repository seams around them.
"""
