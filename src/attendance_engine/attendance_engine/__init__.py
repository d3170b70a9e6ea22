"""Attendance Engine package.

This package is organized by feature modules (attendance, classification,
reports, ...) with pure engine functions at the core and thin service /
repository layers around them.
"""
