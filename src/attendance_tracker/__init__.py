"""Attendance Tracker package.

Organized by feature modules (attendance, analytics, reports) with a thin
Flask controller layer over service/repository layers. Attendance records
live in a remote REST service; this package only reads and aggregates them.
"""
