"""Classroom Attendance package.

This package is organized by feature modules (users, subjects, rooms, attendance)
with a thin Flask controller layer over service/repository layers backed by
in-memory stores.
"""
