"""Classroom Attendance package.

This package is organized by feature modules (users, classes, attendance)
with a thin Flask controller layer over service/repository layers and a
pluggable document store.
"""
