"""Gym ERP core package.

Organized by feature modules (attendance, billing, sessions, reports, ...)
with a thin Flask controller layer over service/repository layers.
"""
