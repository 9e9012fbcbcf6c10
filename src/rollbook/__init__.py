"""Rollbook package.

Organized by feature modules (staff, roster, attendance, reports) with a thin
Flask controller layer over plain service/repository layers.
"""
