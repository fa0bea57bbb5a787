"""School operations core package.

Organized by feature modules (roster, attendance, schedules) with a thin
Flask controller layer over service/repository layers.
"""
