"""School Attendance package.

This package is organized by feature modules (profiles, admin, leaves, geofence, ...)
with a thin Flask controller layer on top of service/repository layers.
"""
