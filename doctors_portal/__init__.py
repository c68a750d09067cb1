"""
Doctors Portal

A FastAPI backend for a clinic portal: user sign-in tokens, admin roles,
services with daily slots, appointment bookings and the doctor directory,
stored in MongoDB.
"""

__version__ = "1.0.0"
