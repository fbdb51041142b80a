"""
Shared Kernel

This module contains value objects, operation results and HTTP helpers
shared by the rooms and bookings apps.
"""
