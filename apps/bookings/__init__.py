"""Bookings app package.

This app encapsulates the booking domain: the booking model, the booking
store and the booking service that books a room for a date range. Bookings
are written inside a database transaction that holds an exclusive lock on
the room row, so concurrent requests for the same room cannot both pass the
overlap check.
"""
