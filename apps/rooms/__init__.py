"""Rooms app package.

This app encapsulates hotel rooms: the room model, the room store used by
the booking workflow (including the exclusive row lock taken while a
booking is written) and the read-only room API.
"""
