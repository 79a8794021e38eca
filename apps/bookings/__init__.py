"""Bookings app package.

The booking-availability and lifecycle engine: double-booking prevention
under concurrent requests, PENDING -> CONFIRMED / CANCELLED transitions,
timed expiry of unpaid bookings and the post-commit side effects (audit
log, available units cache) of every transition.
"""
