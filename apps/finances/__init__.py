"""Finances app package.

Payments coupled to bookings. A PENDING payment is created in the same
transaction as its booking; processing it is emulated and confirms the
booking. There is no payment gateway and no refund flow.
"""
