"""Events app package.

Append-only audit log of unit, booking and payment lifecycle transitions.
Rows are written after the business transaction commits and are never
consulted by business decisions.
"""
