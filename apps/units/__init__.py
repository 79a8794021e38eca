"""Units app package.

Accommodation units offered for booking. Prices are stored as base
nightly cost; the user-facing price with markup is derived on read.
"""
