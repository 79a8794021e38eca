"""
Shared Kernel

Base classes and utilities shared by the booking, payment and statistics
contexts: domain building blocks, the error taxonomy, the unit of work,
the post-commit message bus and exclusive guards.
"""
