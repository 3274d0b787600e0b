"""
services/ - Business Logic Layer
=================================
Balance rules: account opening, credit, clamped debit, persistence lifecycle.
"""
