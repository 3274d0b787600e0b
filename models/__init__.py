"""
models/ - Domain Models
========================
Plain dataclasses describing callers and command targets.
"""
