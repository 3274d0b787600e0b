"""
security/ - Permission checks
==============================
"""
