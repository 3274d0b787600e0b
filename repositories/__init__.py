"""
repositories/ - Data Access Layer
==================================
Reads and writes the JSON ledger file. This layer has no dependencies
on the layers above it.
"""
