"""Core module: constants and the process-wide configuration snapshot.

The public configuration API is re-exported from :mod:`assertkit`.
"""
