"""Core interfaces.

Protocols implemented by concrete adapters, so the core depends on
abstractions rather than on subprocess details.
"""
