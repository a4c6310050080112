"""Domain models and entities.

Plain, strict data structures (Pydantic v2 and enums). The domain knows
nothing about subprocesses, the CLI or the filesystem.
"""
