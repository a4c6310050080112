"""Adapters to the outside world: the cargo process, the filesystem, JSON files."""
