"""Orchestration services reused by every entry point."""
