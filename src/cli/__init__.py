"""Command line layer (Typer + Rich). Commands only parse, delegate and print."""
