"""Domain models and errors.

Why here:
- Pure data structures (Pydantic v2) and the error taxonomy live here.
- The domain knows nothing about typer, rich or the filesystem.
"""
