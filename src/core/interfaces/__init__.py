"""Core interfaces.

Why:
- Defines contracts (Protocol) implemented by concrete adapters.
- The Core depends on abstractions, adapters plug in (real walker, test stubs).
"""
