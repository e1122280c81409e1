"""
Core numeral conversion primitives, domain models, and contracts.

This module contains self-contained building blocks with no external
state (no I/O besides loading bundled JSON schemas).
"""
