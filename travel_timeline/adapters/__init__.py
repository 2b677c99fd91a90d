"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems like:
- Storage (JSON files, SQL database, in-memory)
- Clocks (system date, fixed date)
- Rendering (plain text)
"""
