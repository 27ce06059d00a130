"""
Core business logic package for the booking admin API.

All business logic, store access, and mail delivery live here.
Function handlers in src/handlers/ are thin wrappers that call into core/.
"""

__all__: list[str] = []
