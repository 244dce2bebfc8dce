"""
reaction_picker - Emoji catalog and frequency ranking for Textual apps

Lets a user pick a standard or site-defined custom emoji from a categorized,
searchable catalog. Selections are counted in a small SQLite store so the
most used emoji are offered first the next time the picker opens.
"""

__version__ = "0.1.0"

# Version tuple for programmatic comparison
VERSION_TUPLE = (0, 1, 0)

__all__ = [
    "__version__",
    "VERSION_TUPLE",
]
