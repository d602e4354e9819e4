"""
LightBnB data-access layer.
Translates application requests into parameterized SQL and returns plain rows.
"""

__version__ = "1.0.0"
