"""
Auto Sales API: customers, cars and sales orders over a relational database.
"""

__version__ = "1.0.0"
