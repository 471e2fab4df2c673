"""CQL statement building, table CRUD statements, named queries and value binding."""

__version__ = "0.1.0"