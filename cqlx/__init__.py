"""CQL query builders, table CRUD statements, named-query compilation and parameter binding."""

__version__ = "0.1.0"