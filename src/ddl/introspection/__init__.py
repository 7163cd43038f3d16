"""Catalog-row to schema-model conversions used by introspection adapters."""
