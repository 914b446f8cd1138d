"""
Per-domain repository modules for database access.

`dog_catalog.db.crud` is the facade the API imports; the implementations live
here.
"""
