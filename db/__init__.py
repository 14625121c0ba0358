"""
db/ - Database Layer
====================
Handles PostgreSQL connections, schema initialization and store-level errors.
This layer is the lowest in the architecture and depends only on config and logging.
"""
