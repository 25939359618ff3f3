"""
db/ - Database Layer
====================
Handles the connection source, schema initialization, and persistence errors.
The URL in DATABASE_URL decides whether SQLite or PostgreSQL sits underneath.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
