"""
db/ - Database Layer
====================
Loads the schema document, opens the MySQL connection and applies the schema.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
