"""
repositories/ - Data Access Layer
==================================
StudentRepository owns every SQL statement against the `students` table.
Each call opens and closes its own connection and hands back Student
objects, ids or booleans, never raw rows.
"""
