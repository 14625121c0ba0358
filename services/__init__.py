"""
services/ - Business Layer
==========================
Validation and business rules. Services hold a repository reference and
nothing else; they never talk to the database directly.
"""
