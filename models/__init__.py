"""
models/ - Domain Layer
======================
Plain dataclasses representing persisted rows. No I/O lives here.
"""
