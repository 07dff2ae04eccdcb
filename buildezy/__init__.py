"""Buildezy API — vendor and enquiry CRUD over PostgreSQL."""
