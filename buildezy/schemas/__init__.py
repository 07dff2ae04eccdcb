"""Pydantic schemas package.

Folder intent:
  common.py   — RowModel base, ErrorResponse, HealthResponse
  vendor.py   — vendor request bodies and responses
  enquiry.py  — enquiry request bodies and responses
"""
