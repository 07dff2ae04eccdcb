"""Routers package — HTTP endpoint definitions.

Files:
  vendors.py    — /api/vendors
  enquiries.py  — /api/enquiries

Rule: Routers only handle HTTP (request parsing, response shaping).
      All error mapping delegates to buildezy/services/.
"""
