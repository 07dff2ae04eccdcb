"""Domain package — all ORM models are imported here so metadata.create_all sees them.

Folder intent:
  vendor.py   — vendors offering a service (full CRUD)
  enquiry.py  — customer enquiries (create, list, delete)
  mixins.py   — shared TimestampMixin
"""

from buildezy.domain.enquiry import Enquiry
from buildezy.domain.vendor import Vendor

__all__ = [
    "Enquiry",
    "Vendor",
]
