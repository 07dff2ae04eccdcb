"""Services package — error mapping and logging live here, never in routers.

Files:
  vendor.py   — vendor create/list/update/delete
  enquiry.py  — enquiry create/list/delete

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""

from sqlalchemy.exc import SQLAlchemyError

# Driver-level connection failures (refused, DNS, TLS) can surface as OSError.
DB_ERRORS = (SQLAlchemyError, OSError)
