"""
Endpoint subpackage.

Each module defines an APIRouter for one part of the page.  The
routers are aggregated in ``router.py``.
"""
