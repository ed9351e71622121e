"""External I/O layer for geoutils.

This module holds adapters to collaborators outside the process. The
geometry core never imports it; callers wire an adapter in explicitly.

Key classes:
- SqlContainmentOracle: Containment via a spatial database's ST_Contains
"""

from geoutils.io.spatial_db import SqlContainmentOracle

__all__ = [
    "SqlContainmentOracle",
]
