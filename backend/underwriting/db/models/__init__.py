"""
Models package — re-exports Base and all models.

Import models here so `Base.metadata.create_all` picks up every
table automatically.

When adding a new model:
    1. Create `underwriting/db/models/<table_name>.py`
    2. Import it here
"""

from underwriting.db.models.base import Base
from underwriting.db.models.policy import Policy
from underwriting.db.models.product import InsuranceProduct
from underwriting.db.models.profile import Profile

__all__ = [
    "Base",
    "InsuranceProduct",
    "Policy",
    "Profile",
]
