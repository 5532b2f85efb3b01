from .write_policy import WritePolicy
from .cache_entry_orm import CacheEntryORM, Base

__all__ = [
    "WritePolicy",
    "CacheEntryORM",
    "Base",
]
