"""SQLAlchemy ORM models for the certificate cache database"""
from datetime import datetime, timezone
from sqlalchemy import Column, String, LargeBinary, DateTime
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CacheEntryORM(Base):
    """SQLAlchemy ORM model for the certcache table - one row per cache key"""
    __tablename__ = 'certcache'

    # Keys are opaque (domain names, account thumbprints, ...)
    key = Column(String(255), primary_key=True)
    data = Column(LargeBinary, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    def __repr__(self):
        size = len(self.data) if self.data is not None else 0
        return f"<CacheEntryORM(key='{self.key}', bytes={size})>"
