"""Key/value JSON document model."""

from sqlalchemy import JSON, TIMESTAMP, Column, String, func

from homepage.database import Base


class DocumentRow(Base):
    """
    A JSON document stored under a well-known key.

    The profile lives under the ``profile`` key; no other keys are used yet.
    """

    __tablename__ = "documents"

    key = Column(String, primary_key=True)
    content = Column(JSON, nullable=False)
    updated_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now())
