"""Admin account model."""

from sqlalchemy import TIMESTAMP, Column, Integer, String, Text, func

from homepage.database import Base


class AdminAccountRow(Base):
    """The single admin account of the deployment."""

    __tablename__ = "admin_accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String, unique=True, nullable=False)
    password_hash = Column(Text, nullable=False)
    role = Column(String, nullable=False, server_default="admin")
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
