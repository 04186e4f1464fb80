# services/user_management/models/accounts.py
from sqlalchemy import Column, String, DateTime, Index
from sqlalchemy.sql import func
import uuid
from shared.db import Base


class AuthAccount(Base):
    __tablename__ = "auth_accounts"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), unique=True, nullable=False)
    name = Column(String(100), nullable=True)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        Index('idx_account_email', 'email'),  # sign-in lookups
    )
