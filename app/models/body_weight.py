from datetime import datetime

from sqlalchemy import Column, Integer, Float, Date, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from app.core.base import Base


class BodyWeight(Base):
    __tablename__ = "body_weights"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_body_weights_user_date"),
    )

    id = Column(Integer, primary_key=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    date = Column(Date, nullable=False)
    weight = Column(Float, nullable=False)
    body_fat_percentage = Column(Float, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    user = relationship("User", back_populates="body_weights")
