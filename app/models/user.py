from datetime import datetime

from sqlalchemy import Column, Integer, String, Float, DateTime
from sqlalchemy.orm import relationship

from app.core.base import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, nullable=False)
    password = Column(String(255), nullable=False)
    name = Column(String(100), nullable=False)
    height = Column(Float, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Erasure goes through UserRepository.delete_with_all_data, not ORM cascades
    workouts = relationship("Workout", back_populates="user", passive_deletes=True)
    menus = relationship("Menu", back_populates="user", passive_deletes=True)
    body_weights = relationship("BodyWeight", back_populates="user", passive_deletes=True)
