from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from mycamp.db import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(String, nullable=False, default="user")

    reservations = relationship("Reservation", back_populates="user")
