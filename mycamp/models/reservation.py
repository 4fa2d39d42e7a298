from sqlalchemy import Column, Integer, Date, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from mycamp.db import Base


class Reservation(Base):
    __tablename__ = "reservations"

    id = Column(Integer, primary_key=True, index=True)
    check_in = Column(Date, nullable=False)
    check_out = Column(Date, nullable=False)
    created_at = Column(DateTime, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    campsite_id = Column(Integer, ForeignKey("campsites.id"), nullable=False, index=True)

    user = relationship("User", back_populates="reservations")
    campsite = relationship("Campsite", back_populates="reservations")
