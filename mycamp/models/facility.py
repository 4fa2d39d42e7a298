from sqlalchemy import Column, Integer, String, Numeric
from sqlalchemy.orm import relationship
from mycamp.db import Base


class Facility(Base):
    __tablename__ = "facilities"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    description = Column(String, nullable=True)
    directions = Column(String, nullable=True)
    latitude = Column(Numeric(9, 6), nullable=False)
    longitude = Column(Numeric(9, 6), nullable=False)

    campsites = relationship("Campsite", back_populates="facility")
