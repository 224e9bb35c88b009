"""Rental and RentalImage models."""
from sqlalchemy import Column, Integer, Float, String, DateTime, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.models.base import Base


class Rental(Base):
    __tablename__ = "rentals"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(256), nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Float, nullable=True)
    location = Column(String(256), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    owner = relationship("User", back_populates="rentals")
    images = relationship(
        "RentalImage",
        back_populates="rental",
        order_by="RentalImage.position",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class RentalImage(Base):
    """One photo of a rental; ``position`` keeps upload order."""
    __tablename__ = "rental_images"
    __table_args__ = (UniqueConstraint("rental_id", "position", name="uq_rental_image_position"),)

    id = Column(Integer, primary_key=True, index=True)
    rental_id = Column(Integer, ForeignKey("rentals.id", ondelete="CASCADE"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0)
    url = Column(String(512), nullable=False)

    rental = relationship("Rental", back_populates="images")
