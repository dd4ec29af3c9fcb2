from sqlalchemy import TIMESTAMP, Column, Float, ForeignKey, Integer, String, Text, func

from core.base import Base


class GymRecord(Base):
    __tablename__ = "gyms"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    address = Column(String, nullable=False)
    city = Column(String)
    state = Column(String)
    latitude = Column(Float)
    longitude = Column(Float)
    phone = Column(String)
    website = Column(String)
    description = Column(Text)
    # comma separated, e.g. "Parking,Showers"
    facilities = Column(String)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<GymRecord(id={self.id}, name={self.name})>"


class GymReviewRecord(Base):
    __tablename__ = "gym_reviews"

    id = Column(Integer, primary_key=True, autoincrement=True)
    gym_id = Column(
        String,
        ForeignKey("gyms.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(String)
    rating = Column(Integer, nullable=False)  # 1..5
    comment = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<GymReviewRecord(gym_id={self.gym_id}, rating={self.rating})>"
