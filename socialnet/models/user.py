from sqlalchemy import Column, Integer, String, TIMESTAMP

from socialnet.database import Base
from socialnet.utils.clock import utcnow


# ---------------- USER (DIRECTORY TABLE) ----------------
# Profile CRUD lives in the users service; this table is only read here.
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    display_name = Column(String(100))
    avatar_url = Column(String(255))
    created_at = Column(TIMESTAMP, default=utcnow, nullable=False)
