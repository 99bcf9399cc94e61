from sqlalchemy import Column, String, Uuid
from app.database import Base

class UserRole(Base):
    __tablename__ = "user_roles"

    # Mismo id que el usuario de Supabase Auth
    id = Column(Uuid(as_uuid=False), primary_key=True)
    role = Column(String(50), nullable=False, default="user")
