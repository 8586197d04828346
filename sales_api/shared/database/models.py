from sqlalchemy import Column, Integer, String, Boolean, DateTime, Numeric, ForeignKey, Table
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from sales_api.config.database import Base

class TimestampMixin:
    """Automatic creation/update timestamps"""
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

# ===== USERS & ROLES =====

user_roles = Table(
    "user_roles",
    Base.metadata,
    Column("user_id", Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Column("role_id", Integer, ForeignKey("roles.id", ondelete="CASCADE"), primary_key=True),
)

class Role(Base):
    """Named role granted to users"""
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(64), unique=True, nullable=False)

    users = relationship("User", secondary=user_roles, back_populates="roles")

class User(Base, TimestampMixin):
    """API account able to obtain bearer tokens"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(150), unique=True, nullable=False, index=True)
    email = Column(String(255), nullable=False)
    password_hash = Column(String(255), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    roles = relationship("Role", secondary=user_roles, back_populates="users", lazy="selectin")

    @property
    def role_names(self):
        return sorted(role.name for role in self.roles)

# ===== SALES =====

class Sale(Base, TimestampMixin):
    """A sale attributed to a sales representative"""
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, index=True)
    amount = Column(Numeric(18, 2), nullable=False)
    sale_date = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), index=True)
    # Representatives live outside this service; only the identifier is kept
    representative_id = Column(Integer, nullable=False, index=True)
