"""Product SQLAlchemy model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.session import Base


class ProductModel(Base):
    """SQLAlchemy model for catalog products."""
    
    __tablename__ = "products"
    
    id: Mapped[int] = mapped_column(
        "product_id",
        Integer,
        primary_key=True,
        autoincrement=True
    )
    category: Mapped[str | None] = mapped_column(
        String(255),
        index=True,
        nullable=True
    )
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    
    def __repr__(self) -> str:
        return f"<ProductModel(id={self.id}, category={self.category})>"
