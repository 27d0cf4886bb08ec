from sqlalchemy import (
    Column,
    Integer,
    String,
    Float,
    Boolean,
    JSON,
    DateTime,
    ForeignKey,
    Text,
    Index,
    func,
)
from sqlalchemy.orm import declarative_base, relationship

from .parsers.types import CatalogItem, ItemCategory

Base = declarative_base()


class MenuItem(Base):
    __tablename__ = "menu_items"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    local_name = Column(String, nullable=True)  # Tamil display name
    price = Column(Float, nullable=False)
    unit = Column(String, nullable=False, default="piece")  # 'piece', 'plate', 'kg', ...
    category = Column(String, nullable=False, default=ItemCategory.LUNCH.value, index=True)
    is_available = Column(Boolean, nullable=False, default=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    bill_items = relationship("BillItem", back_populates="menu_item")

    def to_catalog_item(self) -> CatalogItem:
        """Snapshot this row for the order parser."""
        try:
            category = ItemCategory(self.category)
        except ValueError:
            category = ItemCategory.GENERAL
        return CatalogItem(
            name=self.name,
            unit_price=float(self.price),
            local_name=self.local_name,
            unit=self.unit or "piece",
            category=category,
            item_id=self.id,
        )


class Bill(Base):
    __tablename__ = "bills"

    id = Column(Integer, primary_key=True, index=True)
    voice_input = Column(Text, nullable=False)
    processed_text = Column(Text, nullable=True)
    subtotal = Column(Float, nullable=False, default=0.0)
    tax = Column(Float, nullable=False, default=0.0)
    total = Column(Float, nullable=False, default=0.0)
    parse_source = Column(String, nullable=False, default="deterministic")  # 'deterministic' or 'llm'
    usage = Column(JSON, nullable=True)  # LLM token usage, when the fallback was used
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)

    items = relationship("BillItem", back_populates="bill", cascade="all, delete-orphan")


class BillItem(Base):
    __tablename__ = "bill_items"

    id = Column(Integer, primary_key=True, index=True)
    bill_id = Column(Integer, ForeignKey("bills.id"), nullable=False, index=True)
    menu_item_id = Column(Integer, ForeignKey("menu_items.id", ondelete="SET NULL"), nullable=True)

    # Name and price are copied so old bills survive menu edits
    item_name = Column(String, nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Float, nullable=False)
    total_price = Column(Float, nullable=False)

    bill = relationship("Bill", back_populates="items")
    menu_item = relationship("MenuItem", back_populates="bill_items")

    __table_args__ = (
        Index("ix_bill_items_bill_id_menu_item_id", "bill_id", "menu_item_id"),
    )
