"""
Default menu and shop catalog.

DEFAULT_MENU_ITEMS is the hotel menu seeded into an empty database at
startup. SHOP_CATALOG is the default catalog for generic shop billing when a
request does not bring its own.

Run directly to seed the configured database:

    python -m bill_bot.seed_menu
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from .models import MenuItem
from .parsers.types import CatalogItem, ItemCategory

logger = logging.getLogger(__name__)

B = ItemCategory.BREAKFAST.value
L = ItemCategory.LUNCH.value
S = ItemCategory.SNACKS.value
ST = ItemCategory.STARTERS.value
G = ItemCategory.GRAVY.value

# (name, Tamil name, price, category, unit)
DEFAULT_MENU_ITEMS = [
    # Dosas
    ("Plain Dosa", "பிளைன் தோசை", 30, B, "piece"),
    ("Kal Dosa (2 pcs)", "கல் தோசை (2)", 40, B, "piece"),
    ("Set Dosa (1 pcs)", "செட் தோசை", 40, B, "piece"),
    ("Ghee Dosa", "நெய் தோசை", 50, B, "piece"),
    ("Masala Dosa", "மசாலா தோசை", 60, B, "piece"),
    ("Ghee Masala Dosa", "நெய் மசாலா தோசை", 80, B, "piece"),
    ("Onion Dosa", "வெங்காய தோசை", 50, B, "piece"),
    ("Onion Uthappam", "வெங்காய ஊத்தாப்பம்", 60, B, "piece"),
    ("Egg Dosa", "முட்டை தோசை", 50, B, "piece"),
    ("Egg Masala Dosa", "முட்டை மசாலா தோசை", 80, B, "piece"),
    ("Podi Dosa", "பொடி தோசை", 50, B, "piece"),
    ("Masala Podi Dosa", "மசாலா பொடி தோசை", 60, B, "piece"),
    ("Ghee Podi Dosa", "நெய் பொடி தோசை", 70, B, "piece"),
    ("Chicken Dosa", "சிக்கன் தோசை", 80, B, "piece"),
    ("Chicken Keema Dosa", "சிக்கன் கீமா தோசை", 100, B, "piece"),
    ("Liver Dosa", "கல்லீரல் தோசை", 100, B, "piece"),

    # Breads
    ("Chapathi (2 pcs)", "சப்பாத்தி", 35, L, "piece"),
    ("Egg Chapathi", "முட்டை சப்பாத்தி", 40, L, "piece"),
    ("Parotta (2 pcs)", "பரோட்டா", 40, L, "piece"),
    ("Egg Parotta", "முட்டை பரோட்டா", 40, L, "piece"),
    ("Veg Kothu Parotta", "காய்கறி கொத்து பரோட்டா", 60, L, "plate"),
    ("Egg Kothu Parotta", "முட்டை கொத்து பரோட்டா", 60, L, "plate"),
    ("Chicken Kothu Parotta", "சிக்கன் கொத்து பரோட்டா", 100, L, "plate"),
    ("Liver Kothu Parotta", "கல்லீரல் கொத்து பரோட்டா", 120, L, "plate"),

    # Idly and vada
    ("Idly (4 pcs)", "இட்லி", 40, B, "piece"),
    ("Podi Idly", "பொடி இட்லி", 60, B, "plate"),
    ("Onion Idly", "வெங்காய இட்லி", 60, B, "plate"),
    ("Methu Vada", "மேது வடை", 10, B, "piece"),

    # Egg items
    ("Omelette", "ஆம்லெட்", 20, S, "piece"),
    ("Double Omelette", "டபுள் ஆம்லெட்", 40, S, "piece"),
    ("Half Boil", "ஹாஃப் போயில்", 20, S, "piece"),
    ("Full Boil", "புல் போயில்", 20, S, "piece"),
    ("Kalakki", "கலக்கி", 40, S, "piece"),
    ("Egg Pepper", "முட்டை மிளகு", 40, S, "piece"),
    ("Egg Masala", "முட்டை மசாலா", 60, S, "plate"),

    # Kebab
    ("Kebab 100 gms", "கெபாப் 100 கிராம்", 60, ST, "plate"),
    ("Kebab 250 gms", "கெபாப் 250 கிராம்", 120, ST, "plate"),

    # Rice and noodles
    ("Veg Fried Rice", "வெஜ் பிரைட் ரைஸ்", 60, L, "plate"),
    ("Egg Fried Rice", "முட்டை பிரைட் ரைஸ்", 70, L, "plate"),
    ("Double Egg Fried Rice", "டபுள் முட்டை பிரைட் ரைஸ்", 80, L, "plate"),
    ("Gobi Fried Rice", "கோபி பிரைட் ரைஸ்", 70, L, "plate"),
    ("Mushroom Fried Rice", "காளான் பிரைட் ரைஸ்", 90, L, "plate"),
    ("Chicken Fried Rice", "சிக்கன் பிரைட் ரைஸ்", 100, L, "plate"),
    ("Paneer Fried Rice", "பனீர் பிரைட் ரைஸ்", 100, L, "plate"),
    ("Pepper Fried Rice", "மிளகு பிரைட் ரைஸ்", 100, L, "plate"),
    ("Liver Fried Rice", "கல்லீரல் பிரைட் ரைஸ்", 120, L, "plate"),

    # Biryani
    ("Chicken Biryani", "சிக்கன் பிரியாணி", 120, L, "plate"),
    ("Kuska", "குஸ்கா", 60, L, "plate"),

    # Veg gravy
    ("Gobi Manchurian", "கோபி மஞ்சூரியன்", 60, G, "plate"),
    ("Gobi Chilli", "கோபி சில்லி", 70, G, "plate"),
    ("Gobi Pepper", "கோபி மிளகு", 70, G, "plate"),
    ("Paneer Manchurian", "பனீர் மஞ்சூரியன்", 120, G, "plate"),
    ("Chilli Paneer", "சில்லி பனீர்", 120, G, "plate"),
    ("Pepper Paneer", "மிளகு பனீர்", 120, G, "plate"),
    ("Mushroom Chilli", "காளான் சில்லி", 100, G, "plate"),
    ("Mushroom Manchurian", "காளான் மஞ்சூரியன்", 100, G, "plate"),
    ("Mushroom Pepper", "காளான் மிளகு", 100, G, "plate"),

    # Non-veg gravy
    ("Chicken Manchurian", "சிக்கன் மஞ்சூரியன்", 120, G, "plate"),
    ("Chilli Chicken", "சில்லி சிக்கன்", 120, G, "plate"),
    ("Pepper Chicken", "மிளகு சிக்கன்", 120, G, "plate"),
    ("Chettinad Chicken", "செட்டிநாடு சிக்கன்", 120, G, "plate"),
    ("Liver Fry", "கல்லீரல் வறுவல்", 50, G, "plate"),
]


def _shop(name: str, local_name: str, price: float, unit: str = "piece") -> CatalogItem:
    return CatalogItem(
        name=name,
        unit_price=price,
        local_name=local_name,
        unit=unit,
        category=ItemCategory.GENERAL,
    )


SHOP_CATALOG: List[CatalogItem] = [
    # Electrical
    _shop("Red Wires", "சிவப்பு கம்பி", 50, "metre"),
    _shop("Wires", "கம்பி", 40, "metre"),
    _shop("Cables", "கேபிள்", 80),
    # Clothing and footwear
    _shop("Shoes", "செருப்பு", 200, "pair"),
    _shop("Saree", "சேலை", 500),
    _shop("Shirt", "சட்டை", 400),
    _shop("Pants", "பேண்ட்", 600),
    _shop("Jeans", "ஜீன்ஸ்", 800),
    # Groceries
    _shop("Rice", "அரிசி", 100, "kg"),
    _shop("Milk", "பால்", 60, "litre"),
    _shop("Eggs", "முட்டை", 5),
    _shop("Bread", "ரொட்டி", 40),
    _shop("Sugar", "சர்க்கரை", 50, "kg"),
    _shop("Salt", "உப்பு", 20, "kg"),
    _shop("Apples", "ஆப்பிள்", 20),
    # Hardware
    _shop("Screws", "திருகு", 2),
    _shop("Nails", "ஆணி", 1),
    _shop("Hammer", "சுத்தி", 250),
]


def build_menu_items() -> List[MenuItem]:
    """Fresh MenuItem rows for the default hotel menu."""
    return [
        MenuItem(
            name=name,
            local_name=local_name,
            price=price,
            category=category,
            unit=unit,
            is_available=True,
        )
        for name, local_name, price, category, unit in DEFAULT_MENU_ITEMS
    ]


def seed_menu(db: Session) -> int:
    """
    Insert the default hotel menu if the menu table is empty.

    Returns:
        Number of items inserted (0 if the menu already had items).
    """
    existing = db.query(MenuItem).count()
    if existing > 0:
        logger.info("Menu already has %d items. Not seeding again.", existing)
        return 0

    items = build_menu_items()
    db.add_all(items)
    db.commit()
    logger.info("Seeded %d default menu items", len(items))
    return len(items)


if __name__ == "__main__":
    from .db import SessionLocal
    from .logging_config import setup_logging

    setup_logging()
    session = SessionLocal()
    try:
        seed_menu(session)
    finally:
        session.close()
