"""Random Product records for demos and tests."""

from __future__ import annotations

import random
from decimal import ROUND_HALF_UP, Decimal
from urllib.parse import quote_plus

from app.models.product import Product

NAMES = ["Classic Frame", "Modern Edge", "Vintage Touch", "Coastal Breeze"]

# black, white, brown, gold
COLOR_HEX = {
    "Black": "000000",
    "White": "ffffff",
    "Brown": "8B4513",
    "Gold": "FFD700",
}

SIZES = ["5x7", "8x10", "11x14", "16x20"]

PRICE_RANGE = (25, 200)
SALE_RATIO_RANGE = (0.6, 0.9)
STOCK_RANGE = (0, 100)
SALE_CHANCE = 0.30
FEATURED_CHANCE = 0.20

_WORDS = (
    "solid wood hand finished frame glass front easel back wall mount "
    "matte border gallery print photo keepsake gift living room hallway "
    "desk shelf timeless clean lines warm tone polished edge archival"
).split()


def _money(value: float) -> Decimal:
    return Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def _description(rng: random.Random, max_chars: int = 200) -> str:
    text = ""
    while True:
        word = rng.choice(_WORDS)
        candidate = f"{text} {word}" if text else word.capitalize()
        if len(candidate) + 1 > max_chars:
            break
        text = candidate
        if len(text) > max_chars // 2 and rng.random() < 0.15:
            break
    return text + "."


def image_url(name: str, hex_code: str, width: int = 640, height: int = 480) -> str:
    return f"https://placehold.co/{width}x{height}/{hex_code}/png?text={quote_plus(name)}"


def product_attributes(rng: random.Random | None = None) -> dict:
    rng = rng or random.Random()

    name = rng.choice(NAMES)
    color = rng.choice(list(COLOR_HEX))
    price = _money(rng.uniform(*PRICE_RANGE))

    sale_price = None
    if rng.random() < SALE_CHANCE:
        ratio = _money(rng.uniform(*SALE_RATIO_RANGE))
        sale_price = (price * ratio).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

    return {
        "name": name,
        "description": _description(rng),
        "color": color,
        "size": rng.choice(SIZES),
        "price": price,
        "sale_price": sale_price,
        "stock_quantity": rng.randint(*STOCK_RANGE),
        "image": image_url(name, COLOR_HEX[color]),
        "is_featured": rng.random() < FEATURED_CHANCE,
    }


def make_product(rng: random.Random | None = None, **overrides) -> Product:
    attrs = product_attributes(rng)
    attrs.update(overrides)
    return Product(**attrs)


def make_products(count: int, rng: random.Random | None = None) -> list[Product]:
    rng = rng or random.Random()
    return [make_product(rng) for _ in range(count)]
