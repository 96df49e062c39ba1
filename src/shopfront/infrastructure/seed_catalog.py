"""The hard-coded demo catalog served by the static gateway."""

from __future__ import annotations

from shopfront.domain.model.product import Product
from shopfront.domain.model.value_objects import Money

# (name, price, image, description, category, rating, reviews)
_SEED_ROWS = [
    ("Nike Air Max", "129.99", "nike", "Comfortable running shoes for professional athletes", "Sports", 4.5, 45),
    ("Yoga Mat Premium", "29.99", "yoga", "Premium yoga mat with extra cushioning", "Sports", 4.3, 78),
    ("Training Gloves", "24.99", "gloves", "Professional training gloves", "Sports", 4.4, 56),
    ("Running Shoes Pro", "89.99", "shoes", "Professional running shoes with advanced cushioning", "Sports", 4.6, 145),
    ("Dumbbell Set", "149.99", "dumbbell", "Adjustable dumbbell set for home gym", "Sports", 4.7, 89),
    ("Basketball", "29.99", "basketball", "Professional indoor/outdoor basketball", "Sports", 4.5, 67),
    ("Tennis Racket", "79.99", "tennis", "Professional tennis racket", "Sports", 4.6, 34),
    ("Gym Bag", "39.99", "gym_bag", "Spacious gym bag with compartments", "Sports", 4.4, 91),
    ("iPhone 13 Pro", "999.99", "iphone", "Latest iPhone with Pro camera system", "Electronics", 4.8, 128),
    ("MacBook Pro", "1299.99", "macbook", "Powerful laptop for professionals", "Electronics", 4.9, 256),
    ("AirPods Pro", "249.99", "airpods", "Wireless earbuds with noise cancellation", "Electronics", 4.7, 89),
    ("Coffee Maker", "79.99", "coffee", "Automatic coffee maker", "Home", 4.6, 156),
    ("Smart TV", "799.99", "tv", "4K Smart TV", "Home", 4.8, 234),
    ("Blender", "59.99", "blender", "High-speed blender", "Home", 4.4, 78),
    ("Leather Wallet", "49.99", "wallet", "Genuine leather wallet", "Accessories", 4.4, 34),
    ("Sunglasses", "159.99", "sunglasses", "Designer sunglasses", "Accessories", 4.2, 92),
    ("Backpack", "69.99", "backpack", "Water-resistant backpack", "Accessories", 4.5, 112),
]


def seed_products() -> list[Product]:
    """Build a fresh product list; ids are new random UUIDs on every call."""
    return [
        Product.create(
            name=name,
            price=Money.of(price),
            category=category,
            description=description,
            rating=rating,
            review_count=reviews,
            image_name=image,
        )
        for name, price, image, description, category, rating, reviews in _SEED_ROWS
    ]
