import random
from datetime import date

from faker import Faker

from .logger import logger
from .models import Base, Category, Product, Order, OldCategory

CATEGORIES = [
    (5, "Computer"),
    (6, "Phone"),
    (7, "Tablet"),
]

OLD_CATEGORIES = [
    (1, "Camera"),
    (2, "Printer"),
]

# id, name, description, price, category id
PRODUCTS = [
    (40, "Dell Inspiron 15", "New laptop with 16GB RAM", 899.0, 5),
    (41, "MacBook Air", "Lightweight laptop", 1199.0, 5),
    (42, "Lenovo ThinkCentre", "Refurbished desktop", 450.0, 5),
    (43, "iPhone 6", "New smartphone from Apple", 649.0, 6),
    (44, "Galaxy S5", "Android phone", 499.0, 6),
    (45, "iPad Air", "Brand New tablet", 520.0, 7),
    (46, "Kindle Fire", "Budget tablet", 99.0, 7),
]

# id, customer name, purchase date, amount, product id
ORDERS = [
    (1, "John Doe", date(2014, 10, 30), 899.0, 40),
    (2, "Jane Roe", date(2014, 11, 1), 649.0, 43),
    (3, "Bob Smith", date(2014, 11, 15), 520.0, 45),
    (4, "Alice Brown", date(2014, 11, 22), 1199.0, 41),
    (5, "Carl White", date(2014, 11, 23), 499.0, 44),
]


def create_schema(engine):
    Base.metadata.create_all(engine)


def seed_catalog(session):
    """
    Add the fixed data set the demo queries are written against.

    Nothing is committed here, the caller owns the transaction.
    """
    session.add_all([Category(id=id, name=name) for id, name in CATEGORIES])
    session.add_all([OldCategory(id=id, name=name) for id, name in OLD_CATEGORIES])
    # Categories must exist before products reference them
    session.flush()

    session.add_all([
        Product(id=id, name=name, description=description, price=price, category_id=category_id)
        for id, name, description, price, category_id in PRODUCTS
    ])
    session.flush()

    session.add_all([
        Order(id=id, customer_name=customer_name, purchase_date=purchase_date, amount=amount, product_id=product_id)
        for id, customer_name, purchase_date, amount, product_id in ORDERS
    ])
    session.flush()

    logger.debug(f"Seeded {len(CATEGORIES)} categories, {len(PRODUCTS)} products, {len(ORDERS)} orders")


def generate_orders(products, n, seed=42):
    rng = random.Random(seed)
    fake = Faker()
    fake.seed_instance(seed)

    for _ in range(n):
        product = rng.choice(products)
        yield Order(
            customer_name=fake.name(),
            purchase_date=fake.date_between(start_date=date(2014, 10, 1), end_date=date(2014, 12, 31)),
            amount=product.price,
            product=product,
        )
