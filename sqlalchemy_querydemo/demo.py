from sqlalchemy import select, insert, update, delete, func, bindparam, and_
from sqlalchemy.orm import joinedload

from .base.session import SessionScope
from .helpers.utils import like_pattern, parse_date
from .logger import logger
from .models import Category, Product, Order, OldCategory

# Short name => QueryDemo method
QUERIES = {
    "list": "list_query",
    "search": "search_query",
    "count": "count_query",
    "insert": "insert_query",
    "named": "named_parameters_query",
    "update": "update_query",
    "delete": "delete_query",
    "join": "join_query",
    "order-by": "order_by_query",
    "pagination": "pagination_query",
    "group-by": "group_by_query",
    "date-range": "date_range_query",
    "arithmetic": "arithmetic_expression_query",
}


class QueryDemo(SessionScope):
    """
    Runs illustrative queries against the mapped entities and prints the results.

    Every query method returns what it printed (entities, rows or a count) so
    callers can inspect it.
    """

    def run(self, name, **kwargs):
        method = getattr(self, QUERIES[name])
        logger.debug(f"Running query '{name}'")
        return method(**kwargs)

    def list_query(self):
        session = self._require_session()
        categories = session.scalars(select(Category)).all()

        for category in categories:
            print(category.name)

        return categories

    def search_query(self, category_name="Computer"):
        session = self._require_session()
        stmt = (
            select(Product)
            .join(Product.category)
            .where(Category.name == bindparam("category_name"))
        )
        products = session.scalars(stmt, {"category_name": category_name}).all()

        for product in products:
            print(product.name)

        return products

    def count_query(self):
        session = self._require_session()
        count = session.scalar(select(func.count(Product.name)))

        print(count)
        return count

    def insert_query(self):
        """
        Copy every legacy category into the category table.

        Plain INSERT ... VALUES goes through ``session.add``; this shows the
        INSERT ... SELECT form, which needs both tables mapped.
        """
        session = self._require_session()
        stmt = insert(Category.__table__).from_select(
            [Category.id, Category.name],
            select(OldCategory.id, OldCategory.name),
        )
        rows_affected = session.execute(stmt).rowcount

        if rows_affected > 0:
            print(f"{rows_affected} row(s) were inserted")
            logger.info(f"Inserted {rows_affected} rows into '{Category.__tablename__}'")

        return rows_affected

    def named_parameters_query(self, keyword="New"):
        session = self._require_session()
        stmt = select(Product).where(Product.description.like(bindparam("keyword")))
        products = session.scalars(stmt, {"keyword": like_pattern(keyword)}).all()

        for product in products:
            print(product.name)

        return products

    def update_query(self, product_id=43, price=488.0):
        session = self._require_session()
        stmt = (
            update(Product)
            .where(Product.id == product_id)
            .values(price=price)
        )
        rows_affected = session.execute(stmt).rowcount

        if rows_affected > 0:
            print(f"Updated {rows_affected} rows.")
            logger.info(f"Updated {rows_affected} rows in '{Product.__tablename__}'")

        return rows_affected

    def delete_query(self, category_id=1):
        session = self._require_session()
        stmt = delete(OldCategory).where(OldCategory.id == category_id)
        rows_affected = session.execute(stmt).rowcount

        if rows_affected > 0:
            print(f"Deleted {rows_affected} rows.")
            logger.info(f"Deleted {rows_affected} rows from '{OldCategory.__tablename__}'")

        return rows_affected

    def join_query(self, min_price=500):
        session = self._require_session()
        # Price condition belongs to the ON clause, not WHERE
        stmt = select(Product, Category).join(
            Category,
            and_(
                Product.category_id == Category.id,
                Product.price > bindparam("min_price"),
            ),
        )
        rows = session.execute(stmt, {"min_price": min_price}).all()

        for product, category in rows:
            print(f"{product.name} - {product.price} - {category.name}")

        return rows

    def order_by_query(self):
        session = self._require_session()
        products = session.scalars(select(Product).order_by(Product.price.asc())).all()

        for product in products:
            print(f"{product.name}\t - {product.price}")

        return products

    def pagination_query(self, first_result=0, max_results=2):
        session = self._require_session()
        stmt = select(Product).offset(first_result).limit(max_results)
        products = session.scalars(stmt).all()

        for product in products:
            print(f"{product.name}\t - {product.price}")

        return products

    def group_by_query(self):
        session = self._require_session()
        stmt = (
            select(func.sum(Product.price), Category.name)
            .join(Product.category)
            .group_by(Category.id, Category.name)
        )
        rows = session.execute(stmt).all()

        for total, category_name in rows:
            print(f"{category_name} - {total}")

        return rows

    def date_range_query(self, begin_date="2014-11-01", end_date="2014-11-22"):
        session = self._require_session()
        stmt = (
            select(Order)
            .options(joinedload(Order.product))
            .where(
                Order.purchase_date >= bindparam("begin_date"),
                Order.purchase_date <= bindparam("end_date"),
            )
        )
        params = {
            "begin_date": parse_date(begin_date),
            "end_date": parse_date(end_date),
        }
        orders = session.scalars(stmt, params).all()

        for order in orders:
            print(f"{order.product.name} - {order.amount} - {order.purchase_date}")

        return orders

    def arithmetic_expression_query(self, low=500, high=1000):
        session = self._require_session()
        stmt = select(Product).where(Product.price >= low, Product.price <= high)
        products = session.scalars(stmt).all()

        for product in products:
            print(f"{product.name}\t - {product.price}")

        return products
