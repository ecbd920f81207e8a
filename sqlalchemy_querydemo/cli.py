import argparse
import traceback

from sqlalchemy import select

from .config import Config
from .demo import QueryDemo, QUERIES
from .logger import configure_logging, logger
from .models import Product
from .seed import create_schema, seed_catalog, generate_orders


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="querydemo",
        description="Run example ORM queries against the category/product/order schema",
    )
    parser.add_argument("queries", nargs="*", default=["date-range"], metavar="QUERY",
                        help=f"Queries to run in order: {', '.join(QUERIES)}")
    parser.add_argument("--database-url", help="Overrides QUERYDEMO_DATABASE_URL")
    parser.add_argument("--init-db", action="store_true", help="Create the schema before running")
    parser.add_argument("--seed", action="store_true", help="Load the fixed sample data set")
    parser.add_argument("--fake-orders", type=int, default=0, help="Generate N random orders")
    parser.add_argument("--begin-date", default="2014-11-01", help="date-range lower bound (YYYY-MM-DD)")
    parser.add_argument("--end-date", default="2014-11-22", help="date-range upper bound (YYYY-MM-DD)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log SQL statements")
    args = parser.parse_args(argv)

    unknown = [name for name in args.queries if name not in QUERIES]
    if unknown:
        parser.error(f"unknown queries: {', '.join(unknown)}")

    return args


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args.verbose)

    config = Config.from_env()
    if args.database_url:
        config.database_url = args.database_url

    demo = QueryDemo(config)
    try:
        with demo:
            if args.init_db:
                create_schema(demo.engine)

            if args.seed:
                seed_catalog(demo.session)

            if args.fake_orders:
                products = demo.session.scalars(select(Product)).all()
                if products:
                    demo.session.add_all(generate_orders(products, args.fake_orders))
                    demo.session.flush()
                    logger.info(f"Generated {args.fake_orders} orders")
                else:
                    logger.warning("No products in the database, skipping --fake-orders (try --seed)")

            for name in args.queries:
                if name == "date-range":
                    demo.run(name, begin_date=args.begin_date, end_date=args.end_date)
                else:
                    demo.run(name)

    except ValueError:
        # Malformed date bounds; the session was already rolled back and closed
        traceback.print_exc()
        return 1

    return 0
