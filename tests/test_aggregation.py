from sqlalchemy import select, func

from sqlalchemy_querydemo import QueryDemo
from sqlalchemy_querydemo.models import Product


class TestAggregation:
    def test_count_query(self, demo, capsys):
        count = demo.count_query()

        assert count == 7
        assert capsys.readouterr().out.strip() == "7"

    def test_count_ignores_null_names(self, engine, SessionFactory):
        with SessionFactory.begin() as session:
            session.add(Product(name=None, description="Unnamed", price=10.0, category_id=5))

        with QueryDemo(engine=engine) as demo:
            assert demo.count_query() == 7

        with SessionFactory() as session:
            total = session.scalar(select(func.count()).select_from(Product))
            assert total == 8

    def test_group_by_query(self, demo, capsys):
        rows = demo.group_by_query()

        totals = {category_name: total for total, category_name in rows}
        assert totals == {
            "Computer": 2548.0,
            "Phone": 1148.0,
            "Tablet": 619.0,
        }

        out = capsys.readouterr().out.splitlines()
        assert sorted(out) == [
            "Computer - 2548.0",
            "Phone - 1148.0",
            "Tablet - 619.0",
        ]
