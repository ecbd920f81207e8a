import pytest

from sqlalchemy import select

from sqlalchemy_querydemo import QueryDemo
from sqlalchemy_querydemo.models import Category, Product, OldCategory


class TestCRUD:
    def test_insert_query(self, engine, SessionFactory, capsys):
        with QueryDemo(engine=engine) as demo:
            rows_affected = demo.insert_query()

        assert rows_affected == 2
        assert capsys.readouterr().out.splitlines() == ["2 row(s) were inserted"]

        with SessionFactory() as session:
            categories = session.scalars(select(Category).order_by(Category.id)).all()
            assert [(c.id, c.name) for c in categories] == [
                (1, "Camera"),
                (2, "Printer"),
                (5, "Computer"),
                (6, "Phone"),
                (7, "Tablet"),
            ]

    def test_insert_query_empty_source(self, engine, SessionFactory, capsys):
        with SessionFactory.begin() as session:
            for old in session.scalars(select(OldCategory)).all():
                session.delete(old)

        with QueryDemo(engine=engine) as demo:
            assert demo.insert_query() == 0

        assert capsys.readouterr().out == ""

    def test_update_query(self, engine, SessionFactory, capsys):
        with SessionFactory() as session:
            before = {p.id: p.price for p in session.scalars(select(Product)).all()}

        with QueryDemo(engine=engine) as demo:
            assert demo.update_query() == 1

        assert capsys.readouterr().out.splitlines() == ["Updated 1 rows."]

        with SessionFactory() as session:
            after = {p.id: p.price for p in session.scalars(select(Product)).all()}

        assert after[43] == 488.0
        assert {k: v for k, v in after.items() if k != 43} == {k: v for k, v in before.items() if k != 43}

    def test_update_query_missing_row(self, demo, capsys):
        assert demo.update_query(product_id=999, price=1.0) == 0
        assert capsys.readouterr().out == ""

    def test_update_rolled_back_on_error(self, engine, SessionFactory):
        with pytest.raises(RuntimeError):
            with QueryDemo(engine=engine) as demo:
                demo.update_query(product_id=40, price=1.0)
                raise RuntimeError("boom")

        with SessionFactory() as session:
            assert session.get(Product, 40).price == 899.0

    def test_delete_query(self, engine, SessionFactory, capsys):
        with QueryDemo(engine=engine) as demo:
            assert demo.delete_query() == 1

        assert capsys.readouterr().out.splitlines() == ["Deleted 1 rows."]

        with SessionFactory() as session:
            remaining = session.scalars(select(OldCategory)).all()
            assert [(c.id, c.name) for c in remaining] == [(2, "Printer")]

    def test_delete_query_missing_row(self, demo, capsys):
        assert demo.delete_query(category_id=42) == 0
        assert capsys.readouterr().out == ""

    def test_delete_then_insert(self, demo):
        demo.delete_query(category_id=1)

        assert demo.insert_query() == 1
        names = [c.name for c in demo.list_query()]
        assert "Printer" in names
        assert "Camera" not in names
