from storefront.data import seed as seed_module
from storefront.data.models import CategoryModel, ProductModel, ProductVariantModel, UserModel


def test_seeds_empty_database_once(monkeypatch, engine, session_factory, db):
    monkeypatch.setattr(seed_module, "SessionLocal", session_factory)
    monkeypatch.setattr(seed_module, "init_db", lambda: None)

    seed_module.seed()
    seed_module.seed()

    assert db.query(ProductModel).count() == 3
    assert db.query(ProductVariantModel).count() == 3 * 4 * 2
    assert {u.role for u in db.query(UserModel)} == {"ADMIN", "CUSTOMER"}
    assert db.query(CategoryModel).count() == 4
    assert all(p.category.parent.slug == "men" for p in db.query(ProductModel))
