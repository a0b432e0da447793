"""Public catalog endpoints: product page and category list."""

from storefront.data.models import ProductVariantModel
from tests.factories import auth, make_category, make_user, make_variant


def _add_variant(db, product_id, size, color):
    db.add(ProductVariantModel(product_id=product_id, size=size, color=color, stock=3))
    db.commit()


class TestProductPage:
    def test_product_with_sorted_variants_and_category(self, client, db):
        men = make_category(db, name="Men")
        tees = make_category(db, name="T-Shirts", parent=men)
        product = make_variant(db, size="M", color="Black", category=tees).product
        product_id = product.id
        _add_variant(db, product_id, "L", "Black")
        _add_variant(db, product_id, "S", "Avocado")

        response = client.get(f"/products/{product.slug}")

        assert response.status_code == 200
        body = response.json()
        page = body["product"]
        assert page["id"] == product_id
        assert [(v["color"], v["size"]) for v in page["variants"]] == [
            ("Avocado", "S"),
            ("Black", "L"),
            ("Black", "M"),
        ]
        assert page["category"]["name"] == "T-Shirts"
        assert page["category"]["parent"]["name"] == "Men"
        assert body["isWishlisted"] is False

    def test_similar_products_are_active_and_from_same_category(self, client, db):
        tees = make_category(db)
        jackets = make_category(db, name="Jackets")
        product = make_variant(db, category=tees).product
        similar = [make_variant(db, category=tees).product_id for _ in range(5)]
        make_variant(db, category=tees, status="DRAFT")
        make_variant(db, category=jackets)

        body = client.get(f"/products/{product.slug}").json()

        ids = [p["id"] for p in body["similarProducts"]]
        assert len(ids) == 4
        assert set(ids) <= set(similar)

    def test_wishlisted_for_signed_in_caller(self, client, db):
        user = make_user(db)
        product = make_variant(db).product
        client.post("/wishlist", json={"productId": product.id}, headers=auth(user))

        signed_in = client.get(f"/products/{product.slug}", headers=auth(user)).json()
        anonymous = client.get(f"/products/{product.slug}").json()

        assert signed_in["isWishlisted"] is True
        assert anonymous["isWishlisted"] is False

    def test_bad_token_is_treated_as_anonymous(self, client, db):
        product = make_variant(db).product

        response = client.get(f"/products/{product.slug}", headers={"Authorization": "Bearer nope"})

        assert response.status_code == 200
        assert response.json()["isWishlisted"] is False

    def test_unknown_slug(self, client):
        response = client.get("/products/no-such-product")

        assert response.status_code == 404
        assert response.json() == {"error": "Product not found"}


def test_categories_list_subcategories_with_counts(client, db):
    men = make_category(db, name="Men")
    tees = make_category(db, name="T-Shirts", parent=men)
    make_category(db, name="Jackets", parent=men)
    make_variant(db, category=tees)
    make_variant(db, category=tees)

    response = client.get("/categories")

    assert response.status_code == 200
    categories = response.json()["categories"]
    assert [(c["name"], c["productCount"]) for c in categories] == [("Jackets", 0), ("T-Shirts", 2)]
    assert {c["parent"]["name"] for c in categories} == {"Men"}
