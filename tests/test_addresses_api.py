import pytest

from storefront.data.models import AddressModel
from tests.factories import auth, make_address, make_order, make_user, make_variant

PAYLOAD = {
    "fullName": "Asha Rao",
    "phone": "9876543210",
    "addressLine1": "4 MG Road, Indiranagar",
    "city": "Bengaluru",
    "state": "Karnataka",
    "pincode": "560038",
}


@pytest.fixture()
def user(db):
    return make_user(db)


def _defaults(db, user):
    db.expire_all()
    return [
        a.id
        for a in db.query(AddressModel).filter(AddressModel.user_id == user.id, AddressModel.is_default.is_(True))
    ]


def test_create_and_list(client, user):
    created = client.post("/addresses", json=PAYLOAD, headers=auth(user))

    assert created.status_code == 201
    body = created.json()
    assert body["fullName"] == "Asha Rao"
    assert body["isDefault"] is False

    listed = client.get("/addresses", headers=auth(user)).json()
    assert [a["id"] for a in listed] == [body["id"]]


def test_new_default_replaces_old_one(client, db, user):
    old = make_address(db, user, is_default=True)

    response = client.post("/addresses", json={**PAYLOAD, "isDefault": True}, headers=auth(user))

    new_id = response.json()["id"]
    assert new_id != old.id
    assert _defaults(db, user) == [new_id]


def test_update_to_default(client, db, user):
    first = make_address(db, user, is_default=True)
    second = make_address(db, user)

    response = client.put(f"/addresses/{second.id}", json={**PAYLOAD, "isDefault": True}, headers=auth(user))

    assert response.status_code == 200
    assert response.json()["city"] == "Bengaluru"
    assert _defaults(db, user) == [second.id]
    assert first.id not in _defaults(db, user)


def test_invalid_pincode(client, user):
    response = client.post("/addresses", json={**PAYLOAD, "pincode": "123"}, headers=auth(user))

    assert response.status_code == 400
    assert response.json()["error"].startswith("pincode")


def test_delete(client, db, user):
    address = make_address(db, user)

    response = client.delete(f"/addresses/{address.id}", headers=auth(user))

    assert response.status_code == 200
    db.expire_all()
    assert db.get(AddressModel, address.id) is None


def test_cannot_delete_address_used_by_order(client, db, user):
    address = make_address(db, user)
    make_order(db, user, address, make_variant(db))

    response = client.delete(f"/addresses/{address.id}", headers=auth(user))

    assert response.status_code == 400
    assert response.json() == {"error": "Cannot delete address linked to orders"}


def test_someone_elses_address(client, db, user):
    other = make_user(db)
    address = make_address(db, other)

    update = client.put(f"/addresses/{address.id}", json=PAYLOAD, headers=auth(user))
    delete = client.delete(f"/addresses/{address.id}", headers=auth(user))

    assert update.status_code == 404
    assert delete.status_code == 404
