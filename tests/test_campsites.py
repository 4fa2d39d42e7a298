import pytest
from datetime import datetime
from fastapi import status

from mycamp.models.campsite import Campsite
from mycamp.models.catalog import CampsiteAttribute, CampsiteEquipment
from mycamp.models.reservation import Reservation
from mycamp.schemas.campsite import CampAttributeBase, CampsiteCreate, EquipmentBase
from mycamp.services import campsites, facilities
from mycamp.utils.errors import (
    ConflictError,
    InvalidAttributeError,
    InvalidEquipmentError,
    NotFoundError,
)

from tests.conf_tests import (  # pylint: disable=unused-import
    client,
    clear_db,
    day,
    test_db,
    test_user,
    auth_headers,
    admin_headers,
    test_facility,
    test_catalog,
    test_campsite,
)


def new_campsite(facility_id, loop="B", name="B07", capacity=4):
    return CampsiteCreate(loop=loop, name=name, facility_id=facility_id, capacity=capacity)


def add_reservations(db, campsite, user, count):
    for offset in range(count):
        db.add(Reservation(
            user_id=user.id,
            campsite_id=campsite.id,
            check_in=day(offset * 3),
            check_out=day(offset * 3 + 1),
            created_at=datetime(2024, 1, 1, 8, offset),
        ))
    db.commit()


def count(db, model, campsite_id):
    return db.query(model).filter(model.campsite_id == campsite_id).count()


@pytest.fixture
def furnished_campsite(test_db, test_facility, test_catalog):  # pylint: disable=redefined-outer-name
    return campsites.add_campsite(
        test_db,
        new_campsite(test_facility.id),
        [CampAttributeBase(name="Shade", value="Full"), CampAttributeBase(name="Max Vehicle Length", value="30")],
        [EquipmentBase(name="Tent")],
    )


# Service tests
# pylint: disable-next=redefined-outer-name
def test_add_then_get_campsite(test_db, test_facility, furnished_campsite):
    campsite = campsites.get_campsite(test_db, furnished_campsite.id)
    assert campsite.loop == "B"
    assert campsite.name == "B07"
    assert campsite.facility_id == test_facility.id
    assert campsite.capacity == 4
    assert campsite.active is True
    assert sorted((a.name, a.value) for a in campsite.attributes) == [
        ("Max Vehicle Length", "30"),
        ("Shade", "Full"),
    ]
    assert [e.name for e in campsite.equipment] == ["Tent"]


# pylint: disable-next=redefined-outer-name
def test_add_campsite_unknown_facility(test_db, test_catalog):
    with pytest.raises(NotFoundError):
        campsites.add_campsite(test_db, new_campsite(12345))


# pylint: disable-next=redefined-outer-name
def test_add_duplicate_campsite_conflicts(test_db, test_facility, test_campsite):
    with pytest.raises(ConflictError):
        campsites.add_campsite(test_db, new_campsite(test_facility.id, loop="A", name="A01"))


# pylint: disable-next=redefined-outer-name
def test_add_campsite_reuses_name_of_inactive(test_db, test_facility, test_campsite):
    assert campsites.disable_campsite(test_db, test_campsite.id) is True
    campsite = campsites.add_campsite(test_db, new_campsite(test_facility.id, loop="A", name="A01"))
    assert campsite.id != test_campsite.id


@pytest.mark.parametrize(
    "attributes, equipment, error",
    [
        ([CampAttributeBase(name="Pool", value="Yes")], [], InvalidAttributeError),
        ([CampAttributeBase(name="Shade", value="  ")], [], InvalidAttributeError),
        ([CampAttributeBase(name="Shade", value="Full")], [EquipmentBase(name="Yacht")], InvalidEquipmentError),
    ],
)
# pylint: disable-next=redefined-outer-name
def test_add_campsite_rolls_back_on_invalid_catalog(test_db, test_facility, test_catalog, attributes, equipment, error):
    with pytest.raises(error):
        campsites.add_campsite(test_db, new_campsite(test_facility.id), attributes, equipment)
    assert test_db.query(Campsite).count() == 0
    assert test_db.query(CampsiteAttribute).count() == 0
    assert test_db.query(CampsiteEquipment).count() == 0


# pylint: disable-next=redefined-outer-name
def test_delete_campsite_cascades(test_db, test_user, furnished_campsite):
    add_reservations(test_db, furnished_campsite, test_user, 3)
    campsite_id = furnished_campsite.id

    assert campsites.delete_campsite(test_db, campsite_id) is True

    assert count(test_db, Reservation, campsite_id) == 0
    assert count(test_db, CampsiteAttribute, campsite_id) == 0
    assert count(test_db, CampsiteEquipment, campsite_id) == 0
    assert test_db.query(Campsite).filter(Campsite.id == campsite_id).first() is None


# pylint: disable-next=redefined-outer-name
def test_delete_campsite_without_reservations(test_db, test_campsite):
    assert campsites.delete_campsite(test_db, test_campsite.id) is True
    assert campsites.delete_campsite(test_db, test_campsite.id) is False


# pylint: disable-next=redefined-outer-name
def test_delete_unknown_campsite_changes_nothing(test_db, test_user, test_catalog, test_campsite):
    # child rows left behind for a campsite row that no longer exists
    orphan_id = 9999
    test_db.add(Reservation(
        user_id=test_user.id,
        campsite_id=orphan_id,
        check_in=day(1),
        check_out=day(2),
        created_at=datetime(2024, 1, 1, 8, 0),
    ))
    test_db.add(CampsiteAttribute(
        campsite_id=orphan_id, attribute_id=facilities.get_attribute_id(test_db, "Shade"), value="Full"
    ))
    test_db.add(CampsiteEquipment(
        campsite_id=orphan_id, equipment_id=facilities.get_equipment_id(test_db, "Tent")
    ))
    test_db.commit()
    add_reservations(test_db, test_campsite, test_user, 2)

    assert campsites.delete_campsite(test_db, orphan_id) is False

    assert count(test_db, Reservation, orphan_id) == 1
    assert count(test_db, CampsiteAttribute, orphan_id) == 1
    assert count(test_db, CampsiteEquipment, orphan_id) == 1
    assert count(test_db, Reservation, test_campsite.id) == 2


# pylint: disable-next=redefined-outer-name
def test_disable_campsite_drops_reservations(test_db, test_user, furnished_campsite):
    add_reservations(test_db, furnished_campsite, test_user, 2)
    campsite_id = furnished_campsite.id

    assert campsites.disable_campsite(test_db, campsite_id) is True

    assert count(test_db, Reservation, campsite_id) == 0
    assert count(test_db, CampsiteAttribute, campsite_id) == 2
    assert count(test_db, CampsiteEquipment, campsite_id) == 1
    assert campsites.get_campsite(test_db, campsite_id) is None


# pylint: disable-next=redefined-outer-name
def test_enable_disable_are_idempotent(test_db, test_campsite):
    assert campsites.enable_campsite(test_db, test_campsite.id) is False
    assert campsites.disable_campsite(test_db, test_campsite.id) is True
    assert campsites.disable_campsite(test_db, test_campsite.id) is False
    assert test_db.query(Campsite.active).filter(Campsite.id == test_campsite.id).scalar() is False
    assert campsites.enable_campsite(test_db, test_campsite.id) is True
    assert campsites.enable_campsite(test_db, test_campsite.id) is False
    assert test_db.query(Campsite.active).filter(Campsite.id == test_campsite.id).scalar() is True


# pylint: disable-next=redefined-outer-name
def test_disable_inactive_keeps_reservations(test_db, test_user, test_campsite):
    test_db.query(Campsite).filter(Campsite.id == test_campsite.id).update({Campsite.active: False})
    test_db.commit()
    add_reservations(test_db, test_campsite, test_user, 1)

    assert campsites.disable_campsite(test_db, test_campsite.id) is False
    assert count(test_db, Reservation, test_campsite.id) == 1


# API tests
# pylint: disable-next=redefined-outer-name
def test_add_campsite_endpoint(admin_headers, test_facility, test_catalog):
    payload = {
        "campsite": {"loop": "C", "name": "C12", "facility_id": test_facility.id, "capacity": 2},
        "attributes": [{"name": "Shade", "value": "Partial"}],
        "equipment": [{"name": "RV"}, {"name": "Tent"}],
    }
    response = client.post("/campsites/", json=payload, headers=admin_headers)
    assert response.status_code == status.HTTP_201_CREATED
    data = response.json()
    assert data["loop"] == "C"
    assert data["capacity"] == 2
    assert data["active"] is True
    assert data["attributes"] == [{"name": "Shade", "value": "Partial"}]
    assert sorted(e["name"] for e in data["equipment"]) == ["RV", "Tent"]

    response = client.get(f"/campsites/{data['id']}")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["name"] == "C12"


# pylint: disable-next=redefined-outer-name
def test_add_campsite_endpoint_requires_admin(auth_headers, test_facility):
    payload = {
        "campsite": {"loop": "C", "name": "C12", "facility_id": test_facility.id, "capacity": 2},
    }
    response = client.post("/campsites/", json=payload, headers=auth_headers)
    assert response.status_code == status.HTTP_403_FORBIDDEN


# pylint: disable-next=redefined-outer-name
def test_add_campsite_endpoint_errors(admin_headers, test_facility, test_catalog, test_campsite):
    duplicate = {"campsite": {"loop": "A", "name": "A01", "facility_id": test_facility.id, "capacity": 1}}
    response = client.post("/campsites/", json=duplicate, headers=admin_headers)
    assert response.status_code == status.HTTP_409_CONFLICT

    missing = {"campsite": {"loop": "A", "name": "A02", "facility_id": 777, "capacity": 1}}
    response = client.post("/campsites/", json=missing, headers=admin_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Facility not found"

    bad_equipment = {
        "campsite": {"loop": "A", "name": "A02", "facility_id": test_facility.id, "capacity": 1},
        "equipment": [{"name": "Hovercraft"}],
    }
    response = client.post("/campsites/", json=bad_equipment, headers=admin_headers)
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Invalid equipment name"


def test_get_campsite_not_found():
    response = client.get("/campsites/9999")
    assert response.status_code == status.HTTP_404_NOT_FOUND


# pylint: disable-next=redefined-outer-name
def test_enable_disable_endpoints(admin_headers, test_campsite):
    response = client.put(f"/campsites/{test_campsite.id}/disable", headers=admin_headers)
    assert response.status_code == status.HTTP_200_OK
    response = client.put(f"/campsites/{test_campsite.id}/disable", headers=admin_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND
    response = client.get(f"/campsites/{test_campsite.id}")
    assert response.status_code == status.HTTP_404_NOT_FOUND

    response = client.put(f"/campsites/{test_campsite.id}/enable", headers=admin_headers)
    assert response.status_code == status.HTTP_200_OK
    response = client.put(f"/campsites/{test_campsite.id}/enable", headers=admin_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND


# pylint: disable-next=redefined-outer-name
def test_delete_campsite_endpoint(admin_headers, test_campsite):
    response = client.delete(f"/campsites/{test_campsite.id}", headers=admin_headers)
    assert response.status_code == status.HTTP_200_OK
    response = client.delete(f"/campsites/{test_campsite.id}", headers=admin_headers)
    assert response.status_code == status.HTTP_404_NOT_FOUND


# pylint: disable-next=redefined-outer-name
def test_delete_campsite_unauthorized(test_campsite):
    response = client.delete(f"/campsites/{test_campsite.id}")
    assert response.status_code in [
        status.HTTP_401_UNAUTHORIZED,
        status.HTTP_403_FORBIDDEN,
    ]
