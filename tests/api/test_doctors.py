"""
tests/api/test_doctors.py — Doctor endpoints end to end.
"""
from __future__ import annotations

import pytest

URL = "/api/v1/doctors"


class TestListDoctors:
    def test_returns_seeded_doctors_in_order(self, client, store):
        response = client.get(URL)
        assert response.status_code == 200
        assert response.json() == store.doctors.all()
        assert [d["id"] for d in response.json()] == [1, 2, 3, 4]


class TestGetDoctor:
    def test_first_seeded_doctor(self, client):
        response = client.get(f"{URL}/1")
        assert response.status_code == 200
        assert response.json() == {"id": 1, "name": "Dr. Meredith Grey"}

    def test_leading_zeros_name_the_same_doctor(self, client):
        assert client.get(f"{URL}/01").json()["id"] == 1

    @pytest.mark.parametrize("doctor_id", ["5", "999999", str(2**31 - 1)])
    def test_well_formed_unknown_id_is_404(self, client, doctor_id):
        response = client.get(f"{URL}/{doctor_id}")
        assert response.status_code == 404
        assert response.json() == {"error": "Doctor not found."}

    @pytest.mark.parametrize("doctor_id", ["abc", "0", "-1", "1.0", "1e2", "99999999999"])
    def test_malformed_id_is_400(self, client, doctor_id):
        response = client.get(f"{URL}/{doctor_id}")
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid id."}


class TestCreateDoctor:
    def test_created_with_next_id(self, client, store):
        n = len(store.doctors)
        response = client.post(URL, json={"name": "Alice"})
        assert response.status_code == 201
        assert response.json() == {"id": n + 1, "name": "Alice"}

        listed = client.get(URL).json()
        assert listed[-1] == {"id": n + 1, "name": "Alice"}
        assert client.get(f"{URL}/{n + 1}").json()["name"] == "Alice"

    def test_consecutive_creates_get_ascending_ids(self, client):
        first = client.post(URL, json={"name": "Alice"}).json()
        second = client.post(URL, json={"name": "Alice"}).json()
        assert second["id"] == first["id"] + 1

    def test_extra_fields_are_dropped(self, client):
        response = client.post(URL, json={"name": "Bob", "specialty": "ENT"})
        assert response.status_code == 201
        assert set(response.json()) == {"id", "name"}

    @pytest.mark.parametrize("body", [{}, {"name": ""}, {"name": None}, {"other": "x"}])
    def test_missing_name_is_400_and_nothing_is_added(self, client, store, body):
        n = len(store.doctors)
        response = client.post(URL, json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Doctor needs a name parameter."}
        assert len(store.doctors) == n

    def test_empty_body_is_400(self, client, store):
        response = client.post(URL)
        assert response.status_code == 400
        assert response.json() == {"error": "Doctor needs a name parameter."}
        assert len(store.doctors) == 4

    @pytest.mark.parametrize("body", [[], ["Alice"], "Alice", 42])
    def test_non_object_json_body_has_no_name(self, client, store, body):
        response = client.post(URL, json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Doctor needs a name parameter."}
        assert len(store.doctors) == 4

    def test_form_encoded_body_has_no_name(self, client, store):
        response = client.post(URL, data={"name": "Alice"})
        assert response.status_code == 400
        assert response.json() == {"error": "Doctor needs a name parameter."}
        assert len(store.doctors) == 4

    def test_malformed_json_is_400(self, client, store):
        response = client.post(
            URL, content=b"{not json", headers={"content-type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Malformed request body."}
        assert len(store.doctors) == 4


class TestOverlongIds:
    def test_huge_path_id_is_400(self, client):
        response = client.get(f"{URL}/{'1' * 5000}")
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid id."}

    def test_huge_visit_filter_matches_nothing(self, client):
        response = client.get("/api/v1/visits", params={"doctorid": "1" * 5000})
        assert response.status_code == 200
        assert response.json() == []
