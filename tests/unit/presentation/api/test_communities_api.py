"""HTTP tests for the community routes and their authorization filters."""

from uuid import uuid4

import pytest


def _respell(community_id: str, spelling: str) -> str:
    return {
        "hex": community_id.replace("-", ""),
        "braced": "{" + community_id + "}",
        "urn": "urn:uuid:" + community_id,
    }[spelling]


class CommunityApiTestCase:
    def _create_community(self, api, headers, name: str = "Sunny Gardens") -> dict:
        response = api.client.post(
            "/api/v1/communities",
            json={"name": name, "district": "North"},
            headers=headers,
        )
        assert response.status_code == 201, response.text
        return response.json()


class TestCreateCommunity(CommunityApiTestCase):
    def test_creator_becomes_admin(self, api):
        user, headers = api.signup("Admin", "admin@example.com")

        community = self._create_community(api, headers)

        assert community["admin_ids"] == [user["user_id"]]
        details = api.client.get(f"/api/v1/users/{user['user_id']}", headers=headers)
        assert details.json()["community_ids"] == [community["community_id"]]

    def test_anonymous_cannot_create(self, client):
        response = client.post("/api/v1/communities", json={"name": "Sunny Gardens"})

        assert response.status_code == 401


class TestCommunityAdmins(CommunityApiTestCase):
    def test_non_admin_cannot_add_admins(self, api):
        _, admin_headers = api.signup("Admin", "admin@example.com")
        outsider, outsider_headers = api.signup("Outsider", "outsider@example.com")
        community = self._create_community(api, admin_headers)
        admins_url = f"/api/v1/communities/{community['community_id']}/admins"

        response = api.client.post(
            admins_url,
            json={"user_ids": [outsider["user_id"]]},
            headers=outsider_headers,
        )

        assert response.status_code == 403
        assert response.json()["code"] == "COMMUNITY_ADMIN_REQUIRED"
        admins = api.client.get(admins_url, headers=admin_headers).json()
        assert outsider["user_id"] not in [a["user_id"] for a in admins]

    def test_admin_adds_admin(self, api):
        admin, admin_headers = api.signup("Admin", "admin@example.com")
        neighbour, neighbour_headers = api.signup("Neighbour", "neighbour@example.com")
        community = self._create_community(api, admin_headers)
        admins_url = f"/api/v1/communities/{community['community_id']}/admins"

        response = api.client.post(
            admins_url,
            json={"user_ids": [neighbour["user_id"]]},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert sorted(response.json()["admin_ids"]) == sorted(
            [admin["user_id"], neighbour["user_id"]],
        )
        # The new admin is recognised by the filter on the next request
        listed = api.client.get(admins_url, headers=neighbour_headers)
        assert listed.status_code == 200

    def test_adding_unknown_user_fails(self, api):
        _, headers = api.signup("Admin", "admin@example.com")
        community = self._create_community(api, headers)

        response = api.client.post(
            f"/api/v1/communities/{community['community_id']}/admins",
            json={"user_ids": ["nobody"]},
            headers=headers,
        )

        assert response.status_code == 404
        assert response.json()["code"] == "USER_NOT_FOUND"

    def test_unknown_community_is_denied(self, api):
        _, headers = api.signup("Admin", "admin@example.com")

        response = api.client.get(f"/api/v1/communities/{uuid4()}/admins", headers=headers)

        assert response.status_code == 403

    def test_anonymous_is_denied(self, api):
        _, headers = api.signup("Admin", "admin@example.com")
        community = self._create_community(api, headers)

        response = api.client.get(f"/api/v1/communities/{community['community_id']}/admins")

        assert response.status_code == 403

    def test_non_uuid_community_id_is_denied(self, api):
        _, headers = api.signup("Admin", "admin@example.com")

        response = api.client.get("/api/v1/communities/not-a-uuid/admins", headers=headers)

        assert response.status_code == 403


class TestAlternativeCommunityIdSpellings(CommunityApiTestCase):
    @pytest.mark.parametrize("spelling", ["hex", "braced", "urn"])
    def test_outsider_cannot_add_admins(self, api, spelling):
        _, admin_headers = api.signup("Admin", "admin@example.com")
        outsider, outsider_headers = api.signup("Outsider", "outsider@example.com")
        community = self._create_community(api, admin_headers)
        community_id = _respell(community["community_id"], spelling)

        response = api.client.post(
            f"/api/v1/communities/{community_id}/admins",
            json={"user_ids": [outsider["user_id"]]},
            headers=outsider_headers,
        )

        assert response.status_code == 403
        admins = api.client.get(
            f"/api/v1/communities/{community['community_id']}/admins",
            headers=admin_headers,
        ).json()
        assert outsider["user_id"] not in [a["user_id"] for a in admins]

    @pytest.mark.parametrize("spelling", ["hex", "braced", "urn"])
    def test_outsider_cannot_add_amenities(self, api, spelling):
        _, admin_headers = api.signup("Admin", "admin@example.com")
        _, outsider_headers = api.signup("Outsider", "outsider@example.com")
        community = self._create_community(api, admin_headers)
        community_id = _respell(community["community_id"], spelling)

        response = api.client.post(
            f"/api/v1/communities/{community_id}/amenities",
            json={"amenities": [{"name": "Pool"}]},
            headers=outsider_headers,
        )

        assert response.status_code == 403

    def test_admin_may_use_hex_spelling(self, api):
        _, headers = api.signup("Admin", "admin@example.com")
        community = self._create_community(api, headers)
        community_id = _respell(community["community_id"], "hex")

        response = api.client.get(f"/api/v1/communities/{community_id}/admins", headers=headers)

        assert response.status_code == 200


class TestCommunityAmenities(CommunityApiTestCase):
    def test_admin_adds_amenities(self, api):
        _, headers = api.signup("Admin", "admin@example.com")
        community = self._create_community(api, headers)

        response = api.client.post(
            f"/api/v1/communities/{community['community_id']}/amenities",
            json={"amenities": [{"name": "Pool", "description": "Outdoor", "price": "5.50"}]},
            headers=headers,
        )

        assert response.status_code == 201
        (amenity,) = response.json()
        assert amenity["name"] == "Pool"
        assert amenity["community_id"] == community["community_id"]

    def test_non_admin_cannot_add_amenities(self, api):
        _, admin_headers = api.signup("Admin", "admin@example.com")
        _, outsider_headers = api.signup("Outsider", "outsider@example.com")
        community = self._create_community(api, admin_headers)

        response = api.client.post(
            f"/api/v1/communities/{community['community_id']}/amenities",
            json={"amenities": [{"name": "Pool"}]},
            headers=outsider_headers,
        )

        assert response.status_code == 403
