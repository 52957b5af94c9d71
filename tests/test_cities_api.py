"""Tests for the cities endpoints."""

import json

import pytest

CITIES_URL = "/api/v1/cities"


def pagination(response) -> dict:
    return json.loads(response.headers["X-Pagination"])


class TestListCities:
    """Tests for GET /api/v{version}/cities."""

    def test_lists_seeded_cities(self, client, auth_headers):
        """Test the default page holds every seeded city in id order."""
        response = client.get(CITIES_URL, headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert [c["id"] for c in body] == [1, 2, 3]
        assert [c["name"] for c in body] == ["New York City", "Antwerp", "Paris"]

    def test_list_shape_has_no_points_of_interest(self, client, auth_headers):
        """Test list items never include nested points of interest."""
        response = client.get(CITIES_URL, headers=auth_headers)

        for city in response.json():
            assert set(city) == {"id", "name", "description"}

    def test_pagination_header(self, client, auth_headers):
        """Test pagination metadata is returned as a JSON header."""
        response = client.get(CITIES_URL, headers=auth_headers)

        assert pagination(response) == {
            "totalCount": 3,
            "pageSize": 10,
            "currentPage": 1,
            "totalPages": 1,
        }

    @pytest.mark.parametrize("requested", [21, 50, 1000])
    def test_page_size_clamped_to_maximum(self, client, auth_headers, requested):
        """Test page sizes above 20 are reduced to 20."""
        response = client.get(
            CITIES_URL, params={"pageSize": requested}, headers=auth_headers
        )

        assert response.status_code == 200
        assert pagination(response)["pageSize"] == 20

    def test_page_size_and_number_below_one_clamped(self, client, auth_headers):
        """Test zero or negative paging values are raised to 1."""
        response = client.get(
            CITIES_URL,
            params={"pageSize": 0, "pageNumber": -3},
            headers=auth_headers,
        )

        assert response.status_code == 200
        assert len(response.json()) == 1
        meta = pagination(response)
        assert meta["pageSize"] == 1
        assert meta["currentPage"] == 1
        assert meta["totalPages"] == 3

    def test_second_page(self, client, auth_headers):
        """Test paging through results with a small page size."""
        first = client.get(
            CITIES_URL, params={"pageSize": 2, "pageNumber": 1}, headers=auth_headers
        )
        second = client.get(
            CITIES_URL, params={"pageSize": 2, "pageNumber": 2}, headers=auth_headers
        )

        assert [c["name"] for c in first.json()] == ["New York City", "Antwerp"]
        assert [c["name"] for c in second.json()] == ["Paris"]
        assert pagination(second) == {
            "totalCount": 3,
            "pageSize": 2,
            "currentPage": 2,
            "totalPages": 2,
        }

    def test_page_past_the_end_is_empty(self, client, auth_headers):
        """Test a page number beyond the last page returns no items."""
        response = client.get(
            CITIES_URL, params={"pageSize": 2, "pageNumber": 5}, headers=auth_headers
        )

        assert response.json() == []
        assert pagination(response)["totalCount"] == 3

    def test_huge_page_number_is_bounded(self, client, auth_headers):
        """Test a page number whose offset overflows an INTEGER returns an empty page."""
        response = client.get(
            CITIES_URL, params={"pageNumber": 10**19}, headers=auth_headers
        )

        assert response.status_code == 200
        assert response.json() == []
        assert pagination(response)["currentPage"] == (2**63 - 1) // 10 + 1

    def test_filter_by_exact_name(self, client, auth_headers):
        """Test the name filter matches the whole name, ignoring outer spaces."""
        response = client.get(
            CITIES_URL, params={"name": "  Paris "}, headers=auth_headers
        )

        assert [c["name"] for c in response.json()] == ["Paris"]
        assert pagination(response)["totalCount"] == 1

    def test_name_filter_is_not_a_substring_match(self, client, auth_headers):
        """Test a partial name does not match."""
        response = client.get(CITIES_URL, params={"name": "Par"}, headers=auth_headers)

        assert response.json() == []
        assert pagination(response)["totalPages"] == 0

    def test_blank_filters_are_ignored(self, client, auth_headers):
        """Test whitespace-only filters behave like no filter."""
        response = client.get(
            CITIES_URL,
            params={"name": "   ", "searchQuery": ""},
            headers=auth_headers,
        )

        assert len(response.json()) == 3

    def test_search_matches_description(self, client, auth_headers):
        """Test search text is found inside the description."""
        response = client.get(
            CITIES_URL, params={"searchQuery": "cathedral"}, headers=auth_headers
        )

        assert [c["name"] for c in response.json()] == ["Antwerp"]

    def test_search_matches_name(self, client, auth_headers):
        """Test search text is found inside the name."""
        response = client.get(
            CITIES_URL, params={"searchQuery": "York"}, headers=auth_headers
        )

        assert [c["name"] for c in response.json()] == ["New York City"]

    def test_name_and_search_are_combined(self, client, auth_headers):
        """Test both filters must match."""
        both = client.get(
            CITIES_URL,
            params={"name": "Paris", "searchQuery": "tower"},
            headers=auth_headers,
        )
        conflicting = client.get(
            CITIES_URL,
            params={"name": "Paris", "searchQuery": "cathedral"},
            headers=auth_headers,
        )

        assert [c["name"] for c in both.json()] == ["Paris"]
        assert conflicting.json() == []


class TestGetCity:
    """Tests for GET /api/v{version}/cities/{cityId}."""

    def test_without_points_of_interest(self, client, auth_headers):
        """Test the default shape omits points of interest."""
        response = client.get(f"{CITIES_URL}/1", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {
            "id": 1,
            "name": "New York City",
            "description": "The one with that big park.",
        }

    def test_with_points_of_interest(self, client, auth_headers):
        """Test the flag adds the nested points of interest."""
        response = client.get(
            f"{CITIES_URL}/1",
            params={"includePointsOfInterest": "true"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["numberOfPointsOfInterest"] == 2
        assert [p["name"] for p in body["pointsOfInterest"]] == [
            "Central Park",
            "Empire State Building",
        ]
        assert set(body["pointsOfInterest"][0]) == {"id", "name", "description"}

    def test_explicit_false_flag(self, client, auth_headers):
        """Test includePointsOfInterest=false omits points of interest."""
        response = client.get(
            f"{CITIES_URL}/3",
            params={"includePointsOfInterest": "false"},
            headers=auth_headers,
        )

        assert "pointsOfInterest" not in response.json()

    @pytest.mark.parametrize("include", ["true", "false"])
    def test_unknown_city_not_found(self, client, auth_headers, include):
        """Test an unknown id returns 404 with an empty body."""
        response = client.get(
            f"{CITIES_URL}/999",
            params={"includePointsOfInterest": include},
            headers=auth_headers,
        )

        assert response.status_code == 404
        assert response.content == b""
        assert response.headers["api-supported-versions"] == "1, 2"

    def test_non_integer_id_rejected(self, client, auth_headers):
        """Test a non-numeric id fails request validation."""
        response = client.get(f"{CITIES_URL}/abc", headers=auth_headers)

        assert response.status_code == 422


class TestCitiesVersioningAndAuth:
    """Tests for version handling and authentication on city routes."""

    def test_version_two_supported(self, client, auth_headers):
        """Test the cities routes also answer on v2."""
        response = client.get("/api/v2/cities", headers=auth_headers)

        assert response.status_code == 200
        assert response.headers["api-supported-versions"] == "1, 2"

    def test_unsupported_version_rejected(self, client, auth_headers):
        """Test an unknown version returns 400."""
        response = client.get("/api/v3/cities", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["detail"] == "Unsupported API version: 3"

    def test_requires_token(self, client):
        """Test requests without a bearer token are rejected."""
        response = client.get(CITIES_URL)

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_token_checked_before_version(self, client):
        """Test an unauthenticated request to an unknown version gets 401, not 400."""
        response = client.get("/api/v3/cities")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_rejects_invalid_token(self, client):
        """Test a malformed bearer token is rejected."""
        response = client.get(
            f"{CITIES_URL}/1", headers={"Authorization": "Bearer not-a-jwt"}
        )

        assert response.status_code == 401
