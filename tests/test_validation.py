"""Request rules, checked through the routes: a rejected body never reaches the brewery API."""

import pytest

from conftest import inventory_url
from core.validation import collect_violations


class TestProductCreateRules:
    def test_valid_product(self, client, downstream, auth_headers, valid_product):
        downstream.on("POST", inventory_url(), 201, json={"id": "1"})

        response = client.post("/inventory/add-product", json=valid_product, headers=auth_headers)

        assert response.status_code == 201

    @pytest.mark.parametrize("product_type", ["Beer", "Cocktail", "Liqueur", "Hard Seltzer"])
    def test_all_product_types_accepted(self, client, downstream, auth_headers, valid_product, product_type):
        downstream.on("POST", inventory_url(), 201, json={"id": "1"})
        valid_product["type"] = product_type

        response = client.post("/inventory/add-product", json=valid_product, headers=auth_headers)

        assert response.status_code == 201

    def test_unknown_package(self, client, downstream, auth_headers, valid_product):
        valid_product["package"] = "Keg"

        response = client.post("/inventory/add-product", json=valid_product, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"errors": [{"field": "package", "message": "Invalid package type"}]}
        assert downstream.requests == []

    def test_negative_numbers(self, client, downstream, auth_headers, valid_product):
        valid_product.update(abv=-0.1, cost=-1, reorderPoint=-1)

        response = client.post("/inventory/add-product", json=valid_product, headers=auth_headers)

        assert response.json()["errors"] == [
            {"field": "abv", "message": "ABV must be a positive number"},
            {"field": "cost", "message": "Cost must be a positive number"},
            {"field": "reorderPoint", "message": "Reorder point must be a non-negative integer"},
        ]
        assert downstream.requests == []

    def test_zero_is_allowed(self, client, downstream, auth_headers, valid_product):
        downstream.on("POST", inventory_url(), 201, json={"id": "1"})
        valid_product.update(abv=0, volume=0, price=0, cost=0, stockQuantity=0, reorderPoint=0)

        response = client.post("/inventory/add-product", json=valid_product, headers=auth_headers)

        assert response.status_code == 201

    def test_numeric_strings_are_coerced(self, client, downstream, auth_headers, valid_product):
        downstream.on("POST", inventory_url(), 201, json={"id": "1"})
        valid_product.update(price="3.5", stockQuantity="12")

        response = client.post("/inventory/add-product", json=valid_product, headers=auth_headers)

        assert response.status_code == 201

    def test_fractional_stock_quantity(self, client, downstream, auth_headers, valid_product):
        valid_product["stockQuantity"] = 2.5

        response = client.post("/inventory/add-product", json=valid_product, headers=auth_headers)

        assert response.json() == {
            "errors": [{"field": "stockQuantity", "message": "Stock quantity must be a non-negative integer"}]
        }

    @pytest.mark.parametrize(
        "field, message",
        [
            ("stockQuantity", "Stock quantity must be a non-negative integer"),
            ("reorderPoint", "Reorder point must be a non-negative integer"),
            ("price", "Price must be a positive number"),
            ("abv", "ABV must be a positive number"),
        ],
    )
    def test_boolean_is_not_a_number(self, client, downstream, auth_headers, valid_product, field, message):
        valid_product[field] = True

        response = client.post("/inventory/add-product", json=valid_product, headers=auth_headers)

        assert response.status_code == 400
        assert response.json() == {"errors": [{"field": field, "message": message}]}
        assert downstream.requests == []

    def test_bad_taste_profile(self, client, downstream, auth_headers, valid_product):
        valid_product["tasteProfile"] = {"sweetness": 5}

        response = client.post("/inventory/add-product", json=valid_product, headers=auth_headers)

        assert response.json() == {"errors": [{"field": "tasteProfile", "message": "Invalid taste profile"}]}

    def test_not_an_object(self, client, downstream, auth_headers):
        response = client.post("/inventory/add-product", json=["not", "a", "product"], headers=auth_headers)

        assert response.status_code == 400
        [violation] = response.json()["errors"]
        assert violation["field"] == "body"
        assert downstream.requests == []


class TestProductUpdateRules:
    def test_empty_update_is_valid(self, client, downstream, auth_headers):
        downstream.on("PUT", inventory_url("/1"), json={"id": 1})

        response = client.put("/inventory/1", json={}, headers=auth_headers)

        assert response.status_code == 200

    def test_present_fields_are_checked(self, client, downstream, auth_headers):
        response = client.put("/inventory/1", json={"type": "Wine", "name": ""}, headers=auth_headers)

        assert response.status_code == 400
        assert [e["field"] for e in response.json()["errors"]] == ["name", "type"]
        assert downstream.requests == []

    def test_boolean_stock_quantity(self, client, downstream, auth_headers):
        response = client.put("/inventory/1", json={"stockQuantity": False}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "stockQuantity"
        assert downstream.requests == []


class TestStockUpdateRules:
    @pytest.mark.parametrize("quantity", [-40, 0, 12])
    def test_any_integer_sign(self, client, downstream, auth_headers, quantity):
        downstream.on("PUT", inventory_url("/1/stock"), json={"id": "1", "stockQuantity": 50, "reorderPoint": 10})

        response = client.put("/inventory/1/stock", json={"quantity": quantity}, headers=auth_headers)

        assert response.status_code == 200

    def test_non_integer(self, client, downstream, auth_headers):
        response = client.put("/inventory/1/stock", json={"quantity": 3.7}, headers=auth_headers)

        assert response.json() == {"errors": [{"field": "quantity", "message": "Quantity must be an integer"}]}
        assert downstream.requests == []


class TestCollectViolations:
    def test_one_violation_per_field_and_request_prefix_dropped(self):
        errors = [
            {"loc": ("body", "tasteProfile", "sweetness"), "msg": "bad"},
            {"loc": ("body", "tasteProfile", "bitterness"), "msg": "bad"},
            {"loc": ("body", "extra"), "msg": "Extra inputs are not permitted"},
        ]

        violations = collect_violations(errors)

        assert [(v.field, v.message) for v in violations] == [
            ("tasteProfile", "Invalid taste profile"),
            ("extra", "Extra inputs are not permitted"),
        ]
