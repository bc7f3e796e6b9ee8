"""Tests for the business and business account endpoints."""

from tests.factories import DELETE_PASSWORD, business_payload


def test_business_lifecycle(client):
    """Test create, read, account upsert, handover and delete end to end."""
    response = client.post("/api/businesses", json=business_payload(email="", customFields={"zone": "A"}))
    assert response.status_code == 201
    business = response.json()
    assert business["taxId"] == "TAX001"
    assert business["customFields"] == {"zone": "A"}
    business_id = business["id"]

    response = client.get(f"/api/businesses/{business_id}")
    assert response.status_code == 200
    assert response.json()["name"] == "Acme Co"

    response = client.put(f"/api/businesses/{business_id}/accounts", json={"taxAccountId": "T1"})
    assert response.status_code == 200
    response = client.put(f"/api/businesses/{business_id}/accounts", json={"taxAccountId": "T2"})
    assert response.status_code == 200
    account = client.get(f"/api/businesses/{business_id}/accounts").json()
    assert account["taxAccountId"] == "T2"

    response = client.post(
        f"/api/businesses/{business_id}/documents",
        json={"deliveryCompany": "Acme Co", "receivingCompany": "Royal", "handledBy": "jane"},
    )
    assert response.status_code == 201

    response = client.request("DELETE", f"/api/businesses/{business_id}", json={"password": DELETE_PASSWORD})
    assert response.status_code == 200
    assert response.json()["success"] is True

    assert client.get(f"/api/businesses/{business_id}").status_code == 404
    assert client.get(f"/api/businesses/{business_id}/accounts").json() is None
    assert client.get(f"/api/businesses/{business_id}/documents").json() == []


def test_create_business_with_credentials(client):
    response = client.post("/api/businesses", json=business_payload(tokenId="tok-1"))
    business_id = response.json()["id"]

    account = client.get(f"/api/businesses/{business_id}/accounts").json()

    assert account["tokenId"] == "tok-1"
    assert account["businessId"] == business_id


def test_create_business_missing_fields(client):
    response = client.post("/api/businesses", json={"name": "No Tax Id"})

    assert response.status_code == 400
    assert response.json()["success"] is False
    assert any(error["field"] == "taxId" for error in response.json()["errors"])


def test_create_business_duplicate_tax_id(client):
    assert client.post("/api/businesses", json=business_payload()).status_code == 201

    response = client.post("/api/businesses", json=business_payload(name="Copycat"))

    assert response.status_code == 400
    assert "TAX001" in response.json()["message"]


def test_get_business_bad_id(client):
    assert client.get("/api/businesses/abc").status_code == 400
    assert client.get("/api/businesses/999").status_code == 404


def test_list_businesses_paginated(client):
    for index in range(3):
        client.post("/api/businesses", json=business_payload(name=f"Biz {index}", taxId=f"T{index}"))

    response = client.get("/api/businesses", params={"page": 2, "limit": 2})

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 3
    assert [b["name"] for b in body["businesses"]] == ["Biz 2"]


def test_list_businesses_sorted(client):
    for name, tax_id in (("Bravo", "2"), ("Alpha", "1")):
        client.post("/api/businesses", json=business_payload(name=name, taxId=tax_id))

    response = client.get("/api/businesses", params={"sortBy": "name", "sortOrder": "desc"})

    assert [b["name"] for b in response.json()["businesses"]] == ["Bravo", "Alpha"]


def test_list_all_businesses(client):
    for name, tax_id in (("Zeta", "1"), ("Beta", "2")):
        client.post("/api/businesses", json=business_payload(name=name, taxId=tax_id))

    response = client.get("/api/businesses/all")

    assert response.status_code == 200
    assert [b["name"] for b in response.json()] == ["Beta", "Zeta"]


def test_search_businesses(client):
    client.post("/api/businesses", json=business_payload(name="Acme Trading", taxId="A1"))
    client.post("/api/businesses", json=business_payload(name="Globex", taxId="G1"))

    partial = client.post("/api/businesses/search", json={"field": "namePartial", "value": "Trad"})
    unknown = client.post("/api/businesses/search", json={"field": "colour", "value": "red"})

    assert [b["taxId"] for b in partial.json()] == ["A1"]
    assert unknown.status_code == 200
    assert unknown.json() == []


def test_update_business(client, sample_business):
    response = client.put(f"/api/businesses/{sample_business.id}", json={"phone": "0909", "notes": "vip"})

    assert response.status_code == 200
    assert response.json()["phone"] == "0909"
    assert response.json()["name"] == "Acme Co"


def test_update_missing_business(client):
    assert client.put("/api/businesses/999", json={"phone": "1"}).status_code == 404


def test_delete_business_wrong_password(client, sample_business):
    response = client.request("DELETE", f"/api/businesses/{sample_business.id}", json={"password": "nope"})

    assert response.status_code == 403
    assert client.get(f"/api/businesses/{sample_business.id}").status_code == 200


def test_access_code_requires_admin(client, sample_business, employee_token):
    url = f"/api/businesses/{sample_business.id}/access-code"

    assert client.put(url, json={"accessCode": "X"}).status_code == 401

    response = client.put(
        url, json={"accessCode": "X"}, headers={"Authorization": f"Bearer {employee_token}"}
    )
    assert response.status_code == 401


def test_access_code_as_admin(client, sample_business, admin_token):
    response = client.put(
        f"/api/businesses/{sample_business.id}/access-code",
        json={"accessCode": "AC-9"},
        headers={"Authorization": f"Bearer {admin_token}"},
    )

    assert response.status_code == 200
    assert client.get(f"/api/businesses/{sample_business.id}").json()["accessCode"] == "AC-9"


def test_create_account_directly(client, sample_business):
    response = client.post(
        f"/api/businesses/{sample_business.id}/accounts",
        json={"statisticsId": "S1", "statisticsPass": "p"},
    )

    assert response.status_code == 201
    assert response.json()["statisticsId"] == "S1"


def test_update_business_blank_name_or_tax_id(client, sample_business):
    """Test whitespace-only name or tax id is rejected and the row stays readable."""
    url = f"/api/businesses/{sample_business.id}"

    assert client.put(url, json={"name": "   "}).status_code == 400
    assert client.put(url, json={"taxId": "  "}).status_code == 400

    assert client.get(url).json()["name"] == "Acme Co"
    assert client.get("/api/businesses").status_code == 200
    assert client.get("/api/businesses/all").status_code == 200


def test_update_business_strips_name(client, sample_business):
    response = client.put(f"/api/businesses/{sample_business.id}", json={"name": "  Acme Group  "})

    assert response.status_code == 200
    assert response.json()["name"] == "Acme Group"


def test_list_businesses_large_limit(client):
    for index in range(3):
        client.post("/api/businesses", json=business_payload(name=f"Biz {index}", taxId=f"T{index}"))

    response = client.get("/api/businesses", params={"limit": 200})

    assert response.status_code == 200
    assert len(response.json()["businesses"]) == 3


def test_list_businesses_clamps_page_and_limit(client, sample_business):
    response = client.get("/api/businesses", params={"page": 0, "limit": 0})

    assert response.status_code == 200
    assert [b["taxId"] for b in response.json()["businesses"]] == ["TAX001"]
