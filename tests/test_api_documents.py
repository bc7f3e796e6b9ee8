"""Tests for the document transaction and object storage endpoints."""

from tests.factories import DELETE_PASSWORD


def _create_handover(client, business_id, **overrides):
    payload = {"deliveryCompany": "Acme Co", "receivingCompany": "Royal", "handledBy": "jane"}
    payload.update(overrides)
    response = client.post(f"/api/businesses/{business_id}/documents", json=payload)
    assert response.status_code == 201
    return response.json()


def test_create_handover_defaults(client, sample_business):
    transaction = _create_handover(client, sample_business.id)

    assert transaction["documentType"] == "Hồ sơ khác"
    assert transaction["status"] == "pending"
    assert transaction["businessId"] == sample_business.id
    assert transaction["deliveryDate"]
    assert transaction["receivingDate"]


def test_create_handover_with_types(client, sample_business):
    transaction = _create_handover(
        client,
        sample_business.id,
        documentType="Hồ sơ thuế",
        documentTypes=["Hồ sơ thuế", "Hồ sơ BHXH"],
        documentCounts={"Hồ sơ thuế": 3},
        deliveryDate="2024-03-01T08:00:00",
    )

    assert transaction["documentTypes"] == ["Hồ sơ thuế", "Hồ sơ BHXH"]
    assert transaction["documentCounts"] == {"Hồ sơ thuế": 3}
    assert transaction["deliveryDate"].startswith("2024-03-01T08:00:00")


def test_create_handover_unknown_type(client, sample_business):
    response = client.post(
        f"/api/businesses/{sample_business.id}/documents",
        json={
            "deliveryCompany": "Acme Co",
            "receivingCompany": "Royal",
            "handledBy": "jane",
            "documentType": "Recipes",
        },
    )

    assert response.status_code == 400


def test_create_handover_missing_required(client, sample_business):
    response = client.post(f"/api/businesses/{sample_business.id}/documents", json={"deliveryCompany": "Acme"})

    assert response.status_code == 400


def test_list_documents(client, sample_business):
    first = _create_handover(client, sample_business.id)
    second = _create_handover(client, sample_business.id, deliveryCompany="Globex", receivingCompany="Initech")

    by_business = client.get(f"/api/businesses/{sample_business.id}/documents").json()
    everything = client.get("/api/documents").json()
    by_company = client.get("/api/documents/company/Acme Co").json()
    by_tax_id = client.get("/api/documents/tax-id/TAX001").json()
    unknown_tax_id = client.get("/api/documents/tax-id/nope")

    assert [t["id"] for t in by_business] == [first["id"], second["id"]]
    assert len(everything) == 2
    assert [t["id"] for t in by_company] == [first["id"]]
    assert [t["id"] for t in by_tax_id] == [first["id"]]
    assert unknown_tax_id.status_code == 200
    assert unknown_tax_id.json() == []


def test_update_document_number(client, sample_business):
    transaction = _create_handover(client, sample_business.id)

    response = client.put(f"/api/documents/{transaction['id']}/number", json={"documentNumber": "BG-7"})

    assert response.status_code == 200
    assert client.get("/api/documents").json()[0]["documentNumber"] == "BG-7"
    assert client.put("/api/documents/999/number", json={"documentNumber": "X"}).status_code == 404


def test_upload_pdf_path(client, sample_business):
    transaction = _create_handover(client, sample_business.id)

    response = client.put(
        f"/api/documents/{transaction['id']}/upload-pdf",
        json={"pdfPath": "https://storage.example.com/documents/abc.pdf"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["pdfPath"] == "/documents/abc.pdf"
    assert body["transaction"]["signedFilePath"] == "/documents/abc.pdf"


def test_delete_document(client, sample_business):
    transaction = _create_handover(client, sample_business.id)
    url = f"/api/documents/{transaction['id']}"

    assert client.request("DELETE", url, json={"password": "bad"}).status_code == 403
    assert client.request("DELETE", url, json={"password": DELETE_PASSWORD}).status_code == 200
    assert client.request("DELETE", url, json={"password": DELETE_PASSWORD}).status_code == 404


def test_pdf_upload_flow(client, sample_business):
    """Test issuing an upload URL, storing bytes and attaching them to a handover."""
    transaction = _create_handover(client, sample_business.id)

    response = client.post("/api/documents/pdf-upload")
    assert response.status_code == 200
    upload_url = response.json()["uploadURL"]
    assert upload_url.startswith("http://testserver/documents/")

    response = client.put(upload_url, content=b"%PDF-1.4 signed")
    assert response.status_code == 200
    stored_path = response.json()["path"]

    response = client.put(f"/api/documents/{transaction['id']}/upload-pdf", json={"pdfPath": upload_url})
    assert response.json()["pdfPath"] == stored_path

    response = client.get(stored_path)
    assert response.status_code == 200
    assert response.content == b"%PDF-1.4 signed"
    assert response.headers["content-type"] == "application/pdf"


def test_objects_upload_url(client):
    response = client.post("/api/objects/upload")

    assert response.status_code == 200
    assert response.json()["uploadURL"].endswith(".pdf")


def test_download_missing_object(client):
    assert client.get("/documents/missing.pdf").status_code == 404


def test_upload_empty_object(client):
    assert client.put("/documents/empty.pdf", content=b"").status_code == 400


def test_list_documents_by_company_with_slash(client, sample_business):
    transaction = _create_handover(client, sample_business.id, deliveryCompany="A/B Co")

    response = client.get("/api/documents/company/A%2FB%20Co")

    assert response.status_code == 200
    assert [t["id"] for t in response.json()] == [transaction["id"]]


def test_list_documents_by_tax_id_with_slash(client):
    business = client.post("/api/businesses", json={"name": "Slash Co", "taxId": "01/2024"}).json()
    transaction = _create_handover(client, business["id"], deliveryCompany="Slash Co")

    response = client.get("/api/documents/tax-id/01%2F2024")

    assert response.status_code == 200
    assert [t["id"] for t in response.json()] == [transaction["id"]]
