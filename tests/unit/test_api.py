"""API tests using FastAPI's TestClient over an in-memory store."""

import pytest
from fastapi.testclient import TestClient

from docfill.core.config import Settings
from docfill.main import create_app

FORM_LINE = "Name: ....... Date: ___________"


@pytest.fixture
def client(tmp_path):
    settings = Settings(store_type="memory", log_dir=tmp_path / "logs")
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def form(client):
    response = client.post("/documents", json={"name": "Form", "content": FORM_LINE})
    assert response.status_code == 201
    return response.json()


# =============================================================================
# Document Endpoints
# =============================================================================


class TestDocumentEndpoints:
    """Test suite for document routes."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_upload_text_file(self, client):
        response = client.post(
            "/documents/upload",
            files={"file": ("contract.txt", FORM_LINE.encode(), "text/plain")},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "contract"
        assert body["type"] == "system"
        assert [b["length"] for b in body["blank_spaces"]] == [7, 11]

    def test_upload_unsupported_kind(self, client):
        response = client.post(
            "/documents/upload",
            files={"file": ("legacy.doc", b"\xd0\xcf\x11\xe0", "application/msword")},
        )

        assert response.status_code == 415
        assert response.json()["error_code"] == "UNSUPPORTED_CONTENT"

    def test_upload_unreadable_word_file(self, client):
        response = client.post(
            "/documents/upload",
            files={"file": ("broken.docx", b"not a zip", "application/octet-stream")},
        )

        assert response.status_code == 400
        assert response.json()["error_code"] == "PARSE_ERROR"

    def test_create_from_text(self, client):
        response = client.post(
            "/documents",
            json={"name": "Note", "content": "a < b\n\nc", "kind": "text"},
        )

        assert response.status_code == 201
        assert response.json()["content"] == "<p>a &lt; b</p><p>c</p>"

    def test_get_and_list(self, client, form):
        assert client.get(f"/documents/{form['id']}").json()["id"] == form["id"]

        listed = client.get("/documents").json()
        assert listed["total"] == 1
        assert client.get("/documents", params={"type": "template"}).json()["total"] == 0

    def test_missing_document(self, client):
        response = client.get("/documents/doc_missing")

        assert response.status_code == 404
        assert response.json()["error_code"] == "NOT_FOUND"

    def test_rename(self, client, form):
        response = client.put(f"/documents/{form['id']}", json={"name": "Signed form"})

        assert response.status_code == 200
        assert response.json()["name"] == "Signed form"
        assert response.json()["content"] == form["content"]

    def test_delete(self, client, form):
        assert client.delete(f"/documents/{form['id']}").status_code == 204
        assert client.get(f"/documents/{form['id']}").status_code == 404
        assert client.delete(f"/documents/{form['id']}").status_code == 404

    def test_clone(self, client, form):
        response = client.post(f"/documents/{form['id']}/clone")

        assert response.status_code == 201
        body = response.json()
        assert body["type"] == "template"
        assert body["name"] == "Form (Template)"
        assert body["id"] != form["id"]

    def test_clone_with_name(self, client, form):
        response = client.post(f"/documents/{form['id']}/clone", json={"name": "Standard"})
        assert response.json()["name"] == "Standard"

    def test_detect_and_reset(self, client):
        created = client.post(
            "/documents",
            json={"name": "Raw", "content": "Sign: ____", "detect_blanks": False},
        ).json()
        assert created["blank_spaces"] == []

        client.put(f"/documents/{created['id']}", json={"content": "Sign: ____ on ...."})
        detected = client.post(f"/documents/{created['id']}/detect").json()
        assert len(detected["blank_spaces"]) == 2

        reset = client.post(f"/documents/{created['id']}/reset").json()
        assert reset["content"] == "Sign: ____"


# =============================================================================
# Blank Space Endpoints
# =============================================================================


class TestBlankSpaceEndpoints:
    """Test suite for blank-space routes."""

    def test_list(self, client, form):
        body = client.get(f"/documents/{form['id']}/blank-spaces").json()

        assert body["total"] == 2
        assert [b["kind"] for b in body["blank_spaces"]] == ["empty", "empty"]
        assert body["blank_spaces"][0]["placeholder"] == "_______"

    def test_detail_with_neighbours(self, client, form):
        first, second = form["blank_spaces"]

        body = client.get(f"/documents/{form['id']}/blank-spaces/{second['id']}").json()

        assert body["blank_space"]["id"] == second["id"]
        assert body["previous_id"] == first["id"]
        assert body["next_id"] is None

    def test_missing_blank_space(self, client, form):
        response = client.get(f"/documents/{form['id']}/blank-spaces/blank_0_1")
        assert response.status_code == 404

    def test_fill(self, client, form):
        blank_id = form["blank_spaces"][0]["id"]

        response = client.post(
            f"/documents/{form['id']}/blank-spaces/{blank_id}/fill",
            json={"text": "Jane Doe"},
        )

        assert response.status_code == 200
        first = response.json()["blank_spaces"][0]
        assert first["filled"] is True
        assert first["content"] == "Jane Doe"
        assert first["length"] == 7

    def test_insert(self, client, form):
        response = client.post(
            f"/documents/{form['id']}/blank-spaces",
            json={"position": 0},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["blank_space"]["position"] == 0
        assert len(body["document"]["blank_spaces"]) == 3
        assert body["document"]["blank_spaces"][0]["id"] == body["blank_space"]["id"]

    def test_insert_out_of_range(self, client, form):
        response = client.post(
            f"/documents/{form['id']}/blank-spaces",
            json={"position": 10_000},
        )

        assert response.status_code == 422
        assert response.json()["error_code"] == "INVALID_POSITION"


# =============================================================================
# Export Endpoints
# =============================================================================


class TestExportEndpoints:
    """Test suite for export downloads."""

    def test_export_text(self, client, form):
        blank_id = form["blank_spaces"][0]["id"]
        client.post(
            f"/documents/{form['id']}/blank-spaces/{blank_id}/fill",
            json={"text": "Jane Doe"},
        )

        response = client.get(f"/documents/{form['id']}/export/txt")

        assert response.status_code == 200
        assert response.text == "Name: Jane Doe Date: ___________"
        assert response.headers["content-type"].startswith("text/plain")
        assert "Form.txt" in response.headers["content-disposition"]

    def test_export_markup(self, client, form):
        response = client.get(f"/documents/{form['id']}/export/html")
        assert response.text == form["content"]

    def test_export_word(self, client, form):
        response = client.get(f"/documents/{form['id']}/export/docx")

        assert response.status_code == 200
        assert response.content[:2] == b"PK"

    def test_unknown_format(self, client, form):
        assert client.get(f"/documents/{form['id']}/export/pdf").status_code == 422


# =============================================================================
# Template Endpoints
# =============================================================================


class TestTemplateEndpoints:
    """Test suite for variable template routes."""

    def test_list_and_get(self, client):
        listed = client.get("/templates").json()
        assert listed["total"] == 4

        template = client.get("/templates/fee-note").json()
        assert template["id"] == "fee-note"
        assert template["variables"]

    def test_unknown_template(self, client):
        response = client.get("/templates/missing")
        assert response.status_code == 404

    def test_render(self, client):
        response = client.post(
            "/templates/lease-agreement/render",
            json={"bindings": {"tenant_name": "Jane Doe"}},
        )

        body = response.json()
        assert "Jane Doe" in body["content"]
        assert "tenant_name" not in body["unbound"]
        assert "landlord_name" in body["unbound"]

    def test_variables(self, client):
        response = client.post("/templates/variables", json={"content": "{{x}} {{y}} {{x}}"})
        assert response.json() == {"variables": ["x", "y"]}

    def test_substitute(self, client):
        response = client.post(
            "/templates/substitute",
            json={"content": "Hi {{a}} and {{b}}", "bindings": {"a": "X"}},
        )
        assert response.json() == {"content": "Hi X and {{b}}", "unbound": ["b"]}

    def test_promote(self, client):
        response = client.post(
            "/templates/promote",
            json={"content": "Pay ..... now", "selection": ".....", "name": "amount"},
        )
        assert response.json() == {"content": "Pay {{amount}} now", "variables": ["amount"]}

    def test_promote_blank_name(self, client):
        response = client.post(
            "/templates/promote",
            json={"content": "Pay ..... now", "selection": ".....", "name": "{{}}"},
        )
        assert response.status_code == 422
