"""
HTTP API tests.
"""

from checklist.catalog import GENERAL_TEMPLATE, PROJECT_TEMPLATES, PROJECTS
from checklist.schemas import Category


async def _create(client, name="Login Flow", project_id="wts"):
    response = await client.post("/entities/", json={"name": name, "project_id": project_id})
    assert response.status_code == 201
    return response.json()


class TestHealthAndCatalog:

    async def test_health(self, client):
        response = await client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    async def test_catalog_projects(self, client):
        response = await client.get("/catalog/projects")
        assert response.status_code == 200
        assert [project["id"] for project in response.json()] == [project.id for project in PROJECTS]

    async def test_catalog_template_with_slash_in_id(self, client):
        response = await client.get("/catalog/projects/hoerzu/tvdigital/template")
        assert response.status_code == 200

        body = response.json()
        assert body["project_id"] == "hoerzu/tvdigital"
        assert body["categories"]["uiux"] == (
            list(GENERAL_TEMPLATE[Category.UIUX]) + list(PROJECT_TEMPLATES["hoerzu/tvdigital"][Category.UIUX])
        )

    async def test_catalog_template_unknown_project(self, client):
        response = await client.get("/catalog/projects/acme/template")
        assert response.status_code == 404
        assert response.json()["error"] == "not_found"


class TestEntities:

    async def test_create_returns_view(self, client):
        view = await _create(client)

        assert view["selected_entity_id"].startswith("task_")
        assert view["project_filter"] == "wts"
        assert [panel["category"] for panel in view["panels"]] == ["uiux", "functionality", "responsive"]
        assert view["overall"]["text"].startswith("0% (0/")

    async def test_create_with_empty_name(self, client):
        response = await client.post("/entities/", json={"name": "  ", "project_id": "wts"})

        assert response.status_code == 422
        body = response.json()
        assert body["error"] == "validation_error"
        assert body["message"] == "Please enter a task name"

    async def test_create_without_project(self, client):
        response = await client.post("/entities/", json={"name": "Login Flow"})

        assert response.status_code == 422
        assert response.json()["message"] == "Please select a project"

    async def test_get_entity_uses_persisted_layout(self, client):
        entity_id = (await _create(client))["selected_entity_id"]

        response = await client.get(f"/entities/{entity_id}")

        assert response.status_code == 200
        body = response.json()
        assert body["projectId"] == "wts"
        assert "created" in body
        assert body["categories"]["uiux"][0]["isPredefined"] is True
        assert body["progress"]["uiux"]["percentage"] == 0
        assert body["overall"]["completed"] == 0

    async def test_get_unknown_entity(self, client):
        response = await client.get("/entities/missing")
        assert response.status_code == 404

    async def test_list_filtered_by_project(self, client):
        await _create(client, "Login Flow", "wts")
        await _create(client, "Checkout", "kontron")

        response = await client.get("/entities/", params={"project_id": "kontron"})

        assert response.status_code == 200
        assert [entity["name"] for entity in response.json()] == ["Checkout"]

    async def test_delete_needs_confirmation(self, client):
        entity_id = (await _create(client))["selected_entity_id"]

        response = await client.delete(f"/entities/{entity_id}")
        assert response.status_code == 409
        body = response.json()
        assert body["error"] == "confirmation_required"
        assert body["message"] == 'Are you sure you want to delete "Login Flow"? This action cannot be undone.'

        response = await client.delete(f"/entities/{entity_id}", params={"confirm": "true"})
        assert response.status_code == 200
        view = response.json()
        assert view["selected_entity_id"] is None
        assert view["empty_state"] is True

        assert (await client.get(f"/entities/{entity_id}")).status_code == 404


class TestItems:

    async def test_toggle_twice(self, client):
        view = await _create(client)
        entity_id = view["selected_entity_id"]
        item_id = view["panels"][0]["items"][0]["id"]
        url = f"/entities/{entity_id}/categories/uiux/items/{item_id}/toggle"

        first = (await client.post(url)).json()
        assert first["panels"][0]["items"][0]["checked"] is True
        assert first["panels"][0]["progress"]["completed"] == 1

        second = (await client.post(url)).json()
        assert second["panels"] == view["panels"]

    async def test_add_and_delete_custom_item(self, client):
        view = await _create(client)
        entity_id = view["selected_entity_id"]

        response = await client.post(
            f"/entities/{entity_id}/categories/functionality/items",
            json={"label": "Newsletter double opt-in"},
        )
        assert response.status_code == 201
        item = response.json()["panels"][1]["items"][-1]
        assert item["label"] == "Newsletter double opt-in"
        assert item["deletable"] is True

        response = await client.delete(f"/entities/{entity_id}/categories/functionality/items/{item['id']}")
        assert response.status_code == 200
        assert response.json()["panels"][1] == view["panels"][1]

    async def test_empty_custom_label(self, client):
        entity_id = (await _create(client))["selected_entity_id"]

        response = await client.post(f"/entities/{entity_id}/categories/uiux/items", json={"label": ""})

        assert response.status_code == 422
        assert response.json()["message"] == "Please enter an item description"

    async def test_unknown_category(self, client):
        entity_id = (await _create(client))["selected_entity_id"]
        response = await client.post(f"/entities/{entity_id}/categories/security/items", json={"label": "x"})
        assert response.status_code == 422

    async def test_add_to_unknown_entity_creates_nothing(self, client):
        response = await client.post("/entities/missing/categories/uiux/items", json={"label": "Orphan"})

        assert response.status_code == 200
        assert response.json()["empty_state"] is True
        assert (await client.get("/entities/")).json() == []


class TestWorkspace:

    async def test_selection_and_filter(self, client):
        first = (await _create(client, "Login Flow", "wts"))["selected_entity_id"]
        await _create(client, "Checkout", "kontron")

        view = (await client.put("/filter", json={"project_filter": "all"})).json()
        assert view["selected_entity_id"] is None
        assert len(view["entity_options"]) == 2

        view = (await client.put("/selection", json={"entity_id": first})).json()
        assert view["selected_entity_id"] == first
        assert view["entity_options"][0]["label"] == "Login Flow (WTS)"

        view = (await client.get("/view")).json()
        assert view["selected_entity_id"] == first

        view = (await client.put("/selection", json={"entity_id": None})).json()
        assert view["empty_state"] is True

    async def test_unknown_filter(self, client):
        response = await client.put("/filter", json={"project_filter": "acme"})
        assert response.status_code == 422
