def _create(client, name="Movies", **fields):
    response = client.post("/categories", json={"name": name, **fields})
    assert response.status_code == 201
    return response.json()["id"]


def test_create_category_returns_id_and_location(client):
    response = client.post(
        "/categories", json={"name": "Movies", "description": "Feature films"}
    )

    assert response.status_code == 201
    category_id = response.json()["id"]
    assert len(category_id) == 32
    assert response.headers["Location"] == f"/categories/{category_id}"


def test_get_category(client):
    category_id = _create(client, description="Feature films")

    body = client.get(f"/categories/{category_id}").json()

    assert body["name"] == "Movies"
    assert body["description"] == "Feature films"
    assert body["is_active"] is True
    assert body["deleted_at"] is None


def test_get_unknown_category_returns_404(client):
    response = client.get("/categories/unknown")

    assert response.status_code == 404
    assert response.json()["detail"] == "Category with ID unknown was not found"


def test_create_inactive_category_sets_deleted_at(client):
    category_id = _create(client, is_active=False)

    body = client.get(f"/categories/{category_id}").json()

    assert body["is_active"] is False
    assert body["deleted_at"] is not None


def test_update_category(client):
    category_id = _create(client, is_active=False)

    response = client.put(
        f"/categories/{category_id}",
        json={"name": "Documentaries", "description": None, "is_active": True},
    )

    assert response.status_code == 200
    assert response.json() == {"id": category_id}
    body = client.get(f"/categories/{category_id}").json()
    assert body["name"] == "Documentaries"
    assert body["is_active"] is True
    assert body["deleted_at"] is None


def test_update_unknown_category_returns_404(client):
    response = client.put("/categories/unknown", json={"name": "Movies"})

    assert response.status_code == 404


def test_delete_category_is_idempotent(client):
    category_id = _create(client)

    assert client.delete(f"/categories/{category_id}").status_code == 204
    assert client.delete(f"/categories/{category_id}").status_code == 204
    assert client.get(f"/categories/{category_id}").status_code == 404


def test_list_categories_searches_sorts_and_pages(client):
    for name in ("Movies", "Documentaries", "Series", "Mini series"):
        _create(client, name=name)

    response = client.get(
        "/categories", params={"search": "SERIES", "sort": "name", "dir": "desc"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 2
    assert [c["name"] for c in body["items"]] == ["Series", "Mini series"]

    page = client.get("/categories", params={"page": 1, "perPage": 3}).json()
    assert page["current_page"] == 1
    assert page["per_page"] == 3
    assert page["total"] == 4
    assert [c["name"] for c in page["items"]] == ["Series"]


def test_list_categories_searches_description(client):
    _create(client, name="Movies", description="Feature films")
    _create(client, name="Series")

    body = client.get("/categories", params={"search": "feature"}).json()

    assert [c["name"] for c in body["items"]] == ["Movies"]


def test_list_categories_rejects_unknown_sort(client):
    response = client.get("/categories", params={"sort": "rating"})

    assert response.status_code == 422


def test_create_category_validates_name(client):
    assert client.post("/categories", json={"name": "ab"}).status_code == 422
    assert client.post("/categories", json={"name": "   "}).status_code == 422
    assert client.post("/categories", json={}).status_code == 422
    assert (
        client.post(
            "/categories", json={"name": "Movies", "description": "x" * 4001}
        ).status_code
        == 422
    )


def test_list_categories_treats_blank_sort_and_direction_as_defaults(client):
    for name in ("Series", "Movies"):
        _create(client, name=name)

    response = client.get(
        "/categories",
        params={"page": 0, "perPage": 10, "search": "", "sort": "", "dir": ""},
    )

    assert response.status_code == 200
    assert [c["name"] for c in response.json()["items"]] == ["Movies", "Series"]


def test_list_categories_direction_is_case_insensitive(client):
    for name in ("Movies", "Series"):
        _create(client, name=name)

    body = client.get("/categories", params={"dir": "DESC"}).json()

    assert [c["name"] for c in body["items"]] == ["Series", "Movies"]
