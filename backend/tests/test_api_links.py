import time

from homecal.api.links import link_from_share


def _add(client, headers, url, **fields):
    response = client.post("/api/links", json={"url": url, **fields}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_link_from_share_prefers_subject_as_title():
    link = link_from_share("Look at this https://example.com/recipe yum", "Pancakes")

    assert link.url == "https://example.com/recipe"
    assert link.title == "Pancakes"
    assert link.description == "Look at this https://example.com/recipe yum"


def test_link_from_share_bare_url():
    link = link_from_share("  https://example.com/a  ", "")

    assert link.url == "https://example.com/a"
    assert link.title == "https://example.com/a"
    assert link.description is None


def test_link_from_share_without_url():
    link = link_from_share("just a note", "")

    assert link.url == ""
    assert link.title == "just a note"


def test_create_and_list_newest_first(client, register):
    headers, user = register(display_name="Jamie")
    _add(client, headers, "https://example.com/one", title="One")
    time.sleep(0.01)
    second = _add(client, headers, "https://example.com/two")

    assert second["title"] == "https://example.com/two"
    assert second["shared_by_name"] == "Jamie"
    assert second["shared_by_uid"] == user["id"]

    listed = client.get("/api/links", headers=headers).json()
    assert [link["url"] for link in listed] == ["https://example.com/two", "https://example.com/one"]


def test_blank_url_rejected(client, auth_headers):
    assert client.post("/api/links", json={"url": "   "}, headers=auth_headers).status_code == 422


def test_share_endpoint(client, auth_headers):
    response = client.post(
        "/api/links/share",
        json={"text": "https://example.com/trip", "subject": "Trip ideas"},
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.json()["title"] == "Trip ideas"
    assert response.json()["url"] == "https://example.com/trip"

    empty = client.post("/api/links/share", json={"text": "  ", "subject": ""}, headers=auth_headers)
    assert empty.status_code == 422


def test_categories_and_filter(client, auth_headers):
    _add(client, auth_headers, "https://example.com/soup", category="Recipes")
    _add(client, auth_headers, "https://example.com/beach", category="Travel")
    untagged = _add(client, auth_headers, "https://example.com/misc")

    assert client.get("/api/links/categories", headers=auth_headers).json() == ["Recipes", "Travel"]

    recipes = client.get("/api/links?category=recipes", headers=auth_headers).json()
    assert [link["url"] for link in recipes] == ["https://example.com/soup"]
    assert len(client.get("/api/links?category=All", headers=auth_headers).json()) == 3

    updated = client.put(
        f"/api/links/{untagged['id']}/category", json={"category": " Travel "}, headers=auth_headers
    )
    assert updated.json()["category"] == "Travel"
    travel = client.get("/api/links?category=Travel", headers=auth_headers).json()
    assert len(travel) == 2


def test_update_category_unknown_link(client, auth_headers):
    response = client.put("/api/links/missing/category", json={"category": "x"}, headers=auth_headers)

    assert response.status_code == 404


def test_comments(client, register):
    alice, _ = register(household_code="LINKS1", display_name="Alice")
    bob, _ = register(household_code="LINKS1", display_name="Bob")
    link = _add(client, alice, "https://example.com/movie")

    first = client.post(f"/api/links/{link['id']}/comments", json={"message": " Tonight? "}, headers=bob)
    assert first.status_code == 201
    time.sleep(0.01)
    second = client.post(f"/api/links/{link['id']}/comments", json={"message": "Sure"}, headers=alice)

    comments = second.json()["comments"]
    assert [(c["author_name"], c["message"]) for c in comments] == [("Bob", "Tonight?"), ("Alice", "Sure")]


def test_blank_comment_and_unknown_link(client, auth_headers):
    link = _add(client, auth_headers, "https://example.com/x")

    blank = client.post(f"/api/links/{link['id']}/comments", json={"message": "   "}, headers=auth_headers)
    assert blank.status_code == 422
    assert "Comment cannot be empty" in blank.text

    missing = client.post("/api/links/missing/comments", json={"message": "hi"}, headers=auth_headers)
    assert missing.status_code == 404
