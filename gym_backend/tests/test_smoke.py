from gym_backend.db import get_conn


def _career_payload(**kw):
    data = {
        "title": "Yoga Instructor",
        "description": "Morning batches",
        "location": "Bengaluru",
        "requirements": "RYT 200",
        "responsibilities": "Lead classes",
    }
    data.update(kw)
    return data


def test_health_and_version(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json().get("status") == "ok"

    v = client.get("/version")
    assert v.status_code == 200
    assert v.json().get("app") == "gym-backend"


def test_career_crud_over_http(client):
    r = client.post("/api/admin/careers", json=_career_payload(), headers={"X-Admin-Id": "4"})
    assert r.status_code == 201
    body = r.json()
    assert body["status"] is True
    career = body["data"]["career"]
    assert career["posted_by"] == 4

    r = client.get("/api/admin/careers", params={"status": 1, "page": 0, "limit": 500})
    assert r.status_code == 200
    data = r.json()["data"]
    assert data["pagination"] == {"total": 1, "page": 1, "limit": 100, "totalPages": 1}

    r = client.put(f"/api/admin/careers/{career['id']}", json={"title": "Senior Yoga Instructor"})
    assert r.status_code == 200
    assert r.json()["data"]["career"]["title"] == "Senior Yoga Instructor"

    r = client.get(f"/api/admin/careers/{career['id']}")
    assert r.json()["data"]["career"]["title"] == "Senior Yoga Instructor"

    r = client.delete(f"/api/admin/careers/{career['id']}")
    assert r.status_code == 200
    r = client.get(f"/api/admin/careers/{career['id']}")
    assert r.status_code == 404
    assert r.json() == {"status": False, "message": "Career not found"}

    with get_conn() as conn:
        actions = [row["action"] for row in conn.execute("SELECT action FROM operation_log ORDER BY id")]
    assert actions == ["CREATE_CAREER", "UPDATE_CAREER", "DELETE_CAREER"]


def test_validation_error_envelope(client):
    r = client.post("/api/admin/careers", json={"title": "Only"})
    assert r.status_code == 400
    body = r.json()
    assert body["status"] is False
    assert body["message"].startswith("Validation error")
    assert "data" not in body


def test_public_blog_visibility(client):
    draft = client.post("/api/admin/blogs", json={"title": "Draft Note", "content": "wip"}).json()["data"]["blog"]
    live = client.post(
        "/api/admin/blogs", json={"title": "Live Note", "content": "done", "status": 1, "tags": ["news"]}
    ).json()["data"]["blog"]

    r = client.get("/api/public/blogs")
    assert [b["title"] for b in r.json()["data"]["blogs"]] == ["Live Note"]
    assert client.get(f"/api/public/blogs/{draft['id']}").status_code == 404
    assert client.get(f"/api/public/blogs/{live['id']}").status_code == 200
    assert client.get("/api/public/blogs/slug/live-note").status_code == 200
    assert client.get("/api/public/blogs/slug/draft-note").status_code == 404

    r = client.get("/api/admin/blogs", params=[("tags", "news")])
    assert r.json()["data"]["pagination"]["total"] == 1


def test_public_careers_only_active(client):
    client.post("/api/admin/careers", json=_career_payload(title="Open"))
    hidden = client.post("/api/admin/careers", json=_career_payload(title="Closed", status=2)).json()
    r = client.get("/api/public/careers")
    assert [c["title"] for c in r.json()["data"]["careers"]] == ["Open"]
    assert client.get(f"/api/public/careers/{hidden['data']['career']['id']}").status_code == 404


def test_public_forms_and_admin_exports(client):
    r = client.post("/api/public/contact", json={
        "first_name": "Ira", "last_name": "M", "email": "ira@example.com", "message": "Hello",
    })
    assert r.status_code == 201
    r = client.post("/api/public/franchise", json={
        "contact_person": "Dev", "email": "dev@example.com", "phone": "123", "city": "Goa", "message": "Keen",
    })
    assert r.status_code == 201
    fid = r.json()["data"]["franchise"]["id"]

    r = client.put(f"/api/admin/franchise/{fid}", json={"status": 2})
    assert r.json()["data"]["franchise"]["status"] == 2

    r = client.get("/api/admin/contact-us/export")
    assert r.status_code == 200
    assert len(r.json()["data"]["contactUs"]) == 1

    r = client.get("/api/admin/franchise/export", params={"format": "csv"})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/csv")
    lines = r.text.strip().splitlines()
    assert "contact_person" in lines[0]
    assert len(lines) == 2

    summary = client.get("/api/admin/franchise/summary").json()["data"]
    assert summary["summary"] == {"2": 1}


def test_register_login_and_login_history(client):
    r = client.post("/api/users/register", json={
        "email": "fit@example.com", "password": "longenough", "first_name": "F", "last_name": "L",
    })
    assert r.status_code == 201
    assert client.post("/api/users/register", json={
        "email": "fit@example.com", "password": "longenough", "first_name": "F", "last_name": "L",
    }).status_code == 400

    r = client.post("/api/users/login", json={"email": "fit@example.com", "password": "longenough", "platform": "ios"})
    assert r.status_code == 200
    assert "password" not in r.json()["data"]["user"]
    assert client.post("/api/users/login", json={"email": "fit@example.com", "password": "nope-nope"}).status_code == 401

    r = client.get("/api/admin/user-logins", params={"platform": "ios"})
    assert r.json()["data"]["pagination"]["total"] == 1
    r = client.get("/api/users/admin/users")
    assert r.json()["data"]["pagination"]["total"] == 1


def test_payments_and_subscriptions(client):
    r = client.post("/api/admin/payments", json={
        "transaction_id": "pay_1", "amount": 999, "payment_method": "card", "payment_gateway": "stripe",
    })
    assert r.status_code == 201
    r = client.get("/api/admin/payments", params={"min_amount": 500})
    assert r.json()["data"]["pagination"]["total"] == 1

    r = client.post("/api/users/subscription", json={
        "subscription_id": "s1", "user_id": "u1", "plan_id": "p1", "base_amount": 500,
    })
    assert r.status_code == 201
    r = client.get("/api/users/admin/subscriptions")
    assert r.json()["data"]["subscriptions"][0]["total_amount"] == 500


def test_cache_stats_and_clear(client):
    client.get("/api/admin/careers")
    stats = client.get("/api/admin/cache/stats").json()["data"]
    assert any(k.startswith("careers_list_page_1") for k in stats["keys"])
    r = client.post("/api/admin/cache/clear")
    assert r.json()["data"]["cleared"] >= 1
    assert client.get("/api/admin/cache/stats").json()["data"]["keys"] == []


def test_logs_search_endpoint(client):
    client.post("/api/admin/careers", json=_career_payload())
    r = client.get("/api/admin/logs/search", params={"action": "CREATE_CAREER"})
    body = r.json()
    assert body["total"] == 1
    assert body["items"][0]["entity_type"] == "career"


def test_blog_tag_filter_accepts_comma_separated_value(client):
    client.post("/api/admin/blogs", json={
        "title": "Stretch Routine", "content": "c", "status": 1, "tags": ["yoga", "mobility"],
    })
    client.post("/api/admin/blogs", json={"title": "Yoga Only", "content": "c", "status": 1, "tags": ["yoga"]})
    for url in ("/api/admin/blogs", "/api/public/blogs"):
        r = client.get(url, params={"tags": "yoga,mobility"})
        assert r.status_code == 200
        data = r.json()["data"]
        assert data["pagination"]["total"] == 1
        assert data["blogs"][0]["title"] == "Stretch Routine"


def test_user_profile_over_http(client):
    r = client.post("/api/users/register", json={
        "email": "pro@example.com", "password": "longenough", "first_name": "P", "last_name": "R",
    })
    uid = r.json()["data"]["user"]["id"]

    assert client.get("/api/users/profile").status_code == 401
    r = client.get("/api/users/profile", headers={"X-User-Id": str(uid)})
    assert r.status_code == 200
    assert r.json()["data"]["user"]["email"] == "pro@example.com"

    r = client.put("/api/users/profile", json={"last_name": "Rao"}, headers={"X-User-Id": str(uid)})
    assert r.status_code == 200
    assert r.json()["data"]["user"]["last_name"] == "Rao"

    with get_conn() as conn:
        row = conn.execute("SELECT user, result FROM operation_log WHERE action='UPDATE_PROFILE'").fetchone()
    assert row["user"] == f"user:{uid}"
    assert row["result"] == "OK"


def test_admin_sign_in_and_change_password_over_http(client, monkeypatch):
    from gym_backend.services.admin_auth_svc import admin_auth_service

    aid = admin_auth_service.create_admin(
        {"email": "boss@gym.example", "name": "Boss", "password": "first-pass-1"}
    ).get("admin")["id"]
    monkeypatch.setenv("GYM_ADMIN_TOKEN", "s3cret")

    r = client.post("/api/admin/auth/login", json={"email": "boss@gym.example", "password": "first-pass-1"})
    assert r.status_code == 200
    assert r.json()["data"]["admin"]["id"] == aid
    assert "password" not in r.json()["data"]["admin"]
    assert client.post("/api/admin/auth/login", json={"email": "boss@gym.example", "password": "x"}).status_code == 401

    body = {"current_password": "first-pass-1", "new_password": "second-pass-2"}
    assert client.post("/api/admin/auth/change-password", json=body, headers={"X-Admin-Id": str(aid)}).status_code == 401
    r = client.post(
        "/api/admin/auth/change-password", json=body,
        headers={"X-Admin-Id": str(aid), "X-Admin-Token": "s3cret"},
    )
    assert r.status_code == 200
    assert r.json() == {"status": True, "message": "Password changed successfully"}
    assert client.post(
        "/api/admin/auth/login", json={"email": "boss@gym.example", "password": "second-pass-2"}
    ).status_code == 200
