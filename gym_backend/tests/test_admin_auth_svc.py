from gym_backend.db import get_conn
from gym_backend.services.admin_auth_svc import admin_auth_service
from gym_backend.services.utils import verify_password


def _admin(**kw):
    data = {"email": "Ops@Gym.example", "name": "Ops Lead", "password": "front-desk-9"}
    data.update(kw)
    res = admin_auth_service.create_admin(data)
    assert res.status_code == 201, res.message
    return res.get("admin")


def _stored_hash(admin_id):
    with get_conn() as conn:
        return conn.execute("SELECT password FROM admins WHERE id=?", (admin_id,)).fetchone()["password"]


def test_create_admin_hashes_password_and_hides_it():
    admin = _admin()
    assert admin["email"] == "ops@gym.example"
    assert admin["status"] == 1
    assert "password" not in admin
    assert verify_password("front-desk-9", _stored_hash(admin["id"]))
    assert admin_auth_service.create_admin({"email": "ops@gym.example", "name": "X", "password": "front-desk-9"}).status_code == 400
    assert admin_auth_service.create_admin({"email": "new@gym.example", "name": "X", "password": "short"}).status_code == 400


def test_sign_in_returns_profile_and_stamps_last_login():
    admin = _admin()
    res = admin_auth_service.sign_in(" OPS@gym.example ", "front-desk-9")
    assert res.status_code == 200
    assert res.message == "Login successful"
    signed = res.get("admin")
    assert signed["id"] == admin["id"]
    assert signed["last_login_at"]
    assert "password" not in signed


def test_sign_in_failures():
    admin = _admin()
    assert admin_auth_service.sign_in(None, "x").status_code == 400
    assert admin_auth_service.sign_in("nobody@gym.example", "front-desk-9").status_code == 401
    wrong = admin_auth_service.sign_in("ops@gym.example", "front-desk-8")
    assert wrong.status_code == 401
    assert wrong.message == "Invalid email or password"

    admin_auth_service.update(admin["id"], {"status": 2})
    inactive = admin_auth_service.sign_in("ops@gym.example", "front-desk-9")
    assert inactive.status_code == 403
    assert inactive.message == "Account is inactive. Contact administrator."


def test_change_password():
    admin = _admin()
    aid = admin["id"]
    assert admin_auth_service.change_password(None, "a", "b").status_code == 401
    assert admin_auth_service.change_password(aid, "front-desk-9", None).status_code == 400
    assert admin_auth_service.change_password(aid, "front-desk-9", "tiny").status_code == 400
    assert admin_auth_service.change_password(aid + 100, "front-desk-9", "new-password-1").status_code == 404

    wrong = admin_auth_service.change_password(aid, "not-it-at-all", "new-password-1")
    assert wrong.status_code == 401
    assert verify_password("front-desk-9", _stored_hash(aid))

    ok = admin_auth_service.change_password(aid, "front-desk-9", "new-password-1")
    assert ok.status_code == 200
    assert ok.message == "Password changed successfully"
    assert admin_auth_service.sign_in("ops@gym.example", "front-desk-9").status_code == 401
    assert admin_auth_service.sign_in("ops@gym.example", "new-password-1").status
