from gym_backend.services.contact_svc import contact_service
from gym_backend.services.franchise_svc import franchise_service


def _inquiry(**kw):
    data = {
        "contact_person": "Asha Rao",
        "email": "asha@example.com",
        "phone": "9999999999",
        "city": "Mumbai",
        "message": "I want to open a gym",
    }
    data.update(kw)
    return data


def test_contact_create_and_search():
    res = contact_service.create({
        "first_name": "Ravi", "last_name": "K", "email": "ravi@example.com", "message": "Timings?",
    })
    assert res.status_code == 201
    contact_service.create({"first_name": "Meera", "last_name": "S", "email": "meera@example.com", "message": "Fees"})
    found = contact_service.list(1, 10, {"search": "ravi"})
    assert [c["first_name"] for c in found.get("contactUs")] == ["Ravi"]
    assert contact_service.list(1, 10, {"email": "example.com"}).get("pagination")["total"] == 2


def test_contact_validation():
    assert contact_service.create({"first_name": "A"}).status_code == 400
    bad = contact_service.create({"first_name": "A", "last_name": "B", "email": "nope", "message": "m"})
    assert bad.status_code == 400
    assert "email" in bad.message


def test_franchise_create_stores_message_and_status():
    res = franchise_service.create(_inquiry(investment_capacity=2500000))
    row = res.get("franchise")
    assert res.status_code == 201
    assert row["why_franchise"] == "I want to open a gym"
    assert row["status"] == 1
    assert row["investment_capacity"] == 2500000


def test_franchise_capacity_range_and_city():
    franchise_service.create(_inquiry(city="Pune", investment_capacity=100))
    franchise_service.create(_inquiry(city="Mumbai", investment_capacity=1000))
    mid = franchise_service.list(1, 10, {"investment_capacity_min": 500})
    assert [r["city"] for r in mid.get("franchiseInquiries")] == ["Mumbai"]
    assert franchise_service.list(1, 10, {"city": "pun"}).get("pagination")["total"] == 1


def test_franchise_status_update():
    fid = franchise_service.create(_inquiry()).get("franchise")["id"]
    res = franchise_service.update(fid, {"status": 4, "notes": "Approved in call", "assigned_to": 2})
    assert res.status
    assert res.get("franchise")["status"] == 4
    assert franchise_service.update(fid, {"status": 9}).status_code == 400
    assert franchise_service.update(fid, {"contact_person": "x"}).status_code == 400
    assert franchise_service.update(12345, {"status": 2}).status_code == 404


def test_franchise_export_ignores_paging():
    for i in range(12):
        franchise_service.create(_inquiry(email=f"p{i}@example.com"))
    rows = franchise_service.export({"status": 1}).get("franchiseInquiries")
    assert len(rows) == 12
