from gym_backend.cache import CacheService, CacheStore
from gym_backend.domain.query_builder import exact
from gym_backend.repository.base import EntityRepository, TableSpec
from gym_backend.repository.career_repo import repo as career_repo
from gym_backend.services.entity_svc import EntityService

GHOST = TableSpec(
    name="ghost_table",
    label="ghost",
    filters=(exact("status"),),
    insert_columns=("name",),
    update_columns=("name",),
)


def test_driver_failure_becomes_tagged_result():
    repo = EntityRepository(GHOST)
    res = repo.fetch_page({}, 1, 10)
    assert res.status is False
    assert res.message == "Failed to fetch ghost"
    assert "no such table" not in res.message
    assert repo.insert({"name": "x"}).message == "Failed to create ghost"


def test_service_turns_persistence_failure_into_500():
    svc = EntityService(EntityRepository(GHOST), "GHOST_LIST", "ghosts", "ghost", cache=CacheService(CacheStore()))
    res = svc.list(1, 10, {})
    assert res.status is False
    assert res.status_code == 500
    assert res.message == "Failed to fetch ghost"
    assert svc.get_by_id(1).status_code == 500


def test_insert_update_get_delete():
    created = career_repo.insert({
        "title": "t", "description": "d", "location": "l", "requirements": "r", "responsibilities": "s",
    })
    assert created.status
    cid = created.data["id"]
    assert career_repo.update(cid, {"title": "t2"}).data["title"] == "t2"
    assert career_repo.update(cid, {}).message == "No fields to update"
    assert career_repo.count({"status": 1}).data == 1
    assert career_repo.delete(cid).data == 1
    missing = career_repo.get_by_id(cid)
    assert missing.status is False and missing.not_found
    assert missing.message == "Career not found"
