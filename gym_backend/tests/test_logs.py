from gym_backend.logs import LogContext, search_logs


def test_log_context_writes_and_searches():
    log = LogContext("CREATE_CAREER")
    log.set_payload({"title": "Coach"})
    log.set_entity("career", 5)
    log.set_after({"id": 5, "title": "Coach"})
    log.write("OK")
    LogContext("DELETE_BLOG").write("ERROR", "Blog not found")

    total, items = search_logs(None, None, None, None, 1, 20)
    assert total == 2

    total, items = search_logs("Coach", None, None, None, 1, 20)
    assert total == 1
    row = items[0]
    assert row["action"] == "CREATE_CAREER"
    assert row["entity_type"] == "career"
    assert row["entity_id"] == "5"
    assert row["result"] == "OK"
    assert row["user"] == "admin"

    total, items = search_logs(None, "DELETE_BLOG", None, None, 1, 20)
    assert total == 1 and items[0]["err_msg"] == "Blog not found"

    total, _ = search_logs(None, None, None, None, 1, 20, entity_type="career")
    assert total == 1


def test_search_logs_date_bounds():
    LogContext("X").write()
    total, _ = search_logs(None, None, "2000-01-01", "2999-12-31", 1, 20)
    assert total == 1
    total, _ = search_logs(None, None, "2999-01-01", None, 1, 20)
    assert total == 0
