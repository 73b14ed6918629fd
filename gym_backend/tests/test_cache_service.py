from gym_backend.cache import CacheService, CacheStore


def _svc():
    return CacheService(CacheStore())


def test_list_key_format_and_order_normalization():
    svc = _svc()
    k1 = svc.list_key("CAREERS_LIST", 1, 10, {"status": 1, "location": "Pune"})
    k2 = svc.list_key("CAREERS_LIST", 1, 10, {"location": "Pune", "status": 1})
    assert k1 == k2
    assert k1 == 'careers_list_page_1_limit_10_filters_{"location":"Pune","status":1}'


def test_item_and_unknown_module_keys():
    svc = _svc()
    assert svc.item_key("BLOGS_LIST", 7) == "blogs_list_item_7"
    assert svc.item_key("SOMETHING_ELSE", 7) == "SOMETHING_ELSE_item_7"
    assert svc.stats_key("FRANCHISE_LIST") == "franchise_list_stats"


def test_list_cache_round_trip_with_reordered_filters():
    svc = _svc()
    svc.set_list_cache("BLOGS_LIST", 1, 10, {"a": 1, "b": 2}, {"items": []})
    assert svc.get_list_cache("BLOGS_LIST", 1, 10, {"b": 2, "a": 1}) == {"items": []}
    assert svc.get_list_cache("BLOGS_LIST", 2, 10, {"a": 1, "b": 2}) is None


def test_module_invalidation_is_scoped():
    svc = _svc()
    svc.set_list_cache("CAREERS_LIST", 1, 10, {}, "careers-page")
    svc.set_item_cache("CAREERS_LIST", 1, "career-1")
    svc.set_stats_cache("CAREERS_LIST", {"1": 3})
    svc.set_list_cache("BLOGS_LIST", 1, 10, {}, "blogs-page")
    assert svc.invalidate_module_cache("CAREERS_LIST") == 3
    assert svc.get_list_cache("CAREERS_LIST", 1, 10, {}) is None
    assert svc.get_item_cache("CAREERS_LIST", 1) is None
    assert svc.get_stats_cache("CAREERS_LIST") is None
    assert svc.get_list_cache("BLOGS_LIST", 1, 10, {}) == "blogs-page"


def test_users_and_user_logins_do_not_share_prefix():
    svc = _svc()
    svc.set_list_cache("USER_LOGINS_LIST", 1, 10, {}, "logins")
    svc.invalidate_module_cache("USERS_LIST")
    assert svc.get_list_cache("USER_LOGINS_LIST", 1, 10, {}) == "logins"


def test_clear_all_and_item_delete():
    svc = _svc()
    svc.set_item_cache("BLOGS_LIST", 1, "b1")
    svc.delete_item_cache("BLOGS_LIST", 1)
    assert svc.get_item_cache("BLOGS_LIST", 1) is None
    svc.set_item_cache("BLOGS_LIST", 2, "b2")
    svc.set_item_cache("CAREERS_LIST", 2, "c2")
    assert svc.clear_all_cache() == 2
    assert svc.store.keys() == []
