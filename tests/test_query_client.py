from unittest.mock import MagicMock

import pytest

from Services.models import PageResult
from Utils.query_client import QueryClient, QueryKey


def test_query_key_validation():
    with pytest.raises(ValueError):
        QueryKey("nodes", page=-1)
    with pytest.raises(ValueError):
        QueryKey("nodes", take=0)


def test_query_key_identity():
    key = QueryKey("nodes", page=0, search_term="", take=5)

    assert key == QueryKey("nodes", 0, "", 5)
    assert hash(key) == hash(QueryKey("nodes", 0, "", 5))
    assert key.with_changes(page=1) != key
    assert key.with_changes(search_term="x") != key
    assert key.with_changes(take=10) != key


def test_set_and_get():
    client = QueryClient()
    key = QueryKey("nodes")
    page = PageResult(results=("a",), total=1)

    client.set_query_data(key, page)

    assert client.get_query_data(key) is page
    assert client.get_query_data(None) is None
    assert client.get_query_data(key.with_changes(page=3)) is None


def test_invalidate_notifies_and_keeps_cached_pages():
    client = QueryClient()
    nodes_key = QueryKey("nodes")
    other_key = QueryKey("channels")
    client.set_query_data(nodes_key, PageResult())
    client.set_query_data(other_key, PageResult())
    listener = MagicMock()
    client.queries_invalidated.connect(listener)

    client.invalidate_queries("nodes")

    listener.assert_called_once_with("nodes")
    assert client.get_query_data(nodes_key) == PageResult()


def test_refetched_page_replaces_cached_page():
    client = QueryClient()
    key = QueryKey("nodes")
    client.set_query_data(key, PageResult(results=("old",), total=1))
    client.invalidate_queries("nodes")
    fresh = PageResult(results=("new",), total=1)

    client.set_query_data(key, fresh)

    assert client.get_query_data(key) is fresh
    assert len(client) == 1


def test_lru_eviction():
    client = QueryClient(max_size=2)
    keys = [QueryKey("nodes", page=i) for i in range(3)]
    client.set_query_data(keys[0], PageResult())
    client.set_query_data(keys[1], PageResult())
    client.get_query_data(keys[0])

    client.set_query_data(keys[2], PageResult())

    assert len(client) == 2
    assert client.get_query_data(keys[1]) is None
    assert client.get_query_data(keys[0]) is not None
