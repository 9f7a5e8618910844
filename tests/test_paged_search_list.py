from unittest.mock import MagicMock

import pytest

from Base_Components.paged_search_list import ListState, PagedSearchList
from Pages.NodesPage import make_nodes_query_function
from Services.errors import FetchError
from Services.models import PageResult
from Utils.query_client import QueryClient


@pytest.fixture
def query_client():
    return QueryClient()


def make_list(query_function, query_client, runner, take=5):
    return PagedSearchList("nodes", query_function, query_client, runner, take=take)


def test_initial_load_fetches_first_page(fake_client, query_client, runner):
    paged = make_list(make_nodes_query_function(fake_client), query_client, runner)

    paged.start()
    assert paged.state is ListState.LOADING
    runner.run_all()

    assert fake_client.list_calls == [(0, "", 5)]
    assert paged.state is ListState.LOADED
    assert [row.alias for row in paged.results] == ["alpha", "bravo"]
    assert paged.total == 2
    assert not paged.has_more


def test_start_twice_fetches_once(fake_client, query_client, runner):
    paged = make_list(make_nodes_query_function(fake_client), query_client, runner)

    paged.start()
    paged.start()

    assert len(runner.pending) == 1


@pytest.mark.parametrize("change", [
    lambda p: p.set_page(1),
    lambda p: p.set_search_term("al"),
    lambda p: p.set_take(10),
])
def test_each_key_change_triggers_exactly_one_fetch(change, query_client, runner):
    query_function = MagicMock(return_value=PageResult(results=("row",), has_more=True, total=20))
    paged = make_list(query_function, query_client, runner)
    paged.start()
    runner.run_all()

    assert change(paged)
    runner.run_all()

    assert query_function.call_count == 2


def test_setting_same_value_is_not_a_key_change(query_client, runner):
    query_function = MagicMock(return_value=PageResult())
    paged = make_list(query_function, query_client, runner)
    paged.start()

    assert not paged.set_search_term("")
    assert not paged.set_page(0)
    assert len(runner.pending) == 1


def test_search_resets_page(query_client, runner):
    query_function = MagicMock(return_value=PageResult(results=("row",), has_more=True, total=20))
    paged = make_list(query_function, query_client, runner)
    paged.start()
    runner.run_all()
    paged.next_page()
    runner.run_all()
    assert paged.key.page == 1

    paged.set_search_term("bob")

    assert paged.key.page == 0
    assert paged.key.search_term == "bob"


def test_stale_response_is_never_shown(query_client, runner):
    def query(key):
        return PageResult(results=(f"page{key.page}",), has_more=True, total=20)

    paged = make_list(query, query_client, runner)
    paged.start()
    first = runner.pending[0]
    paged.set_page(1)
    second = runner.pending[1]

    runner.run(second)
    assert paged.results == ("page1",)

    runner.run(first)
    assert paged.results == ("page1",)
    assert paged.key.page == 1


def test_superseded_request_for_same_key_is_dropped(query_client, runner):
    responses = iter([PageResult(results=("old",), total=1), PageResult(results=("new",), total=1)])
    paged = make_list(lambda key: next(responses), query_client, runner)
    paged.start()
    paged.retry()
    first, second = runner.pending

    runner.run(first)
    assert paged.state is ListState.LOADING

    runner.run(second)
    assert paged.results == ("new",)


def test_failure_is_distinct_from_empty(fake_client, query_client, runner):
    fake_client.fail_listing = "admin API down"
    paged = make_list(make_nodes_query_function(fake_client), query_client, runner)

    paged.start()
    runner.run_all()

    assert paged.state is ListState.FAILED
    assert paged.error == "admin API down"
    assert paged.results == ()


def test_retry_reissues_same_key(fake_client, query_client, runner):
    fake_client.fail_listing = "admin API down"
    paged = make_list(make_nodes_query_function(fake_client), query_client, runner)
    paged.start()
    runner.run_all()

    fake_client.fail_listing = None
    paged.retry()
    runner.run_all()

    assert fake_client.list_calls == [(0, "", 5), (0, "", 5)]
    assert paged.state is ListState.LOADED
    assert paged.error is None


def test_empty_results(fake_client, query_client, runner):
    paged = make_list(make_nodes_query_function(fake_client), query_client, runner)
    paged.start()
    runner.run_all()

    paged.set_search_term("zzz")
    runner.run_all()

    assert paged.state is ListState.EMPTY
    assert paged.total == 0


def test_invalidation_refetches_current_key(fake_client, query_client, runner):
    paged = make_list(make_nodes_query_function(fake_client), query_client, runner)
    paged.start()
    runner.run_all()

    query_client.invalidate_queries("nodes")

    assert paged.is_fetching
    # previous rows stay visible during a same-key refetch
    assert len(paged.results) == 2
    runner.run_all()
    assert len(fake_client.list_calls) == 2


def test_invalidation_of_other_kind_is_ignored(fake_client, query_client, runner):
    paged = make_list(make_nodes_query_function(fake_client), query_client, runner)
    paged.start()
    runner.run_all()

    query_client.invalidate_queries("channels")

    assert runner.pending == []


def test_key_change_clears_previous_rows(fake_client, query_client, runner):
    paged = make_list(make_nodes_query_function(fake_client), query_client, runner)
    paged.start()
    runner.run_all()

    paged.set_search_term("bob")

    assert paged.results == ()


def test_pagination_bounds(query_client, runner):
    query_function = MagicMock(return_value=PageResult(results=("r",) * 5, has_more=False, total=12))
    paged = make_list(query_function, query_client, runner)
    paged.start()
    runner.run_all()

    assert paged.page_count == 3
    assert not paged.can_go_previous
    assert not paged.previous_page()
    assert not paged.next_page()


def test_page_count_is_at_least_one(query_client, runner):
    paged = make_list(MagicMock(return_value=PageResult()), query_client, runner)

    assert paged.page_count == 1


def test_fetch_error_from_worker_carries_message(query_client, runner):
    paged = make_list(MagicMock(side_effect=FetchError("bad payload")), query_client, runner)

    paged.start()
    runner.run_all()

    assert paged.error == "bad payload"
