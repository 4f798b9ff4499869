import json
import logging

import pytest

from studyguide.config import ViewerConfig
from studyguide.errors import StorageError
from studyguide.navigation import Direction, NavigationController, Theme
from studyguide.sectioning import Section
from studyguide.storage import InMemoryStore

VISITED_KEY = "interview-prep-visited"
THEME_KEY = "interview-prep-theme"

SECTIONS = [
    Section(id="intro", title="Overview", content="How to use the guide."),
    Section(id="section-1", title="1. Graphs", content="Use dfs traversal for cycles."),
    Section(id="section-2", title="2. Caching", content="LRU, LFU and TTL eviction."),
    Section(id="section-3", title="3. DFS Patterns", content="Backtracking templates."),
]


class FailingStore:
    """Store whose backing medium is always unavailable."""

    def __init__(self):
        self.set_calls = 0

    def get(self, key):
        raise StorageError("storage unavailable")

    def set(self, key, value):
        self.set_calls += 1
        raise StorageError("quota exceeded")


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def controller(store):
    return NavigationController(SECTIONS, store)


def test_opening_selects_and_visits_first_section(controller, store):
    assert controller.active_id == "intro"
    assert controller.visited == {"intro"}
    assert json.loads(store.get(VISITED_KEY)) == ["intro"]


def test_select_first_can_be_disabled(store):
    controller = NavigationController(SECTIONS, store, select_first=False)

    assert controller.active_id == ""
    assert controller.active_section() is None
    assert controller.visited == frozenset()
    assert store.get(VISITED_KEY) is None


def test_empty_document_starts_with_nothing_selected(store):
    controller = NavigationController([], store)

    assert controller.active_id == ""
    assert controller.active_section() is None
    assert controller.filtered_sections() == []
    assert controller.progress() == 0


def test_search_query_is_stored_verbatim_and_trimmed_for_filtering(controller):
    controller.set_search_query("  caching  ")

    assert controller.search_query == "  caching  "
    assert [section.id for section in controller.filtered_sections()] == ["section-2"]


def test_blank_query_returns_full_list(controller):
    controller.set_search_query("   ")

    assert controller.filtered_sections() == SECTIONS


def test_search_is_case_insensitive_over_title_and_content(controller):
    controller.set_search_query("DFS")

    # section-1 matches on content, section-3 on title.
    assert [section.id for section in controller.filtered_sections()] == ["section-1", "section-3"]


def test_search_without_matches_leaves_active_section_alone(controller):
    controller.select_section("section-2")
    controller.set_search_query("zzz-nomatch")

    assert controller.filtered_sections() == []
    assert controller.active_section() == SECTIONS[2]


def test_navigate_moves_through_full_list(controller):
    assert controller.navigate(Direction.NEXT) == SECTIONS[1]
    assert controller.navigate("next") == SECTIONS[2]
    assert controller.navigate(Direction.PREVIOUS) == SECTIONS[1]
    assert controller.active_id == "section-1"
    assert controller.visited == {"intro", "section-1", "section-2"}


def test_navigate_follows_filtered_list(controller):
    controller.select_section("section-1")
    controller.set_search_query("dfs")

    assert controller.navigate(Direction.NEXT) == SECTIONS[3]
    assert "section-2" not in controller.visited


def test_navigate_next_at_end_of_filtered_list_is_noop(controller):
    controller.set_search_query("c")
    filtered = controller.filtered_sections()
    assert len(filtered) == 3
    controller.select_section(filtered[-1].id)
    visited_before = controller.visited

    assert controller.navigate(Direction.NEXT) is None
    assert controller.active_id == filtered[-1].id
    assert controller.visited == visited_before


def test_navigate_previous_at_start_is_noop(controller):
    assert controller.navigate(Direction.PREVIOUS) is None
    assert controller.active_id == "intro"


def test_navigate_when_active_is_filtered_out(controller):
    controller.set_search_query("caching")

    # Active "intro" is not in the filtered list: previous is a no-op,
    # next starts from the top of the filtered list.
    assert controller.navigate(Direction.PREVIOUS) is None
    assert controller.active_id == "intro"
    assert controller.navigate(Direction.NEXT) == SECTIONS[2]


def test_navigate_with_no_matches_is_noop(controller):
    controller.set_search_query("zzz-nomatch")

    assert controller.navigate(Direction.NEXT) is None
    assert controller.navigate(Direction.PREVIOUS) is None
    assert controller.active_id == "intro"


def test_visited_grows_once_per_id(controller, store):
    controller.select_section("section-2")
    size = len(controller.visited)
    controller.select_section("section-2")

    assert len(controller.visited) == size
    assert json.loads(store.get(VISITED_KEY)) == ["intro", "section-2"]


def test_progress_never_decreases(controller):
    seen = [controller.progress()]
    for section_id in ["section-1", "section-1", "intro", "section-3", "section-2"]:
        controller.select_section(section_id)
        seen.append(controller.progress())

    assert seen == sorted(seen)
    assert seen[-1] == 100


def test_progress_rounds_to_nearest_integer(store):
    sections = [Section(id=f"section-{i}", title=f"{i}. T", content="x") for i in range(1, 9)]
    controller = NavigationController(sections, store)

    # 1 of 8 is 12.5%, rounded half up.
    assert controller.progress() == 13
    controller.select_section("section-2")
    assert controller.progress() == 25


def test_progress_thirds(store):
    controller = NavigationController(SECTIONS[:3], store)
    assert controller.progress() == 33
    controller.select_section("section-1")
    assert controller.progress() == 67


def test_unknown_id_is_accepted_but_not_counted(controller):
    # Selection is permissive: unknown ids become active without validation.
    controller.select_section("section-99")

    assert controller.active_id == "section-99"
    assert controller.active_section() is None
    assert "section-99" in controller.visited
    assert controller.visited_count() == 1
    assert controller.progress() == 25


def test_selecting_empty_id_clears_active_without_visiting(controller):
    controller.select_section("")

    assert controller.active_id == ""
    assert controller.active_section() is None
    assert controller.visited == {"intro"}


def test_visited_is_seeded_from_store_in_first_visit_order():
    store = InMemoryStore({VISITED_KEY: json.dumps(["section-2", "gone"])})
    controller = NavigationController(SECTIONS, store)

    assert controller.visited_order == ("section-2", "gone", "intro")
    assert controller.visited_count() == 2
    assert controller.progress() == 50


@pytest.mark.parametrize("raw", ["not json", '{"intro": true}', '["intro", 3]', "42"])
def test_malformed_visited_falls_back_to_empty(raw, caplog):
    store = InMemoryStore({VISITED_KEY: raw})
    with caplog.at_level(logging.WARNING, logger="studyguide"):
        controller = NavigationController(SECTIONS, store, select_first=False)

    assert controller.visited == frozenset()
    assert "Ignoring visited state" in caplog.text


def test_theme_defaults_to_dark(controller):
    assert controller.theme is Theme.DARK


def test_unknown_theme_value_falls_back_to_dark():
    controller = NavigationController(SECTIONS, InMemoryStore({THEME_KEY: "banana"}))

    assert controller.theme is Theme.DARK


def test_stored_light_theme_is_restored():
    controller = NavigationController(SECTIONS, InMemoryStore({THEME_KEY: "light"}))

    assert controller.theme is Theme.LIGHT


def test_toggle_theme_persists_immediately(controller, store):
    assert controller.toggle_theme() is Theme.LIGHT
    assert store.get(THEME_KEY) == "light"
    assert controller.toggle_theme() is Theme.DARK
    assert store.get(THEME_KEY) == "dark"


def test_custom_storage_keys_are_used(store):
    config = ViewerConfig(visited_key="v", theme_key="t")
    controller = NavigationController(SECTIONS, store, config=config)
    controller.toggle_theme()

    assert store.snapshot() == {"v": '["intro"]', "t": "light"}


def test_failing_store_never_blocks_state_changes(caplog):
    store = FailingStore()
    with caplog.at_level(logging.WARNING, logger="studyguide"):
        controller = NavigationController(SECTIONS, store)
        controller.select_section("section-1")
        theme = controller.toggle_theme()

    assert controller.theme is Theme.LIGHT
    assert theme is Theme.LIGHT
    assert controller.active_id == "section-1"
    assert controller.visited == {"intro", "section-1"}
    assert store.set_calls == 3
    assert "not persisted" in caplog.text


def test_search_focus_request_is_consumed_once(controller):
    assert controller.consume_search_focus() is False
    controller.request_search_focus()

    assert controller.consume_search_focus() is True
    assert controller.consume_search_focus() is False
