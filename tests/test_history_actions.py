from history_actions import (
    BATCH_HISTORY_PAGE,
    MENU_KEY,
    QR_GENERATOR_PAGE,
    QR_MODE_KEY,
    SELECTED_BATCH_KEY,
    SHOW_SINGLE_KEY,
    SINGLE_CONTENT_KEY,
    selected_batch_index,
    use_history_item,
    view_batch,
)


SINGLE_ITEM = {"id": "a", "text": "hello", "is_batch_generated": False, "batch_timestamp": None}
BATCH_ITEM = {"id": "b", "text": "second", "is_batch_generated": True, "batch_timestamp": "T1"}


def test_use_history_item_loads_single_generator():
    state = {}
    use_history_item(state, BATCH_ITEM)

    assert state[MENU_KEY] == QR_GENERATOR_PAGE
    assert state[QR_MODE_KEY] == "Single"
    assert state[SINGLE_CONTENT_KEY] == "second"
    assert state[SHOW_SINGLE_KEY] is True


class TestViewBatch:

    def test_opens_batch_history_on_the_items_batch(self):
        state = {}
        assert view_batch(state, BATCH_ITEM) is True
        assert state == {MENU_KEY: BATCH_HISTORY_PAGE, SELECTED_BATCH_KEY: "T1"}

    def test_single_item_has_no_batch(self):
        state = {}
        assert view_batch(state, SINGLE_ITEM) is False
        assert state == {}


class TestSelectedBatchIndex:

    def test_selected_batch(self):
        assert selected_batch_index({SELECTED_BATCH_KEY: "T1"}, ["T2", "T1"]) == 1

    def test_missing_batch_falls_back_to_newest(self):
        assert selected_batch_index({SELECTED_BATCH_KEY: "gone"}, ["T2", "T1"]) == 0
        assert selected_batch_index({}, ["T2", "T1"]) == 0
