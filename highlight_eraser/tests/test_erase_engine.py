from PySide6.QtCore import QPointF

from highlight_eraser.models.annotation import Annotation
from highlight_eraser.services.annotation_store import AnnotationStore
from highlight_eraser.services.erase_engine import EraseEngine

from conftest import P, RecordingStore, box, make_annotations


def test_three_overlapping_boxes_deleted_in_one_call(session, view, redraws):
    store = RecordingStore(make_annotations("Z", "A", "B", "C"))
    view.visible_boxes.replace([box(1), box(2), box(3)])
    engine = EraseEngine(session, view, store)

    assert engine.erase_at(P) is True

    assert [dt for _pos, dt in store.deleted_calls] == ["A", "B", "C"]
    assert [a.datetime for a in store.annotations] == ["Z"]
    assert len(view.visible_boxes) == 0
    assert len(redraws) == 1


def test_two_line_highlight_removed_and_later_box_renumbered(session, view):
    store = RecordingStore(make_annotations("a", "b", "X", "c", "d", "Y"))
    later = box(5, x=100)
    view.visible_boxes.replace([box(2), box(2, y=8), later])
    engine = EraseEngine(session, view, store)

    engine.erase_at(P)

    assert store.deleted_calls == [(2, "X")]
    assert list(view.visible_boxes) == [later]
    assert later.list_position == 4
    assert store.get(4).datetime == "Y"


def test_same_point_twice_deletes_once(session, view, redraws):
    store = RecordingStore(make_annotations("X"))
    view.visible_boxes.replace([box(0)])
    engine = EraseEngine(session, view, store)

    assert engine.erase_at(P) is True
    assert engine.erase_at(P) is False
    assert store.deleted_calls == [(0, "X")]
    assert len(redraws) == 1


def test_already_deleted_id_is_skipped_for_lingering_box(session, view):
    store = RecordingStore(make_annotations("X", "Y"))
    view.visible_boxes.replace([box(0)])
    engine = EraseEngine(session, view, store)
    engine.erase_at(P)

    # a lingering box resolves to an id already handled this activation
    session.mark_deleted("Y")
    view.visible_boxes.replace([box(0)])
    assert engine.erase_at(P) is False
    assert [dt for _pos, dt in store.deleted_calls] == ["X"]


def test_failed_delete_rolls_back_and_retries(session, view, redraws):
    store = RecordingStore(make_annotations("X"), fail_positions={0})
    view.visible_boxes.replace([box(0)])
    engine = EraseEngine(session, view, store)

    assert engine.erase_at(P) is False
    assert "X" not in session.deleted_ids
    assert len(view.visible_boxes) == 1
    assert redraws == []

    store.fail_positions.clear()
    assert engine.erase_at(P) is True
    assert store.deleted_calls == [(0, "X"), (0, "X")]
    assert "X" in session.deleted_ids


def test_failure_does_not_abort_scan(session, view):
    store = RecordingStore(make_annotations("A", "B"), fail_positions={0})
    view.visible_boxes.replace([box(0), box(1)])
    engine = EraseEngine(session, view, store)

    assert engine.erase_at(P) is True
    assert [a.datetime for a in store.annotations] == ["A"]
    assert view.visible_boxes.positions() == [0]


def test_missing_annotation_is_skipped(session, view):
    store = RecordingStore(make_annotations("A"))
    view.visible_boxes.replace([box(3), box(0)])
    engine = EraseEngine(session, view, store)

    assert engine.erase_at(P) is True
    assert store.deleted_calls == [(0, "A")]


def test_fallback_identity_when_timestamp_missing(session, view):
    store = RecordingStore([Annotation(page=7)])
    view.visible_boxes.replace([box(0)])
    engine = EraseEngine(session, view, store)

    engine.erase_at(P)
    assert session.deleted_ids == {"idx_0_page_7"}


def test_untimestamped_highlights_on_same_page_all_deleted(session, view):
    store = RecordingStore([Annotation(page=1), Annotation(page=1)])
    view.visible_boxes.replace([box(0), box(1)])
    engine = EraseEngine(session, view, store)

    assert engine.erase_at(P) is True
    assert len(store) == 0
    assert store.deleted_calls == [(0, None), (0, None)]
    assert session.deleted_ids == {"idx_0_page_1", "idx_1_page_1"}
    assert len(view.visible_boxes) == 0


def test_point_outside_every_box_deletes_nothing(session, view, redraws):
    store = RecordingStore(make_annotations("A"))
    view.visible_boxes.replace([box(0)])
    engine = EraseEngine(session, view, store)

    assert engine.erase_at(QPointF(11, 5)) is False
    assert store.deleted_calls == []
    assert redraws == []


def test_screen_position_is_mapped_to_page(session, view):
    view.zoom = 2.0
    view.offset = QPointF(100, 0)
    store = RecordingStore(make_annotations("A"))
    view.visible_boxes.replace([box(0, 0, 0, 10, 10)])
    engine = EraseEngine(session, view, store)

    # screen (60, 0) -> page (-20, 0): outside
    assert engine.erase_at(QPointF(60, 0)) is False
    # screen (120, 20) -> page (10, 10): bottom-right corner
    assert engine.erase_at(QPointF(120, 20)) is True


def test_unavailable_collaborators_are_noops(session, view):
    store = AnnotationStore(make_annotations("A"))
    assert EraseEngine(session, None, store).erase_at(P) is False
    assert EraseEngine(session, view, store).erase_at(P) is False   # no boxes
    view.visible_boxes.replace([box(0)])
    assert EraseEngine(session, view, None).erase_at(P) is False
    assert len(store) == 1
