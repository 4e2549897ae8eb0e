from highlight_eraser.services.eraser_session import EraserSession


def _recorder(session):
    emitted = []
    session.active_changed.connect(emitted.append)
    return emitted


def test_starts_inactive_and_empty():
    s = EraserSession()
    assert s.active is False
    assert s.deleted_ids == set()


def test_activation_is_idempotent():
    s = EraserSession()
    emitted = _recorder(s)
    assert s.set_active(True) is True
    assert s.set_active(True) is False
    assert s.active is True
    assert emitted == [True]


def test_redundant_deactivation_emits_nothing():
    s = EraserSession()
    emitted = _recorder(s)
    assert s.set_active(False) is False
    assert emitted == []


def test_deactivation_clears_deleted_ids():
    s = EraserSession()
    s.set_active(True)
    s.mark_deleted("a")
    s.mark_deleted("b")

    s.set_active(False)

    assert s.active is False
    assert s.deleted_ids == set()

    s.set_active(True)
    assert s.deleted_ids == set()


def test_mark_and_unmark():
    s = EraserSession()
    s.mark_deleted("x")
    assert s.is_deleted("x")
    s.unmark_deleted("x")
    s.unmark_deleted("never-marked")
    assert not s.is_deleted("x")
