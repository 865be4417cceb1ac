"""Smoke test for the Streamlit dashboard (app.py).

Uses streamlit.testing.v1.AppTest to verify the app starts without exceptions
and that the trainer buttons drive the session through a full deal/answer cycle.
"""

import pytest

try:
    from streamlit.testing.v1 import AppTest

    _STREAMLIT_AVAILABLE = True
except ImportError:
    _STREAMLIT_AVAILABLE = False


@pytest.mark.skipif(not _STREAMLIT_AVAILABLE, reason="streamlit not installed")
def test_app_runs_without_exception():
    """App renders all four tabs without raising an exception."""
    at = AppTest.from_file("../app.py")
    at.run(timeout=120)
    assert not at.exception, f"App raised an exception: {at.exception}"


@pytest.mark.skipif(not _STREAMLIT_AVAILABLE, reason="streamlit not installed")
def test_app_has_expected_tabs():
    """App exposes the four expected tab labels."""
    at = AppTest.from_file("../app.py")
    at.run(timeout=120)
    tab_labels = [t.label for t in at.tabs]
    assert "Trainer" in tab_labels
    assert "Range Charts" in tab_labels
    assert "Interactive Lookup" in tab_labels
    assert "Range Report" in tab_labels


@pytest.mark.skipif(not _STREAMLIT_AVAILABLE, reason="streamlit not installed")
def test_deal_and_answer_updates_stats():
    """Start, answer, and the session records one graded hand."""
    at = AppTest.from_file("../app.py")
    at.run(timeout=120)
    next(b for b in at.button if b.label == "Start Training").click().run(timeout=120)
    next(b for b in at.button if b.label == "Fold").click().run(timeout=120)
    assert not at.exception
    assert at.session_state["session"].get_stats().total == 1
    assert at.session_state["last_verdict"] is not None
