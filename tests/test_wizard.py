from streamlit_app.wizard import STEP_TITLES, FormWizard


def test_starts_on_first_step():
    w = FormWizard()
    assert w.step == 1
    assert w.max_step == 5
    assert w.is_first and not w.is_last
    assert w.title == "Household"


def test_next_is_bounded():
    seen = []
    w = FormWizard(on_change=seen.append)
    for _ in range(10):
        w.next()
    assert w.step == 5
    assert w.is_last
    assert w.title == "Review"
    assert seen == [2, 3, 4, 5]
    assert w.next() is False


def test_prev_is_bounded():
    seen = []
    w = FormWizard(on_change=seen.append)
    assert w.prev() is False
    w.next()
    assert w.prev() is True
    assert w.step == 1
    assert seen == [2, 1]


def test_reset_returns_to_first_step():
    seen = []
    w = FormWizard(on_change=seen.append)
    w.next()
    w.next()
    assert w.reset() is True
    assert w.step == 1
    assert seen == [2, 3, 1]
    # already on step 1: nothing to render
    assert w.reset() is False
    assert seen == [2, 3, 1]


def test_indicator_marks_active_step():
    w = FormWizard()
    w.next()
    marks = w.indicator()
    assert [m[0] for m in marks] == [1, 2, 3, 4, 5]
    assert [m[1] for m in marks] == STEP_TITLES
    assert [m[2] for m in marks] == [False, True, False, False, False]


def test_custom_titles():
    w = FormWizard(titles=["One", "Two"])
    assert w.max_step == 2
    w.next()
    assert w.is_last
