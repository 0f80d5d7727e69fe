"""
Tests for travel_dates.selector.render.

Run with:
    pytest tests/test_render.py -q
"""

from datetime import date

from travel_dates.selector import render_dropdown


def test_closed_view_has_trigger_only(make_dropdown):
    view = render_dropdown(make_dropdown("2025-06-10_to_2025-06-15"))

    assert view.state == "closed"
    assert view.trigger_label == "June 10, 2025 - June 15, 2025"
    assert view.has_value is True
    assert view.calendar is None
    assert view.flexible is None
    assert view.tabs == []
    assert view.apply_enabled is False


def test_closed_view_without_value_shows_placeholder(make_dropdown):
    view = render_dropdown(make_dropdown(""))
    assert view.trigger_label == "Select dates"
    assert view.has_value is False


def test_open_dates_view_marks_range(make_dropdown):
    dropdown = make_dropdown()
    dropdown.open()
    dropdown.select_date(date(2025, 6, 10))
    dropdown.select_date(date(2025, 6, 12))

    view = render_dropdown(dropdown)

    assert view.state == "open_dates"
    assert [t.active for t in view.tabs] == [True, False]
    assert view.calendar.title == "June 2025"
    assert len(view.calendar.cells) == 42

    cells = {c.date: c for c in view.calendar.cells if c is not None}
    assert cells[date(2025, 6, 10)].endpoint is True
    assert cells[date(2025, 6, 11)].in_range is True
    assert cells[date(2025, 6, 11)].endpoint is False
    assert cells[date(2025, 6, 12)].endpoint is True
    assert cells[date(2025, 6, 13)].in_range is False
    assert view.calendar.selected_text == "Selected: June 10, 2025 - June 12, 2025"
    assert view.apply_enabled is True
    assert view.flexible is None


def test_open_dates_view_flags_past_days(make_dropdown):
    dropdown = make_dropdown()
    dropdown.open()
    dropdown.navigate_month(-1)

    view = render_dropdown(dropdown)
    assert view.calendar.title == "May 2025"
    assert all(c.disabled for c in view.calendar.cells if c is not None)
    assert view.calendar.selected_text is None
    assert view.apply_enabled is False


def test_open_flexible_view_marks_choices(make_dropdown):
    dropdown = make_dropdown(locale="ar")
    dropdown.open()
    dropdown.switch_tab("flexible")
    dropdown.set_duration("week")
    dropdown.toggle_month("August")

    view = render_dropdown(dropdown)

    assert view.state == "open_flexible"
    assert view.calendar is None
    assert [d.value for d in view.flexible.durations if d.selected] == ["week"]
    assert [m.value for m in view.flexible.months if m.selected] == ["August"]
    assert view.flexible.months[7].label == "أغسطس"
    assert view.flexible.duration_title == "مدة الرحلة"
    assert view.apply_label == "تطبيق"
    assert view.pending.flexible.months == ["August"]


def test_render_does_not_mutate_controller(make_dropdown):
    dropdown = make_dropdown("2025-06-10_to_2025-06-15")
    dropdown.open()
    before = dropdown.pending.snapshot()

    render_dropdown(dropdown)
    render_dropdown(dropdown)

    assert dropdown.pending.snapshot() == before
    assert dropdown.visible_month == date(2025, 6, 1)
