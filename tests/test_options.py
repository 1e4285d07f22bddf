import pytest

from splendorui.options import OptionsPanel, OptionsType
from splendorui.panel import Event, EventType, MouseButton
from splendorui.selector import SelectorType


def click_on(box):
    rect = box.rect
    return Event(
        EventType.MOUSE_BUTTON_PRESSED,
        rect.left + rect.width / 2,
        rect.top + rect.height / 2,
        MouseButton.LEFT,
    )


def radio_panel():
    panel = OptionsPanel("Game Mode: ", OptionsType.RADIO, (50, 100), (1000, 150), title_width=120)
    for name in ("Offline", "Client", "Server"):
        panel.add_option(name)
    return panel


def check_panel():
    panel = OptionsPanel("Other: ", OptionsType.CHECK, (50, 100), (1000, 150), title_width=120)
    panel.add_option("Timer")
    panel.add_option("A.I.")
    return panel


def test_radio_checks_first_option():
    panel = radio_panel()
    assert panel.first_checked() == "Offline"
    assert panel.is_checked("Offline") is True
    assert panel.is_checked("Client") is False


def test_check_panel_starts_empty():
    panel = check_panel()
    assert panel.first_checked() == ""
    assert panel.is_checked("Timer") is False


def test_unknown_option_raises():
    with pytest.raises(ValueError):
        check_panel().is_checked("Missing")


def test_option_type_follows_panel_type():
    assert all(o.type is SelectorType.RADIO for o in radio_panel().options)
    assert all(o.type is SelectorType.CHECK for o in check_panel().options)


def test_first_option_follows_title():
    panel = radio_panel()
    assert panel.options[0].position[0] == panel.position[0] + panel.title_width


def test_options_placed_after_previous_collider():
    panel = radio_panel()
    first, second, third = panel.options
    assert second.position[0] == first.rect.left + first.rect.width
    assert third.position[0] == second.rect.left + second.rect.width
    assert all(o.position[1] == panel.position[1] for o in panel.options)


def test_radio_click_moves_selection():
    panel = radio_panel()
    panel.handle_event(click_on(panel.options[1]))
    assert panel.first_checked() == "Client"
    assert [o.checked for o in panel.options] == [False, True, False]
    panel.handle_event(click_on(panel.options[2]))
    assert [o.checked for o in panel.options] == [False, False, True]


def test_radio_click_on_selected_keeps_it():
    panel = radio_panel()
    panel.handle_event(click_on(panel.options[0]))
    assert [o.checked for o in panel.options] == [True, False, False]


def test_check_options_toggle_independently():
    panel = check_panel()
    panel.handle_event(click_on(panel.options[0]))
    panel.handle_event(click_on(panel.options[1]))
    assert panel.is_checked("Timer") is True
    assert panel.is_checked("A.I.") is True
    panel.handle_event(click_on(panel.options[0]))
    assert panel.is_checked("Timer") is False
    assert panel.first_checked() == "A.I."


def test_click_elsewhere_changes_nothing():
    panel = radio_panel()
    panel.handle_event(Event(EventType.MOUSE_BUTTON_PRESSED, -100, -100, MouseButton.LEFT))
    assert [o.checked for o in panel.options] == [True, False, False]


def test_title_is_drawn_before_options():
    panel = radio_panel()
    assert panel.drawables[0] == "Game Mode: "
    assert panel.drawables[1:] == panel.options