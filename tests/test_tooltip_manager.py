from trace_timeline.data.trace_models import ProcessedEvent
from trace_timeline.utils.tooltip_manager import TooltipManager


def test_event_tooltip_is_escaped():
    event = ProcessedEvent('InstantiateClass', 'std::vector<int>', 0, 1234, '1')

    text = TooltipManager.format_event_tooltip(event)

    assert text == ("<strong>InstantiateClass</strong><br/>1.234 ms<br/>"
                    "<small>std::vector&lt;int&gt;</small>")


def test_position_below_right_of_pointer():
    assert TooltipManager.position_tooltip(100, 100, 1000, 600) == (115, 115)


def test_position_flips_on_overflow():
    assert TooltipManager.position_tooltip(900, 580, 1000, 600) == (900 - 215, 580 - 75)
    assert TooltipManager.position_tooltip(900, 100, 1000, 600, 50, 20, offset=5) == (905, 105)


def test_canvas_hints():
    assert TooltipManager.get_canvas_tooltip('pan_hint') == 'Drag to pan the timeline'
    assert TooltipManager.get_canvas_tooltip('unknown') == ''
    assert TooltipManager.get_usage_hint().count(' | ') == len(TooltipManager.CANVAS_TOOLTIPS) - 1
