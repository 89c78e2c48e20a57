from trace_timeline.config import DEFAULT_CONFIG
from trace_timeline.session import TraceSession, extract_trace_events
from tests.helpers import RecordingSurface, complete


def test_extract_trace_events():
    events = [complete(1, 'A', 0, 1)]

    assert extract_trace_events({'traceEvents': events}) == events
    assert extract_trace_events(events) == events
    assert extract_trace_events({'traceEvents': 'nope'}) == []
    assert extract_trace_events({'displayTimeUnit': 'ns'}) == []
    assert extract_trace_events(None) == []


def test_ingest_before_first_resize_fits_later():
    session = TraceSession()
    session.ingest({'traceEvents': [complete(1, 'A', 0, 920)]})
    assert session.state.scale == TraceSession().state.scale

    session.resize(1000, 600)

    assert session.state.scale == 1.0
    assert session.state.x == DEFAULT_CONFIG.view.margin_side
    assert session.state.y == DEFAULT_CONFIG.top_offset


def test_fit_only_happens_once(session):
    session.viewport.zoom(500, 3.0)

    session.resize(1200, 600)

    assert session.state.scale == 3.0


def test_new_dataset_replaces_everything(session):
    session.selected = session.layout.threads[0].events[0]
    session.viewport.zoom(500, 3.0)

    session.ingest({'traceEvents': [complete(5, 'Z', 0, 460)]})

    assert [t.tid for t in session.layout.threads] == ['5']
    assert session.selected is None
    assert session.context_event is None
    assert session.state.scale == 2.0


def test_handle_message(session):
    assert session.handle_message({'command': 'update', 'data': [complete(2, 'B', 0, 10)]})
    assert [t.tid for t in session.layout.threads] == ['2']

    assert not session.handle_message({'command': 'update'})
    assert not session.handle_message({'command': 'refresh', 'data': []})
    assert not session.handle_message('update')
    assert [t.tid for t in session.layout.threads] == ['2']


def test_empty_dataset_renders_nothing():
    session = TraceSession()
    session.ingest({'traceEvents': []})
    session.resize(1000, 600)
    surface = RecordingSurface()

    session.render(surface)

    assert surface.calls == []
    assert session.hit_test(100, 100) is None


def test_content_height_counts_rows_and_spacing(session):
    # Two rows of 24px plus 30px thread spacing
    assert session.content_height() == 2 * 24 + 30
