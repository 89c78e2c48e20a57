import pytest

from trace_timeline.session import TraceSession
from tests.helpers import begin, complete, end


def name_at(session, px, py):
    hit = session.hit_test(px, py)
    return hit.name if hit is not None else None


@pytest.mark.parametrize('px,py,expected', [
    (45, 60, 'A'),
    (55, 80, 'B'),
    (300, 80, 'C'),
    (640, 97, 'C'),      # bottom-right corner is inclusive
    (700, 80, None),     # depth 1 row, no bar there
    (45, 30, None),      # behind the ruler
    (45, 200, None),     # below the only thread
    (20, 60, None),      # left of the first bar
])
def test_hit_test_sample(session, px, py, expected):
    assert name_at(session, px, py) == expected


def test_hit_test_on_empty_session():
    session = TraceSession()
    session.resize(1000, 600)

    assert session.hit_test(100, 100) is None


def test_hit_test_follows_pan_and_zoom(session):
    session.viewport.zoom(140, 4.0)

    # C starts exactly under the zoom anchor
    assert name_at(session, 141, 80) == 'C'
    assert name_at(session, 139, 80) is None


def test_hit_test_respects_lanes():
    session = TraceSession()
    session.ingest({'traceEvents': [
        complete(1, 'Frontend', 0, 100),
        begin(1, 'Source', 0, detail='/inc/a.h'),
        end(1, 'Source', 40),
    ]})
    session.resize(1000, 600)

    # main lane [50, 74], lane gap, source lane [80, 104]
    assert name_at(session, 45, 60) == 'Frontend'
    assert name_at(session, 45, 77) is None
    assert name_at(session, 45, 90) == 'Source'


def test_hit_test_second_thread_offset():
    session = TraceSession()
    session.ingest({'traceEvents': [complete(1, 'first', 0, 100), complete(2, 'second', 0, 100)]})
    session.resize(1000, 600)

    # thread 1 occupies 24px row + 30px spacing
    assert name_at(session, 100, 60) == 'first'
    assert name_at(session, 100, 90) is None
    assert name_at(session, 100, 110) == 'second'


def test_at_most_one_bar_under_any_point(session):
    events = session.layout.threads[0].events
    optimizer = session.optimizer
    state = session.state

    for px in range(0, 1000, 7):
        for py in range(40, 120, 3):
            containing = [e for e in events
                          if optimizer.bar_rect(e, state.y, state).contains(px, py)]
            assert len(containing) <= 1
            hit = session.hit_test(px, py)
            assert hit is (containing[0] if containing else None)
