import pytest

from trace_timeline.interaction.interaction_controller import InteractionController, ResizeInput
from trace_timeline.session import TraceSession
from tests.helpers import FakeChannel, RecordingSurface, complete

CANVAS_WIDTH = 1000
CANVAS_HEIGHT = 600


@pytest.fixture
def sample_dataset():
    """
    One thread, fitted at scale 1.0 on a 1000px canvas (920px drawable):

        A  [0, 920)   depth 0
        B  [10, 25)   depth 1
        C  [100, 600) depth 1, with a detail path
    """
    return {'traceEvents': [
        complete(1, 'A', 0, 920),
        complete(1, 'B', 10, 15),
        complete(1, 'C', 100, 500, detail='/src/dir/a.cpp:12:3'),
    ]}


@pytest.fixture
def session(sample_dataset):
    session = TraceSession()
    session.ingest(sample_dataset)
    session.resize(CANVAS_WIDTH, CANVAS_HEIGHT)
    return session


@pytest.fixture
def surface():
    return RecordingSurface(CANVAS_WIDTH, CANVAS_HEIGHT)


@pytest.fixture
def channel():
    return FakeChannel()


@pytest.fixture
def render_counter():
    counter = {'count': 0}

    def on_render():
        counter['count'] += 1

    return counter, on_render


@pytest.fixture
def controller(sample_dataset, channel, render_counter):
    _, on_render = render_counter
    controller = InteractionController(TraceSession(), channel, on_render=on_render)
    channel.post({'command': 'update', 'data': sample_dataset})
    controller.dispatch(ResizeInput(CANVAS_WIDTH, CANVAS_HEIGHT))
    render_counter[0]['count'] = 0
    return controller
