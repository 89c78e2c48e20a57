import json

import pytest

from trace_timeline.data.trace_loader import load_trace_file
from trace_timeline.utils.error_handler import TraceLoadError, TraceViewerError


def write(tmp_path, content, name='trace.json'):
    path = tmp_path / name
    path.write_text(content, encoding='utf-8')
    return str(path)


def test_load_trace_object(tmp_path):
    events = [{'ph': 'X', 'tid': 1, 'name': 'A', 'ts': 0, 'dur': 5}]
    path = write(tmp_path, json.dumps({'traceEvents': events, 'beginningOfTime': 0}))

    data = load_trace_file(path)

    assert data['traceEvents'] == events


def test_load_bare_event_array(tmp_path):
    path = write(tmp_path, '[{"ph": "X", "tid": 1, "name": "A", "ts": 0}]')

    assert len(load_trace_file(path)['traceEvents']) == 1


def test_missing_file(tmp_path):
    with pytest.raises(TraceLoadError) as excinfo:
        load_trace_file(str(tmp_path / 'missing.json'))

    assert excinfo.value.path.endswith('missing.json')
    assert 'missing.json' in excinfo.value.details


def test_invalid_json(tmp_path):
    path = write(tmp_path, '{"traceEvents": [')

    with pytest.raises(TraceLoadError) as excinfo:
        load_trace_file(path)

    assert isinstance(excinfo.value, TraceViewerError)
    assert excinfo.value.original_error is not None


@pytest.mark.parametrize('content', ['{"events": []}', '{"traceEvents": {}}', '42'])
def test_not_a_trace(tmp_path, content):
    with pytest.raises(TraceLoadError):
        load_trace_file(write(tmp_path, content))
