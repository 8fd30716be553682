import json
import os

os.environ.setdefault('MPLBACKEND', 'Agg')

import pytest


class FakeResponse:
    def __init__(self, status_code=200, reason='OK', body=None, text=None, content=b''):
        self.status_code = status_code
        self.reason = reason
        self._body = body
        self._text = text
        self.content = content

    def json(self):
        if self._text is not None:
            return json.loads(self._text)
        return self._body


def make_layer(rows=2, cols=3, fill=0.5):
    return {'shape': [rows, cols], 'values': [[fill] * cols for _ in range(rows)]}


@pytest.fixture
def api_body():
    return {
        'predictions': [
            {'class': 'dog', 'confidence': 0.81},
            {'class': 'rooster', 'confidence': 0.12},
            {'class': 'hen', 'confidence': 0.04},
            {'class': 'cat', 'confidence': 0.02},
        ],
        'visualization': {
            'conv1': make_layer(),
            'conv1.relu': make_layer(fill=-0.25),
            'layer1': make_layer(),
            'layer1.0.conv2': make_layer(),
            'layer1.0.conv1': make_layer(),
        },
        'input_spectrogram': make_layer(4, 8),
        'waveform': {'values': [0.0, 0.5, -0.5, 0.25], 'sample_rate': 44100, 'duration': 5.0},
    }


@pytest.fixture
def fake_response():
    return FakeResponse
