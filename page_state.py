import enum
import logging
from dataclasses import dataclass

from inference_client import VisualizerError, request_inference
from layer_hierarchy import LayerHierarchy, split_layers

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = 'An unknown error occurred'


class Status(enum.Enum):
    IDLE = 'idle'
    LOADING = 'loading'
    SUCCESS = 'success'
    ERROR = 'error'


@dataclass
class PageState:
    """What the page shows for the current request cycle.

    Every cycle gets a generation number from ``begin``. A completion only
    lands if it carries the latest generation, so a slow response from an
    abandoned cycle cannot overwrite a newer one.
    """
    status: Status = Status.IDLE
    generation: int = 0
    file_name: str = ''
    response: object = None
    error: str | None = None

    @property
    def is_loading(self):
        return self.status is Status.LOADING

    @property
    def hierarchy(self):
        if self.response is None:
            return LayerHierarchy()
        return split_layers(self.response.visualization)

    def begin(self, file_name):
        self.generation += 1
        self.status = Status.LOADING
        self.file_name = file_name
        self.response = None
        self.error = None
        return self.generation

    def _is_current(self, generation):
        if generation != self.generation:
            logger.info("Ignoring stale completion %d (latest is %d)", generation, self.generation)
            return False
        return True

    def succeed(self, generation, response):
        if not self._is_current(generation):
            return False
        self.status = Status.SUCCESS
        self.response = response
        self.error = None
        return True

    def fail(self, generation, message):
        if not self._is_current(generation):
            return False
        self.status = Status.ERROR
        self.response = None
        self.error = message
        return True


def describe_error(exc):
    if isinstance(exc, VisualizerError):
        return str(exc)
    return UNKNOWN_ERROR


def run_cycle(state, file_name, load_audio, url, timeout=None):
    generation = state.begin(file_name)
    try:
        audio = load_audio()
        response = request_inference(audio, url, timeout=timeout)
    except Exception as e:
        if not isinstance(e, VisualizerError):
            logger.exception("Unexpected failure while analysing %s", file_name)
        return state.fail(generation, describe_error(e))
    return state.succeed(generation, response)
