import base64
import logging
import os
from typing import Dict, List

import requests
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from config import SAMPLES_DIR

logger = logging.getLogger(__name__)


class VisualizerError(Exception):
    pass


class FileReadError(VisualizerError):
    def __init__(self, message='Failed to read the file.'):
        super().__init__(message)


class SampleFetchError(VisualizerError):
    pass


class ApiError(VisualizerError):
    pass


class ResponseParseError(VisualizerError):
    pass


class Prediction(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    label: str = Field(..., alias='class')
    confidence: float


class LayerData(BaseModel):
    model_config = ConfigDict(frozen=True)

    shape: List[int]
    values: List[List[float]]


class WaveformData(BaseModel):
    model_config = ConfigDict(frozen=True)

    values: List[float]
    sample_rate: int
    duration: float


class ApiResponse(BaseModel):
    """Decoded body of a successful inference call.

    ``visualization`` keeps the layer order of the JSON document, which is
    the order ``split_layers`` relies on.
    """
    model_config = ConfigDict(frozen=True)

    predictions: List[Prediction]
    visualization: Dict[str, LayerData]
    input_spectrogram: LayerData
    waveform: WaveformData


def parse_response(body):
    try:
        return ApiResponse.model_validate(body)
    except ValidationError as e:
        raise ResponseParseError(str(e)) from e


def encode_audio(data):
    return base64.b64encode(data).decode('ascii')


def build_payload(data):
    return {'audio_data': encode_audio(data)}


def read_audio_file(file_obj):
    try:
        return file_obj.read()
    except (OSError, ValueError) as e:
        logger.warning("Could not read uploaded file: %s", e)
        raise FileReadError() from e


def read_audio_path(path):
    try:
        with open(path, 'rb') as f:
            return f.read()
    except OSError as e:
        logger.warning("Could not read %s: %s", path, e)
        raise FileReadError() from e


def _is_success(response):
    return 200 <= response.status_code < 300


def fetch_sample(name, base_url='', samples_dir=SAMPLES_DIR, timeout=None):
    # a local copy wins, otherwise the clip is fetched from base_url
    path = os.path.join(samples_dir, name)
    if os.path.isfile(path):
        try:
            with open(path, 'rb') as f:
                return f.read()
        except OSError as e:
            raise SampleFetchError(f"Failed to fetch sample file: {e}") from e
    if not base_url:
        raise SampleFetchError("Failed to fetch sample file: Not Found")

    url = f"{base_url}/{name}"
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise SampleFetchError(f"Failed to fetch sample file: {e}") from e
    if not _is_success(response):
        logger.warning("Sample fetch %s returned %s", url, response.status_code)
        raise SampleFetchError(f"Failed to fetch sample file: {response.reason}")
    return response.content


def request_inference(audio, url, timeout=None):
    payload = build_payload(audio)
    logger.info("Posting %d bytes of audio to %s", len(audio), url or '<unset>')
    try:
        response = requests.post(
            url,
            json=payload,
            headers={'Content-Type': 'application/json'},
            timeout=timeout,
        )
    except requests.RequestException as e:
        raise ApiError(str(e)) from e

    if not _is_success(response):
        logger.warning("Inference endpoint returned %s %s", response.status_code, response.reason)
        raise ApiError(f"API error {response.reason}")

    try:
        body = response.json()
    except ValueError as e:
        logger.warning("Inference response was not valid JSON")
        raise ResponseParseError(str(e)) from e
    return parse_response(body)
