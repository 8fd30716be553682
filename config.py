import os
from dataclasses import dataclass

# the sample clips are part of the public ESC-50 dataset
ESC50_AUDIO_URL = 'https://raw.githubusercontent.com/karolpiczak/ESC-50/master/audio'
SAMPLES_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'samples')


@dataclass(frozen=True)
class Settings:
    inference_url: str = ''
    inference_timeout: float | None = None
    samples_url: str = ESC50_AUDIO_URL
    samples_dir: str = SAMPLES_DIR


def _optional_float(raw):
    if raw is None or raw.strip() == '':
        return None
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"INFERENCE_TIMEOUT must be a number of seconds, got {raw!r}") from None


def load_settings(environ=None):
    env = os.environ if environ is None else environ
    return Settings(
        inference_url=env.get('MODAL_INFERENCE_URL', ''),
        inference_timeout=_optional_float(env.get('INFERENCE_TIMEOUT')),
        samples_url=env.get('AUDIO_SAMPLES_URL', ESC50_AUDIO_URL).rstrip('/'),
        samples_dir=env.get('AUDIO_SAMPLES_DIR', SAMPLES_DIR),
    )
