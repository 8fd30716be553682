from esc50 import (
    DEFAULT_EMOJI,
    ESC50_EMOJI_MAP,
    SAMPLE_FILES,
    confidence_text,
    emoji_for_class,
    prediction_label,
    top_predictions,
)
from inference_client import Prediction


def test_known_class_emoji():
    assert emoji_for_class('dog') == '🐕'
    assert emoji_for_class('church_bells') == '🔔'


def test_unknown_class_falls_back():
    assert emoji_for_class('theremin') == DEFAULT_EMOJI
    assert emoji_for_class('') == DEFAULT_EMOJI
    assert prediction_label('theremin') == f'{DEFAULT_EMOJI} theremin'


def test_every_esc50_class_has_a_glyph():
    assert len(ESC50_EMOJI_MAP) == 50
    assert all(ESC50_EMOJI_MAP.values())


def test_prediction_label_replaces_underscores():
    assert prediction_label('crying_baby') == '👶 crying baby'
    assert prediction_label('door_wood_knock') == '🚪 door wood knock'


def test_confidence_text():
    assert confidence_text(0.8123) == '81.2%'
    assert confidence_text(1.0) == '100.0%'
    assert confidence_text(0.0) == '0.0%'


def test_top_predictions_takes_first_three_as_given():
    preds = [Prediction(label=str(i), confidence=c) for i, c in enumerate([0.1, 0.5, 0.3, 0.1])]

    assert [p.label for p in top_predictions(preds)] == ['0', '1', '2']
    assert top_predictions(preds[:2]) == preds[:2]


def test_sample_files_are_wavs():
    assert len(SAMPLE_FILES) == 6
    assert all(name.endswith('.wav') for name in SAMPLE_FILES)
