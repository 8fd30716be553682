DEFAULT_EMOJI = '🔈'

ESC50_EMOJI_MAP = {
    'dog': '🐕',
    'rain': '🌧️',
    'crying_baby': '👶',
    'door_wood_knock': '🚪',
    'helicopter': '🚁',
    'rooster': '🐓',
    'sea_waves': '🌊',
    'sneezing': '🤧',
    'mouse_click': '🖱️',
    'chainsaw': '🪚',
    'pig': '🐷',
    'crackling_fire': '🔥',
    'clapping': '👏',
    'keyboard_typing': '⌨️',
    'siren': '🚨',
    'cow': '🐄',
    'crickets': '🦗',
    'breathing': '💨',
    'door_wood_creaks': '🚪',
    'car_horn': '📯',
    'frog': '🐸',
    'chirping_birds': '🐦',
    'coughing': '😷',
    'can_opening': '🥫',
    'engine': '🚗',
    'cat': '🐱',
    'water_drops': '💧',
    'footsteps': '👣',
    'washing_machine': '🧺',
    'train': '🚂',
    'hen': '🐔',
    'wind': '💨',
    'laughing': '😂',
    'vacuum_cleaner': '🧹',
    'church_bells': '🔔',
    'insects': '🦟',
    'pouring_water': '🚰',
    'brushing_teeth': '🪥',
    'clock_alarm': '⏰',
    'airplane': '✈️',
    'sheep': '🐑',
    'toilet_flush': '🚽',
    'snoring': '😴',
    'clock_tick': '⏱️',
    'fireworks': '🎆',
    'crow': '🐦‍⬛',
    'thunderstorm': '⛈️',
    'drinking_sipping': '🥤',
    'glass_breaking': '🔨',
    'hand_saw': '🪚',
}

SAMPLE_FILES = [
    '1-100210-B-36.wav',
    '1-172649-D-40.wav',
    '1-172649-E-40.wav',
    '1-172649-F-40.wav',
    '1-26806-A-1.wav',
    '1-30709-C-23.wav',
]


def emoji_for_class(class_name):
    return ESC50_EMOJI_MAP.get(class_name, DEFAULT_EMOJI)


def prediction_label(class_name):
    return f"{emoji_for_class(class_name)} {class_name.replace('_', ' ')}"


def confidence_text(confidence):
    return f"{confidence * 100:.1f}%"


def top_predictions(predictions, k=3):
    # already ordered by the service, highest confidence first
    return list(predictions[:k])
