import html
import logging

import streamlit as st
import matplotlib.pyplot as plt

import inference_client
from config import load_settings
from esc50 import SAMPLE_FILES, confidence_text, prediction_label, top_predictions
from layer_hierarchy import internal_title, sorted_internals
from page_state import PageState, Status, run_cycle
from plots import plot_color_scale, plot_feature_map, plot_waveform, shape_title, waveform_title

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(name)s - %(message)s")
logger = logging.getLogger(__name__)

LAYERS_PER_ROW = 5

st.set_page_config(page_title="CNN Audio Visualizer", layout="wide")

st.markdown("""
<style>
    .main-header {font-size: 2.6rem; font-weight: 300; text-align: center; margin-bottom: 0.5rem;}
    .subtitle {font-size: 1.05rem; color: #666; text-align: center; margin-bottom: 2rem;}
    .file-badge {display: inline-block; padding: 0.2rem 0.7rem; border-radius: 8px;
                 background-color: #f0f2f6; color: #333; font-size: 0.85rem;}
    .layer-name {font-weight: 600; margin-bottom: 0.3rem;}
    .stButton>button {border-radius: 8px;}
</style>
""", unsafe_allow_html=True)


@st.cache_resource
def get_settings():
    settings = load_settings()
    if not settings.inference_url:
        logger.warning("MODAL_INFERENCE_URL is not set, inference requests will fail")
    return settings


def show_figure(fig):
    st.pyplot(fig)
    plt.close(fig)


def queue_upload():
    uploaded = st.session_state.uploaded_file
    if uploaded is not None:
        st.session_state.pending = ('upload', uploaded.name, uploaded)


def queue_sample(sample):
    st.session_state.pending = ('sample', sample, None)


def analyse_pending(state, settings):
    kind, name, uploaded = st.session_state.pending

    def load_audio():
        if kind == 'upload':
            return inference_client.read_audio_file(uploaded)
        return inference_client.fetch_sample(
            name,
            base_url=settings.samples_url,
            samples_dir=settings.samples_dir,
            timeout=settings.inference_timeout,
        )

    with st.spinner("Analysing..."):
        try:
            run_cycle(state, name, load_audio, settings.inference_url, timeout=settings.inference_timeout)
        finally:
            st.session_state.pending = None


def render_predictions(response):
    st.subheader("Top Predictions")
    for i, pred in enumerate(top_predictions(response.predictions)):
        col1, col2 = st.columns([5, 1])
        with col1:
            label = prediction_label(pred.label)
            st.markdown(f"**{label}**" if i == 0 else label)
        with col2:
            st.markdown(f"`{confidence_text(pred.confidence)}`")
        st.progress(min(max(pred.confidence, 0.0), 1.0))


def render_inputs(response):
    col1, col2 = st.columns(2)
    with col1:
        st.subheader("Input Spectrogram")
        spectrogram = response.input_spectrogram
        show_figure(plot_feature_map(spectrogram.values, shape_title(spectrogram.shape), spectrogram=True))
        show_figure(plot_color_scale(200, 16, -1, 1))
    with col2:
        st.subheader("Audio Waveform")
        show_figure(plot_waveform(response.waveform.values, waveform_title(response.waveform)))


def render_layers(hierarchy):
    st.subheader("Convolutional Layer Outputs")
    main = hierarchy.main
    for row_start in range(0, len(main), LAYERS_PER_ROW):
        columns = st.columns(LAYERS_PER_ROW)
        for col, (name, data) in zip(columns, main[row_start:row_start + LAYERS_PER_ROW]):
            with col:
                st.markdown(f'<p class="layer-name">{html.escape(name)}</p>', unsafe_allow_html=True)
                show_figure(plot_feature_map(data.values, shape_title(data.shape)))

                children = sorted_internals(hierarchy, name)
                if children:
                    with st.expander(f"{len(children)} internal layers"):
                        for child_name, child_data in children:
                            show_figure(plot_feature_map(
                                child_data.values, internal_title(child_name, name), internal=True))
    show_figure(plot_color_scale(200, 16, -1, 1))


for key, default in [
    ('page', PageState()),
    ('pending', None),
]:
    if key not in st.session_state:
        st.session_state[key] = default

settings = get_settings()
state = st.session_state.page

st.markdown('<h1 class="main-header">CNN Audio Visualizer</h1>', unsafe_allow_html=True)
st.markdown('<p class="subtitle">Upload a WAV file to see the model\'s predictions and feature maps</p>',
            unsafe_allow_html=True)

busy = st.session_state.pending is not None

st.file_uploader(
    "Choose File",
    type=['wav'],
    key='uploaded_file',
    on_change=queue_upload,
    disabled=busy,
)

st.caption("Or try one of our sample files:")
sample_columns = st.columns(len(SAMPLE_FILES))
for col, sample in zip(sample_columns, SAMPLE_FILES):
    with col:
        st.button(sample, key=f"sample-{sample}", on_click=queue_sample, args=(sample,), disabled=busy)

if busy:
    analyse_pending(state, settings)
    # redraw with the controls enabled again
    st.rerun()

if state.file_name:
    st.markdown(f'<span class="file-badge">{html.escape(state.file_name)}</span>', unsafe_allow_html=True)

if state.status is Status.ERROR:
    st.error(f"Error: {state.error}")
elif state.status is Status.SUCCESS:
    st.divider()
    render_predictions(state.response)
    st.divider()
    render_inputs(state.response)
    st.divider()
    render_layers(state.hierarchy)

st.sidebar.markdown("## Inference Endpoint")
if settings.inference_url:
    st.sidebar.code(settings.inference_url, language=None)
else:
    st.sidebar.warning("MODAL_INFERENCE_URL is not set")
st.sidebar.markdown("---")
st.sidebar.markdown("## Last Request")
st.sidebar.metric("Requests this session", state.generation)
if state.status is Status.SUCCESS:
    st.sidebar.metric("Layers returned", len(state.response.visualization))
