import numpy as np
import matplotlib.pyplot as plt
from matplotlib.cm import ScalarMappable
from matplotlib.colors import Normalize
from scipy.ndimage import zoom

FEATURE_CMAP = 'RdBu_r'
MAX_DISPLAY_SIZE = 256


def shape_title(shape):
    return ' x '.join(str(dim) for dim in shape)


def waveform_title(waveform):
    return f"{waveform.duration:.2f}s * {waveform.sample_rate}Hz"


def _display_grid(values):
    grid = np.asarray(values, dtype=np.float32)
    if grid.ndim == 1:
        grid = grid[np.newaxis, :]

    # very large maps are shrunk before drawing, small ones are left alone
    if max(grid.shape) > MAX_DISPLAY_SIZE:
        factors = tuple(min(1.0, MAX_DISPLAY_SIZE / dim) for dim in grid.shape)
        grid = zoom(grid, factors, order=1)

    peak = np.abs(grid).max() if grid.size else 0.0
    if peak > 0:
        grid = grid / peak
    return grid


def plot_feature_map(values, title, spectrogram=False, internal=False):
    grid = _display_grid(values)
    figsize = (2.5, 1.6) if internal else (5, 3.5)

    fig, ax = plt.subplots(figsize=figsize)
    ax.imshow(
        grid,
        cmap=FEATURE_CMAP,
        vmin=-1,
        vmax=1,
        aspect='auto',
        origin='lower' if spectrogram else 'upper',
        interpolation='nearest',
    )
    ax.axis('off')
    ax.set_title(title, fontsize=7 if internal else 9)
    plt.tight_layout()
    return fig


def plot_waveform(values, title):
    samples = np.asarray(values, dtype=np.float32)

    fig, ax = plt.subplots(figsize=(5, 3.5))
    ax.plot(np.arange(len(samples)), samples, linewidth=0.6, color='#1f77b4')
    ax.axhline(0, color='gray', linewidth=0.5, alpha=0.6)
    ax.set_xlim(0, max(len(samples) - 1, 1))
    ax.set_xticks([])
    ax.grid(axis='y', alpha=0.3)
    ax.set_title(title, fontsize=9)
    plt.tight_layout()
    return fig


def plot_color_scale(width=200, height=16, vmin=-1, vmax=1):
    # width and height are in pixels at the default dpi
    dpi = 100
    fig = plt.figure(figsize=(width / dpi, (height + 20) / dpi), dpi=dpi)
    ax = fig.add_axes([0.05, 0.55, 0.9, 0.4])
    mappable = ScalarMappable(norm=Normalize(vmin=vmin, vmax=vmax), cmap=FEATURE_CMAP)
    fig.colorbar(mappable, cax=ax, orientation='horizontal',
                 ticks=[vmin, 0, vmax] if vmin < 0 < vmax else [vmin, vmax])
    ax.tick_params(labelsize=6, length=2)
    return fig
