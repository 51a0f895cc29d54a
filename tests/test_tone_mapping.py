import math

import numpy as np
import pytest

from pathtracer.renderer.tone_mapping import gamma_quantize


def reference_channel(value, samples):
    scaled = math.sqrt(max(value / samples, 0.0))
    return int(256 * min(scaled, 0.999))


@pytest.mark.parametrize(
    "value, samples, expected",
    [
        (0.0, 1, 0),
        (1.0, 1, 255),
        (4.0, 4, 255),
        (9.0, 1, 255),
        (0.25, 1, 128),
        (1.0, 4, 128),
        (-0.5, 1, 0),
    ],
)
def test_single_channel(value, samples, expected):
    accumulated = np.full((1, 1, 3), value, dtype=np.float64)
    pixels = gamma_quantize(accumulated, samples)
    assert pixels.dtype == np.uint8
    assert pixels.tolist() == [[[expected] * 3]]


def test_matches_reference_quantization():
    rng = np.random.default_rng(7)
    samples = 7
    accumulated = rng.uniform(0.0, 1.2 * samples, size=(5, 6, 3))
    pixels = gamma_quantize(accumulated, samples)
    expected = [
        [[reference_channel(c, samples) for c in pixel] for pixel in row]
        for row in accumulated.tolist()
    ]
    assert pixels.tolist() == expected


def test_output_is_in_byte_range():
    accumulated = np.linspace(0.0, 10.0, 4 * 4 * 3).reshape(4, 4, 3)
    pixels = gamma_quantize(accumulated, 3)
    assert pixels.min() >= 0
    assert pixels.max() <= 255


def test_rejects_bad_input():
    with pytest.raises(ValueError):
        gamma_quantize(np.zeros((2, 2, 3)), 0)
    with pytest.raises(ValueError):
        gamma_quantize(np.zeros((2, 2)), 1)
