"""
Fixed symbol alphabets and ideal constellations.

QAM alphabets are static lookup tables indexed by the integer value of a
symbol's bits (MSB first). The 8-QAM table is a star layout mixing unit
axis points with sqrt(2)-scaled diagonals rather than a rectangular grid.
"""

import numpy as np

_SQRT2 = np.sqrt(2.0)

QAM4_ALPHABET = np.array(
    [
        [-1.0, -1.0],  # 00
        [-1.0, 1.0],  # 01
        [1.0, -1.0],  # 10
        [1.0, 1.0],  # 11
    ]
)
QAM4_ALPHABET.setflags(write=False)

QAM8_ALPHABET = np.array(
    [
        [-1.0, 0.0],  # 000
        [-_SQRT2, _SQRT2],  # 001
        [0.0, -1.0],  # 010
        [-_SQRT2, -_SQRT2],  # 011
        [1.0, 0.0],  # 100
        [_SQRT2, _SQRT2],  # 101
        [0.0, 1.0],  # 110
        [_SQRT2, -_SQRT2],  # 111
    ]
)
QAM8_ALPHABET.setflags(write=False)

QAM_ALPHABETS = {
    4: QAM4_ALPHABET,
    8: QAM8_ALPHABET,
}

PSK_ORDERS = (2, 4)


def psk_constellation(order: int) -> np.ndarray:
    """Ideal M-PSK points on the unit circle.

    Args:
        order: Alphabet size M

    Returns:
        (M, 2) array with rows (cos(k * 2pi/M), sin(k * 2pi/M))
    """
    phase_step = 2 * np.pi / order
    angles = np.arange(order) * phase_step
    return np.column_stack((np.cos(angles), np.sin(angles)))


def bits_to_symbol_indices(bits: np.ndarray, bits_per_symbol: int) -> np.ndarray:
    """Group bits MSB-first into integer symbol indices.

    Args:
        bits: Bit sequence whose length is a multiple of ``bits_per_symbol``
        bits_per_symbol: Bits per symbol

    Returns:
        Integer array of length ``len(bits) // bits_per_symbol``
    """
    groups = np.asarray(bits, dtype=np.int64).reshape(-1, bits_per_symbol)
    weights = 1 << np.arange(bits_per_symbol - 1, -1, -1)
    return groups @ weights
