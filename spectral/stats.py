from typing import NamedTuple

import numpy as np

class SpectralStatistics(NamedTuple):
    peak_magnitude: float
    total_energy: float
    average_energy: float
    peak_bin: int

def magnitudes(spectrum: np.ndarray) -> np.ndarray:
    re = spectrum.real
    im = spectrum.imag
    return np.sqrt(re * re + im * im)

def analyze(spectrum):
    """
    Summary statistics of a spectrum.

    peak_magnitude / peak_bin: largest |X[k]|, lowest k on ties
    total_energy: sum_k |X[k]|^2
    average_energy: total_energy / n
    """
    if spectrum is None or len(spectrum) == 0:
        return None
    spectrum = np.asarray(spectrum)
    n = spectrum.shape[0]

    mag = magnitudes(spectrum)
    # cumsum adds in bin order, same rounding as a running total
    total_energy = float(np.cumsum(mag * mag)[-1])
    peak_bin = int(np.argmax(mag))

    return SpectralStatistics(
        peak_magnitude=float(mag[peak_bin]),
        total_energy=total_energy,
        average_energy=total_energy / n,
        peak_bin=peak_bin,
    )
