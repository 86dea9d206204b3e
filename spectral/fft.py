"""
Radix-2 decimation-in-time FFT.

bit reversal -> log2(n) butterfly stages, all on a private copy of the input.

Twiddles are advanced by repeated multiplication (w <- w * w_L) instead of calling
cos/sin per sample. Butterflies work on separate real and imaginary float64
arrays, so each product and sum is rounded once, exactly as in a scalar loop.
Blocks within one stage are independent and run vectorised; stages are strictly
sequential.
"""

import math

import numpy as np

def is_power_of_two(n) -> bool:
    if isinstance(n, bool):
        return False
    try:
        if int(n) != n:
            return False
    except (TypeError, ValueError):
        return False
    n = int(n)
    return n > 0 and (n & (n - 1)) == 0

def bit_reverse(data: np.ndarray) -> np.ndarray:
    """
    In-place bit-reversal permutation using a reversed binary counter.

    j tracks reverse(i). Incrementing a reversed counter means clearing the
    leading run of set bits from the top, then setting the next one.
    """
    n = data.shape[0]
    j = 0
    for i in range(n):
        if i < j:
            data[i], data[j] = data[j], data[i]
        k = n >> 1
        while 0 < k <= j:
            j -= k
            k >>= 1
        j += k
    return data

def bit_reverse_indices(n: int) -> np.ndarray:
    return bit_reverse(np.arange(n, dtype=np.intp))

def stage_twiddles(length: int) -> np.ndarray:
    """
    w^j for j in [0, length//2), w = exp(-2*pi*i / length).
    Each entry is the previous one times w, as four separately rounded products.
    """
    half = length // 2
    angle = -2.0 * math.pi / length
    wlen_re = math.cos(angle)
    wlen_im = math.sin(angle)

    W = np.empty(half, dtype=np.complex128)
    w_re, w_im = 1.0, 0.0
    for j in range(half):
        W[j] = complex(w_re, w_im)
        w_re, w_im = w_re * wlen_re - w_im * wlen_im, w_re * wlen_im + w_im * wlen_re
    return W

def compute_transform(signal, n=None):
    """
    Forward DFT (negative exponent) of a power-of-two length signal.

    signal: (n,) array-like of complex samples, left untouched
    n: expected length, defaults to len(signal)
    returns: (n,) complex128 spectrum, or None on invalid input
    """
    if signal is None or np.ndim(signal) != 1:
        return None
    if n is None:
        n = len(signal)
    if not is_power_of_two(n):
        return None
    n = int(n)
    if len(signal) != n:
        return None

    try:
        out = np.array(signal, dtype=np.complex128, copy=True)
        bit_reverse(out)
        re = out.real.copy()
        im = out.imag.copy()
    except MemoryError:
        return None

    length = 2
    while length <= n:
        half = length // 2
        W = stage_twiddles(length)
        w_re = W.real
        w_im = W.imag
        # (n // length, length) views, writes land in re / im
        br = re.reshape(n // length, length)
        bi = im.reshape(n // length, length)

        ur = br[:, :half].copy()
        ui = bi[:, :half].copy()
        vr = br[:, half:]
        vi = bi[:, half:]

        # t = v * w on the float parts: numpy's complex multiply may fuse
        # multiply-add, which rounds differently from a scalar loop
        tr = vr * w_re - vi * w_im
        ti = vr * w_im + vi * w_re

        br[:, :half] = ur + tr
        bi[:, :half] = ui + ti
        br[:, half:] = ur - tr
        bi[:, half:] = ui - ti
        length <<= 1

    out.real = re
    out.imag = im
    return out
