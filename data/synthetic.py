import numpy as np

# (frequency, amplitude) of the test tones, strongest first
TONES = ((5.0, 1.0), (10.0, 0.5), (20.0, 0.3))

def generate_signal(n: int):
    """
    Three-tone test signal, real valued, stored as complex128.

    x[i] = sin(2*pi*5*t) + 0.5*sin(2*pi*10*t) + 0.3*sin(2*pi*20*t),  t = i/n

    n does not need to be a power of two here.
    returns: (n,) complex128, or None if n <= 0
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n <= 0:
        return None
    n = int(n)

    try:
        t = np.arange(n, dtype=np.float64) / n
        signal = np.zeros(n, dtype=np.complex128)
        real = np.zeros(n, dtype=np.float64)
    except MemoryError:
        return None

    for freq, amp in TONES:
        real += amp * np.sin(2.0 * np.pi * freq * t)
    signal.real = real
    return signal
