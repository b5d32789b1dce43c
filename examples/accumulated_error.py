import numpy as np

import floatcmp
from floatcmp import double_cmp, float_cmp
from floatcmp import array


def harmonic_sum(n, dtype):
    """Sum 1/k forward and backward, the two results differ by rounding."""
    terms = np.array([1.0 / k for k in range(1, n + 1)], dtype=dtype)
    forward = dtype(0.0)
    for term in terms:
        forward += term
    backward = dtype(0.0)
    for term in terms[::-1]:
        backward += term
    return forward, backward


if __name__ == '__main__':
    floatcmp.configure({
        'logging': {
            'level': 'DEBUG',
            'stdout': True,
        },
    })

    forward, backward = harmonic_sum(100, np.float32)
    print('binary32', forward == backward, float_cmp(forward) == backward)

    forward, backward = harmonic_sum(100, np.float64)
    print('binary64', forward == backward, double_cmp(forward) == backward)

    samples = np.linspace(0.0, 1.0, 11)
    print(array.almost_equal(samples * 3.0 / 3.0, samples))
