KB = 1.380649e-23  # J/K, Boltzmann constant
JOULE_PER_KELVIN_OVER_KB = 1.0 / KB  # (J/K)/k_B, dimensionless
DEBYE2_PER_ANGSTROM3 = 1e-19  # J, value of 1 D^2/A^3 (Gaussian units)


def assert_unit(actual: str, expected: str, what: str):
    if actual != expected:
        raise ValueError(f"Unit mismatch for {what}: got '{actual}', expected '{expected}'")
