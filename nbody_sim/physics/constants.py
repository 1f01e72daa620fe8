"""Physical constants and reference scales (SI units)."""

G = 6.67e-11  # Gravitational constant, m^3 kg^-1 s^-2
DAY = 60.0 * 60.0 * 24.0  # Default time step, s

SUN_MASS = 2.0e30  # kg
EARTH_MASS = 6.0e24  # kg
AU = 1.5e11  # m
