"""Simulation constants.

The initial-condition formulas assume these values; other values still
integrate correctly but no longer produce stable-looking disks.
"""

# Δt per update. Smaller is more accurate and more expensive.
TIME_STEP = 0.005

# Gravitational constant in simulation units.
G = 0.001
