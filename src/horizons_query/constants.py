"""Fixed constants: protocol defaults and velocity unit coefficients."""

# Site code meaning "the center body itself" (Horizons 500@ convention)
CENTER_SITE_CODE = 500

# Velocity units: coefficient in m/s
AU_PER_DAY = 1_731_456.9
KILOMETRE_PER_SECOND = 1000.0
KILOMETRE_PER_DAY = 86.4

# Epoch of rms-julian day numbers (day 0 is 2000-01-01 UTC)
JULIAN_EPOCH_YEAR = 2000
