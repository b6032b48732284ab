"""Unit conversion factors for velocity (km/h, m/s) and distance (km, m)."""

from __future__ import annotations

# Length conversion: kilometers → meters
M_PER_KM: float = 1000.0

# Time conversion: hours → seconds
S_PER_HOUR: float = 3600.0

# Speed conversion: kilometers per hour → meters per second
KPH_TO_MPS: float = M_PER_KM / S_PER_HOUR
MPS_TO_KPH: float = S_PER_HOUR / M_PER_KM
