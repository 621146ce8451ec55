"""Constants shared by the geometry helpers."""

# Mean Earth radius used by the Haversine formula
EARTH_RADIUS_KM = 6371

# Length of one degree of latitude, taken as constant everywhere
KM_PER_DEGREE_LAT = 111.32

# Below this cos(lat) a point is treated as sitting on a pole
POLE_COS_THRESHOLD = 1e-3

# Slack added to a search radius before bounding it, above the 0.005 km
# that 2-decimal rounding can hide
SEARCH_PAD_KM = 0.01
