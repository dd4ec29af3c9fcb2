GEOCODE_URL       = "https://maps.googleapis.com/maps/api/geocode/json"
TEXT_SEARCH_URL   = "https://maps.googleapis.com/maps/api/place/textsearch/json"
NEARBY_SEARCH_URL = "https://maps.googleapis.com/maps/api/place/nearbysearch/json"
PLACE_DETAILS_URL = "https://maps.googleapis.com/maps/api/place/details/json"

CACHE_NAME = "google_maps_cache"

# Geocoding API allows 50 requests per second
GEOCODE_DELAY = 0.1

NEARBY_MAX_RADIUS  = 50000  # meters
DEFAULT_AREA_RADIUS = 5000  # meters

PLACE_DETAIL_FIELDS = (
    "name",
    "formatted_address",
    "geometry",
    "rating",
    "user_ratings_total",
    "formatted_phone_number",
    "website",
    "types",
    "opening_hours",
    "photos",
)

# place type keyword -> facility label, checked in this order
FACILITY_NAMES = {
    "parking": "Parking",
    "shower":  "Showers",
    "locker":  "Locker Room",
    "pool":    "Pool",
    "sauna":   "Sauna",
    "spa":     "Spa",
    "cafe":    "Cafe",
    "wifi":    "WiFi",
}

REDACTED = "API_KEY_HIDDEN"
