API_PREFIX = '/api'

DESK_BASE = f'{API_PREFIX}/desk'
DESK_AVAILABLE = f'{DESK_BASE}/available'

DESK_BOOKING_BASE = f'{API_PREFIX}/desk_booking'

HEALTH = '/health'
METRICS = '/metrics'
