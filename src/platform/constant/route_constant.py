# API Route Constants

# Base API
API_BASE = '/api'

# Booking routes
BOOKING_BASE = f'{API_BASE}/bookings'
BOOKING_CREATE = BOOKING_BASE
BOOKING_LIST_BY_USER = f'{BOOKING_BASE}/{{user_id}}'
BOOKING_RAW_LIST = '/bookings'

# Payment routes
PAYMENT_CREATE = f'{API_BASE}/payment'

# Restaurant routes
RESTAURANT_BASE = f'{API_BASE}/restaurants'
RESTAURANT_ADD = f'{RESTAURANT_BASE}/add'
RESTAURANT_GET = '/restaurant/{restaurant_id}'

# User routes
USER_AVAILABILITY = f'{API_BASE}/userAvailability/{{user_id}}/availability'

# Realtime
REALTIME_WS = '/ws'

# System routes
HEALTH = '/health'
METRICS = '/metrics'
