# API Route Constants

# Base API
API_BASE = '/api'

# Auth routes
AUTH_BASE = f'{API_BASE}/auth'
AUTH_REGISTER = f'{AUTH_BASE}/register'
AUTH_VERIFY_EMAIL = f'{AUTH_BASE}/verify-email'
AUTH_LOGIN = f'{AUTH_BASE}/login'
AUTH_LOGOUT = f'{AUTH_BASE}/logout'
AUTH_REFRESH = f'{AUTH_BASE}/refresh'
AUTH_FORGOT_PASSWORD = f'{AUTH_BASE}/forgot-password'
AUTH_RESET_PASSWORD = f'{AUTH_BASE}/reset-password'

# User routes
USER_BASE = f'{API_BASE}/users'
USER_CURRENT = f'{USER_BASE}/current-user'

# Venue routes
VENUE_BASE = f'{API_BASE}/venues'
VENUE_CREATE = VENUE_BASE
VENUE_LIST = VENUE_BASE
VENUE_GET = f'{VENUE_BASE}/{{venue_id}}'
VENUE_UPDATE = f'{VENUE_BASE}/{{venue_id}}'
VENUE_DELETE = f'{VENUE_BASE}/{{venue_id}}'

# Reservation routes
RESERVATION_BASE = f'{API_BASE}/reservations'
RESERVATION_CREATE = RESERVATION_BASE
RESERVATION_MY_LIST = RESERVATION_BASE
RESERVATION_ADMIN_LIST = f'{RESERVATION_BASE}/admin'
RESERVATION_DELETE = f'{RESERVATION_BASE}/{{booking_id}}'

# Cookie names
ACCESS_TOKEN_COOKIE = 'accessToken'
REFRESH_TOKEN_COOKIE = 'refreshToken'
