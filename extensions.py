from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
import os

# Shared by the auth, checkout and seed routes; counters live in
# RATELIMIT_STORAGE_URL so they hold across workers when that is Redis.
limiter = Limiter(
    key_func=get_remote_address,
    storage_uri=os.getenv("RATELIMIT_STORAGE_URL", "memory://"),
    strategy="fixed-window",
    default_limits=[os.getenv("DEFAULT_RATE_LIMIT", "200 per hour")],
)
