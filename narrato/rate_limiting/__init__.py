from narrato.rate_limiting.exceptions import RateLimitedError
from narrato.rate_limiting.rate_limiter import FixedWindowRateLimiter

__all__ = ["FixedWindowRateLimiter", "RateLimitedError"]
