"""
Shared services.

- http.py      - requests session with default timeout, no automatic retries
- ratelimit.py - one lock-guarded limiter shared by every external call
"""
