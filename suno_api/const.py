"""Suno API 클라이언트 상수."""

from __future__ import annotations

# ---------------------------------------------------------------------------
# URL
# ---------------------------------------------------------------------------

BASE_URL = "https://studio-api.suno.ai"
CLERK_BASE_URL = "https://clerk.suno.ai"

GENERATE_PATH = "/api/generate/v2/"
FEED_PATH = "/api/feed/"
BILLING_PATH = "/api/billing/info/"

# ---------------------------------------------------------------------------
# Clerk 인증
# ---------------------------------------------------------------------------

CLERK_SESSION_VERSION = "4.70.5"
CLERK_TOKEN_VERSION = "4.70.0"

CLERK_SESSION_URL = f"{CLERK_BASE_URL}/v1/client?_clerk_js_version={CLERK_SESSION_VERSION}"
CLERK_TOKEN_URL = (
    CLERK_BASE_URL
    + "/v1/client/sessions/{sid}/tokens/api?_clerk_js_version="
    + CLERK_TOKEN_VERSION
)

COOKIE_ENV_VAR = "SUNO_COOKIE"

# ---------------------------------------------------------------------------
# 생성 / 폴링
# ---------------------------------------------------------------------------

DEFAULT_MODEL = "chirp-v3-0"

# 요청별 타임아웃 (초)
GENERATE_TIMEOUT = 10
FEED_TIMEOUT = 3
BILLING_TIMEOUT = 30
CLERK_TIMEOUT = 15

# 폴링 루프 (초)
POLL_TIMEOUT = 100
POLL_INITIAL_DELAY = (5, 5)
POLL_INTERVAL = (3, 6)
KEEPALIVE_DELAY = (1, 2)

TERMINAL_STATUSES = frozenset({"complete", "streaming"})

# ---------------------------------------------------------------------------
# User-Agent (macOS Chrome)
# ---------------------------------------------------------------------------

USER_AGENTS = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/130.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/129.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_5) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/128.0.0.0 Safari/537.36",
)
