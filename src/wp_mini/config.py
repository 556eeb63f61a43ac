"""Configuration constants for the wp-mini client."""

# ============================================
# Transport
# ============================================
DEFAULT_BASE_URL = "https://www.wattpad.com"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/125.0.0.0 Safari/537.36"
)
DEFAULT_TIMEOUT = 30.0  # seconds

# ============================================
# Session
# ============================================
LOGIN_PATH = "/auth/login"
LOGIN_PARAMS = (("_data", "routes/auth.login"),)
LOGOUT_PATH = "/logout"

# ============================================
# Resources
# ============================================
USER_PATH = "/api/v3/users/{username}"
STORY_PATH = "/api/v3/stories/{story_id}"
PART_PATH = "/api/v3/story_parts/{part_id}"

# ============================================
# Content
# ============================================
CONTENT_PATH = "/apiv2/"
CONTENT_MODE_STORYTEXT = "storytext"
CONTENT_OUTPUT_JSON = "json"
CONTENT_OUTPUT_ZIP = "zip"
