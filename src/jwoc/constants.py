from __future__ import annotations

DEFAULT_BASE_URL = "https://jwoc-2025.onrender.com"
DEFAULT_CONFIG_DIR = "~/.config/jwoc"
DEFAULT_COOKIE_NAME = "connect.sid"
DEFAULT_HOME_PATH = "/"
DEFAULT_REDIRECT_DELAY_SECONDS = 3.0

IDENTITY_PATH = "/mentee-auth/mentee/user"
REGISTER_PATH = "/api/mentee/register"
GOOGLE_LOGIN_PATH = "/auth/google"
GITHUB_LOGIN_PATH = "/auth/github"

MSG_AUTHENTICATE_FIRST = "Please authenticate using Google or GitHub first."
MSG_IDENTITY_FETCH_FAILED = "Error fetching user. Please try again."
MSG_REGISTRATION_SUCCEEDED = "Registration successful!"
MSG_REGISTRATION_FALLBACK_ERROR = "An error occurred. Please try again."
