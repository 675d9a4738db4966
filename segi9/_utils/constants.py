# Plugin identity
PLUGIN_NAME = "Segi9"
ITEM_KEY = "segi9.http"
USER_AGENT_PRODUCT = "Zabbix-Plugin-Segi9"

# Environment variables
ENV_LOG_FILE = "SEGI9_LOG_FILE"
ENV_SSL_CERT_FILE = "SSL_CERT_FILE"
ENV_REQUESTS_CA_BUNDLE = "REQUESTS_CA_BUNDLE"
ENV_SSL_CERT_DIR = "SSL_CERT_DIR"

# Configuration bounds, in seconds
DEFAULT_TIMEOUT = 10
MIN_TIMEOUT = 1
MAX_TIMEOUT = 30

MAX_REDIRECTS = 10

# Headers
HEADER_USER_AGENT = "User-Agent"
HEADER_ACCEPT = "Accept"
HEADER_AUTHORIZATION = "Authorization"
