# Headers
HEADER_USER_AGENT = "User-Agent"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_AUTHORIZATION = "Authorization"

# Client identity
USER_AGENT = "Unirest-Python/1.0"

# Content types
CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"
CONTENT_TYPE_OCTET_STREAM = "application/octet-stream"

# Methods
METHOD_GET = "GET"
METHOD_POST = "POST"

# Environment variables
ENV_TIMEOUT = "UNIREST_TIMEOUT"
ENV_FOLLOW_REDIRECTS = "UNIREST_FOLLOW_REDIRECTS"

# Logging
LOGGER_NAME = "unirest"
