ENV_API_KEY = "ACTIVE24_API_KEY"
ENV_API_URL = "ACTIVE24_API_URL"
ENV_LOG_LEVEL = "ACTIVE24_LOG_LEVEL"

DEFAULT_ENDPOINT_URL = "https://api.active24.com/"

CHALLENGE_LABEL = "_acme-challenge"
CHALLENGE_TTL = 300
HTTP_TIMEOUT = 3

CONFIGURATION_SCHEMA = {
    "api_key": {
        "type": "string",
        "required": True,
        "empty": False,
    },
    "api_url": {
        "type": "string",
        "empty": False,
        "default": DEFAULT_ENDPOINT_URL,
    },
}

# keys are case-sensitive, missing ones decode to zero values
TXT_RECORD_SCHEMA = {
    "name": {"type": "string", "nullable": True, "default": ""},
    "ttl": {"type": "integer", "nullable": True, "default": 0},
    "text": {"type": "string", "nullable": True, "default": ""},
    "hashId": {"type": "string", "nullable": True, "default": ""},
    "type": {"type": "string"},
}
