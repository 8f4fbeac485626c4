from active24dns.errors import Active24Error
from active24dns.config import Config, load_config
from active24dns.provider import Active24DNSProvider
