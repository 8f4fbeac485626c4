import base64
import hashlib
import logging
from active24dns.constants import CHALLENGE_LABEL
from active24dns.errors import DomainParseError


def to_fqdn(name):
    if name.endswith("."):
        return name
    return f"{name}."


def un_fqdn(name):
    if name.endswith("."):
        return name[:-1]
    return name


def extract_second_level_domain(domain):
    """
    `i.am.nested.domain.example.com` -> `example.com`
    """
    labels = domain.split(".")
    if len(labels) < 2 or not labels[-1] or not labels[-2]:
        raise DomainParseError("can't parse second-level domain")
    return ".".join(labels[-2:])


def get_challenge_record(domain, key_auth):
    """
    Returns the DNS-01 record fqdn and its TXT value for `domain`.
    The value is the unpadded base64url SHA-256 digest of the key authorization.
    """
    fqdn = f"{CHALLENGE_LABEL}.{to_fqdn(domain)}"
    digest = hashlib.sha256(key_auth.encode("utf-8")).digest()
    value = base64.urlsafe_b64encode(digest).decode("ascii").rstrip("=")
    logging.debug(f"Challenge record for {domain} is {fqdn}")
    return fqdn, value
