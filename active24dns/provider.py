import logging
import requests
from active24dns.config import load_config
from active24dns.constants import CHALLENGE_TTL
from active24dns.domain import extract_second_level_domain, get_challenge_record, un_fqdn
from active24dns.errors import (
    AuthenticationError,
    DecodeError,
    NotAuthorizedError,
    RateLimitedError,
    RecordNotFoundError,
    ServerError,
    UnhandledResponseError,
    ValidationError,
)
from active24dns.records import TXTRecordCreate, decode_txt_records
from active24dns.transport import HTTPTransport

CREATE_ERRORS = {
    requests.codes.bad_request: (ValidationError, "validation error, check your payload"),
    requests.codes.unauthorized: (AuthenticationError, "authentication was not successful"),
    requests.codes.forbidden: (NotAuthorizedError, "not authorized"),
    requests.codes.too_many_requests: (RateLimitedError, "rate limited, try again later"),
    requests.codes.internal_server_error: (ServerError, "internal server error, try again later"),
}

LIST_ERRORS = {
    requests.codes.unauthorized: (AuthenticationError, "authentication was not successful"),
    requests.codes.forbidden: (NotAuthorizedError, "not authorized"),
    requests.codes.too_many_requests: (RateLimitedError, "rate limited, try again later"),
    requests.codes.internal_server_error: (ServerError, "internal server error, try again later"),
}

DELETE_ERRORS = {
    requests.codes.bad_request: (RecordNotFoundError, "DNS record to delete not found"),
    requests.codes.unauthorized: (AuthenticationError, "invalid token"),
    requests.codes.forbidden: (NotAuthorizedError, "not allowed to delete that record"),
    requests.codes.too_many_requests: (RateLimitedError, "rate limited, too many requests"),
    requests.codes.internal_server_error: (ServerError, "server side error"),
}


def check_response(r, expected_status, errors):
    if r.status_code == expected_status:
        return
    logging.debug(f"Active24 API responded `{r.status_code} {r.text}`.")
    if r.status_code in errors:
        error_class, message = errors[r.status_code]
        raise error_class(message, r.status_code)
    raise UnhandledResponseError(r)


class Active24DNSProvider:
    """
    Creates and removes the DNS-01 challenge TXT record through the Active24 API.
    """

    def __init__(self, config, transport=None):
        logging.debug("Instanciating Active24DNSProvider class.")
        self.config = config
        self.transport = transport if transport is not None else HTTPTransport()

    @classmethod
    def from_environment(cls, config_file=None, environ=None, transport=None):
        return cls(load_config(config_file, environ), transport)

    def url(self, *parts):
        return "/".join([self.config.endpoint.rstrip("/"), "dns", *parts, "v1"])

    def request(self, method, url, json=None):
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.config.api_key}",
        }
        return self.transport.send(
            requests.Request(method, url, headers=headers, json=json)
        )

    def create_txt_record(self, domain, record):
        url = self.url(domain, "txt")
        logging.info(
            f"Prepared TXT DNS record call: {url} with payload: {record.to_json()}"
        )
        r = self.request("POST", url, json=record.to_json())
        check_response(r, requests.codes.no_content, CREATE_ERRORS)

    def delete_txt_record(self, domain, hash_id):
        if not hash_id:
            raise DecodeError(f"can't delete a DNS record of {domain} without hashId")
        logging.debug(f"Deleting record {hash_id} from {domain}...")
        r = self.request("DELETE", self.url(domain, hash_id))
        check_response(r, requests.codes.no_content, DELETE_ERRORS)
        logging.debug(f"Deleting record {hash_id} from {domain}...done.")

    def get_domain_hash_ids(self, domain, name):
        logging.debug(f"Getting hash ids of TXT records named {name} in {domain}...")
        r = self.request("GET", self.url(domain, "records"))
        check_response(r, requests.codes.ok, LIST_ERRORS)
        try:
            entries = r.json()
        except ValueError as e:
            raise DecodeError(f"can't decode DNS records of {domain}: {e}") from e
        hash_ids = [record.hash_id for record in decode_txt_records(entries, name)]
        logging.debug(
            f"Getting hash ids of TXT records named {name} in {domain}...done: {hash_ids}"
        )
        return hash_ids

    def present(self, domain, token, key_auth):
        fqdn, value = get_challenge_record(domain, key_auth)
        sld = extract_second_level_domain(domain)
        logging.info(f"Presenting challenge record {fqdn} in {sld}")
        self.create_txt_record(sld, TXTRecordCreate(un_fqdn(fqdn), value, CHALLENGE_TTL))
        logging.info(f'DNS Record "{un_fqdn(fqdn)} {CHALLENGE_TTL} IN TXT" successfully created.')

    def cleanup(self, domain, token, key_auth):
        fqdn, _ = get_challenge_record(domain, key_auth)
        sld = extract_second_level_domain(domain)
        logging.info(f"Cleaning up challenge record {fqdn} in {sld}")
        hash_ids = self.get_domain_hash_ids(sld, un_fqdn(fqdn))
        if not hash_ids:
            logging.info(f"No TXT record named {un_fqdn(fqdn)} found, nothing to do.")
        for hash_id in hash_ids:
            self.delete_txt_record(sld, hash_id)
        logging.info(f"Cleanup of {un_fqdn(fqdn)} finished, {len(hash_ids)} record(s) deleted.")
