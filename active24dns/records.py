import logging
from cerberus import Validator
from active24dns.constants import TXT_RECORD_SCHEMA
from active24dns.errors import DecodeError


class TXTRecordCreate:
    def __init__(self, name, text, ttl):
        self.name = name
        self.text = text
        self.ttl = ttl

    def to_json(self):
        return {"name": self.name, "text": self.text, "ttl": self.ttl}


class TXTRecord:
    def __init__(self, name, ttl, text, hash_id, type):
        self.name = name
        self.ttl = ttl
        self.text = text
        self.hash_id = hash_id
        self.type = type

    @classmethod
    def from_json(cls, entry):
        return cls(
            entry["name"], entry["ttl"], entry["text"], entry["hashId"], entry["type"]
        )

    def __eq__(self, other):
        if not isinstance(other, TXTRecord):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self):
        return (
            f"TXTRecord(name={self.name!r}, ttl={self.ttl!r}, text={self.text!r}, "
            f"hash_id={self.hash_id!r}, type={self.type!r})"
        )


def decode_txt_records(entries, name):
    """
    Picks the TXT records named exactly `name` out of the heterogeneous
    record list returned by the records endpoint, keeping their order.
    """
    if not isinstance(entries, list):
        raise DecodeError(f"expected a list of DNS records, got {type(entries).__name__}")

    v = Validator(TXT_RECORD_SCHEMA, purge_unknown=True)
    records = []
    for entry in entries:
        if not isinstance(entry, dict):
            raise DecodeError(f"expected a DNS record object, got {entry!r}")
        if entry.get("type") != "TXT":
            continue
        if not v.validate(entry):
            raise DecodeError(f"can't decode TXT record {entry!r}: {v.errors}")
        record = TXTRecord.from_json(v.document)
        if record.name != name:
            logging.debug(f"Skipping TXT record {record.name}, not {name}.")
            continue
        if not record.hash_id:
            raise DecodeError(f"TXT record {record.name} has no hashId: {entry!r}")
        records.append(record)
    logging.debug(f"Found {len(records)} TXT record(s) named {name}.")
    return records
