import argparse
import logging
import os
import sys
import requests
from active24dns import Active24DNSProvider, Active24Error
from active24dns.constants import ENV_LOG_LEVEL


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="active24dns",
        description="Create or remove an ACME DNS-01 challenge record at Active24",
    )
    parser.add_argument(
        "--config",
        dest="config_file",
        type=str,
        help="optional YAML configuration file, environment variables take precedence",
    )
    parser.add_argument("action", choices=["present", "cleanup"])
    parser.add_argument("domain", type=str, help="domain the challenge was issued for")
    parser.add_argument("token", type=str, help="challenge token (unused)")
    parser.add_argument("key_auth", type=str, help="challenge key authorization")
    return parser.parse_args(argv)


def main(argv=None):
    # logging configuration
    log_level = os.environ.get(ENV_LOG_LEVEL)
    if not log_level:
        log_level = "INFO"
    logging.basicConfig(
        level=logging.getLevelName(log_level),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    args = parse_args(argv)

    try:
        provider = Active24DNSProvider.from_environment(args.config_file)
        if args.action == "present":
            provider.present(args.domain, args.token, args.key_auth)
        else:
            provider.cleanup(args.domain, args.token, args.key_auth)
    except (Active24Error, requests.exceptions.RequestException) as e:
        logging.error(f"{args.action} failed for {args.domain}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
