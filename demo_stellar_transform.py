#!/usr/bin/env python3
"""
Demo: Edit the Stellar transformations of a sensor parser config.

Calls the PARSER_STELLAR_TRANSFORM functions the way the shell does.
"""

import json

from sensorcfg.functions import default_registry
from sensorcfg.serialization import config_from_json, config_to_yaml
from sensorcfg.settings import setup_logging


SQUID_CONFIG = json.dumps({
    "parserClassName": "org.apache.metron.parsers.GrokParser",
    "sensorTopic": "squid",
    "parserConfig": {"grokPath": "/patterns/squid", "patternLabel": "SQUID_DELIMITED"},
    "fieldTransformations": [
        {"input": ["protocol"], "transformation": "IP_PROTOCOL"},
    ],
})


def main():
    setup_logging()

    print("=" * 80)
    print("PARSER_STELLAR_TRANSFORM DEMO")
    print("=" * 80)

    config = default_registry.call(
        "PARSER_STELLAR_TRANSFORM.ADD",
        [SQUID_CONFIG, {"full_hostname": "URL_TO_HOST(url)", "domain_without_subdomains": "DOMAIN_REMOVE_SUBDOMAINS(full_hostname)"}],
    )
    print("\nAfter ADD:")
    print("-" * 80)
    print(config)

    print("\nPRINT:")
    print("-" * 80)
    print(default_registry.call("PARSER_STELLAR_TRANSFORM.PRINT", [config]))

    print("\nAs YAML:")
    print("-" * 80)
    print(config_to_yaml(config_from_json(config)))

    config = default_registry.call(
        "PARSER_STELLAR_TRANSFORM.REMOVE",
        [config, ["full_hostname", "domain_without_subdomains"]],
    )
    print("\nAfter REMOVE (entry pruned):")
    print("-" * 80)
    print(config)


if __name__ == "__main__":
    main()
