"""
Environment Configuration Example

Reads REST_CLIENT_* variables (or a .env file):

    REST_CLIENT_SITE=https://jsonplaceholder.typicode.com
    REST_CLIENT_TIMEOUT=10
    REST_CLIENT_LOG_ENABLED=true
    REST_CLIENT_LOG_FORMAT=json
"""

import os

from rest_resource import Resource, connection_from_env, json_format, load_from_env


def show_config():
    print("\n=== Loaded Config ===")
    config = load_from_env()
    print(f"timeout={config.timeout} proxy={config.proxy} verify={config.ssl.verify}")
    print(f"logging={config.logging}")


def request_from_env():
    print("\n=== Connection From Env ===")
    os.environ.setdefault("REST_CLIENT_SITE", "https://jsonplaceholder.typicode.com")
    os.environ.setdefault("REST_CLIENT_LOG_ENABLED", "true")

    with connection_from_env() as conn:
        result = Resource(conn, format=json_format())["todos"]["1"].get()
        print(f"Todo: {result.value}")


if __name__ == "__main__":
    show_config()
    request_from_env()
