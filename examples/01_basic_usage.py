"""
Basic Resource Usage Examples

Demonstrates GET, POST, PUT, DELETE through resources and status handling.
"""

from rest_resource import (
    Connection,
    ConnectionConfig,
    Resource,
    ResourceNotFound,
    json_format,
)


def basic_get_request():
    """Simple GET request."""
    print("\n=== Basic GET Request ===")

    api = Resource.from_url("https://jsonplaceholder.typicode.com", format=json_format())
    result = api["posts"]["1"].get()

    print(f"Status: {result.status_code}")
    print(f"Data: {result.value}")


def post_with_json():
    """POST request with JSON body."""
    print("\n=== POST with JSON ===")

    api = Resource.from_url("https://jsonplaceholder.typicode.com", format=json_format())
    result = api["posts"].post(data={"title": "My Post", "body": "Content", "userId": 1})

    print(f"Status: {result.status_code}")
    print(f"Created: {result.value}")


def put_and_delete():
    """PUT then DELETE the same resource."""
    print("\n=== PUT / DELETE ===")

    post = Resource.from_url("https://jsonplaceholder.typicode.com", format=json_format())["posts/1"]

    result = post.put(data={"id": 1, "title": "Updated", "body": "Updated", "userId": 1})
    print(f"Updated: {result.status_code}")

    result = post.delete()
    print(f"Deleted: {result.status_code}")


def with_query_params():
    """Default params on a resource, call-time params on top."""
    print("\n=== Query Params ===")

    api = Resource.from_url("https://jsonplaceholder.typicode.com", format=json_format())
    posts = api.descend("posts", {"userId": 1})

    result = posts.get({"_limit": 3})
    print(f"Found {len(result.value)} posts for user 1")


def status_errors():
    """Error statuses are carried by the Result, not raised by the call."""
    print("\n=== Status Errors ===")

    api = Resource.from_url("https://jsonplaceholder.typicode.com", format=json_format())
    result = api["posts"]["999999"].get()

    if not result.ok:
        print(f"Status: {result.status_code} ({type(result.error).__name__})")

    try:
        result.value
    except ResourceNotFound as e:
        print(f"Raised on access: {e}")


def with_connection_config():
    """Shared connection with timeout and custom headers."""
    print("\n=== Connection Config ===")

    config = ConnectionConfig.create(timeout=5, headers={"X-Custom-Header": "MyValue"})

    with Connection("https://httpbin.org", config=config) as conn:
        api = Resource(conn, format=json_format())
        result = api["headers"].get()
        print(f"Headers sent: {result.value['headers']}")


if __name__ == "__main__":
    print("=" * 50)
    print("REST Resource - Basic Usage Examples")
    print("=" * 50)

    try:
        basic_get_request()
        post_with_json()
        put_and_delete()
        with_query_params()
        status_errors()
        with_connection_config()

        print("\n" + "=" * 50)
        print("All examples completed successfully!")
        print("=" * 50)

    except Exception as e:
        print(f"\nError: {e}")
