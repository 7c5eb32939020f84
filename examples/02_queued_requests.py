"""
Queued Requests Examples

Requests submitted with `on_complete` are collected and executed
concurrently when the connection's queue is drained.
"""

from rest_resource import Connection, Resource, json_format


def batch_of_requests():
    """Three GETs in flight together."""
    print("\n=== Batch ===")

    api = Resource.from_url(
        "https://jsonplaceholder.typicode.com",
        format=json_format(),
        connection_factory=Connection.queued,
    )

    def show(result):
        if result.ok:
            print(f"  {result.status_code}: {result.value['title'][:40]}")
        else:
            print(f"  failed: {result.error}")

    pending = [api["posts"][str(i)].get(on_complete=show) for i in (1, 2, 3)]
    print(f"Queued: {api.connection.transport.pending}")

    api.run()
    print(f"Done: {all(p.done for p in pending)}")


def wait_for_one():
    """PendingRequest.wait() drains the queue."""
    print("\n=== Wait ===")

    with Connection.queued("https://jsonplaceholder.typicode.com") as conn:
        api = Resource(conn, format=json_format())
        pending = api["users"]["1"].get(on_complete=lambda result: None)
        print(f"User: {pending.wait().value['name']}")


if __name__ == "__main__":
    print("=" * 50)
    print("REST Resource - Queued Requests")
    print("=" * 50)

    try:
        batch_of_requests()
        wait_for_one()
    except Exception as e:
        print(f"\nError: {e}")
