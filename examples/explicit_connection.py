"""Posting and deleting through an explicitly constructed Connection."""

from __future__ import annotations

from graphquery.core import FQB, Connection
from graphquery.exceptions import GraphQueryBuilderError
from graphquery.transport import HttpMethod, MemoryTransport


def main() -> None:
    transport = MemoryTransport()
    transport.add_reply(HttpMethod.POST, "/me/feed", '{"id": "123_456"}')
    transport.add_reply(HttpMethod.DELETE, "/123_456", "true")
    connection = Connection(transport=transport)
    connection.set_app_credentials("123", "app-secret")

    fqb = FQB(connection=connection)
    created = fqb.object("me/feed").with_data({"message": "Hello from graphquery"}).post()
    print(f"Created post {created['id']}")

    deleted = fqb.object(str(created["id"])).delete()
    print(f"Deleted: {deleted['success']}")

    try:
        fqb.object("me/photos").post()
    except GraphQueryBuilderError as exc:
        print(f"No reply configured for me/photos: {exc.error_summary()}")

    for request in transport.requests:
        print(request.method, request.path, sorted(request.params))


if __name__ == "__main__":
    main()
