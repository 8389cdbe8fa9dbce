"""Basic usage example using the convenience API."""

from __future__ import annotations

import os

import graphquery
from graphquery.renderers import render_query


def main() -> None:
    graphquery.set_access_token(os.environ.get("FACEBOOK_ACCESS_TOKEN", "user-access-token"))

    comments = graphquery.edge("comments", ["from", "message"])
    photos = graphquery.edge("photos", ["id", "source", comments])
    me = graphquery.fqb("me").fields("id", "name", photos).limit(5)

    print(render_query(me))

    try:
        profile = me.get()
    except graphquery.GraphQueryBuilderError as exc:
        print(f"Request failed: {exc.error_summary()}")
        for permission in exc.detect_required_permissions():
            print(f"Ask the user for: {permission}")
        return

    print(f"Hello, {profile['name']}")


if __name__ == "__main__":
    main()
