"""compile and get subcommand implementations."""

from __future__ import annotations

import json
import sys

from ..core import FQB
from ..exceptions import GraphQueryBuilderError, ResponseParseError
from ..renderers import render_query


def run_compile(builder: FQB, *, tree: bool) -> int:
    print(builder.get_query_url())
    if tree:
        print()
        print(render_query(builder))
    return 0


def run_get(builder: FQB, *, access_token: str | None) -> int:
    if access_token:
        builder.connection.set_access_token(access_token)

    try:
        response = builder.get()
    except GraphQueryBuilderError as exc:
        print(f"Error: {exc.error_summary()} {exc.message}", file=sys.stderr)
        for permission in exc.detect_required_permissions():
            print(f"Required permission: {permission}", file=sys.stderr)
        return 1
    except ResponseParseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(response.to_dict(), ensure_ascii=True, sort_keys=True, indent=2))
    return 0
