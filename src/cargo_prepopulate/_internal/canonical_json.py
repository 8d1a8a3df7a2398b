"""Canonical JSON serialization for scaffold reports.

`--report` files are meant to be kept next to the scaffold and compared
across runs (CI artifacts, `diff` after regenerating from a newer lock
file). Two runs over the same lock file must therefore give the same
bytes, whatever the dict insertion order inside the report models. Keys
are sorted, separators are fixed, and non-ASCII package names are kept
as UTF-8 rather than escaped.
"""

import json
from typing import Any


def canonical_dumps(obj: Any) -> str:
    """Serialize obj with sorted keys and compact separators.

    List order is kept as given; callers pass lists already in their
    deterministic (plan) order.
    """
    return json.dumps(
        obj,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False
    )
