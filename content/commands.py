"""Save commands for resources that upsert by surrogate id.

Products, tours and footer links share one write path: a request that carries a
truthy ``id`` updates that row, anything else inserts a new one. The handler
turns the parsed body into an :class:`Insert` or :class:`Update` before it
reaches the store, so the branch can be exercised without HTTP.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class Insert:
    fields: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class Update:
    id: Any
    fields: dict[str, Any] = field(default_factory=dict)


Save = Union[Insert, Update]


def command_from_body(body: dict[str, Any], columns: tuple[str, ...]) -> Save:
    """Build a save command from a request body.

    Only ``columns`` are copied; missing ones become ``None``. Inserts default a
    falsy ``position`` to 0, updates write the value as given.
    """
    fields = {name: body.get(name) for name in columns}
    row_id = body.get("id")
    if row_id:
        return Update(id=row_id, fields=fields)
    if "position" in fields and not fields["position"]:
        fields["position"] = 0
    return Insert(fields=fields)
