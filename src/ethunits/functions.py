from collections.abc import Hashable, Iterable, Mapping
from typing import Any


def array_to_map_with_id[T](items: Iterable[T], id_key: str) -> dict[Hashable, T]:
    """
    Index a sequence of mappings or objects by the value found at `id_key`, e.g.
    `[{"id": 1, ...}, {"id": 2, ...}]` -> `{1: {"id": 1, ...}, 2: {"id": 2, ...}}`.

    Later items replace earlier items with the same ID.
    """

    def _get_id(item: Any) -> Hashable:
        return item[id_key] if isinstance(item, Mapping) else getattr(item, id_key)

    return {_get_id(item): item for item in items}
