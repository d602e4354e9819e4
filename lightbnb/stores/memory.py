"""
Non-persistent property collection used when PROPERTY_STORE is "memory".
"""

from typing import Any, Dict, Mapping, Optional
import asyncio
import json
import logging

from lightbnb.utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class InMemoryPropertyStore:
    """
    Property records keyed by sequential integer id.
    Nothing written here reaches the database or survives a restart.
    """

    def __init__(self, properties: Optional[Mapping[Any, Mapping[str, Any]]] = None):
        self.properties: Dict[int, Dict[str, Any]] = {}
        self._lock = asyncio.Lock()
        for key, record in (properties or {}).items():
            self.properties[int(key)] = dict(record)

    @classmethod
    def from_json_file(cls, path: str) -> "InMemoryPropertyStore":
        """
        Load seed properties from a JSON fixture.

        The file holds either an object keyed by property id or a list of
        records, which are numbered from 1 in file order.

        Raises:
            ConfigurationError: If the file cannot be read or has the wrong shape
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot load properties seed file {path}: {e}") from e

        if isinstance(data, list):
            data = {index: record for index, record in enumerate(data, start=1)}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Properties seed file {path} must hold an object or a list")

        properties = {}
        for key, record in data.items():
            try:
                property_id = int(key)
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"Properties seed file {path} has a non-numeric id {key!r}") from e
            if not isinstance(record, dict):
                raise ConfigurationError(f"Property {key!r} in seed file {path} is not an object")
            properties[property_id] = record

        store = cls(properties)
        logger.info(f"Loaded {len(store)} seed properties from {path}")
        return store

    def __len__(self) -> int:
        return len(self.properties)

    def get(self, property_id: int) -> Optional[Dict[str, Any]]:
        return self.properties.get(property_id)

    async def add(self, property_data: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Store a copy of the property under the next id and return it.

        The next id is the collection size plus one, moved forward past any
        id already taken by seed data.
        """
        async with self._lock:
            property_id = len(self.properties) + 1
            while property_id in self.properties:
                property_id += 1
            record = {**property_data, "id": property_id}
            self.properties[property_id] = record

        logger.info(f"Stored property in memory (ID: {property_id})")
        return record
