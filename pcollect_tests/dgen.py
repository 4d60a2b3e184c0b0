"""
seeded record generator for test fixtures.

a schema is a dict of field name -> spec, where a spec is one of
  - a faker provider name, e.g. 'word'
  - a (provider, kwargs) tuple, e.g. ('pyint', {'min_value': 1, 'max_value': 9})
  - {'choice': [...]} to pick one of the listed values
  - anything else, used literally
"""

from typing import Any, Dict, Optional

import numpy as np
from faker import Faker

from pcollect import from_iterable, Collection


class Generator:
    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _provider(self, name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{name}'")
        return method(**(kwargs or {}))

    def field(self, spec: Any) -> Any:
        if isinstance(spec, dict) and 'choice' in spec:
            # numpy hands back numpy scalars, tests want plain python values
            picked = self._rng.choice(spec['choice'])
            return picked.item() if hasattr(picked, 'item') else picked
        if isinstance(spec, tuple) and len(spec) == 2 and isinstance(spec[1], dict):
            return self._provider(spec[0], spec[1])
        if isinstance(spec, str) and hasattr(self._fake, spec):
            return self._provider(spec)
        return spec

    def record(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        return {key: self.field(spec) for key, spec in schema.items()}


class _SchemaProvider:
    def __init__(self, schema: Dict[str, Any], seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Collection[Dict[str, Any]]:
        return from_iterable(self._generator.record(self._schema) for _ in range(count))


def from_schema(schema: Dict[str, Any], seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
