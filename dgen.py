r'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
'''

import numpy as np
from faker import Faker
from linqy import from_iterable, Enumerable
from typing import Any, Dict, List, Optional


class Generator:
    """
    turns a schema into records for the test suites.

    a schema is one of:
      - a dict of field -> schema, built field by field so later fields can 'ref' earlier ones
      - a faker method name ('word', 'name', ...) or a (method, kwargs) tuple
      - a provider dict carrying '_qen_provider' ('choice', 'ref', 'literal', 'maybe_none')
      - anything else, used as a literal
    """

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        method = getattr(self._fake, method_name, None)
        if method is None:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "choice":
            options = config["from"]
            # index into the options so their python types survive
            return options[int(self._rng.integers(len(options)))]

        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            value = context[key]
            return config["format"].format(value) if "format" in config else value

        if provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        if provider == "maybe_none":
            # absent values on purpose, for the degraded-input paths
            if self._rng.random() < config.get("rate", 0.2):
                return None
            return self.create(config["schema"], context)

        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._provider(schema, context)
            record = {}
            for key, sub_schema in schema.items():
                record[key] = self.create(sub_schema, {**context, **record})
            return record

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._faker(schema[0], schema[1])

        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._faker(schema)

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def records(self, count: int) -> List[Any]:
        return [self._generator.create(self._schema) for _ in range(count)]

    def take(self, count: int) -> Enumerable:
        return from_iterable(self.records(count))


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
