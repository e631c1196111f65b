'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'

schema-driven test records, served as eachy enumerables.
'''

import numpy as np
from faker import Faker
from eachy import from_iterable, from_each, Enumerable
from typing import Any, Dict, List, Optional


class Generator:
    """schema interpreter.

    a schema is a dict of field -> spec, where a spec is
      - a faker provider name ('word', 'name', ...)
      - a (provider, kwargs) tuple: ('pyint', {'min_value': 1, 'max_value': 9})
      - a provider dict: {'_qen_provider': 'choice' | 'ref' | 'literal', ...}
      - a nested dict schema, or a one-item list holding an item schema
      - any other value, used literally
    """

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'") from None
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, context: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "ref":
            key = config["key"]
            if key not in context:
                raise ValueError(f"reference to '{key}' not found in current context.")
            return context[key]

        if provider == "choice":
            # index into the options so python values come back, not numpy scalars
            options = config["from"]
            return options[int(self._rng.integers(len(options)))]

        if provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, context: Optional[Dict] = None) -> Any:
        current_context = context or {}

        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema, current_context)
            # fields can refer to siblings generated before them
            generated_obj = {}
            for k, v in schema.items():
                generated_obj[k] = self.create(v, {**current_context, **generated_obj})
            return generated_obj

        if isinstance(schema, list):
            if not schema: return []
            item_schema = schema[0]
            count = self._get_count(item_schema)
            actual_item_schema = item_schema.get('_qen_items', item_schema) if isinstance(item_schema, dict) else item_schema
            return [self.create(actual_item_schema, current_context) for _ in range(count)]

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        if isinstance(schema, str) and hasattr(self._fake, schema):
            return self._resolve_faker_method(schema)

        return schema

    def _get_count(self, item_schema: Any) -> int:
        if isinstance(item_schema, dict) and "_qen_count" in item_schema:
            count_config = item_schema["_qen_count"]
            if isinstance(count_config, int):
                return count_config
            low, high = count_config
            return int(self._rng.integers(low, high, endpoint=True))
        return 5


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._seed = seed

    def take(self, count: int) -> Enumerable:
        """`count` records, generated once and re-traversable"""
        generator = Generator(self._seed)
        records: List[Any] = [generator.create(self._schema) for _ in range(count)]
        return from_iterable(records)

    def stream(self, count: int) -> Enumerable:
        """
        `count` records generated during each traversal. with a seed every
        traversal yields the same records, without one each is fresh.
        """
        def each(visit):
            generator = Generator(self._seed)
            for _ in range(count):
                visit(generator.create(self._schema))
        return from_each(each)


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
