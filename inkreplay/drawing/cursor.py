"""Cursor samples delivered by the recorder"""

import math
from typing import NamedTuple


class CursorState(NamedTuple):
    """One captured input sample; pressure == 0 means the pen is up."""
    x: float
    y: float
    pressure: float
    time: float = 0.0

    @property
    def pen_down(self):
        return self.pressure > 0

    @classmethod
    def from_mapping(cls, sample):
        """Build a cursor state from a dict or an object with attributes

        Args:
            sample: Mapping with 'x', 'y', 'pressure' and optional 'time' keys,
                    an object exposing those attributes, or a CursorState

        Returns:
            CursorState: Validated sample

        Raises:
            ValueError: If a coordinate or the pressure is missing or not a finite number
        """
        if isinstance(sample, cls):
            values = sample._asdict()
        elif isinstance(sample, dict):
            values = sample
        else:
            values = {name: getattr(sample, name, None) for name in cls._fields}

        fields = {}
        for name in cls._fields:
            value = values.get(name)
            if value is None:
                if name == "time":
                    value = 0.0
                else:
                    raise ValueError(f"Cursor sample is missing '{name}'")
            try:
                value = float(value)
            except (TypeError, ValueError):
                raise ValueError(f"Cursor sample field '{name}' is not a number: {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"Cursor sample field '{name}' is not finite: {value!r}")
            fields[name] = value

        if fields["pressure"] < 0:
            raise ValueError(f"Cursor pressure must not be negative: {fields['pressure']}")

        return cls(**fields)
