"""Case-insensitive HTTP headers.

``Headers`` implements ``Mapping[str, str]`` over raw byte pairs from the
ASGI scope and decodes on access. ``MutableHeaders`` adds the write
operations a response needs before it is sent.
"""

from collections.abc import Iterator, Mapping


def _encode(value: str) -> bytes:
    return value.encode("latin-1")


class Headers(Mapping[str, str]):
    """Immutable, case-insensitive HTTP headers.

    ``__getitem__`` returns the first matching value.
    ``get_list`` returns all values for a header (e.g. multiple ``Set-Cookie``).
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: tuple[tuple[bytes, bytes], ...] = ()) -> None:
        object.__setattr__(self, "_raw", raw)

    def __getitem__(self, key: str) -> str:
        key_lower = _encode(key.lower())
        for name, value in self._raw:
            if name.lower() == key_lower:
                return value.decode("latin-1")
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        key_lower = _encode(key.lower())
        return any(name.lower() == key_lower for name, _ in self._raw)

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for name, _ in self._raw:
            key = name.decode("latin-1").lower()
            if key not in seen:
                seen.add(key)
                yield key

    def __len__(self) -> int:
        return len(set(self))

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"{type(self).__name__}({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        """Return the first value for *key*, or *default* if missing."""
        try:
            return self[key]
        except KeyError:
            return default

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key*."""
        key_lower = _encode(key.lower())
        return [value.decode("latin-1") for name, value in self._raw if name.lower() == key_lower]

    @property
    def raw(self) -> tuple[tuple[bytes, bytes], ...]:
        """Access raw header byte pairs for ASGI compatibility."""
        return tuple(self._raw)


class MutableHeaders(Headers):
    """Case-insensitive headers that can be modified until sent.

    Names are stored lower-cased, matching what ASGI expects.
    """

    __slots__ = ()

    def __init__(self, headers: Mapping[str, str] | None = None) -> None:
        super().__init__()
        object.__setattr__(self, "_raw", [])
        for name, value in (headers or {}).items():
            self.append(name, value)

    def append(self, name: str, value: str) -> None:
        """Add a value for *name*, keeping any existing values."""
        self._raw.append((_encode(name.lower()), _encode(value)))

    def set(self, name: str, value: str) -> None:
        """Replace every value for *name* with *value*."""
        self.delete(name)
        self.append(name, value)

    def delete(self, name: str) -> None:
        """Remove every value for *name*. Missing names are ignored."""
        key_lower = _encode(name.lower())
        self._raw[:] = [(k, v) for k, v in self._raw if k != key_lower]
