"""
Base class for endpoint definitions.

An endpoint is an immutable record describing exactly one HTTP request: the
method, a path template filled from the record's own fields, and the shape of
the response it expects. Fields named in the path template never appear in
the body; fields listed in ``QUERY`` are sent as query parameters instead.
"""

import string
from typing import Any, ClassVar, Dict, FrozenSet, Optional, Tuple, Type
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict


def path_fields(template: str) -> Tuple[str, ...]:
    """Return the field names referenced by a path template."""
    return tuple(name for _, name, _, _ in string.Formatter().parse(template) if name)


class Endpoint(BaseModel):
    """A single Vault API call."""
    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    METHOD: ClassVar[str] = "GET"
    PATH: ClassVar[str] = ""
    RESPONSE: ClassVar[Optional[Type[BaseModel]]] = None
    QUERY: ClassVar[Tuple[str, ...]] = ()
    RAW: ClassVar[bool] = False
    ACCEPTED: ClassVar[FrozenSet[int]] = frozenset()
    AUTHENTICATED: ClassVar[bool] = True

    def url_path(self) -> str:
        # Slashes stay literal so nested paths keep their segments
        values = {name: quote(str(getattr(self, name)), safe="/") for name in path_fields(self.PATH)}
        return self.PATH.format(**values)

    def query(self) -> Optional[Dict[str, Any]]:
        params = {}
        for name in self.QUERY:
            value = getattr(self, name)
            if value is None:
                continue
            if isinstance(value, bool):
                value = str(value).lower()
            params[name] = value
        return params or None

    def body(self) -> Optional[Dict[str, Any]]:
        exclude = set(path_fields(self.PATH)) | set(self.QUERY)
        data = {}
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if name in exclude or value is None:
                continue
            if isinstance(value, BaseModel):
                value = value.model_dump(mode="json", by_alias=True, exclude_none=True)
            data[field.alias or name] = value
        return data or None
