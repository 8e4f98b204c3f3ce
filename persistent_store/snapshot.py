from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, RootModel


class PersistentData(RootModel[dict[str, Any]]):
    """
    Mirrors the on-disk snapshot: one JSON object mapping key names to values.
      { "MySQL:Example": {"user": "bob", "port": 3306}, "SSH:remote": "ssh ..." }

    Non-finite floats are written as Infinity / -Infinity / NaN so they load back unchanged.
    """

    model_config = ConfigDict(ser_json_inf_nan="constants")

    @classmethod
    def from_disk_doc(cls, doc: Any) -> "PersistentData":
        return cls.model_validate(doc)

    def to_disk_doc(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
