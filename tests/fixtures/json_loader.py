import copy
import json
from pathlib import Path
from typing import Any, Dict

from src.domain.base import normalize_email


class ResetDataLoader:
    """Reads tests/fixtures/test_data.json once and hands out copies"""

    _data: Dict[str, Any] = None

    @classmethod
    def load(cls) -> Dict[str, Any]:
        if cls._data is None:
            with open(Path(__file__).parent / "test_data.json") as f:
                cls._data = json.load(f)
        return cls._data

    @classmethod
    def get_copy(cls, key: str) -> Any:
        return copy.deepcopy(cls.load()[key])

    @classmethod
    def account(cls, key: str) -> Dict[str, Any]:
        """Account fixture with its lookup key precomputed"""
        account = cls.get_copy(key)
        account["normalized_email"] = normalize_email(account["email"])
        return account
