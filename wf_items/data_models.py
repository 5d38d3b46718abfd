"""
Item record models for the Warframe item dump.

These dataclasses mirror the JSON structure of the community item export
(one array of item objects). They are intentionally **data-only**: filtering
and rendering live in their own modules.

The export carries many more keys than the tool reads; unknown keys are
ignored. Required keys that are missing, or keys holding the wrong JSON type,
raise MalformedInputError so a bad dump aborts the run instead of producing
half-rendered output.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class MalformedInputError(Exception):
    """Raised when input text is not valid JSON or does not match the item shape."""

    def __init__(self, message: str, index: Optional[int] = None):
        self.message = message
        self.index = index
        if index is not None:
            super().__init__(f"Item {index}: {message}")
        else:
            super().__init__(message)


def _require_str(d: dict[str, Any], key: str) -> str:
    value = d.get(key)
    if not isinstance(value, str) or not value:
        raise MalformedInputError(f"'{key}' must be a non-empty string")
    return value


def _optional_str(d: dict[str, Any], key: str) -> Optional[str]:
    value = d.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise MalformedInputError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


def _str_or_empty(d: dict[str, Any], key: str) -> str:
    return _optional_str(d, key) or ""


def _require_bool(d: dict[str, Any], key: str) -> bool:
    value = d.get(key)
    if not isinstance(value, bool):
        raise MalformedInputError(f"'{key}' must be a boolean")
    return value


def _optional_list(d: dict[str, Any], key: str) -> Optional[list]:
    value = d.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        raise MalformedInputError(f"'{key}' must be a list")
    return value


def _require_dict(x: Any, what: str) -> dict[str, Any]:
    if not isinstance(x, dict):
        raise MalformedInputError(f"{what} must be an object")
    return x


def _drop_none(d: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in d.items() if v is not None}


# -----------------------------------------------------------------------------
# Relic types
# -----------------------------------------------------------------------------

class RelicType(str, Enum):
    """Void relic eras, matched against the start of an item's uniqueName."""

    LITH = "lith"
    MESO = "meso"
    NEO = "neo"
    AXI = "axi"

    @classmethod
    def from_str(cls, s: Optional[str]) -> Optional["RelicType"]:
        """Case-insensitive lookup; anything unrecognised yields None."""
        if s is None:
            return None
        try:
            return cls(s.lower())
        except ValueError:
            return None


# -----------------------------------------------------------------------------
# Sub-records
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Patchlog:
    name: str = ""
    date: str = ""
    url: str = ""
    additions: str = ""
    changes: str = ""
    fixes: str = ""

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Patchlog":
        d = _require_dict(d, "patchlog")
        return Patchlog(
            name=_str_or_empty(d, "name"),
            date=_str_or_empty(d, "date"),
            url=_str_or_empty(d, "url"),
            additions=_str_or_empty(d, "additions"),
            changes=_str_or_empty(d, "changes"),
            fixes=_str_or_empty(d, "fixes"),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "date": self.date,
            "url": self.url,
            "additions": self.additions,
            "changes": self.changes,
            "fixes": self.fixes,
        }


@dataclass(frozen=True)
class Introduced:
    """The update an item arrived in."""

    name: Optional[str] = None
    url: Optional[str] = None
    aliases: tuple[str, ...] = ()
    parent: Optional[str] = None
    date: Optional[str] = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Introduced":
        d = _require_dict(d, "introduced")
        aliases = _optional_list(d, "aliases") or []
        if not all(isinstance(a, str) for a in aliases):
            raise MalformedInputError("'aliases' must be a list of strings")
        return Introduced(
            name=_optional_str(d, "name"),
            url=_optional_str(d, "url"),
            aliases=tuple(aliases),
            parent=_optional_str(d, "parent"),
            date=_optional_str(d, "date"),
        )

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            "name": self.name,
            "url": self.url,
            "aliases": list(self.aliases),
            "parent": self.parent,
            "date": self.date,
        })


@dataclass(frozen=True)
class Component:
    """A crafting component of an item (blueprint, chassis, ...)."""

    name: str
    unique_name: str
    tradable: bool = False
    description: Optional[str] = None
    type: Optional[str] = None
    category: Optional[str] = None
    product_category: Optional[str] = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Component":
        d = _require_dict(d, "component")
        tradable = d.get("tradable", False)
        if not isinstance(tradable, bool):
            raise MalformedInputError("'tradable' must be a boolean")
        return Component(
            name=_require_str(d, "name"),
            unique_name=_require_str(d, "uniqueName"),
            tradable=tradable,
            description=_optional_str(d, "description"),
            type=_optional_str(d, "type"),
            category=_optional_str(d, "category"),
            product_category=_optional_str(d, "productCategory"),
        )

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            "name": self.name,
            "uniqueName": self.unique_name,
            "tradable": self.tradable,
            "description": self.description,
            "type": self.type,
            "category": self.category,
            "productCategory": self.product_category,
        })


@dataclass(frozen=True)
class WarframeMarket:
    id: Optional[str] = None
    url_name: Optional[str] = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "WarframeMarket":
        d = _require_dict(d, "warframeMarket")
        return WarframeMarket(id=_optional_str(d, "id"), url_name=_optional_str(d, "urlName"))

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({"id": self.id, "urlName": self.url_name})


@dataclass(frozen=True)
class RewardItem:
    name: str
    unique_name: str
    warframe_market: Optional[WarframeMarket] = None

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "RewardItem":
        d = _require_dict(d, "reward item")
        market = d.get("warframeMarket")
        return RewardItem(
            name=_require_str(d, "name"),
            unique_name=_require_str(d, "uniqueName"),
            warframe_market=WarframeMarket.from_dict(market) if market is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return _drop_none({
            "name": self.name,
            "uniqueName": self.unique_name,
            "warframeMarket": self.warframe_market.to_dict() if self.warframe_market else None,
        })


@dataclass(frozen=True)
class Reward:
    """One entry of a relic's drop table."""

    rarity: str
    chance: float
    item: RewardItem

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Reward":
        d = _require_dict(d, "reward")
        chance = d.get("chance")
        # bool is an int subclass; reject it explicitly
        if isinstance(chance, bool) or not isinstance(chance, (int, float)):
            raise MalformedInputError("'chance' must be a number")
        if not 0.0 <= chance <= 1.0:
            raise MalformedInputError(f"'chance' must be within [0, 1], got {chance}")
        return Reward(
            rarity=_str_or_empty(d, "rarity"),
            chance=float(chance),
            item=RewardItem.from_dict(d.get("item")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {"rarity": self.rarity, "chance": self.chance, "item": self.item.to_dict()}


# -----------------------------------------------------------------------------
# Items
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Item:
    """
    A single record from the item export.

    Field names are snake_case; `from_dict`/`to_dict` translate to and from
    the export's camelCase keys.
    """

    name: str
    unique_name: str
    tradable: bool
    description: Optional[str] = None
    type: Optional[str] = None
    category: Optional[str] = None
    product_category: Optional[str] = None
    introduced: Optional[Introduced] = None
    estimated_vault_date: Optional[str] = None
    components: Optional[tuple[Component, ...]] = None
    rewards: Optional[tuple[Reward, ...]] = None
    patchlogs: Optional[tuple[Patchlog, ...]] = None

    @property
    def introduced_date(self) -> Optional[str]:
        return self.introduced.date if self.introduced else None

    @property
    def relic_short_name(self) -> str:
        """First two words of the name, e.g. "Meso A1 Relic" -> "Meso A1"."""
        return " ".join(self.name.split()[:2])

    @staticmethod
    def from_dict(d: dict[str, Any]) -> "Item":
        d = _require_dict(d, "item")
        introduced = d.get("introduced")
        return Item(
            name=_require_str(d, "name"),
            unique_name=_require_str(d, "uniqueName"),
            tradable=_require_bool(d, "tradable"),
            description=_optional_str(d, "description"),
            type=_optional_str(d, "type"),
            category=_optional_str(d, "category"),
            product_category=_optional_str(d, "productCategory"),
            introduced=Introduced.from_dict(introduced) if introduced is not None else None,
            estimated_vault_date=_optional_str(d, "estimatedVaultDate"),
            components=_records(d, "components", Component.from_dict),
            rewards=_records(d, "rewards", Reward.from_dict),
            patchlogs=_records(d, "patchlogs", Patchlog.from_dict),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the export's key names, omitting absent fields."""
        return _drop_none({
            "name": self.name,
            "uniqueName": self.unique_name,
            "tradable": self.tradable,
            "description": self.description,
            "type": self.type,
            "category": self.category,
            "productCategory": self.product_category,
            "introduced": self.introduced.to_dict() if self.introduced else None,
            "estimatedVaultDate": self.estimated_vault_date,
            "components": _dump(self.components),
            "rewards": _dump(self.rewards),
            "patchlogs": _dump(self.patchlogs),
        })


def _records(d: dict[str, Any], key: str, parse) -> Optional[tuple]:
    raw = _optional_list(d, key)
    if raw is None:
        return None
    return tuple(parse(x) for x in raw)


def _dump(records: Optional[tuple]) -> Optional[list[dict[str, Any]]]:
    if records is None:
        return None
    return [r.to_dict() for r in records]
