import logging
from typing import Any, Callable, Dict, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, PositiveInt
from constants import BandwidthBound
from errors import InvalidDataShape

logger = logging.getLogger(__name__)


class ComponentDamage(BaseModel):
    """
    Damage caused by a meeting component, one field per damage category.
    Every category defaults to zero.
    """
    model_config = ConfigDict(frozen=True)

    climate_change: float = 0.0
    resources: float = 0.0
    human_health: float = 0.0
    ecosystem_quality: float = 0.0

    @classmethod
    def categories(cls) -> tuple:
        return tuple(cls.model_fields)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> 'ComponentDamage':
        """Copy the known categories of record, ignoring any other key."""
        return cls(**{c: record[c] for c in cls.categories() if c in record})

    def __getitem__(self, category: str) -> float:
        if category not in self.categories():
            raise KeyError(category)
        return getattr(self, category)

    def map(self, fn: Callable[[str, float], float]) -> 'ComponentDamage':
        return type(self)(**{c: fn(c, self[c]) for c in self.categories()})

    def __add__(self, other: 'ComponentDamage') -> 'ComponentDamage':
        return self.map(lambda c, value: value + other[c])


# Bandwidth variants (Kbit/s)

class FlatValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: NonNegativeFloat


class BoundedValue(BaseModel):
    model_config = ConfigDict(frozen=True)

    minimum: NonNegativeFloat
    ideal: NonNegativeFloat

    def for_bound(self, bound: Optional[str] = None) -> float:
        if bound is None:
            return self.ideal
        return getattr(self, BandwidthBound(bound).value)


class ByParticipantCount(BaseModel):
    model_config = ConfigDict(frozen=True)

    values: Dict[int, Union[FlatValue, BoundedValue]] = Field(min_length=1)


class Bandwidth(BaseModel):
    model_config = ConfigDict(frozen=True)

    inbound: Optional[Union[FlatValue, ByParticipantCount]] = None

    def to_raw(self) -> Dict[str, Any]:
        match self.inbound:
            case None:
                return {}
            case FlatValue(value=value):
                return {'inbound': value}
            case ByParticipantCount(values=values):
                return {'inbound': {str(count): _value_to_raw(v) for count, v in values.items()}}


def _value_to_raw(value: Union[FlatValue, BoundedValue]) -> Any:
    match value:
        case FlatValue(value=flat):
            return flat
        case BoundedValue(minimum=minimum, ideal=ideal):
            return {'minimum': minimum, 'ideal': ideal}


# Parsing of raw (catalog) bandwidth data

def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _participant_count(key: Any) -> int:
    if isinstance(key, str) and key.strip().isascii() and key.strip().isdecimal():
        return int(key)
    if isinstance(key, int) and not isinstance(key, bool) and key >= 0:
        return key
    if isinstance(key, float) and key.is_integer() and key >= 0:
        return int(key)
    raise InvalidDataShape(f'Invalid participants number key: {key!r}')


def _parse_inbound_value(raw: Any) -> Union[FlatValue, BoundedValue]:
    if _is_number(raw):
        return FlatValue(value=raw)
    if isinstance(raw, dict) and set(raw) == {'minimum', 'ideal'} and all(_is_number(v) for v in raw.values()):
        return BoundedValue(**raw)
    raise InvalidDataShape(f'Expected a number or a {{minimum, ideal}} record, got {raw!r}')


def parse_inbound(raw: Any) -> Optional[Union[FlatValue, ByParticipantCount]]:
    """Turn raw inbound data (number or participants-number mapping) into a bandwidth variant."""
    if raw is None:
        return None
    if _is_number(raw):
        return FlatValue(value=raw)
    if isinstance(raw, dict):
        if not raw:
            raise InvalidDataShape('Inbound bandwidth mapping is empty')
        values = {}
        for key, value in raw.items():
            count = _participant_count(key)
            if count in values:
                raise InvalidDataShape(f'Participants number {count} appears twice')
            values[count] = _parse_inbound_value(value)
        return ByParticipantCount(values=values)
    raise InvalidDataShape(f'Expected a number or a participants number mapping, got {raw!r}')


def parse_bandwidth(raw: Any) -> Optional[Bandwidth]:
    if raw is None or isinstance(raw, Bandwidth):
        return raw
    if not isinstance(raw, dict):
        raise InvalidDataShape(f'Bandwidth must be a mapping, got {raw!r}')
    ignored = set(raw) - {'inbound'}
    if ignored:
        logger.warning('Ignoring bandwidth keys: %s', sorted(ignored))
    return Bandwidth(inbound=parse_inbound(raw.get('inbound')))


# API models

class DamageRequest(BaseModel):
    software: str
    instances_number: PositiveInt
    meeting_duration: NonNegativeFloat
    participants_number: Optional[PositiveInt] = None
    bandwidth_bound: Optional[BandwidthBound] = None
    network_bound: Optional[str] = None


class DamageResponse(BaseModel):
    software: str
    embodied: ComponentDamage
    operating: ComponentDamage
    total: ComponentDamage
    notes: str
