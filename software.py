import logging
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, NonNegativeFloat
import network
from closest import get_closest
from constants import (
    BITS_IN_KBIT,
    BITS_IN_OCTET,
    OCTETS_IN_MO,
    SECONDS_IN_MINUTE,
    NetworkBound,
)
from errors import InvalidDataShape
from schemas import (
    Bandwidth,
    BoundedValue,
    ByParticipantCount,
    ComponentDamage,
    FlatValue,
    parse_bandwidth,
)

logger = logging.getLogger(__name__)


class Software(BaseModel):
    """
    A software used during a meeting and the damage its use causes.

    file_size is the download size in Mo (None or 0 when nothing has to be
    downloaded) and bandwidth its inbound network needs in Kbit/s (None for
    a software working locally).
    """
    model_config = ConfigDict(frozen=True, extra='forbid')

    display_name: str
    file_size: Optional[NonNegativeFloat] = None
    bandwidth: Optional[Bandwidth] = None

    @classmethod
    def from_description(cls, raw: Dict[str, Any]) -> 'Software':
        """Build a software from a catalog record (displayName, fileSize, bandwidth)."""
        return cls(
            display_name=raw['displayName'],
            file_size=raw.get('fileSize'),
            bandwidth=parse_bandwidth(raw.get('bandwidth')),
        )

    def to_description(self) -> Dict[str, Any]:
        description: Dict[str, Any] = {'displayName': self.display_name}
        if self.file_size is not None:
            description['fileSize'] = self.file_size
        if self.bandwidth is not None:
            description['bandwidth'] = self.bandwidth.to_raw()
        return description

    def with_changes(self, **changes: Any) -> 'Software':
        """Return a validated copy of the software with the given fields replaced."""
        if 'bandwidth' in changes:
            changes['bandwidth'] = parse_bandwidth(changes['bandwidth'])
        return type(self)(**{**dict(self), **changes})

    def file_size_in_bits(self) -> float:
        return (self.file_size or 0) * BITS_IN_OCTET * OCTETS_IN_MO

    def has_inbound_bandwidth(self) -> bool:
        return self.bandwidth is not None and self.bandwidth.inbound is not None

    def get_inbound_bandwidth(self, participants_number: float, bound: Optional[str] = None) -> float:
        """
        Return the software download speed (Kbit/s).
        When values depend on the participants number, the closest available
        participants number is used; bound ('minimum' or 'ideal') picks the
        value of a bounded record and defaults to 'ideal'.
        """
        inbound = self.bandwidth.inbound if self.bandwidth is not None else None
        match inbound:
            case FlatValue(value=value):
                return value
            case ByParticipantCount(values=values):
                closest_number = get_closest(participants_number, list(values))
                logger.debug('%s: using bandwidth for %s participants (asked %s)',
                             self.display_name, closest_number, participants_number)
                match values[closest_number]:
                    case FlatValue(value=value):
                        return value
                    case BoundedValue() as bounded:
                        return bounded.for_bound(bound)
        raise InvalidDataShape(f'{self.display_name} has no usable inbound bandwidth: {inbound!r}')

    @staticmethod
    def get_network_energetic_intensity(network_bound: Optional[str] = None) -> ComponentDamage:
        """
        Return the damage per operated bit for the network energetic intensity
        lower or upper bound. Anything but 'lower' gives the upper bound.
        """
        if network_bound == NetworkBound.LOWER:
            table = network.NETWORK_ENERGETIC_INTENSITY_LOWER
        else:
            table = network.NETWORK_ENERGETIC_INTENSITY_UPPER
        return ComponentDamage.from_record(table['operating_one_bit'])

    def compute_operating_damage(
        self,
        instances_number: int,
        bandwidth_bound: Optional[str],
        network_bound: Optional[str],
        meeting_duration: float,
        participants_number: Optional[int] = None,
    ) -> ComponentDamage:
        """Damage caused by using the software instances for the whole meeting."""
        if not self.has_inbound_bandwidth():
            return ComponentDamage()

        if participants_number is None:
            participants_number = instances_number
        inbound_bandwidth = self.get_inbound_bandwidth(participants_number, bandwidth_bound)
        intensity = Software.get_network_energetic_intensity(network_bound)

        # (damageUnit/bit) * (Kbit/s) / 1000 * 60 = damageUnit/minute
        return intensity.map(
            lambda category, per_bit: per_bit * inbound_bandwidth / BITS_IN_KBIT
            * SECONDS_IN_MINUTE * instances_number * meeting_duration
        )

    def compute_embodied_damage(self, instances_number: int, network_bound: Optional[str]) -> ComponentDamage:
        """Damage caused by all the software downloads of the meeting."""
        if not self.file_size:
            return ComponentDamage()

        intensity = Software.get_network_energetic_intensity(network_bound)
        size_bits = self.file_size_in_bits()
        return intensity.map(lambda category, per_bit: per_bit * size_bits * instances_number)
