import logging
from typing import Optional
import config
from software import Software

logger = logging.getLogger(__name__)


def estimate(software: Software, instances_number: int, meeting_duration: float,
             bandwidth_bound: Optional[str] = None, network_bound: Optional[str] = None,
             participants_number: Optional[int] = None) -> dict:
    """
    Estimate the damage of one software used during a meeting of
    meeting_duration minutes by instances_number participants.
    """
    bandwidth_bound = bandwidth_bound or config.DEFAULT_BANDWIDTH_BOUND
    network_bound = network_bound or config.DEFAULT_NETWORK_BOUND
    embodied = software.compute_embodied_damage(instances_number, network_bound)
    operating = software.compute_operating_damage(
        instances_number, bandwidth_bound, network_bound, meeting_duration, participants_number
    )
    total = embodied + operating
    logger.info('Estimated %s for %d instances over %s minutes: %s',
                software.display_name, instances_number, meeting_duration, total)
    return {
        "software": software.display_name,
        "embodied": embodied,
        "operating": operating,
        "total": total,
        "notes": f"{total.climate_change:.2e} kg CO₂ eq for the meeting",
    }
