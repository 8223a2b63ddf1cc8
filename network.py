# Network energetic intensity, in damageUnit per operated bit.
# climate_change: kg CO2 eq, resources: MJ primary,
# human_health: DALY, ecosystem_quality: PDF.m2.yr

NETWORK_ENERGETIC_INTENSITY_UPPER = {
    'operating_one_bit': {
        'climate_change': 1.18e-11,
        'resources': 2.46e-10,
        'human_health': 9.41e-18,
        'ecosystem_quality': 2.63e-12,
    }
}

NETWORK_ENERGETIC_INTENSITY_LOWER = {
    'operating_one_bit': {
        'climate_change': 8.80e-13,
        'resources': 1.84e-11,
        'human_health': 7.02e-19,
        'ecosystem_quality': 1.96e-13,
    }
}
