"""
Metric rows - classification and rounding of raw sensor readings
"""

import math
from collections import namedtuple

import constants

MetricRow = namedtuple('MetricRow', ['time', 'metric_type', 'metric_name', 'value', 'unit'])


def round_to_decimals(value, decimals=2):
    # Halves round away from zero (55.125 -> 55.13), unlike round()
    multiplier = 10 ** decimals
    value = float(value)
    return math.copysign(math.floor(abs(value) * multiplier + 0.5), value) / multiplier


def classify_sensor(label):
    """Map sensor label to metric name, raw label if nothing matches"""
    for needle, metric_name in constants.SENSOR_RULES:
        if needle in label:
            return metric_name
    return label


def cpu_usage_row(cpu_percent, now):
    return MetricRow(
        now,
        constants.TYPE_USAGE,
        constants.NAME_CPU_USAGE,
        round_to_decimals(cpu_percent),
        constants.UNIT_PERCENT,
    )


def memory_usage_row(used_memory, total_memory, now):
    if not total_memory:
        raise ValueError("Total memory reported as 0, cannot compute memory usage")

    usage = (float(used_memory) / float(total_memory)) * 100.0
    return MetricRow(
        now,
        constants.TYPE_USAGE,
        constants.NAME_MEMORY_USAGE,
        round_to_decimals(usage),
        constants.UNIT_PERCENT,
    )


def temperature_row(label, temperature, now):
    return MetricRow(
        now,
        constants.TYPE_TEMPERATURE,
        classify_sensor(label),
        round_to_decimals(temperature),
        constants.UNIT_CELSIUS,
    )


def temperature_rows(readings, now):
    return [temperature_row(r.label, r.current, now) for r in readings]
