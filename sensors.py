"""
Host sensor readings via psutil
"""

from collections import namedtuple

import psutil

TemperatureReading = namedtuple('TemperatureReading', ['label', 'current'])

CPU_SAMPLE_INTERVAL = 1


def read_cpu_percent():
    return psutil.cpu_percent(interval=CPU_SAMPLE_INTERVAL)


def read_memory():
    """(used, total) in bytes, used = total - available"""
    memory = psutil.virtual_memory()
    return memory.total - memory.available, memory.total


def component_label(chip, label):
    # Same naming as hwmon components: "k10temp Tctl", "nvme Composite"
    if label:
        return f"{chip} {label}"
    return chip


def read_temperatures():
    # Not available on every platform (e.g. Windows)
    if not hasattr(psutil, 'sensors_temperatures'):
        return []

    readings = []
    for chip, entries in psutil.sensors_temperatures().items():
        for entry in entries:
            if entry.current is None:
                continue
            readings.append(TemperatureReading(component_label(chip, entry.label), float(entry.current)))
    return readings
