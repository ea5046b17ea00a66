#!/usr/bin/env python3
"""
System Metrics Collector - one reading per run, invoked from cron / systemd timer
"""

import sys
from datetime import datetime, timezone

import psycopg

import db
import metrics
import sensors
from config import Config, ConfigError


def collect_stages(now):
    """Read sensors and build rows, grouped by insert stage"""
    cpu = sensors.read_cpu_percent()
    used, total = sensors.read_memory()
    temps = sensors.read_temperatures()

    return [
        ('cpu usage', [metrics.cpu_usage_row(cpu, now)]),
        ('memory usage', [metrics.memory_usage_row(used, total, now)]),
        ('temperature', metrics.temperature_rows(temps, now)),
    ]


def collect_metrics(config):
    now = datetime.now(timezone.utc)
    stages = collect_stages(now)

    with db.connect(config) as conn:
        return db.write_stages(conn, stages)


def main():
    try:
        config = Config.from_env()
        collect_metrics(config)
    except (ConfigError, ValueError, psycopg.Error) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
