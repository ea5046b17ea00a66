"""
PostgreSQL writer for system_metrics
"""

import psycopg

INSERT_METRIC_SQL = '''
    INSERT INTO system_metrics (time, metric_type, metric_name, value, unit)
    VALUES (%s, %s, %s, %s, %s)
'''


def connect(config):
    # Transactions are opened explicitly with conn.transaction()
    return psycopg.connect(autocommit=True, **config.connect_kwargs())


def insert_rows(cursor, rows):
    for row in rows:
        cursor.execute(INSERT_METRIC_SQL, tuple(row))


def write_stages(conn, stages):
    """
    Insert all stages in one transaction.
    stages: list of (stage_name, rows). Any failed insert rolls back everything.
    """
    total = 0
    with conn.transaction():
        with conn.cursor() as cursor:
            for stage_name, rows in stages:
                insert_rows(cursor, rows)
                total += len(rows)
                print(f"Success {stage_name} insert.")

    print("Transaction committed successfully.")
    return total
