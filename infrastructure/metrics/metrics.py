# infrastructure/metrics/metrics.py
from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from fastapi import Response

sms_ingest_total = Counter(
    "sms_ingest_total",
    "SMS messages received for ingestion",
    ["outcome"]  # accepted|ignored|error
)

sms_transaction_type_total = Counter(
    "sms_transaction_type_total",
    "Stored transactions by type",
    ["type"]  # CREDIT|DEBIT
)

sms_transaction_amount = Histogram(
    "sms_transaction_amount",
    "Amounts of stored transactions (source currency units)",
    buckets=[100, 500, 1000, 5000, 10000, 50000, 100000, 500000]
)

retention_sweep_runs_total = Counter(
    "retention_sweep_runs_total",
    "Retention sweep runs",
    ["outcome"]  # success|error
)

retention_sweep_deleted_total = Counter(
    "retention_sweep_deleted_total",
    "Transactions deleted by the retention sweep"
)

retention_sweep_skipped_total = Counter(
    "retention_sweep_skipped_total",
    "Transactions skipped by the retention sweep because of an unusable timestamp"
)

def metrics_endpoint():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
