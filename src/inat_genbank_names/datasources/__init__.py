"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # Endpoints, constants, rate-limited requests
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Fetch functions that may fail per specimen return a ``FetchFailure`` instead
of raising, so one bad observation never stops a batch. Only the batch
consensus-name fetch raises (``BatchFetchError``).
"""
