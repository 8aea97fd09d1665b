from pathlib import Path

DEFAULT_DATA_DIR = (Path(__file__).parent.parent.resolve() / "data").absolute().resolve()

# Snapshot shipped inside the package, served when nothing has been published yet
BUNDLED_DATA_DIR = (Path(__file__).parent / "data").absolute().resolve()

# Upstream feed
LITELLM_MODEL_URL = (
    "https://raw.githubusercontent.com/BerriAI/litellm/refs/heads/main/"
    "model_prices_and_context_window.json"
)
UPSTREAM_SENTINEL_KEY = "sample_spec"  # Documents the schema, not a model
UPSTREAM_TIMEOUT = 30.0
UPSTREAM_MAX_RETRIES = 3
UPSTREAM_RETRY_STATUSES = (429, 500, 502, 503, 504)

# Published artifacts
SCHEMA_VERSION = "1.0.0"
MANIFEST_KEY = "manifest"
VERSION_KEY_TEMPLATE = "{version}:{kind}"

# Edge cache
EDGE_CACHE_PATH_TEMPLATE = "/cache/v1/latest/{kind}.json"
EDGE_CACHE_MAX_AGE = 3600  # 1 hour, matches the refresh interval
EDGE_CACHE_HEADERS = {
    "Content-Type": "application/json",
    "Cache-Control": f"public, max-age={EDGE_CACHE_MAX_AGE}",
}
EDGE_CACHE_TIMEOUT = 0.5  # Seconds before the read path gives up on the cache tier

# Refresh scheduling
REFRESH_INTERVAL_SECONDS = 3600

# Environment variables
ENV_DATA_DIR = "MODELDB_DATA_DIR"
ENV_SOURCE_URL = "MODELDB_SOURCE_URL"
ENV_ADMIN_TOKEN = "MODELDB_ADMIN_TOKEN"
ENV_REFRESH_INTERVAL = "MODELDB_REFRESH_INTERVAL"
ENV_CACHE_TIMEOUT = "MODELDB_CACHE_TIMEOUT"
ENV_CACHE_TTL = "MODELDB_CACHE_TTL"
