"""Normalization of upstream identifiers into canonical ids and display names."""

from modeldb.normalization.identifiers import normalize_model_id, normalize_provider_id
from modeldb.normalization.names import (
    clean_bedrock_id,
    extract_date_suffix,
    generate_display_name,
    get_provider_display_name,
    smart_title_case,
)

__all__ = [
    "clean_bedrock_id",
    "extract_date_suffix",
    "generate_display_name",
    "get_provider_display_name",
    "normalize_model_id",
    "normalize_provider_id",
    "smart_title_case",
]
