"""Provider id and model id normalization.

Upstream entries carry a free-form provider tag (``litellm_provider``) and a
raw model name that is often prefixed with a routing provider. Both are
collapsed to stable ids here.
"""

import re

from modeldb.normalization.human_maintained import PROVIDER_ID_ALIASES

# Routing prefixes stripped from raw model names
MODEL_ID_PREFIX_PATTERN = re.compile(
    r"^(openai|anthropic|bedrock|vertex_ai|cohere|replicate|huggingface|together_ai"
    r"|deepinfra|groq|mistral|perplexity|anyscale|cloudflare|voyage|databricks|ai21)/"
)

GEMINI_DOUBLE_PREFIX = "gemini/gemini-"
GEMINI_PREFIX = "gemini/"
XAI_PREFIX = "xai/"


def normalize_provider_id(provider: str) -> str:
    """Normalize an upstream provider tag to a canonical provider id.

    Lower-cases, drops everything from the first "_ai" or "_" on, then
    applies the alias table. Idempotent: normalizing a canonical id returns
    it unchanged.

    Args:
        provider: Upstream tag, e.g. "vertex_ai-language-models" or "Gemini".

    Returns:
        Canonical id, e.g. "vertex" or "google".
    """
    lowered = provider.strip().lower()
    if lowered in PROVIDER_ID_ALIASES:
        return PROVIDER_ID_ALIASES[lowered]

    base = lowered.split("_ai")[0].split("_")[0]
    if base in PROVIDER_ID_ALIASES:
        return PROVIDER_ID_ALIASES[base]
    if base.startswith("vertex"):
        return "vertex"
    if "codestral" in base:
        return "mistral"
    return base


def normalize_model_id(raw_name: str, provider_id: str) -> str:
    """Strip routing prefixes from a raw upstream model name.

    Google ids drop the nested "gemini/gemini-" prefix entirely so they stay
    distinct from the Vertex copies of the same model.

    Args:
        raw_name: Upstream key, e.g. "openai/gpt-4".
        provider_id: Already-normalized provider id.

    Returns:
        Normalized model id, e.g. "gpt-4".
    """
    if provider_id == "google":
        if raw_name.startswith(GEMINI_DOUBLE_PREFIX):
            return raw_name[len(GEMINI_DOUBLE_PREFIX) :]
        if raw_name.startswith(GEMINI_PREFIX):
            return raw_name[len(GEMINI_PREFIX) :]
    if provider_id == "xai" and raw_name.startswith(XAI_PREFIX):
        return raw_name[len(XAI_PREFIX) :]
    return MODEL_ID_PREFIX_PATTERN.sub("", raw_name, count=1)
