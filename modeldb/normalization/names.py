"""Display name generation for models and providers.

Curated tables win. Otherwise names are derived from the normalized id:
Bedrock prefixes and version suffixes are stripped, a trailing date becomes
"(Mon YYYY)", and the rest is title-cased with a few acronym touch-ups.

Degenerate ids keep degenerate spacing: "model--name" renders as
"Model  Name" and "-start" as " Start". Consumers match on these strings.
"""

import re

from modeldb.normalization.human_maintained import (
    MODEL_DISPLAY_NAMES,
    MONTH_NAMES,
    PROVIDER_DISPLAY_NAMES,
)

FINE_TUNED_PREFIX = "ft:"
FINE_TUNED_SUFFIX = " [Fine-tuned]"
TEXT_COMPLETION_PREFIX = "text-completion-"

# "2024-07-18" or "20240718" at the end
DATE_PATTERN = re.compile(r"[-_]?(\d{4})[-_]?(\d{2})[-_]?(\d{2})$")
# "2501" (Jan 2025) at the end, only after a separator
SHORT_DATE_PATTERN = re.compile(r"[-_](\d{2})(\d{2})$")
# "-20241022-v1:0" at the end of a Bedrock id
BEDROCK_DATE_VERSION_PATTERN = re.compile(r"[-_](\d{4})(\d{2})(\d{2})[-_]v\d+:\d+$")
BEDROCK_VERSION_PATTERN = re.compile(r"[-_]v\d+:\d+$")
# "us.anthropic.", "eu.meta."
BEDROCK_REGION_PREFIX = re.compile(r"^(us|eu|apac|ap|sa)\.([a-z]+)\.", re.IGNORECASE)
# "anthropic.claude" without a region
BEDROCK_PROVIDER_PREFIX = re.compile(
    r"^(anthropic|meta|cohere|mistral|ai21|amazon|stability)\.", re.IGNORECASE
)

# Applied in order after hyphen-splitting and capitalizing
_TITLE_FIXES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\bGpt\b", re.IGNORECASE), "GPT"),
    (re.compile(r"\bGPT (\d[\d.]*)"), r"GPT-\1"),
    (re.compile(r"\bLlama\b", re.IGNORECASE), "Llama"),
    (re.compile(r"\bAi\b"), "AI"),
    (re.compile(r"\bApi\b"), "API"),
    (re.compile(r"\bHd\b"), "HD"),
    (re.compile(r"\bTts\b"), "TTS"),
    (re.compile(r"\bStt\b"), "STT"),
    (re.compile(r"(\d+)b\b", re.IGNORECASE), r"\1B"),
)

_PROVIDER_FIXES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\bAi\b"), "AI"),
    (re.compile(r"\bLlm\b"), "LLM"),
    (re.compile(r"\bApi\b"), "API"),
    (re.compile(r"\bMl\b"), "ML"),
)


def _format_month(year: str, month: str) -> str | None:
    """Format "(Mon YYYY)", or None when month is outside 1-12."""
    index = int(month) - 1
    if 0 <= index < 12:
        return f"({MONTH_NAMES[index]} {year})"
    return None


def clean_bedrock_id(model_id: str) -> tuple[str, str]:
    """Strip Bedrock region/provider prefixes and version suffixes.

    Args:
        model_id: Id such as "us.anthropic.claude-3-5-haiku-20241022-v1:0".

    Returns:
        Tuple of (cleaned_id, date_suffix). date_suffix is "" when the id
        carried no embedded date.
    """
    cleaned = BEDROCK_REGION_PREFIX.sub("", model_id, count=1)
    cleaned = BEDROCK_PROVIDER_PREFIX.sub("", cleaned, count=1)

    date_suffix = ""
    match = BEDROCK_DATE_VERSION_PATTERN.search(cleaned)
    if match:
        year, month, _day = match.groups()
        formatted = _format_month(year, month)
        if formatted:
            date_suffix = formatted
            cleaned = cleaned[: match.start()]

    if not date_suffix:
        cleaned = BEDROCK_VERSION_PATTERN.sub("", cleaned, count=1)

    return cleaned, date_suffix


def extract_date_suffix(model_id: str) -> tuple[str, str]:
    """Split a trailing date off a model id.

    Tries a full YYYY-MM-DD / YYYYMMDD date first, then a short YYMM form.
    Month values outside 1-12 are not dates and stay in the id.

    Returns:
        Tuple of (id_without_date, "(Mon YYYY)") or (model_id, "").
    """
    match = DATE_PATTERN.search(model_id)
    if match:
        year, month, _day = match.groups()
        formatted = _format_month(year, month)
        if formatted:
            return model_id[: match.start()], formatted

    match = SHORT_DATE_PATTERN.search(model_id)
    if match:
        yy, mm = match.groups()
        formatted = _format_month(f"20{yy}", mm)
        if formatted:
            return model_id[: match.start()], formatted

    return model_id, ""


def smart_title_case(name: str) -> str:
    """Title-case a hyphenated id, keeping known acronyms and brand casing."""
    result = " ".join(word[:1].upper() + word[1:] for word in name.split("-"))
    for pattern, replacement in _TITLE_FIXES:
        result = pattern.sub(replacement, result)
    return result


def _with_date(name: str, date_suffix: str) -> str:
    return f"{name} {date_suffix}" if date_suffix else name


def _name_from_base(base_id: str, bedrock_date: str) -> str:
    """Resolve a display name for a prefix-free, slash-free base id."""
    if base_id in MODEL_DISPLAY_NAMES:
        return _with_date(MODEL_DISPLAY_NAMES[base_id], bedrock_date)

    id_without_date, date_suffix = extract_date_suffix(base_id)
    effective_date = bedrock_date or date_suffix
    if id_without_date in MODEL_DISPLAY_NAMES:
        return _with_date(MODEL_DISPLAY_NAMES[id_without_date], effective_date)
    return _with_date(smart_title_case(id_without_date), effective_date)


def generate_display_name(model_id: str) -> str:
    """Generate a human-friendly display name for a normalized model id.

    Args:
        model_id: Normalized model id, e.g. "gpt-4o-mini-2024-07-18".

    Returns:
        Display name, e.g. "GPT-4o mini (Jul 2024)".
    """
    if model_id in MODEL_DISPLAY_NAMES:
        return MODEL_DISPLAY_NAMES[model_id]

    is_fine_tuned = model_id.startswith(FINE_TUNED_PREFIX)
    base_id = model_id[len(FINE_TUNED_PREFIX) :] if is_fine_tuned else model_id

    base_id, bedrock_date = clean_bedrock_id(base_id)

    if base_id in MODEL_DISPLAY_NAMES:
        name = _with_date(MODEL_DISPLAY_NAMES[base_id], bedrock_date)
    elif "/" in base_id:
        # Vendor-routed ids such as "azure/gpt-5-2025-08-07"
        last = base_id.split("/")[-1] or base_id
        name = _name_from_base(last, bedrock_date)
    else:
        name = _name_from_base(base_id, bedrock_date)

    return f"{name}{FINE_TUNED_SUFFIX}" if is_fine_tuned else name


def get_provider_display_name(provider: str) -> str:
    """Generate a display name for a provider id.

    Args:
        provider: Provider id (any case), e.g. "openai" or "text-completion-openai".

    Returns:
        Display name, e.g. "OpenAI".
    """
    lowered = provider.lower()
    if lowered in PROVIDER_DISPLAY_NAMES:
        return PROVIDER_DISPLAY_NAMES[lowered]

    if lowered.startswith(TEXT_COMPLETION_PREFIX):
        wrapped = lowered.split("-")[2]
        if wrapped in PROVIDER_DISPLAY_NAMES:
            return PROVIDER_DISPLAY_NAMES[wrapped]

    result = " ".join(
        word[:1].upper() + word[1:].lower() for word in re.split(r"[-_]", provider)
    )
    for pattern, replacement in _PROVIDER_FIXES:
        result = pattern.sub(replacement, result)
    return result
