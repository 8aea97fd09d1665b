"""Human-maintained naming data.

Curated display names for models and providers whose formatting no generic
rule can infer. Extend these tables when a new upstream model renders badly.
Only add entries for lowercase variants (mini/nano), brand casing,
abbreviations (3.5T), dropped "-latest" suffixes or other custom formatting.
"""

from typing import Final

MODEL_DISPLAY_NAMES: Final[dict[str, str]] = {
    # OpenAI
    "gpt-4o": "GPT-4o",
    "gpt-4o-mini": "GPT-4o mini",
    "gpt-4.1-mini": "GPT-4.1 mini",
    "gpt-4.1-nano": "GPT-4.1 nano",
    "o4-mini": "o4 mini",
    "o3-mini": "o3 mini",
    "o3-pro": "o3 Pro",
    "o3": "o3",
    "o1": "o1",
    "o1-mini": "o1 mini",
    "o1-pro": "o1 Pro",
    "o1-preview": "o1 Preview",
    "chatgpt-4o-latest": "ChatGPT-4o",
    "gpt-3.5-turbo": "GPT 3.5T",
    "gpt-3.5-turbo-instruct": "GPT 3.5T Instruct",
    "gpt-3.5-turbo-16k": "GPT 3.5T 16k",
    # Anthropic
    "claude-sonnet-4-20250514": "Claude 4 Sonnet",
    "claude-opus-4-20250514": "Claude 4 Opus",
    "claude-3-7-sonnet-latest": "Claude 3.7 Sonnet",
    "claude-3-5-haiku-latest": "Claude 3.5 Haiku",
    "claude-3-5-sonnet-latest": "Claude 3.5 Sonnet",
    "claude-3-5-haiku": "Claude 3.5 Haiku",
    "claude-3-5-sonnet": "Claude 3.5 Sonnet",
    "claude-3-opus-latest": "Claude 3 Opus",
    "claude-3-sonnet-20240229": "Claude 3 Sonnet",
    "claude-3-haiku-20240307": "Claude 3 Haiku",
    "claude-3-haiku": "Claude 3 Haiku",
    "claude-3-sonnet": "Claude 3 Sonnet",
    "claude-3-opus": "Claude 3 Opus",
    "claude-instant-1.2": "Claude Instant 1.2",
    "claude-instant-1": "Claude Instant 1",
    # Google
    "gemini-2.0-flash": "Gemini 2.0 Flash",
    "gemini-2.0-flash-lite": "Gemini 2.0 Flash-Lite",
    "gemini-1.5-flash-8b": "Gemini 1.5 Flash-8B",
    # Meta
    "llama-4-maverick-17b-128e-instruct": "Llama 4 Maverick Instruct (17Bx128E)",
    "llama-4-scout-17b-16e-instruct": "Llama 4 Scout Instruct (17Bx16E)",
    "llama-3-70b-chat-hf": "Llama 3 70B Instruct Reference",
    "llama-3-8b-chat-hf": "Llama 3 8B Instruct Reference",
    "llama-2-70b-chat": "LLaMA 2 70b Chat",
    "llama3.3-70b": "Llama 3.3 70B",
    "llama3.2-3b": "Llama 3.2 3B",
    "llama3.2-1b": "Llama 3.2 1B",
    "llama3.1-70b": "Llama 3.1 70B",
    "llama3.1-8b": "Llama 3.1 8B",
    "llama3-70b": "Llama 3 70B",
    "llama3-8b": "Llama 3 8B",
    # Mistral
    "mistral-large-latest": "Mistral Large",
    "pixtral-large-latest": "Pixtral Large",
    "mistral-medium-latest": "Mistral Medium 3",
    "mistral-small-latest": "Mistral Small",
    "codestral-latest": "Codestral",
    "ministral-8b-latest": "Ministral 8B",
    "ministral-3b-latest": "Ministral 3B",
    "open-mistral-nemo": "Mistral NeMo",
    "open-codestral-mamba": "Codestral Mamba",
    "open-mixtral-8x22b": "Mixtral 8x22B",
    "mistral-7b-instruct-v0.1": "Mistral (7B) Instruct",
    "mixtral-8x7b": "Mixtral 8x7B",
    # Gemma
    "gemma-2-27b-it": "Gemma-2 Instruct (27B)",
    "gemma-2-9b-it": "Gemma-2 Instruct (9B)",
    "gemma-2b-it": "Gemma Instruct (2B)",
    # DeepSeek
    "deepseek-v3": "DeepSeek V3",
    "deepseek-r1": "DeepSeek R1",
    "deepseek-llm-67b-chat": "DeepSeek LLM Chat (67B)",
    # Qwen
    "qwq-32b": "Qwen QwQ 32B",
    "qwen-2-vl-72b-instruct": "Qwen-2VL (72B) Instruct",
    "qwq-32b-preview": "Qwen QwQ 32B Preview",
    # Other
    "wizardlm-2-8x22b": "WizardLM-2 (8x22B)",
    "wizardlm-2-7b": "WizardLM-2 7B",
    "dbrx-instruct": "DBRX Instruct",
    "nous-hermes-2-mixtral-8x7b-dpo": "Nous Hermes 2 - Mixtral 8x7B-DPO",
    "nous-hermes-llama2-13b": "Nous: Hermes 13B",
    "mythomax-l2-13b": "MythoMax-L2 (13B)",
    # AWS Bedrock base names (region and version suffixes are stripped first)
    "nova-pro-v1:0": "Nova Pro",
    "nova-micro-v1:0": "Nova Micro",
    "nova-lite-v1:0": "Nova Lite",
    "nova-pro": "Nova Pro",
    "nova-micro": "Nova Micro",
    "nova-lite": "Nova Lite",
    "command-r-plus-v1:0": "Command R+",
    "command-r-v1:0": "Command R",
    "command-r-plus": "Command R+",
    "command-r": "Command R",
}

PROVIDER_DISPLAY_NAMES: Final[dict[str, str]] = {
    # Major providers
    "openai": "OpenAI",
    "anthropic": "Anthropic",
    "google": "Google",
    "meta": "Meta",
    "mistral": "Mistral AI",
    "xai": "xAI",
    "deepseek": "DeepSeek",
    # Cloud platforms
    "bedrock": "AWS Bedrock",
    "aws": "AWS",
    "azure": "Microsoft Azure",
    "databricks": "Databricks",
    "cloudflare": "Cloudflare",
    "together": "Together AI",
    "fireworks": "Fireworks AI",
    "anyscale": "Anyscale",
    "replicate": "Replicate",
    "sagemaker": "AWS Sage Maker",
    "snowflake": "Snowflake",
    "openrouter": "OpenRouter",
    "vertex": "Google Vertex AI",
    # Model providers
    "cohere": "Cohere",
    "ai21": "AI21 Labs",
    "huggingface": "Hugging Face",
    "perplexity": "Perplexity AI",
    "groq": "Groq",
    "deepinfra": "DeepInfra",
    "voyage": "Voyage AI",
    "nvidia": "NVIDIA",
    "qwen": "Alibaba Cloud",
    "elevenlabs": "ElevenLabs",
    "deepgram": "Deepgram",
    "moonshot": "Moonshot AI",
    "watsonx": "IBM Watsonx",
    # Other
    "assemblyai": "AssemblyAI",
    "sonar": "Sonar",
    "palm": "Palm AI",
    "nous": "Nous Research",
    "nousresearch": "Nous Research",
    "magistral": "Magistral AI",
    "devstral": "Devstral",
    "minimax": "MiniMax",
    "zhipu": "Zhipu AI",
}

# Upstream provider tags that collapse onto another provider id
PROVIDER_ID_ALIASES: Final[dict[str, str]] = {
    "gemini": "google",
    "meta_llama": "meta",
    "mistralai": "mistral",
    "codestral": "mistral",
    "deepseek-ai": "deepseek",
    "bedrock_converse": "bedrock",
}

MONTH_NAMES: Final[tuple[str, ...]] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)
