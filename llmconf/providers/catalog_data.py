# -*- coding: utf-8 -*-
"""Built-in provider definitions (the compiled catalog)."""

from __future__ import annotations

from typing import Dict, List

from .models import FieldDescriptor, FieldType, ModelSpec, ProviderDefinition

# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------


def _field(
    name: str,
    category: str,
    field_type: FieldType = "text",
    *,
    required: bool = True,
    placeholder: str = "",
    comment: str = "",
) -> FieldDescriptor:
    return FieldDescriptor(
        name=name,
        field_type=field_type,
        required=required,
        placeholder=placeholder,
        comment=comment,
        category=category,
    )


def _api_key(name: str, category: str, comment: str = "") -> FieldDescriptor:
    return _field(
        name,
        category,
        "password",
        comment=comment or "API key",
    )


def _base_url(
    name: str,
    category: str,
    placeholder: str = "",
    *,
    required: bool = False,
) -> FieldDescriptor:
    return _field(
        name,
        category,
        "url",
        required=required,
        placeholder=placeholder,
        comment="Base URL",
    )


REQUEST_TIMEOUT_FIELD = FieldDescriptor(
    name="requestTimeoutMs",
    field_type="number",
    required=False,
    placeholder="30000",
    comment="Request timeout in milliseconds",
    category="general",
)

GENERAL_FIELDS: List[FieldDescriptor] = [REQUEST_TIMEOUT_FIELD]

# ---------------------------------------------------------------------------
# Built-in model lists
# ---------------------------------------------------------------------------

ANTHROPIC_MODELS: Dict[str, ModelSpec] = {
    "claude-sonnet-4-5-20250929": ModelSpec(
        max_tokens=64000,
        context_window=200000,
        supports_images=True,
        supports_prompt_cache=True,
        input_price=3.0,
        output_price=15.0,
        description="Claude Sonnet 4.5",
    ),
    "claude-sonnet-4-20250514": ModelSpec(
        max_tokens=64000,
        context_window=200000,
        supports_images=True,
        supports_prompt_cache=True,
        input_price=3.0,
        output_price=15.0,
        description="Claude Sonnet 4",
    ),
    "claude-opus-4-1-20250805": ModelSpec(
        max_tokens=32000,
        context_window=200000,
        supports_images=True,
        supports_prompt_cache=True,
        input_price=15.0,
        output_price=75.0,
        description="Claude Opus 4.1",
    ),
    "claude-3-7-sonnet-20250219": ModelSpec(
        max_tokens=64000,
        context_window=200000,
        supports_images=True,
        supports_prompt_cache=True,
        input_price=3.0,
        output_price=15.0,
        description="Claude 3.7 Sonnet",
    ),
    "claude-3-5-haiku-20241022": ModelSpec(
        max_tokens=8192,
        context_window=200000,
        supports_prompt_cache=True,
        input_price=0.8,
        output_price=4.0,
        description="Claude 3.5 Haiku",
    ),
}

OPENROUTER_MODELS: Dict[str, ModelSpec] = {
    "anthropic/claude-sonnet-4.5": ModelSpec(
        max_tokens=64000,
        context_window=200000,
        supports_images=True,
        supports_prompt_cache=True,
        input_price=3.0,
        output_price=15.0,
        description="Claude Sonnet 4.5 via OpenRouter",
    ),
    "openai/gpt-4o": ModelSpec(
        max_tokens=16384,
        context_window=128000,
        supports_images=True,
        input_price=2.5,
        output_price=10.0,
        description="GPT-4o via OpenRouter",
    ),
    "google/gemini-2.5-pro": ModelSpec(
        max_tokens=65536,
        context_window=1048576,
        supports_images=True,
        input_price=1.25,
        output_price=10.0,
        description="Gemini 2.5 Pro via OpenRouter",
    ),
    "deepseek/deepseek-chat-v3.1:free": ModelSpec(
        max_tokens=8192,
        context_window=163840,
        description="DeepSeek V3.1 (free tier)",
    ),
}

BEDROCK_MODELS: Dict[str, ModelSpec] = {
    "anthropic.claude-sonnet-4-5-20250929-v1:0": ModelSpec(
        max_tokens=64000,
        context_window=200000,
        supports_images=True,
        supports_prompt_cache=True,
        input_price=3.0,
        output_price=15.0,
        description="Claude Sonnet 4.5 on Bedrock",
    ),
    "anthropic.claude-sonnet-4-20250514-v1:0": ModelSpec(
        max_tokens=64000,
        context_window=200000,
        supports_images=True,
        supports_prompt_cache=True,
        input_price=3.0,
        output_price=15.0,
        description="Claude Sonnet 4 on Bedrock",
    ),
    "amazon.nova-pro-v1:0": ModelSpec(
        max_tokens=5000,
        context_window=300000,
        supports_images=True,
        input_price=0.8,
        output_price=3.2,
        description="Amazon Nova Pro",
    ),
    "amazon.nova-micro-v1:0": ModelSpec(
        max_tokens=5000,
        context_window=128000,
        input_price=0.035,
        output_price=0.14,
        description="Amazon Nova Micro",
    ),
}

VERTEX_MODELS: Dict[str, ModelSpec] = {
    "claude-sonnet-4-5@20250929": ModelSpec(
        max_tokens=64000,
        context_window=200000,
        supports_images=True,
        supports_prompt_cache=True,
        input_price=3.0,
        output_price=15.0,
        description="Claude Sonnet 4.5 on Vertex AI",
    ),
    "gemini-2.5-pro": ModelSpec(
        max_tokens=65536,
        context_window=1048576,
        supports_images=True,
        input_price=1.25,
        output_price=10.0,
        description="Gemini 2.5 Pro on Vertex AI",
    ),
    "gemini-2.5-flash": ModelSpec(
        max_tokens=65536,
        context_window=1048576,
        supports_images=True,
        input_price=0.3,
        output_price=2.5,
        description="Gemini 2.5 Flash on Vertex AI",
    ),
}

GEMINI_MODELS: Dict[str, ModelSpec] = {
    "gemini-2.5-pro": ModelSpec(
        max_tokens=65536,
        context_window=1048576,
        supports_images=True,
        supports_prompt_cache=True,
        input_price=1.25,
        output_price=10.0,
        description="Gemini 2.5 Pro",
    ),
    "gemini-2.5-flash": ModelSpec(
        max_tokens=65536,
        context_window=1048576,
        supports_images=True,
        supports_prompt_cache=True,
        input_price=0.3,
        output_price=2.5,
        description="Gemini 2.5 Flash",
    ),
    "gemini-2.0-flash-exp": ModelSpec(
        max_tokens=8192,
        context_window=1048576,
        supports_images=True,
        description="Gemini 2.0 Flash (experimental, free)",
    ),
}

OPENAI_NATIVE_MODELS: Dict[str, ModelSpec] = {
    "gpt-4o": ModelSpec(
        max_tokens=16384,
        context_window=128000,
        supports_images=True,
        supports_prompt_cache=True,
        input_price=2.5,
        output_price=10.0,
        description="GPT-4o",
    ),
    "gpt-4o-mini": ModelSpec(
        max_tokens=16384,
        context_window=128000,
        supports_images=True,
        supports_prompt_cache=True,
        input_price=0.15,
        output_price=0.6,
        description="GPT-4o mini",
    ),
    "gpt-4.1": ModelSpec(
        max_tokens=32768,
        context_window=1047576,
        supports_images=True,
        supports_prompt_cache=True,
        input_price=2.0,
        output_price=8.0,
        description="GPT-4.1",
    ),
    "o3": ModelSpec(
        max_tokens=100000,
        context_window=200000,
        supports_images=True,
        supports_prompt_cache=True,
        input_price=2.0,
        output_price=8.0,
        description="OpenAI o3",
    ),
    "o4-mini": ModelSpec(
        max_tokens=100000,
        context_window=200000,
        supports_images=True,
        supports_prompt_cache=True,
        input_price=1.1,
        output_price=4.4,
        description="OpenAI o4-mini",
    ),
}

DEEPSEEK_MODELS: Dict[str, ModelSpec] = {
    "deepseek-chat": ModelSpec(
        max_tokens=8000,
        context_window=128000,
        supports_prompt_cache=True,
        input_price=0.27,
        output_price=1.1,
        description="DeepSeek V3",
    ),
    "deepseek-reasoner": ModelSpec(
        max_tokens=8000,
        context_window=128000,
        supports_prompt_cache=True,
        input_price=0.55,
        output_price=2.19,
        description="DeepSeek R1",
    ),
}

QWEN_MODELS: Dict[str, ModelSpec] = {
    "qwen3-coder-plus": ModelSpec(
        max_tokens=65536,
        context_window=1000000,
        input_price=1.0,
        output_price=5.0,
        description="Qwen3 Coder Plus",
    ),
    "qwen-max-latest": ModelSpec(
        max_tokens=8192,
        context_window=32768,
        supports_prompt_cache=True,
        input_price=2.4,
        output_price=9.6,
        description="Qwen Max",
    ),
    "qwen-plus-latest": ModelSpec(
        max_tokens=16384,
        context_window=131072,
        supports_prompt_cache=True,
        input_price=0.8,
        output_price=2.0,
        description="Qwen Plus",
    ),
}

DOUBAO_MODELS: Dict[str, ModelSpec] = {
    "doubao-seed-1-6-250615": ModelSpec(
        max_tokens=32768,
        context_window=128000,
        supports_images=True,
        supports_prompt_cache=True,
        input_price=0.11,
        output_price=0.28,
        description="Doubao Seed 1.6",
    ),
    "doubao-1-5-pro-256k-250115": ModelSpec(
        max_tokens=12288,
        context_window=256000,
        input_price=0.7,
        output_price=1.3,
        description="Doubao 1.5 Pro 256k",
    ),
}

MISTRAL_MODELS: Dict[str, ModelSpec] = {
    "devstral-medium-latest": ModelSpec(
        max_tokens=128000,
        context_window=128000,
        input_price=0.4,
        output_price=2.0,
        description="Devstral Medium",
    ),
    "mistral-large-2411": ModelSpec(
        max_tokens=131000,
        context_window=131000,
        input_price=2.0,
        output_price=6.0,
        description="Mistral Large",
    ),
    "codestral-2501": ModelSpec(
        max_tokens=256000,
        context_window=256000,
        input_price=0.3,
        output_price=0.9,
        description="Codestral",
    ),
    "pixtral-large-2411": ModelSpec(
        max_tokens=131000,
        context_window=131000,
        supports_images=True,
        input_price=2.0,
        output_price=6.0,
        description="Pixtral Large",
    ),
}

MOONSHOT_MODELS: Dict[str, ModelSpec] = {
    "kimi-k2-0905-preview": ModelSpec(
        max_tokens=16384,
        context_window=262144,
        supports_prompt_cache=True,
        input_price=0.6,
        output_price=2.5,
        description="Kimi K2",
    ),
    "kimi-k2-turbo-preview": ModelSpec(
        max_tokens=32000,
        context_window=262144,
        supports_prompt_cache=True,
        input_price=2.4,
        output_price=10.0,
        description="Kimi K2 Turbo",
    ),
}

HUGGINGFACE_MODELS: Dict[str, ModelSpec] = {
    "moonshotai/Kimi-K2-Instruct": ModelSpec(
        max_tokens=131072,
        context_window=131072,
        description="Kimi K2 Instruct via Hugging Face",
    ),
    "deepseek-ai/DeepSeek-R1": ModelSpec(
        max_tokens=8192,
        context_window=64000,
        description="DeepSeek R1 via Hugging Face",
    ),
}

NEBIUS_MODELS: Dict[str, ModelSpec] = {
    "Qwen/Qwen2.5-Coder-32B-Instruct-fast": ModelSpec(
        max_tokens=8192,
        context_window=32768,
        input_price=0.1,
        output_price=0.3,
        description="Qwen2.5 Coder 32B (fast)",
    ),
    "deepseek-ai/DeepSeek-V3": ModelSpec(
        max_tokens=32000,
        context_window=96000,
        input_price=0.5,
        output_price=1.5,
        description="DeepSeek V3 on Nebius",
    ),
}

FIREWORKS_MODELS: Dict[str, ModelSpec] = {
    "accounts/fireworks/models/kimi-k2-instruct": ModelSpec(
        max_tokens=16384,
        context_window=128000,
        input_price=0.6,
        output_price=2.5,
        description="Kimi K2 Instruct on Fireworks",
    ),
    "accounts/fireworks/models/qwen3-coder-480b-a35b-instruct": ModelSpec(
        max_tokens=32768,
        context_window=262144,
        input_price=0.45,
        output_price=1.8,
        description="Qwen3 Coder 480B on Fireworks",
    ),
}

ASKSAGE_MODELS: Dict[str, ModelSpec] = {
    "claude-4-sonnet": ModelSpec(
        max_tokens=8192,
        context_window=200000,
        description="Claude 4 Sonnet via AskSage",
    ),
    "gpt-4.1": ModelSpec(
        max_tokens=32768,
        context_window=1047576,
        description="GPT-4.1 via AskSage",
    ),
}

XAI_MODELS: Dict[str, ModelSpec] = {
    "grok-4": ModelSpec(
        max_tokens=8192,
        context_window=262144,
        supports_images=True,
        supports_prompt_cache=True,
        input_price=3.0,
        output_price=15.0,
        description="Grok 4",
    ),
    "grok-3": ModelSpec(
        max_tokens=8192,
        context_window=131072,
        supports_prompt_cache=True,
        input_price=3.0,
        output_price=15.0,
        description="Grok 3",
    ),
    "grok-3-mini": ModelSpec(
        max_tokens=8192,
        context_window=131072,
        supports_prompt_cache=True,
        input_price=0.3,
        output_price=0.5,
        description="Grok 3 Mini",
    ),
}

SAMBANOVA_MODELS: Dict[str, ModelSpec] = {
    "Meta-Llama-3.3-70B-Instruct": ModelSpec(
        max_tokens=4096,
        context_window=128000,
        input_price=0.6,
        output_price=1.2,
        description="Llama 3.3 70B on SambaNova",
    ),
    "DeepSeek-R1": ModelSpec(
        max_tokens=4096,
        context_window=32000,
        input_price=5.0,
        output_price=7.0,
        description="DeepSeek R1 on SambaNova",
    ),
}

CEREBRAS_MODELS: Dict[str, ModelSpec] = {
    "qwen-3-coder-480b": ModelSpec(
        max_tokens=40000,
        context_window=128000,
        input_price=2.0,
        output_price=2.0,
        description="Qwen 3 Coder 480B",
    ),
    "qwen-3-coder-480b-free": ModelSpec(
        max_tokens=40000,
        context_window=64000,
        description="Qwen 3 Coder 480B (free tier)",
    ),
    "llama-3.3-70b": ModelSpec(
        max_tokens=8192,
        context_window=64000,
        description="Llama 3.3 70B on Cerebras",
    ),
}

SAPAICORE_MODELS: Dict[str, ModelSpec] = {
    "anthropic--claude-4-sonnet": ModelSpec(
        max_tokens=64000,
        context_window=200000,
        supports_images=True,
        description="Claude 4 Sonnet on SAP AI Core",
    ),
    "gpt-4o": ModelSpec(
        max_tokens=16384,
        context_window=128000,
        supports_images=True,
        description="GPT-4o on SAP AI Core",
    ),
}

GROQ_MODELS: Dict[str, ModelSpec] = {
    "llama-3.3-70b-versatile": ModelSpec(
        max_tokens=32768,
        context_window=128000,
        input_price=0.59,
        output_price=0.79,
        description="Meta Llama 3.3 70B",
    ),
    "llama-3.1-8b-instant": ModelSpec(
        max_tokens=8000,
        context_window=128000,
        input_price=0.05,
        output_price=0.08,
        description="Meta Llama 3.1 8B",
    ),
    "moonshotai/kimi-k2-instruct": ModelSpec(
        max_tokens=16384,
        context_window=131072,
        input_price=1.0,
        output_price=3.0,
        description="Kimi K2 on Groq",
    ),
}

BASETEN_MODELS: Dict[str, ModelSpec] = {
    "moonshotai/Kimi-K2-Instruct": ModelSpec(
        max_tokens=163800,
        context_window=163800,
        input_price=0.6,
        output_price=2.5,
        description="Kimi K2 on Baseten",
    ),
    "deepseek-ai/DeepSeek-V3.1": ModelSpec(
        max_tokens=131072,
        context_window=163840,
        input_price=0.5,
        output_price=1.5,
        description="DeepSeek V3.1 on Baseten",
    ),
}

ZAI_MODELS: Dict[str, ModelSpec] = {
    "glm-4.5": ModelSpec(
        max_tokens=98304,
        context_window=131072,
        supports_prompt_cache=True,
        input_price=0.6,
        output_price=2.2,
        description="GLM-4.5",
    ),
    "glm-4.5-air": ModelSpec(
        max_tokens=98304,
        context_window=131072,
        supports_prompt_cache=True,
        input_price=0.2,
        output_price=1.1,
        description="GLM-4.5 Air",
    ),
}

TOGETHER_MODELS: Dict[str, ModelSpec] = {
    "meta-llama/Llama-3.3-70B-Instruct-Turbo": ModelSpec(
        max_tokens=8192,
        context_window=131072,
        input_price=0.88,
        output_price=0.88,
        description="Llama 3.3 70B Turbo on Together",
    ),
    "Qwen/Qwen2.5-Coder-32B-Instruct": ModelSpec(
        max_tokens=8192,
        context_window=32768,
        input_price=0.8,
        output_price=0.8,
        description="Qwen2.5 Coder 32B on Together",
    ),
}

HUAWEI_MAAS_MODELS: Dict[str, ModelSpec] = {
    "DeepSeek-V3": ModelSpec(
        max_tokens=16384,
        context_window=64000,
        input_price=0.27,
        output_price=1.1,
        description="DeepSeek V3 on Huawei Cloud MaaS",
    ),
    "qwen3-32b": ModelSpec(
        max_tokens=8192,
        context_window=32000,
        description="Qwen3 32B on Huawei Cloud MaaS",
    ),
}

MINIMAX_MODELS: Dict[str, ModelSpec] = {
    "MiniMax-M1": ModelSpec(
        max_tokens=40000,
        context_window=1000192,
        input_price=0.4,
        output_price=2.2,
        description="MiniMax M1",
    ),
}

CLAUDE_CODE_MODELS: Dict[str, ModelSpec] = {
    "claude-sonnet-4-5-20250929": ANTHROPIC_MODELS["claude-sonnet-4-5-20250929"],
    "claude-opus-4-1-20250805": ANTHROPIC_MODELS["claude-opus-4-1-20250805"],
}

# ---------------------------------------------------------------------------
# Provider definitions
# ---------------------------------------------------------------------------

_DEFINITIONS: List[ProviderDefinition] = [
    ProviderDefinition(
        id="anthropic",
        name="Anthropic (Claude)",
        required_fields=[_api_key("apiKey", "anthropic", "Anthropic API key")],
        optional_fields=[
            _base_url(
                "anthropicBaseUrl",
                "anthropic",
                "https://api.anthropic.com",
            ),
            REQUEST_TIMEOUT_FIELD,
        ],
        models=ANTHROPIC_MODELS,
        default_model_id="claude-sonnet-4-5-20250929",
        default_base_url="https://api.anthropic.com",
        setup_instructions="Get your API key from "
        "https://console.anthropic.com/settings/keys",
    ),
    ProviderDefinition(
        id="claude-code",
        name="Claude Code",
        required_fields=[
            _field(
                "claudeCodePath",
                "claude-code",
                placeholder="claude",
                comment="Path to the Claude Code executable",
            ),
        ],
        optional_fields=[REQUEST_TIMEOUT_FIELD],
        models=CLAUDE_CODE_MODELS,
        default_model_id="claude-sonnet-4-5-20250929",
        setup_instructions="Install Claude Code and sign in with your "
        "Claude subscription",
    ),
    ProviderDefinition(
        id="openrouter",
        name="OpenRouter",
        required_fields=[
            _api_key("openRouterApiKey", "openrouter", "OpenRouter API key"),
        ],
        optional_fields=[REQUEST_TIMEOUT_FIELD],
        has_dynamic_models=True,
        supports_model_listing=True,
        models=OPENROUTER_MODELS,
        default_model_id="anthropic/claude-sonnet-4.5",
        default_base_url="https://openrouter.ai/api/v1",
        setup_instructions="Get your API key from https://openrouter.ai/keys "
        "(aggregator for hundreds of models)",
    ),
    ProviderDefinition(
        id="bedrock",
        name="AWS Bedrock",
        required_fields=[
            _field(
                "awsAccessKey",
                "bedrock",
                "password",
                comment="AWS access key id",
            ),
            _field(
                "awsSecretKey",
                "bedrock",
                "password",
                comment="AWS secret access key",
            ),
            _field(
                "awsRegion",
                "bedrock",
                "select",
                placeholder="us-east-1",
                comment="AWS region",
            ),
        ],
        optional_fields=[
            _field(
                "awsSessionToken",
                "bedrock",
                "password",
                required=False,
                comment="Temporary session token",
            ),
            _field(
                "awsBedrockEndpoint",
                "bedrock",
                "url",
                required=False,
                comment="Custom VPC endpoint",
            ),
            REQUEST_TIMEOUT_FIELD,
        ],
        models=BEDROCK_MODELS,
        default_model_id="anthropic.claude-sonnet-4-5-20250929-v1:0",
        setup_instructions="Create IAM credentials with Bedrock access in "
        "the AWS console (Amazon Web Services)",
    ),
    ProviderDefinition(
        id="vertex",
        name="GCP Vertex AI",
        required_fields=[
            _field(
                "vertexProjectId",
                "vertex",
                comment="Google Cloud project id",
            ),
            _field(
                "vertexRegion",
                "vertex",
                "select",
                placeholder="us-east5",
                comment="Vertex AI region",
            ),
        ],
        optional_fields=[REQUEST_TIMEOUT_FIELD],
        models=VERTEX_MODELS,
        default_model_id="claude-sonnet-4-5@20250929",
        setup_instructions="Enable Vertex AI in your Google Cloud project "
        "and authenticate with gcloud",
    ),
    ProviderDefinition(
        id="gemini",
        name="Google Gemini",
        required_fields=[_api_key("geminiApiKey", "gemini", "Gemini API key")],
        optional_fields=[
            _base_url(
                "geminiBaseUrl",
                "gemini",
                "https://generativelanguage.googleapis.com",
            ),
            REQUEST_TIMEOUT_FIELD,
        ],
        models=GEMINI_MODELS,
        default_model_id="gemini-2.5-pro",
        default_base_url="https://generativelanguage.googleapis.com",
        setup_instructions="Get your API key from Google AI Studio "
        "https://aistudio.google.com/apikey",
    ),
    ProviderDefinition(
        id="openai",
        name="OpenAI Compatible",
        required_fields=[
            _api_key("openAiApiKey", "openai", "API key for the endpoint"),
        ],
        optional_fields=[
            _base_url("openAiBaseUrl", "openai", "https://api.openai.com"),
            REQUEST_TIMEOUT_FIELD,
        ],
        has_dynamic_models=True,
        supports_model_listing=True,
        default_base_url="https://api.openai.com",
        setup_instructions="Any OpenAI-compatible endpoint: provide its base "
        "URL and API key",
    ),
    ProviderDefinition(
        id="openai-native",
        name="OpenAI",
        required_fields=[
            _api_key("openAiNativeApiKey", "openai-native", "OpenAI API key"),
        ],
        optional_fields=[REQUEST_TIMEOUT_FIELD],
        has_dynamic_models=True,
        supports_model_listing=True,
        models=OPENAI_NATIVE_MODELS,
        default_model_id="gpt-4o",
        default_base_url="https://api.openai.com",
        setup_instructions="Get your API key from "
        "https://platform.openai.com/api-keys",
    ),
    ProviderDefinition(
        id="ollama",
        name="Ollama",
        required_fields=[
            _base_url(
                "ollamaBaseUrl",
                "ollama",
                "http://localhost:11434",
                required=True,
            ),
        ],
        optional_fields=[
            _field(
                "ollamaApiOptionsCtxNum",
                "ollama",
                "number",
                required=False,
                placeholder="32768",
                comment="Context window override",
            ),
            REQUEST_TIMEOUT_FIELD,
        ],
        has_dynamic_models=True,
        supports_model_listing=True,
        default_base_url="http://localhost:11434",
        setup_instructions="Install Ollama locally from https://ollama.com "
        "and pull a model",
    ),
    ProviderDefinition(
        id="lmstudio",
        name="LM Studio",
        required_fields=[
            _base_url(
                "lmStudioBaseUrl",
                "lmstudio",
                "http://localhost:1234",
                required=True,
            ),
        ],
        optional_fields=[REQUEST_TIMEOUT_FIELD],
        has_dynamic_models=True,
        default_base_url="http://localhost:1234",
        setup_instructions="Start the LM Studio local server and load a model",
    ),
    ProviderDefinition(
        id="deepseek",
        name="DeepSeek",
        required_fields=[
            _api_key("deepSeekApiKey", "deepseek", "DeepSeek API key"),
        ],
        optional_fields=[REQUEST_TIMEOUT_FIELD],
        models=DEEPSEEK_MODELS,
        default_model_id="deepseek-chat",
        default_base_url="https://api.deepseek.com",
        setup_instructions="Get your API key from "
        "https://platform.deepseek.com/api_keys",
    ),
    ProviderDefinition(
        id="qwen",
        name="Alibaba Qwen",
        required_fields=[_api_key("qwenApiKey", "qwen", "DashScope API key")],
        optional_fields=[
            _field(
                "qwenApiLine",
                "qwen",
                "select",
                required=False,
                placeholder="international",
                comment="china or international",
            ),
            REQUEST_TIMEOUT_FIELD,
        ],
        models=QWEN_MODELS,
        default_model_id="qwen3-coder-plus",
        default_base_url="https://dashscope-intl.aliyuncs.com/compatible-mode/v1",
        setup_instructions="Get your API key from the Alibaba Cloud "
        "DashScope console",
    ),
    ProviderDefinition(
        id="doubao",
        name="Bytedance Doubao",
        required_fields=[_api_key("doubaoApiKey", "doubao", "Volcengine API key")],
        optional_fields=[REQUEST_TIMEOUT_FIELD],
        models=DOUBAO_MODELS,
        default_model_id="doubao-seed-1-6-250615",
        default_base_url="https://ark.cn-beijing.volces.com/api/v3",
        setup_instructions="Get your API key from the Volcengine Ark console",
    ),
    ProviderDefinition(
        id="mistral",
        name="Mistral AI",
        required_fields=[_api_key("mistralApiKey", "mistral", "Mistral API key")],
        optional_fields=[REQUEST_TIMEOUT_FIELD],
        models=MISTRAL_MODELS,
        default_model_id="devstral-medium-latest",
        default_base_url="https://api.mistral.ai",
        setup_instructions="Get your API key from "
        "https://console.mistral.ai/api-keys",
    ),
    ProviderDefinition(
        id="litellm",
        name="LiteLLM",
        required_fields=[_api_key("liteLLMApiKey", "litellm", "LiteLLM proxy key")],
        optional_fields=[
            _base_url("liteLLMBaseUrl", "litellm", "http://localhost:4000"),
            REQUEST_TIMEOUT_FIELD,
        ],
        has_dynamic_models=True,
        default_base_url="http://localhost:4000",
        setup_instructions="Point at your LiteLLM proxy and use its master "
        "or virtual key",
    ),
    ProviderDefinition(
        id="moonshot",
        name="Moonshot AI",
        required_fields=[
            _api_key("moonshotApiKey", "moonshot", "Moonshot API key"),
        ],
        optional_fields=[
            _field(
                "moonshotApiLine",
                "moonshot",
                "select",
                required=False,
                placeholder="international",
                comment="china or international",
            ),
            REQUEST_TIMEOUT_FIELD,
        ],
        models=MOONSHOT_MODELS,
        default_model_id="kimi-k2-0905-preview",
        default_base_url="https://api.moonshot.ai/v1",
        setup_instructions="Get your API key from "
        "https://platform.moonshot.ai (Kimi models)",
    ),
    ProviderDefinition(
        id="huggingface",
        name="Hugging Face",
        required_fields=[
            _api_key("huggingFaceApiKey", "huggingface", "Hugging Face token"),
        ],
        optional_fields=[REQUEST_TIMEOUT_FIELD],
        has_dynamic_models=True,
        models=HUGGINGFACE_MODELS,
        default_model_id="moonshotai/Kimi-K2-Instruct",
        default_base_url="https://router.huggingface.co/v1",
        setup_instructions="Create an access token at "
        "https://huggingface.co/settings/tokens",
    ),
    ProviderDefinition(
        id="nebius",
        name="Nebius AI Studio",
        required_fields=[_api_key("nebiusApiKey", "nebius", "Nebius API key")],
        optional_fields=[REQUEST_TIMEOUT_FIELD],
        models=NEBIUS_MODELS,
        default_model_id="Qwen/Qwen2.5-Coder-32B-Instruct-fast",
        default_base_url="https://api.studio.nebius.com/v1",
        setup_instructions="Get your API key from https://studio.nebius.com",
    ),
    ProviderDefinition(
        id="fireworks",
        name="Fireworks AI",
        required_fields=[
            _api_key("fireworksApiKey", "fireworks", "Fireworks API key"),
        ],
        optional_fields=[
            _base_url(
                "fireworksBaseUrl",
                "fireworks",
                "https://api.fireworks.ai/inference/v1",
            ),
            _field(
                "fireworksModelMaxTokens",
                "fireworks",
                "number",
                required=False,
                comment="Max completion tokens",
            ),
            REQUEST_TIMEOUT_FIELD,
        ],
        models=FIREWORKS_MODELS,
        default_model_id="accounts/fireworks/models/kimi-k2-instruct",
        default_base_url="https://api.fireworks.ai/inference/v1",
        setup_instructions="Get your API key from "
        "https://fireworks.ai/account/api-keys",
    ),
    ProviderDefinition(
        id="asksage",
        name="AskSage",
        required_fields=[_api_key("askSageApiKey", "asksage", "AskSage API key")],
        optional_fields=[
            _field(
                "askSageApiUrl",
                "asksage",
                "url",
                required=False,
                placeholder="https://api.asksage.ai/server",
                comment="API URL",
            ),
            REQUEST_TIMEOUT_FIELD,
        ],
        models=ASKSAGE_MODELS,
        default_model_id="claude-4-sonnet",
        setup_instructions="Request API access from your AskSage "
        "enterprise administrator",
    ),
    ProviderDefinition(
        id="xai",
        name="xAI (Grok)",
        required_fields=[_api_key("xaiApiKey", "xai", "xAI API key")],
        optional_fields=[REQUEST_TIMEOUT_FIELD],
        models=XAI_MODELS,
        default_model_id="grok-4",
        default_base_url="https://api.x.ai/v1",
        setup_instructions="Get your API key from https://console.x.ai",
    ),
    ProviderDefinition(
        id="sambanova",
        name="SambaNova",
        required_fields=[
            _api_key("sambanovaApiKey", "sambanova", "SambaNova API key"),
        ],
        optional_fields=[REQUEST_TIMEOUT_FIELD],
        models=SAMBANOVA_MODELS,
        default_model_id="Meta-Llama-3.3-70B-Instruct",
        default_base_url="https://api.sambanova.ai/v1",
        setup_instructions="Get your API key from https://cloud.sambanova.ai",
    ),
    ProviderDefinition(
        id="cerebras",
        name="Cerebras",
        required_fields=[
            _api_key("cerebrasApiKey", "cerebras", "Cerebras API key"),
        ],
        optional_fields=[REQUEST_TIMEOUT_FIELD],
        models=CEREBRAS_MODELS,
        default_model_id="qwen-3-coder-480b",
        default_base_url="https://api.cerebras.ai/v1",
        setup_instructions="Get your API key from https://cloud.cerebras.ai "
        "(fast inference, free tier available)",
    ),
    ProviderDefinition(
        id="sapaicore",
        name="SAP AI Core",
        required_fields=[
            _api_key("sapAiCoreApiKey", "sapaicore", "Service key secret"),
            _base_url("sapAiCoreBaseUrl", "sapaicore", required=True),
        ],
        optional_fields=[
            _field(
                "sapAiResourceGroup",
                "sapaicore",
                required=False,
                placeholder="default",
                comment="Resource group",
            ),
            REQUEST_TIMEOUT_FIELD,
        ],
        models=SAPAICORE_MODELS,
        default_model_id="anthropic--claude-4-sonnet",
        setup_instructions="Create a service key for your SAP AI Core "
        "enterprise instance",
    ),
    ProviderDefinition(
        id="groq",
        name="Groq",
        required_fields=[_api_key("groqApiKey", "groq", "Groq API key")],
        optional_fields=[REQUEST_TIMEOUT_FIELD],
        has_dynamic_models=True,
        supports_model_listing=True,
        models=GROQ_MODELS,
        default_model_id="llama-3.3-70b-versatile",
        default_base_url="https://api.groq.com/openai",
        setup_instructions="Get your API key from "
        "https://console.groq.com/keys",
    ),
    ProviderDefinition(
        id="baseten",
        name="Baseten",
        required_fields=[_api_key("basetenApiKey", "baseten", "Baseten API key")],
        optional_fields=[REQUEST_TIMEOUT_FIELD],
        models=BASETEN_MODELS,
        default_model_id="moonshotai/Kimi-K2-Instruct",
        default_base_url="https://inference.baseten.co/v1",
        setup_instructions="Get your API key from https://app.baseten.co",
    ),
    ProviderDefinition(
        id="vercel-ai-gateway",
        name="Vercel AI Gateway",
        required_fields=[
            _api_key(
                "vercelAiGatewayApiKey",
                "vercel-ai-gateway",
                "Vercel AI Gateway key",
            ),
        ],
        optional_fields=[REQUEST_TIMEOUT_FIELD],
        has_dynamic_models=True,
        default_base_url="https://ai-gateway.vercel.sh/v1",
        setup_instructions="Create an AI Gateway key in your Vercel "
        "team settings",
    ),
    ProviderDefinition(
        id="zai",
        name="Z AI (GLM)",
        required_fields=[_api_key("zaiApiKey", "zai", "Z AI API key")],
        optional_fields=[
            _field(
                "zaiApiLine",
                "zai",
                "select",
                required=False,
                placeholder="international",
                comment="china or international",
            ),
            REQUEST_TIMEOUT_FIELD,
        ],
        models=ZAI_MODELS,
        default_model_id="glm-4.5",
        default_base_url="https://api.z.ai/api/paas/v4",
        setup_instructions="Get your API key from https://z.ai",
    ),
    ProviderDefinition(
        id="together",
        name="Together AI",
        required_fields=[
            _api_key("togetherApiKey", "together", "Together API key"),
        ],
        optional_fields=[REQUEST_TIMEOUT_FIELD],
        has_dynamic_models=True,
        models=TOGETHER_MODELS,
        default_model_id="meta-llama/Llama-3.3-70B-Instruct-Turbo",
        default_base_url="https://api.together.xyz/v1",
        setup_instructions="Get your API key from "
        "https://api.together.ai/settings/api-keys",
    ),
    ProviderDefinition(
        id="requesty",
        name="Requesty",
        required_fields=[
            _api_key("requestyApiKey", "requesty", "Requesty API key"),
        ],
        optional_fields=[
            _base_url("requestyBaseUrl", "requesty", "https://router.requesty.ai/v1"),
            REQUEST_TIMEOUT_FIELD,
        ],
        has_dynamic_models=True,
        default_base_url="https://router.requesty.ai/v1",
        setup_instructions="Get your API key from https://app.requesty.ai",
    ),
    ProviderDefinition(
        id="dify",
        name="Dify",
        required_fields=[
            _api_key("difyApiKey", "dify", "Dify application key"),
            _base_url("difyBaseUrl", "dify", "https://api.dify.ai/v1", required=True),
        ],
        optional_fields=[REQUEST_TIMEOUT_FIELD],
        setup_instructions="Publish a Dify application and copy its API key",
    ),
    ProviderDefinition(
        id="huawei-cloud-maas",
        name="Huawei Cloud MaaS",
        required_fields=[
            _api_key(
                "huaweiCloudMaasApiKey",
                "huawei-cloud-maas",
                "Huawei Cloud MaaS API key",
            ),
        ],
        optional_fields=[REQUEST_TIMEOUT_FIELD],
        models=HUAWEI_MAAS_MODELS,
        default_model_id="DeepSeek-V3",
        setup_instructions="Get your API key from the Huawei Cloud ModelArts "
        "console",
    ),
    ProviderDefinition(
        id="minimax",
        name="MiniMax",
        required_fields=[_api_key("minimaxApiKey", "minimax", "MiniMax API key")],
        optional_fields=[REQUEST_TIMEOUT_FIELD],
        models=MINIMAX_MODELS,
        default_model_id="MiniMax-M1",
        default_base_url="https://api.minimax.io/v1",
        setup_instructions="Get your API key from https://www.minimax.io",
    ),
    ProviderDefinition(
        id="deepinfra",
        name="DeepInfra",
        required_fields=[
            _api_key("deepInfraApiKey", "deepinfra", "DeepInfra API key"),
        ],
        optional_fields=[REQUEST_TIMEOUT_FIELD],
        has_dynamic_models=True,
        default_base_url="https://api.deepinfra.com/v1/openai",
        setup_instructions="Get your API key from "
        "https://deepinfra.com/dash/api_keys",
    ),
    ProviderDefinition(
        id="chutes",
        name="Chutes AI",
        required_fields=[_api_key("chutesApiKey", "chutes", "Chutes API key")],
        optional_fields=[REQUEST_TIMEOUT_FIELD],
        has_dynamic_models=True,
        default_base_url="https://llm.chutes.ai/v1",
        setup_instructions="Get your API key from https://chutes.ai",
    ),
]

# Registry: provider_id -> ProviderDefinition
PROVIDERS: Dict[str, ProviderDefinition] = {d.id: d for d in _DEFINITIONS}

ALL_PROVIDERS: List[str] = sorted(PROVIDERS)

CATEGORY_ASSIGNMENTS: Dict[str, List[str]] = {
    "Major Cloud Providers": [
        "anthropic",
        "openai-native",
        "gemini",
        "bedrock",
        "vertex",
    ],
    "Aggregators": ["openrouter", "litellm", "together", "fireworks"],
    "Local/Self-Hosted": ["ollama", "lmstudio"],
    "Specialized": ["deepseek", "qwen", "mistral", "xai", "cerebras", "groq"],
    "Enterprise": ["sapaicore", "asksage", "vercel-ai-gateway"],
}

OTHER_CATEGORY = "Other"

POPULAR_PROVIDERS: List[str] = [
    "openrouter",
    "openai",
    "anthropic",
    "xai",
    "ollama",
    "gemini",
    "deepseek",
    "groq",
    "cerebras",
    "bedrock",
]

LOCAL_PROVIDERS = ("ollama", "lmstudio")
